class QuoteScraperError(Exception):
    """Base exception for the quote scraper."""


class ConfigError(QuoteScraperError):
    """Raised when configuration is missing or invalid."""


class ProxyFailure(QuoteScraperError):
    """One proxy attempt failed (transport error or non-success status)."""

    def __init__(self, proxy: str, url: str, status: int | None = None, reason: str = "") -> None:
        self.proxy = proxy
        self.url = url
        self.status = status
        self.reason = reason
        detail = f"status={status}" if status is not None else reason
        super().__init__(f"Proxy {proxy} failed for {url}: {detail}")


class FetchExhausted(QuoteScraperError):
    """Every configured proxy failed for a page."""

    def __init__(self, page: int, failures: list[ProxyFailure] | None = None) -> None:
        self.page = page
        self.failures = list(failures or [])
        super().__init__(f"All proxy services failed for page {page}")


class ParseElementError(QuoteScraperError):
    """Malformed structure for one candidate record."""


class ScrapeAborted(QuoteScraperError):
    """A page-level failure ended a scrape run."""

    def __init__(self, page: int, reason: str = "") -> None:
        self.page = page
        super().__init__(f"Scrape aborted at page {page}: {reason}" if reason else f"Scrape aborted at page {page}")


class ExportFailure(QuoteScraperError):
    """Serializing or writing the CSV export failed."""
