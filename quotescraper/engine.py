from __future__ import annotations

import asyncio
import enum
from datetime import datetime, timezone
from typing import Awaitable, Callable, Protocol

from quotescraper.dataset import Session
from quotescraper.display import Display, refresh
from quotescraper.exceptions import FetchExhausted, ScrapeAborted
from quotescraper.logging import get_logger
from quotescraper.monitoring.metrics import record_run
from quotescraper.parser import parse_quotes_from_html
from quotescraper.sample_data import get_sample_quotes
from quotescraper.schemas import Quote

log = get_logger("quotescraper.engine")


class PageFetcher(Protocol):
    async def fetch_page(self, page_number: int) -> str: ...


class ScrapeState(str, enum.Enum):
    IDLE = "idle"
    SCRAPING = "scraping"
    SUCCESS = "success"
    FALLBACK = "fallback"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ScrapeOrchestrator:
    """
    Runs one sequential multi-page scrape and swaps the result into the session.

    Idle -> Scraping -> {Success, Fallback} -> Idle. A failure on any page
    discards the whole run in favour of the sample dataset. A second `run()`
    while one is in flight returns None without touching anything.
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        session: Session,
        display: Display,
        max_pages: int = 3,
        page_delay_s: float = 0.5,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if max_pages < 1:
            raise ValueError(f"max_pages must be >= 1, got {max_pages}")
        self.fetcher = fetcher
        self.session = session
        self.display = display
        self.max_pages = max_pages
        self.page_delay_s = page_delay_s
        self._sleep = sleep
        self._clock = clock
        self.state = ScrapeState.IDLE
        self.last_outcome: ScrapeState | None = None

    @property
    def is_scraping(self) -> bool:
        return self.state is ScrapeState.SCRAPING

    async def run(self) -> ScrapeState | None:
        if self.is_scraping:
            log.info("scraping already in progress")
            return None

        self.state = ScrapeState.SCRAPING
        self.display.set_loading(True)
        try:
            try:
                quotes = await self._scrape_pages()
            except ScrapeAborted as aborted:
                log.warning(
                    "scraping failed, using sample data as fallback",
                    extra={"extra_fields": {"page": aborted.page, "error": str(aborted)}},
                )
                quotes = get_sample_quotes(self._clock())
                outcome = ScrapeState.FALLBACK
            else:
                log.info(
                    "scrape finished",
                    extra={"extra_fields": {"quotes": len(quotes), "pages": self.max_pages}},
                )
                outcome = ScrapeState.SUCCESS

            self.session.replace_dataset(quotes)
            refresh(self.session, self.display)
            record_run(outcome.value)
            self.last_outcome = outcome
            return outcome
        finally:
            self.display.set_loading(False)
            self.state = ScrapeState.IDLE

    async def _scrape_pages(self) -> list[Quote]:
        accumulated: list[Quote] = []
        for page in range(1, self.max_pages + 1):
            log.info("scraping page", extra={"extra_fields": {"page": page}})
            try:
                html = await self.fetcher.fetch_page(page)
                candidates = parse_quotes_from_html(html)
                timestamp = self._clock().isoformat()
                # Ids are re-stamped to stay unique across the merged dataset.
                offset = len(accumulated)
                accumulated.extend(
                    [
                        Quote.from_candidate(c, id=offset + i, page=page, timestamp=timestamp)
                        for i, c in enumerate(candidates, start=1)
                    ]
                )
            except FetchExhausted as e:
                raise ScrapeAborted(page, str(e)) from e
            except Exception as e:  # noqa: BLE001
                raise ScrapeAborted(page, f"{type(e).__name__}: {e}") from e
            if page < self.max_pages and self.page_delay_s > 0:
                await self._sleep(self.page_delay_s)
        return accumulated

    def ensure_quotes_available(self) -> bool:
        """Load the sample dataset if the session is still empty. Returns True when it did."""
        if self.session.quotes:
            return False
        log.info("no quotes available, loading sample data")
        self.session.replace_dataset(get_sample_quotes(self._clock()))
        refresh(self.session, self.display)
        return True
