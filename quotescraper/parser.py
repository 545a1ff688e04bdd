from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import Tag

from quotescraper.exceptions import ParseElementError
from quotescraper.logging import get_logger
from quotescraper.monitoring.metrics import record_item
from quotescraper.schemas import QuoteCandidate

log = get_logger("quotescraper.parser")

QUOTE_SELECTOR = ".quote"
TEXT_SELECTOR = ".text"
AUTHOR_SELECTOR = ".author"
TAG_SELECTOR = ".tag"


def _child_text(container: Tag, selector: str) -> str:
    el = container.select_one(selector)
    return el.get_text().strip() if el is not None else ""


def _extract(container: Tag) -> tuple[str, str, tuple[str, ...]]:
    try:
        text = _child_text(container, TEXT_SELECTOR)
        author = _child_text(container, AUTHOR_SELECTOR)
        tags = tuple(t for t in (el.get_text().strip() for el in container.select(TAG_SELECTOR)) if t)
    except Exception as e:  # noqa: BLE001
        raise ParseElementError(f"{type(e).__name__}: {e}") from e
    return text, author, tags


def parse_quotes_from_html(html: str) -> list[QuoteCandidate]:
    """
    Extract quote candidates from one page of markup.

    Containers missing text or author, or failing extraction, are skipped.
    Ids are a page-local sequence over accepted quotes, in document order.
    """
    soup = BeautifulSoup(html or "", "lxml")
    quotes: list[QuoteCandidate] = []
    for index, container in enumerate(soup.select(QUOTE_SELECTOR)):
        try:
            text, author, tags = _extract(container)
        except ParseElementError as e:
            log.warning(
                "skipping malformed quote container",
                extra={"extra_fields": {"index": index, "error": str(e)}},
            )
            record_item("skipped")
            continue
        if not text or not author:
            log.debug(
                "skipping quote without text or author",
                extra={"extra_fields": {"index": index}},
            )
            record_item("skipped")
            continue
        quotes.append(QuoteCandidate(id=len(quotes) + 1, text=text, author=author, tags=tags))
        record_item("ok")
    return quotes
