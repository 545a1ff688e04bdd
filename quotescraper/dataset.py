from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from quotescraper.logging import get_logger
from quotescraper.pagination import PageInfo, is_valid_page, page_slice, total_pages
from quotescraper.schemas import Quote

log = get_logger("quotescraper.dataset")

ALL_TAGS = "all"


@dataclass(frozen=True)
class Stats:
    total_quotes: int
    total_authors: int
    total_tags: int


def matches(quote: Quote, search_text: str, selected_tag: str | None) -> bool:
    needle = (search_text or "").lower()
    matches_search = needle in quote.text.lower() or needle in quote.author.lower()
    matches_tag = not selected_tag or selected_tag == ALL_TAGS or selected_tag in quote.tags
    return matches_search and matches_tag


def filter_quotes(
    quotes: Iterable[Quote], search_text: str = "", selected_tag: str | None = None
) -> tuple[Quote, ...]:
    return tuple(q for q in quotes if matches(q, search_text, selected_tag))


def compute_stats(quotes: Sequence[Quote]) -> Stats:
    return Stats(
        total_quotes=len(quotes),
        total_authors=len({q.author for q in quotes}),
        total_tags=len({t for q in quotes for t in q.tags}),
    )


def tag_options(quotes: Iterable[Quote]) -> list[str]:
    """Distinct tags in first-seen order."""
    return list(dict.fromkeys(t for q in quotes for t in q.tags))


class Session:
    """
    In-memory state of one browsing session.

    `quotes` is the full dataset and `filtered` the subset matching the current
    search text and tag. Both are tuples and only ever replaced wholesale.
    Stats are derived from `filtered`; tag options from `quotes`.
    """

    def __init__(self, page_size: int = 6) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        self.page_size = page_size
        self.quotes: tuple[Quote, ...] = ()
        self.filtered: tuple[Quote, ...] = ()
        self.current_page = 1
        self.search_text = ""
        self.selected_tag: str | None = None

    def replace_dataset(self, quotes: Iterable[Quote]) -> None:
        self.quotes = tuple(quotes)
        self.filtered = self.quotes
        self.search_text = ""
        self.selected_tag = None
        self.current_page = 1

    def apply_filter(self, search_text: str = "", selected_tag: str | None = None) -> tuple[Quote, ...]:
        self.search_text = search_text or ""
        self.selected_tag = selected_tag
        self.filtered = filter_quotes(self.quotes, self.search_text, self.selected_tag)
        self.current_page = 1
        return self.filtered

    @property
    def stats(self) -> Stats:
        return compute_stats(self.filtered)

    @property
    def tag_options(self) -> list[str]:
        return tag_options(self.quotes)

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.filtered), self.page_size)

    @property
    def page_info(self) -> PageInfo:
        return PageInfo(current_page=self.current_page, total_pages=self.total_pages)

    def visible_quotes(self) -> list[Quote]:
        return page_slice(self.filtered, self.current_page, self.page_size)

    def go_to_page(self, page: int) -> bool:
        if not is_valid_page(page, len(self.filtered), self.page_size):
            log.warning(
                "invalid page number",
                extra={"extra_fields": {"page": page, "total_pages": self.total_pages}},
            )
            return False
        self.current_page = page
        return True

    def next_page(self) -> bool:
        return self.go_to_page(self.current_page + 1)

    def prev_page(self) -> bool:
        return self.go_to_page(self.current_page - 1)
