from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

import pytest

from quotescraper.dataset import Session, Stats
from quotescraper.pagination import PageInfo
from quotescraper.sample_data import get_sample_quotes
from quotescraper.schemas import Quote

FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def quote_html(text: str | None, author: str | None, tags: Sequence[str] = ()) -> str:
    parts = ['<div class="quote">']
    if text is not None:
        parts.append(f'<span class="text">{text}</span>')
    if author is not None:
        parts.append(f'<span>by <small class="author">{author}</small></span>')
    parts.append('<div class="tags">Tags:')
    parts.extend(f'<a class="tag" href="/tag/{t}/">{t}</a>' for t in tags)
    parts.append("</div></div>")
    return "".join(parts)


def page_html(*quotes: str) -> str:
    return "<html><body><div class='col-md-8'>" + "".join(quotes) + "</div></body></html>"


class RecordingDisplay:
    """Display double that keeps every call for assertions."""

    def __init__(self) -> None:
        self.quotes: list[Quote] = []
        self.loading_calls: list[bool] = []
        self.pagination: PageInfo | None = None
        self.tag_options: list[str] = []
        self.stats: Stats | None = None
        self.notices: list[str] = []

    def set_quotes(self, quotes: Sequence[Quote]) -> None:
        self.quotes = list(quotes)

    def set_loading(self, visible: bool) -> None:
        self.loading_calls.append(visible)

    def set_pagination(self, info: PageInfo) -> None:
        self.pagination = info

    def set_tag_options(self, tags: Sequence[str]) -> None:
        self.tag_options = list(tags)

    def set_stats(self, stats: Stats) -> None:
        self.stats = stats

    def notify(self, message: str) -> None:
        self.notices.append(message)


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture
def sample_quotes() -> list[Quote]:
    return get_sample_quotes(FIXED_NOW)


@pytest.fixture
def session(sample_quotes) -> Session:
    s = Session(page_size=2)
    s.replace_dataset(sample_quotes)
    return s
