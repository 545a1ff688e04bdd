from __future__ import annotations

import sys
from datetime import datetime
from typing import Protocol, Sequence, TextIO, runtime_checkable

from quotescraper.dataset import ALL_TAGS, Session, Stats
from quotescraper.logging import get_logger
from quotescraper.pagination import PageInfo
from quotescraper.schemas import Quote

log = get_logger("quotescraper.display")


@runtime_checkable
class Display(Protocol):
    def set_quotes(self, quotes: Sequence[Quote]) -> None: ...

    def set_loading(self, visible: bool) -> None: ...

    def set_pagination(self, info: PageInfo) -> None: ...

    def set_tag_options(self, tags: Sequence[str]) -> None: ...

    def set_stats(self, stats: Stats) -> None: ...

    def notify(self, message: str) -> None: ...


def _display_date(timestamp: str) -> str:
    try:
        return datetime.fromisoformat(timestamp.replace("Z", "+00:00")).date().isoformat()
    except ValueError:
        return timestamp


def format_quote(quote: Quote) -> str:
    lines = [f"“{quote.text}”", f"    — {quote.author}"]
    if quote.tags:
        lines.append("    tags: " + ", ".join(quote.tags))
    lines.append(f"    Page {quote.page} • {_display_date(quote.timestamp)}")
    return "\n".join(lines)


class ConsoleDisplay:
    """Plain-text rendering surface writing to a stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout
        self.tag_options: list[str] = [ALL_TAGS]
        self.loading = False

    def _write(self, text: str) -> None:
        self.stream.write(text + "\n")

    def set_quotes(self, quotes: Sequence[Quote]) -> None:
        if not quotes:
            self._write("No quotes found")
            self._write("Try adjusting your search terms or tag filter.")
            return
        for q in quotes:
            self._write(format_quote(q))
            self._write("")

    def set_loading(self, visible: bool) -> None:
        self.loading = visible
        log.info("loading" if visible else "loading finished")

    def set_pagination(self, info: PageInfo) -> None:
        self._write(info.label)

    def set_tag_options(self, tags: Sequence[str]) -> None:
        self.tag_options = [ALL_TAGS, *tags]

    def set_stats(self, stats: Stats) -> None:
        self._write(
            f"Quotes: {stats.total_quotes}  Authors: {stats.total_authors}  Tags: {stats.total_tags}"
        )

    def notify(self, message: str) -> None:
        self._write(f"! {message}")


def render_quotes(session: Session, display: Display) -> None:
    display.set_quotes(session.visible_quotes())
    display.set_pagination(session.page_info)


def refresh(session: Session, display: Display) -> None:
    """Push stats, tag options and the current page to the display."""
    display.set_stats(session.stats)
    display.set_tag_options(session.tag_options)
    render_quotes(session, display)
