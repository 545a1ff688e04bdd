from __future__ import annotations

from pathlib import Path
from typing import Any

from quotescraper.dataset import Session
from quotescraper.display import Display, refresh, render_quotes
from quotescraper.engine import ScrapeOrchestrator, ScrapeState
from quotescraper.exceptions import ExportFailure
from quotescraper.export import export_csv
from quotescraper.logging import get_logger

log = get_logger("quotescraper.controller")

NO_QUOTES_NOTICE = "No quotes available to export."
EXPORT_FAILED_NOTICE = "Error exporting to CSV. Please try again."


class QuotesController:
    """Translates user events into session changes and display updates."""

    def __init__(
        self,
        session: Session,
        display: Display,
        orchestrator: ScrapeOrchestrator,
        export_dir: str | Path = ".",
    ) -> None:
        self.session = session
        self.display = display
        self.orchestrator = orchestrator
        self.export_dir = Path(export_dir)

    async def start(self) -> ScrapeState | None:
        outcome = await self.orchestrator.run()
        self.orchestrator.ensure_quotes_available()
        return outcome

    def render(self) -> None:
        refresh(self.session, self.display)

    def on_filter(self, search_text: str, selected_tag: str | None) -> None:
        self.session.apply_filter(search_text, selected_tag)
        self.display.set_stats(self.session.stats)
        render_quotes(self.session, self.display)

    def on_search(self, text: str) -> None:
        self.on_filter(text, self.session.selected_tag)

    def on_tag_selected(self, tag: str | None) -> None:
        self.on_filter(self.session.search_text, tag)

    def on_page(self, page: int) -> bool:
        if not self.session.go_to_page(page):
            return False
        render_quotes(self.session, self.display)
        return True

    def on_next(self) -> bool:
        return self.on_page(self.session.current_page + 1)

    def on_prev(self) -> bool:
        return self.on_page(self.session.current_page - 1)

    def on_export(self) -> Path | None:
        if not self.session.filtered:
            self.display.notify(NO_QUOTES_NOTICE)
            return None
        try:
            return export_csv(self.session.filtered, self.export_dir)
        except ExportFailure:
            self.display.notify(EXPORT_FAILED_NOTICE)
            return None

    def debug_state(self) -> dict[str, Any]:
        return {
            "total_quotes": len(self.session.quotes),
            "filtered_quotes": len(self.session.filtered),
            "current_page": self.session.current_page,
            "is_scraping": self.orchestrator.is_scraping,
            "last_outcome": self.orchestrator.last_outcome.value if self.orchestrator.last_outcome else None,
        }
