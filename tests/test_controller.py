"""Tests for the event adapter between user actions and the session."""

import asyncio
import io

import pytest

from quotescraper.controller import EXPORT_FAILED_NOTICE, NO_QUOTES_NOTICE, QuotesController
from quotescraper.dataset import Session
from quotescraper.display import ConsoleDisplay
from quotescraper.engine import ScrapeOrchestrator, ScrapeState
from quotescraper.exceptions import FetchExhausted

from conftest import FIXED_NOW


class FailingFetcher:
    async def fetch_page(self, page_number):
        raise FetchExhausted(page_number)


async def _no_sleep(seconds):
    return None


@pytest.fixture
def controller(display, tmp_path):
    session = Session(page_size=2)
    orch = ScrapeOrchestrator(FailingFetcher(), session, display, sleep=_no_sleep, clock=lambda: FIXED_NOW)
    return QuotesController(session, display, orch, export_dir=tmp_path)


def test_start_falls_back_and_renders_first_page(controller, display):
    outcome = asyncio.run(controller.start())

    assert outcome is ScrapeState.FALLBACK
    assert len(controller.session.quotes) == 6
    assert [q.id for q in display.quotes] == [1, 2]
    assert display.pagination.label == "Page 1 of 3"
    assert display.stats.total_quotes == 6


def test_search_then_tag_keeps_both_criteria(controller, display):
    asyncio.run(controller.start())
    controller.on_next()

    controller.on_search("einstein")
    assert controller.session.current_page == 1
    assert display.stats.total_quotes == 3

    controller.on_tag_selected("success")
    assert [q.id for q in display.quotes] == [6]
    assert display.stats.total_quotes == 1


def test_navigation_rejects_out_of_range(controller, display):
    asyncio.run(controller.start())

    assert controller.on_prev() is False
    assert controller.on_next() is True
    assert controller.on_next() is True
    assert controller.on_next() is False
    assert controller.session.current_page == 3
    assert display.pagination.label == "Page 3 of 3"


def test_export_with_nothing_filtered_notifies(controller, display):
    asyncio.run(controller.start())
    controller.on_search("no such quote")

    assert controller.on_export() is None
    assert display.notices == [NO_QUOTES_NOTICE]


def test_export_writes_filtered_quotes(controller, display):
    asyncio.run(controller.start())
    controller.on_search("einstein")

    path = controller.on_export()

    assert path is not None
    assert len(path.read_text(encoding="utf-8").split("\n")) == 4
    assert display.notices == []


def test_export_failure_notifies_and_keeps_dataset(controller, display, tmp_path):
    asyncio.run(controller.start())
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    controller.export_dir = blocker
    before = controller.session.filtered

    assert controller.on_export() is None
    assert display.notices == [EXPORT_FAILED_NOTICE]
    assert controller.session.filtered == before


def test_debug_state(controller):
    asyncio.run(controller.start())
    state = controller.debug_state()
    assert state == {
        "total_quotes": 6,
        "filtered_quotes": 6,
        "current_page": 1,
        "is_scraping": False,
        "last_outcome": "fallback",
    }


def test_console_display_renders_cards_and_empty_state(sample_quotes):
    out = io.StringIO()
    console = ConsoleDisplay(out)

    console.set_quotes(sample_quotes[:1])
    console.set_quotes([])
    console.set_tag_options(["life"])

    text = out.getvalue()
    assert "— Albert Einstein" in text
    assert "Page 0 • 2024-05-01" in text
    assert "No quotes found" in text
    assert console.tag_options == ["all", "life"]
