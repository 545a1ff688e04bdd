from __future__ import annotations

import argparse
import asyncio
import json

import httpx
from prometheus_client import start_http_server

from quotescraper.config import AppConfig, load_config
from quotescraper.controller import QuotesController
from quotescraper.dataset import Session
from quotescraper.display import ConsoleDisplay
from quotescraper.engine import ScrapeOrchestrator
from quotescraper.exceptions import ConfigError
from quotescraper.http import ProxyFetcher, ProxyRotation
from quotescraper.logging import LOG_LEVELS, get_logger, setup_logging

log = get_logger("quotescraper_cli")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="quotes")
    sub = p.add_subparsers(dest="cmd", required=True)
    run = sub.add_parser("scrape", help="Scrape quotes, then filter, page and export them")
    run.add_argument("--config", default=None, help="Path to config YAML (defaults built in)")
    run.add_argument("--search", default="", help="Case-insensitive text/author filter")
    run.add_argument("--tag", default=None, help="Only show quotes carrying this tag ('all' for any)")
    run.add_argument("--page", type=int, default=1, help="Page of results to show")
    run.add_argument("--export", default=None, metavar="DIR", help="Write the filtered quotes as CSV into DIR")
    run.add_argument("--debug-state", action="store_true", help="Print session state as JSON at the end")
    run.add_argument("--log-level", default="INFO", type=str.upper, choices=LOG_LEVELS, help="Logging level")
    run.add_argument(
        "--metrics-port",
        type=int,
        default=0,
        help="Expose /metrics on this port (0 to disable)",
    )
    return p


async def run_session(
    config: AppConfig,
    args: argparse.Namespace,
    transport: httpx.AsyncBaseTransport | None = None,
) -> QuotesController:
    session = Session(page_size=config.view.page_size)
    display = ConsoleDisplay()
    async with httpx.AsyncClient(transport=transport) as client:
        fetcher = ProxyFetcher(
            client=client,
            proxies=ProxyRotation(config.proxy.bases),
            target_url_template=config.scrape.target_url_template,
            timeout_s=config.proxy.timeout_s,
        )
        orchestrator = ScrapeOrchestrator(
            fetcher,
            session,
            display,
            max_pages=config.scrape.max_pages,
            page_delay_s=config.scrape.page_delay_s,
        )
        controller = QuotesController(
            session, display, orchestrator, export_dir=args.export or config.export.output_dir
        )
        await controller.start()

    if args.search or args.tag:
        controller.on_filter(args.search, args.tag)
    if args.page != 1:
        controller.on_page(args.page)
    if args.export:
        path = controller.on_export()
        if path is not None:
            display.notify(f"Exported {len(session.filtered)} quotes to {path}")
    return controller


def main() -> None:
    args = _build_parser().parse_args()
    setup_logging(args.log_level)
    if args.cmd == "scrape":
        try:
            config = load_config(args.config)
        except ConfigError as e:
            raise SystemExit(f"config error: {e}") from e

        if args.metrics_port and args.metrics_port > 0:
            start_http_server(args.metrics_port)
            log.info("metrics server started", extra={"extra_fields": {"port": args.metrics_port}})

        controller = asyncio.run(run_session(config, args))
        if args.debug_state:
            print(json.dumps(controller.debug_state(), indent=2))


if __name__ == "__main__":
    main()
