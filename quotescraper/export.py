from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Sequence

from quotescraper.exceptions import ExportFailure
from quotescraper.logging import get_logger
from quotescraper.schemas import Quote

log = get_logger("quotescraper.export")

CSV_HEADER = ("ID", "Quote", "Author", "Tags", "Page", "Timestamp")


def _quote_field(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def _row(quote: Quote) -> str:
    # Only the quote text is quoted; tags are ';'-joined.
    return ",".join(
        [
            str(quote.id),
            _quote_field(quote.text),
            quote.author,
            ";".join(quote.tags),
            str(quote.page),
            quote.timestamp,
        ]
    )


def quotes_to_csv(quotes: Sequence[Quote]) -> str:
    return "\n".join([",".join(CSV_HEADER), *(_row(q) for q in quotes)])


def export_filename(today: date | None = None) -> str:
    return f"quotes_export_{(today or date.today()).isoformat()}.csv"


def export_csv(quotes: Sequence[Quote], output_dir: str | Path, today: date | None = None) -> Path | None:
    """
    Write `quotes` to a dated CSV file under `output_dir`.

    Returns None when there is nothing to export. Failures surface as ExportFailure.
    """
    if not quotes:
        log.info("nothing to export")
        return None

    path = Path(output_dir) / export_filename(today)
    try:
        content = quotes_to_csv(quotes)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except (OSError, TypeError, ValueError) as e:
        log.exception("csv export failed", extra={"extra_fields": {"path": str(path)}})
        raise ExportFailure(f"Could not export quotes to {path}: {e}") from e

    log.info(
        "exported quotes to csv",
        extra={"extra_fields": {"path": str(path), "count": len(quotes)}},
    )
    return path
