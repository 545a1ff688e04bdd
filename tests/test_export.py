"""Tests for the CSV exporter."""

from datetime import date

import pytest

from quotescraper.exceptions import ExportFailure
from quotescraper.export import export_csv, export_filename, quotes_to_csv
from quotescraper.schemas import Quote


def test_header_plus_one_line_per_quote(sample_quotes):
    lines = quotes_to_csv(sample_quotes).split("\n")
    assert len(lines) == len(sample_quotes) + 1
    assert lines[0] == "ID,Quote,Author,Tags,Page,Timestamp"


def test_row_layout(sample_quotes):
    row = quotes_to_csv(sample_quotes[:1]).split("\n")[1]
    q = sample_quotes[0]
    assert row == (
        f'1,"{q.text}",Albert Einstein,change;deep-thoughts;thinking;world,0,{q.timestamp}'
    )


def test_double_quotes_in_text_are_doubled():
    q = Quote(
        id=1,
        text='He said "hello" twice',
        author="Someone",
        tags=(),
        page=1,
        timestamp="2024-05-01T12:00:00+00:00",
    )
    row = quotes_to_csv([q]).split("\n")[1]
    assert row == '1,"He said ""hello"" twice",Someone,,1,2024-05-01T12:00:00+00:00'


def test_filename_embeds_date():
    assert export_filename(date(2024, 5, 1)) == "quotes_export_2024-05-01.csv"


def test_export_writes_file(tmp_path, sample_quotes):
    path = export_csv(sample_quotes, tmp_path / "out", today=date(2024, 5, 1))
    assert path == tmp_path / "out" / "quotes_export_2024-05-01.csv"
    assert path.read_text(encoding="utf-8") == quotes_to_csv(sample_quotes)


def test_export_of_nothing_is_a_noop(tmp_path):
    assert export_csv([], tmp_path) is None
    assert list(tmp_path.iterdir()) == []


def test_write_failure_raises_export_failure(tmp_path, sample_quotes):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(ExportFailure):
        export_csv(sample_quotes, blocker)
