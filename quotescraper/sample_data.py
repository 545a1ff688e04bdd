from __future__ import annotations

from datetime import datetime, timezone

from quotescraper.schemas import Quote

_SAMPLES: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    (
        "The world as we have created it is a process of our thinking. "
        "It cannot be changed without changing our thinking.",
        "Albert Einstein",
        ("change", "deep-thoughts", "thinking", "world"),
    ),
    (
        "It is our choices, Harry, that show what we truly are, far more than our abilities.",
        "J.K. Rowling",
        ("abilities", "choices"),
    ),
    (
        "There are only two ways to live your life. One is as though nothing is a miracle. "
        "The other is as though everything is a miracle.",
        "Albert Einstein",
        ("inspirational", "life", "live", "miracle", "miracles"),
    ),
    (
        "The person, be it gentleman or lady, who has not pleasure in a good novel, "
        "must be intolerably stupid.",
        "Jane Austen",
        ("aliteracy", "books", "classic", "humor"),
    ),
    (
        "Imperfection is beauty, madness is genius and it's better to be absolutely "
        "ridiculous than absolutely boring.",
        "Marilyn Monroe",
        ("be-yourself", "inspirational"),
    ),
    (
        "Try not to become a man of success. Rather become a man of value.",
        "Albert Einstein",
        ("adulthood", "success", "value"),
    ),
)


def get_sample_quotes(now: datetime | None = None) -> list[Quote]:
    """Fallback dataset used when live scraping cannot complete. All quotes carry page 0."""
    ts = (now or datetime.now(timezone.utc)).isoformat()
    return [
        Quote(id=i, text=text, author=author, tags=tags, page=0, timestamp=ts)
        for i, (text, author, tags) in enumerate(_SAMPLES, start=1)
    ]
