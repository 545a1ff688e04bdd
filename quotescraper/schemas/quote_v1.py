from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class QuoteCandidate(BaseModel):
    """A quote as extracted from one page, before page/time stamping."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1)
    text: str = Field(min_length=1)
    author: str = Field(min_length=1)
    tags: tuple[str, ...] = ()


class Quote(QuoteCandidate):
    page: int = Field(ge=0)
    timestamp: str = Field(min_length=1)

    @classmethod
    def from_candidate(cls, candidate: QuoteCandidate, *, id: int, page: int, timestamp: str) -> "Quote":
        return cls(
            id=id,
            text=candidate.text,
            author=candidate.author,
            tags=candidate.tags,
            page=page,
            timestamp=timestamp,
        )
