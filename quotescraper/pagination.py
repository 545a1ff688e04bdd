from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageInfo:
    current_page: int
    total_pages: int

    @property
    def has_prev(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def label(self) -> str:
        if self.total_pages > 0:
            return f"Page {self.current_page} of {self.total_pages}"
        return "No pages"


def _check_page_size(page_size: int) -> None:
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")


def total_pages(count: int, page_size: int) -> int:
    _check_page_size(page_size)
    return math.ceil(count / page_size) if count > 0 else 0


def page_slice(items: Sequence[T], current_page: int, page_size: int) -> list[T]:
    _check_page_size(page_size)
    start = (current_page - 1) * page_size
    if start < 0:
        return []
    return list(items[start : start + page_size])


def is_valid_page(page: int, count: int, page_size: int) -> bool:
    return 1 <= page <= total_pages(count, page_size)
