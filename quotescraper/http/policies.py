from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class ProxyRotation:
    """
    Ordered list of proxy base URLs, tried first to last.
    A proxied URL is the base with the target URL appended verbatim.
    """

    bases: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.bases:
            raise ValueError("ProxyRotation needs at least one proxy base")

    def __iter__(self) -> Iterator[str]:
        return iter(self.bases)

    def __len__(self) -> int:
        return len(self.bases)

    @staticmethod
    def build_url(base: str, target_url: str) -> str:
        return base + target_url
