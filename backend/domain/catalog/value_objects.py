"""
Catalog Domain - Value Objects.

Resolution results carry the mode they were produced in, so callers can
tell a live catalog from the bundled fallback without reading logs.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Generic, List, TypeVar

T = TypeVar('T')


class ResolutionMode(str, Enum):
    """How a catalog list was produced."""

    FRESH = "fresh"          # Remote store answered, its records take precedence
    FALLBACK = "fallback"    # Remote store failed, static data only

    @property
    def is_degraded(self) -> bool:
        return self is ResolutionMode.FALLBACK


@dataclass(frozen=True)
class CatalogResult(Generic[T]):
    """
    A resolved catalog list together with its resolution mode.

    `items` is a fresh list on every resolution; callers may mutate it.
    """

    items: List[T]
    mode: ResolutionMode

    @property
    def is_fallback(self) -> bool:
        return self.mode.is_degraded

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)
