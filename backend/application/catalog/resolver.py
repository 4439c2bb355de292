"""
Catalog Resolver.

Merges the remote calculator catalog with the calculators bundled in the
build and memoizes the result for the lifetime of the resolver.

Resolution never fails: when the remote source raises, the local list is
served (and cached) instead, tagged `ResolutionMode.FALLBACK`.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from domain.catalog.entities import Calculator, CalculatorCategory
from domain.catalog.fallback import LOCAL_CALCULATORS
from domain.catalog.registry import CalculatorKind
from domain.catalog.repositories import CatalogSource
from domain.catalog.value_objects import CatalogResult, ResolutionMode

logger = logging.getLogger(__name__)

FALLBACK_CATEGORY_ICON = 'Calculator'


@dataclass(frozen=True)
class _CacheEntry:
    items: Tuple
    mode: ResolutionMode

    def to_result(self) -> CatalogResult:
        return CatalogResult(items=list(self.items), mode=self.mode)


def merge_calculators(
    remote: Iterable[Calculator],
    local: Iterable[Calculator],
) -> List[Calculator]:
    """
    Remote records first, in remote order, then local records whose slug
    the remote list does not use.

    A remote record replaces a local one with the same slug as a whole.
    Repeated slugs inside the remote list keep their first occurrence.
    """
    merged: List[Calculator] = []
    seen = set()
    for calc in remote:
        if calc.slug in seen:
            logger.warning(f"Duplicate calculator slug '{calc.slug}' in remote catalog, keeping first")
            continue
        seen.add(calc.slug)
        merged.append(calc)
    for calc in local:
        if calc.slug not in seen:
            seen.add(calc.slug)
            merged.append(calc)
    return merged


def attach_calculators(
    categories: Iterable[CalculatorCategory],
    calculators: Sequence[Calculator],
) -> List[CalculatorCategory]:
    """Populate each category with the calculators sharing its slug, in catalog order."""
    return [
        category.with_calculators(c for c in calculators if c.category_slug == category.slug)
        for category in categories
    ]


def synthesize_categories(calculators: Sequence[Calculator]) -> List[CalculatorCategory]:
    """
    Build one category per distinct `category_slug`, in order of first
    appearance. Used when the remote category list is unavailable.
    """
    grouped: Dict[str, List[Calculator]] = {}
    for calc in calculators:
        grouped.setdefault(calc.category_slug, []).append(calc)

    return [
        CalculatorCategory(
            id=slug,
            name=slug[:1].upper() + slug[1:],
            slug=slug,
            description=f'{slug} calculators',
            icon=FALLBACK_CATEGORY_ICON,
            calculators=tuple(members),
        )
        for slug, members in grouped.items()
    ]


class CatalogResolver:
    """
    Process-lifetime cache over a `CatalogSource`.

    Holds two independent caches, calculators and categories. Each is
    either empty or populated; `invalidate()` empties both. Concurrent
    resolutions against an empty cache may both hit the source, the last
    one to finish is what stays cached.

    Every public call returns new lists of immutable records, so callers
    cannot alter what is cached.
    """

    def __init__(
        self,
        source: CatalogSource,
        local_calculators: Iterable[Calculator] = LOCAL_CALCULATORS,
    ):
        self._source = source
        self._local: Tuple[Calculator, ...] = tuple(local_calculators)
        self._calculators: Optional[_CacheEntry] = None
        self._categories: Optional[_CacheEntry] = None

    @property
    def source(self) -> CatalogSource:
        return self._source

    @property
    def is_populated(self) -> bool:
        return self._calculators is not None or self._categories is not None

    def local_calculators(self) -> List[Calculator]:
        """The bundled calculators, regardless of cache state."""
        return list(self._local)

    async def resolve_calculators(self) -> CatalogResult[Calculator]:
        """Return the merged calculator catalog, fetching it on first use."""
        cached = self._calculators
        if cached is not None:
            return cached.to_result()

        try:
            remote = await self._source.list_calculators()
            merged = merge_calculators(remote, self._local)
            mode = ResolutionMode.FRESH
        except Exception as e:
            logger.error(f"Failed to fetch calculators from remote catalog: {e!r}", exc_info=True)
            logger.warning("Using local calculators as fallback")
            merged = list(self._local)
            mode = ResolutionMode.FALLBACK

        self._report_unknown_components(merged)

        entry = _CacheEntry(items=tuple(merged), mode=mode)
        self._calculators = entry
        logger.info(f"Calculator catalog resolved: {len(merged)} calculators ({mode.value})")
        return entry.to_result()

    async def resolve_categories(self) -> CatalogResult[CalculatorCategory]:
        """Return categories populated with their calculators, fetching on first use."""
        cached = self._categories
        if cached is not None:
            return cached.to_result()

        try:
            remote = await self._source.list_categories()
            calculators = (await self.resolve_calculators()).items
            categories = attach_calculators(remote, calculators)
            mode = ResolutionMode.FRESH
            self._report_orphans(categories, calculators)
        except Exception as e:
            logger.error(f"Failed to fetch calculator categories from remote catalog: {e!r}", exc_info=True)
            calculators = (await self.resolve_calculators()).items
            categories = synthesize_categories(calculators)
            mode = ResolutionMode.FALLBACK

        entry = _CacheEntry(items=tuple(categories), mode=mode)
        self._categories = entry
        logger.info(f"Calculator categories resolved: {len(categories)} categories ({mode.value})")
        return entry.to_result()

    async def get_calculator(self, slug: str) -> Optional[Calculator]:
        """Look a calculator up by slug in the resolved catalog."""
        for calc in (await self.resolve_calculators()).items:
            if calc.slug == slug:
                return calc
        return None

    async def get_category(self, slug: str) -> Optional[CalculatorCategory]:
        """Look a category up by slug in the resolved categories."""
        for category in (await self.resolve_categories()).items:
            if category.slug == slug:
                return category
        return None

    def invalidate(self) -> None:
        """Drop both caches; the next resolution goes back to the source."""
        if self.is_populated:
            logger.info("Catalog cache invalidated")
        self._calculators = None
        self._categories = None

    def _report_unknown_components(self, calculators: Sequence[Calculator]) -> None:
        unknown = [
            c.slug for c in calculators
            if not CalculatorKind.from_component(c.component).is_known
        ]
        if unknown:
            logger.warning(f"Calculators with unknown components: {', '.join(unknown)}")

    def _report_orphans(
        self,
        categories: Sequence[CalculatorCategory],
        calculators: Sequence[Calculator],
    ) -> None:
        known = {category.slug for category in categories}
        orphans = sorted({c.category_slug for c in calculators if c.category_slug not in known})
        if orphans:
            logger.warning(
                f"Calculators reference categories missing from the remote catalog "
                f"and are not listed under any category: {', '.join(orphans)}"
            )
