"""
Catalog Domain - Entities.

Calculator and category records as served to the navigation UI.
Records are immutable so that cached lists can be handed out without
callers being able to corrupt them.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Tuple


@dataclass(frozen=True)
class Calculator:
    """
    A single calculator in the catalog.

    `slug` is the catalog key: it is unique across the merged catalog.
    `component` names the client implementation that renders it, see
    `domain.catalog.registry.CalculatorKind`.
    """

    id: str
    name: str
    slug: str
    description: str
    component: str
    icon: str
    category_slug: str

    def __post_init__(self):
        if not self.slug:
            raise ValueError("Calculator slug is required")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'slug': self.slug,
            'description': self.description,
            'component': self.component,
            'icon': self.icon,
            'category_slug': self.category_slug,
        }


@dataclass(frozen=True)
class CalculatorCategory:
    """
    Navigation group of calculators.

    `calculators` is derived, never stored: it holds the calculators whose
    `category_slug` matches this category, in catalog order.
    """

    id: str
    name: str
    slug: str
    description: str
    icon: str
    calculators: Tuple[Calculator, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.slug:
            raise ValueError("Category slug is required")
        # Accept any iterable but always store a tuple
        if not isinstance(self.calculators, tuple):
            object.__setattr__(self, 'calculators', tuple(self.calculators))

    def with_calculators(self, calculators: Iterable[Calculator]) -> CalculatorCategory:
        """Return a copy of this category holding the given calculators."""
        return replace(self, calculators=tuple(calculators))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'slug': self.slug,
            'description': self.description,
            'icon': self.icon,
            'calculators': [c.to_dict() for c in self.calculators],
        }
