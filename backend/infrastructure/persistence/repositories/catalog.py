"""
Catalog Source - Django ORM adapter.

Reads the remote catalog tables and maps rows to immutable domain
entities. Inactive rows are never returned.
"""

from typing import List

from domain.catalog.entities import Calculator, CalculatorCategory
from domain.catalog.repositories import CatalogSource
from infrastructure.persistence.models import (
    Calculator as CalculatorModel,
    CalculatorCategory as CalculatorCategoryModel,
)


def calculator_to_entity(obj: CalculatorModel) -> Calculator:
    return Calculator(
        id=str(obj.id),
        name=obj.name,
        slug=obj.slug,
        description=obj.description,
        component=obj.component,
        icon=obj.icon,
        category_slug=obj.category_slug,
    )


def category_to_entity(obj: CalculatorCategoryModel) -> CalculatorCategory:
    return CalculatorCategory(
        id=str(obj.id),
        name=obj.name,
        slug=obj.slug,
        description=obj.description,
        icon=obj.icon,
    )


class DjangoCatalogSource(CatalogSource):
    """CatalogSource over the `calculators` and `calculator_categories` tables."""

    def calculator_queryset(self):
        return CalculatorModel.active.all().order_by('created_at', 'slug')

    def category_queryset(self):
        return CalculatorCategoryModel.active.all().order_by('name')

    async def list_calculators(self) -> List[Calculator]:
        return [calculator_to_entity(obj) async for obj in self.calculator_queryset()]

    async def list_categories(self) -> List[CalculatorCategory]:
        return [category_to_entity(obj) async for obj in self.category_queryset()]
