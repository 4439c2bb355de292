"""
Catalog ORM Models.

Storage for the remote calculator catalog:
1. CalculatorCategory - navigation groups (health, finance, math, ...)
2. Calculator - one record per calculator page

Calculators point at categories by slug only. A calculator whose
category_slug matches no category is kept, it just shows up under no
category in the resolved catalog.
"""

import re

from django.db import models

from .base import BaseModelWithHistory, ActiveManager


SLUG_MAX_LENGTH = 100


def slugify_name(name: str) -> str:
    """
    Build a calculator slug from a display name.

    Lower-cases and collapses every run of non-alphanumerics into a single
    dash: "BMI Calculator (Adults)" -> "bmi-calculator-adults".
    """
    slug = re.sub(r'[^a-z0-9]+', '-', (name or '').lower())
    return slug.strip('-')[:SLUG_MAX_LENGTH]


class CalculatorCategory(BaseModelWithHistory):
    """
    Calculator category.

    Examples: Health, Finance, Math.
    """

    name = models.CharField(
        max_length=200,
        verbose_name="Name"
    )

    slug = models.SlugField(
        max_length=SLUG_MAX_LENGTH,
        unique=True,
        verbose_name="Slug"
    )

    description = models.TextField(
        blank=True,
        verbose_name="Description"
    )

    # Symbolic icon name, display only
    icon = models.CharField(
        max_length=100,
        default='Calculator',
        verbose_name="Icon"
    )

    objects = models.Manager()
    active = ActiveManager()

    class Meta:
        db_table = 'calculator_categories'
        verbose_name = 'Calculator category'
        verbose_name_plural = 'Calculator categories'
        ordering = ['name']

    def __str__(self):
        return self.name


class Calculator(BaseModelWithHistory):
    """
    Calculator catalog record.

    `component` names the client implementation; it is validated against
    `domain.catalog.registry.CalculatorKind` on the admin write path, not
    at the database level, so records written by newer builds still load.
    """

    name = models.CharField(
        max_length=200,
        verbose_name="Name"
    )

    slug = models.SlugField(
        max_length=SLUG_MAX_LENGTH,
        unique=True,
        verbose_name="Slug"
    )

    description = models.TextField(
        blank=True,
        verbose_name="Description"
    )

    component = models.CharField(
        max_length=100,
        verbose_name="Client component"
    )

    icon = models.CharField(
        max_length=100,
        default='Calculator',
        verbose_name="Icon"
    )

    # Not a foreign key: categories are matched by slug at resolution time
    category_slug = models.SlugField(
        max_length=SLUG_MAX_LENGTH,
        db_index=True,
        verbose_name="Category slug"
    )

    objects = models.Manager()
    active = ActiveManager()

    class Meta:
        db_table = 'calculators'
        verbose_name = 'Calculator'
        verbose_name_plural = 'Calculators'
        ordering = ['created_at', 'slug']

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify_name(self.name)
        super().save(*args, **kwargs)
