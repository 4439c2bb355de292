"""
Refresh Catalog Command.

Drops the in-process catalog cache and resolves it again, reporting
whether the remote catalog was reachable.
"""

from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand

from application.catalog.apps import get_catalog_resolver


class Command(BaseCommand):
    help = 'Re-resolve the calculator catalog and print the result'

    def handle(self, *args, **options):
        resolver = get_catalog_resolver()
        resolver.invalidate()

        calculators = async_to_sync(resolver.resolve_calculators)()
        categories = async_to_sync(resolver.resolve_categories)()

        style = self.style.WARNING if calculators.is_fallback else self.style.SUCCESS
        self.stdout.write(style(
            f'Calculators: {len(calculators)} ({calculators.mode.value})'
        ))
        self.stdout.write(
            f'Categories: {len(categories)} ({categories.mode.value})'
        )
        for category in categories:
            self.stdout.write(f'  {category.slug}: {len(category.calculators)}')
