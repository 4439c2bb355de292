"""
Catalog app configuration.

Composition root for the catalog: builds the configured `CatalogSource`
and the one `CatalogResolver` this process serves from.
"""

import logging

from django.apps import AppConfig, apps
from django.conf import settings
from django.utils.module_loading import import_string

from domain.catalog.fallback import LOCAL_CALCULATORS

from .resolver import CatalogResolver

logger = logging.getLogger(__name__)


class CatalogConfig(AppConfig):
    name = 'application.catalog'
    label = 'catalog'
    verbose_name = 'Calculator catalog'

    resolver: CatalogResolver = None

    def ready(self):
        self.resolver = build_catalog_resolver()


def build_catalog_resolver() -> CatalogResolver:
    """Create a resolver over the source named by CATALOG_SOURCE_CLASS."""
    source_class = import_string(settings.CATALOG_SOURCE_CLASS)
    logger.debug(f"Catalog source: {settings.CATALOG_SOURCE_CLASS}")
    return CatalogResolver(source=source_class(), local_calculators=LOCAL_CALCULATORS)


def get_catalog_resolver() -> CatalogResolver:
    return apps.get_app_config('catalog').resolver
