"""
Catalog application services.

The resolver instance lives on the `catalog` app config; use
`application.catalog.apps.get_catalog_resolver()` to reach it.
"""
