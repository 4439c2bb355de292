"""
Repository implementations backed by the Django ORM.
"""

from .catalog import DjangoCatalogSource

__all__ = ['DjangoCatalogSource']
