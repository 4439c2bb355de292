"""
Shared fixtures.

The catalog resolver is process-wide; every test starts from an empty
cache, and tests that need a controlled remote swap in a mock source.
"""

from unittest.mock import AsyncMock, Mock

import pytest
from django.apps import apps
from rest_framework.test import APIClient

from application.catalog.resolver import CatalogResolver
from domain.catalog.entities import Calculator, CalculatorCategory
from domain.catalog.repositories import CatalogSource
from infrastructure.auth.tokens import tokens_for_user
from infrastructure.persistence.models import User


def make_calculator(slug, category_slug='health', name=None, component='BmiCalculator', **kwargs):
    return Calculator(
        id=kwargs.pop('id', slug),
        name=name or slug.replace('-', ' ').title(),
        slug=slug,
        description=kwargs.pop('description', f'{slug} description'),
        component=component,
        icon=kwargs.pop('icon', 'Calculator'),
        category_slug=category_slug,
    )


def make_category(slug, name=None):
    return CalculatorCategory(
        id=slug,
        name=name or slug.title(),
        slug=slug,
        description=f'{slug} calculators',
        icon='Calculator',
    )


def mock_source(calculators=(), categories=(), calculators_error=None, categories_error=None):
    """A CatalogSource whose awaited calls are counted."""
    source = Mock(spec=CatalogSource)
    source.list_calculators = AsyncMock(
        return_value=list(calculators),
        side_effect=calculators_error,
    )
    source.list_categories = AsyncMock(
        return_value=list(categories),
        side_effect=categories_error,
    )
    return source


@pytest.fixture(autouse=True)
def fresh_catalog_cache():
    resolver = apps.get_app_config('catalog').resolver
    resolver.invalidate()
    yield
    resolver.invalidate()


@pytest.fixture
def install_resolver(monkeypatch):
    """Replace the app-wide resolver for the duration of a test."""
    def install(resolver):
        monkeypatch.setattr(apps.get_app_config('catalog'), 'resolver', resolver)
        return resolver
    return install


@pytest.fixture
def failing_resolver(install_resolver):
    return install_resolver(CatalogResolver(mock_source(
        calculators_error=ConnectionError('remote down'),
        categories_error=ConnectionError('remote down'),
    )))


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user(db):
    return User.objects.create_user(
        username='jane@example.com',
        email='jane@example.com',
        password='secret123',
        full_name='Jane Doe',
    )


@pytest.fixture
def admin_user(db):
    admin = User.objects.create_user(
        username='admin@example.com',
        email='admin@example.com',
        password='secret123',
        full_name='Site Admin',
    )
    admin.set_admin(True)
    return admin


def authenticate(client, user):
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens_for_user(user)['access']}")
    return client


@pytest.fixture
def user_client(user):
    return authenticate(APIClient(), user)


@pytest.fixture
def admin_client(admin_user):
    return authenticate(APIClient(), admin_user)
