from io import StringIO

import pytest
from django.core.management import call_command

from domain.catalog.fallback import LOCAL_CALCULATORS
from infrastructure.persistence.models import Calculator, CalculatorCategory, SiteSettings, User

pytestmark = pytest.mark.django_db


def test_init_system_seeds_everything():
    out = StringIO()

    call_command('init_system', '--admin-email', 'root@example.com', '--admin-password', 'pw', stdout=out, no_color=True)

    admin = User.objects.get(email='root@example.com')
    assert admin.is_admin and admin.check_password('pw')
    assert Calculator.objects.count() == len(LOCAL_CALCULATORS)
    assert set(CalculatorCategory.objects.values_list('slug', flat=True)) == {'finance', 'health', 'math'}
    assert SiteSettings.load().categories == ['Finance', 'Health', 'Math']
    assert 'completed' in out.getvalue()


def test_init_system_is_idempotent():
    call_command('init_system', stdout=StringIO())
    call_command('init_system', stdout=StringIO())

    assert User.objects.filter(is_admin=True).count() == 1
    assert Calculator.objects.count() == len(LOCAL_CALCULATORS)


def test_init_system_skip_flags():
    call_command('init_system', '--skip-admin', '--skip-catalog', stdout=StringIO())

    assert not User.objects.exists()
    assert not Calculator.objects.exists()
    assert SiteSettings.objects.count() == 1


def test_refresh_catalog_reports_mode():
    out = StringIO()

    call_command('refresh_catalog', stdout=out, no_color=True)

    output = out.getvalue()
    assert f'Calculators: {len(LOCAL_CALCULATORS)} (fresh)' in output
    assert 'Categories: 0 (fresh)' in output


def test_refresh_catalog_fallback(failing_resolver):
    out = StringIO()

    call_command('refresh_catalog', stdout=out, no_color=True)

    assert '(fallback)' in out.getvalue()
