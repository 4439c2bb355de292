from datetime import timedelta

import pytest
from django.utils import timezone

from infrastructure.persistence.models import AuditLog, Calculator, SiteSettings, User

pytestmark = pytest.mark.django_db


def make_users(count):
    now = timezone.now()
    users = []
    for i in range(count):
        u = User.objects.create_user(
            username=f'user{i}@example.com',
            email=f'user{i}@example.com',
            password='secret123',
            full_name=f'User {i}',
        )
        u.date_joined = now - timedelta(days=count - i)
        u.save(update_fields=['date_joined'])
        users.append(u)
    return users


# =============================================================================
# USERS
# =============================================================================

def test_user_list_is_paginated_newest_first(admin_client):
    make_users(12)

    page = admin_client.get('/api/v1/admin/users/').json()

    assert page['count'] == 13
    assert len(page['results']) == 10
    assert page['results'][0]['email'] == 'admin@example.com'
    assert page['results'][1]['email'] == 'user11@example.com'


def test_user_search(admin_client):
    make_users(3)

    by_name = admin_client.get('/api/v1/admin/users/', {'search': 'User 2'}).json()
    by_email = admin_client.get('/api/v1/admin/users/', {'search': 'user1@'}).json()

    assert [u['email'] for u in by_name['results']] == ['user2@example.com']
    assert [u['email'] for u in by_email['results']] == ['user1@example.com']


def test_set_admin(admin_client, user):
    response = admin_client.post(f'/api/v1/admin/users/{user.id}/set_admin/', {'is_admin': True}, format='json')

    assert response.status_code == 200
    assert response.json()['is_admin'] is True
    user.refresh_from_db()
    assert user.is_admin and user.is_staff
    assert AuditLog.objects.filter(action='set_admin', extra_data__is_admin=True).exists()

    admin_client.post(f'/api/v1/admin/users/{user.id}/set_admin/', {'is_admin': False}, format='json')
    user.refresh_from_db()
    assert not user.is_admin


@pytest.mark.parametrize('payload', [{}, {'is_admin': 'yes'}, {'is_admin': 1}])
def test_set_admin_requires_boolean(admin_client, user, payload):
    response = admin_client.post(f'/api/v1/admin/users/{user.id}/set_admin/', payload, format='json')

    assert response.status_code == 400
    assert 'is_admin' in response.json()


def test_delete_user(admin_client, user):
    response = admin_client.delete(f'/api/v1/admin/users/{user.id}/')

    assert response.status_code == 204
    assert not User.objects.filter(pk=user.pk).exists()
    assert AuditLog.objects.filter(action='delete_user', object_repr='Jane Doe').exists()


def test_users_endpoint_is_admin_only(user_client):
    assert user_client.get('/api/v1/admin/users/').status_code == 403


# =============================================================================
# SETTINGS
# =============================================================================

def test_get_settings_creates_defaults(admin_client):
    body = admin_client.get('/api/v1/admin/settings/').json()

    assert body['ai_suggestions'] is True
    assert body['default_precision'] == 2
    assert body['site_name'] == 'OmniCalculator'
    assert body['categories'] == []


def test_patch_settings(admin_client, admin_user):
    response = admin_client.patch('/api/v1/admin/settings/', {
        'ai_suggestions': False,
        'default_precision': 4,
        'categories': ['  Health ', 'Finance', ''],
    }, format='json')

    assert response.status_code == 200, response.content
    settings = SiteSettings.load()
    assert settings.ai_suggestions is False
    assert settings.default_precision == 4
    assert settings.categories == ['Health', 'Finance']
    assert settings.updated_by == admin_user


@pytest.mark.parametrize('payload, field', [
    ({'default_precision': 11}, 'default_precision'),
    ({'default_precision': -1}, 'default_precision'),
    ({'categories': ['Health', 'Health ']}, 'categories'),
])
def test_patch_settings_validation(admin_client, payload, field):
    response = admin_client.patch('/api/v1/admin/settings/', payload, format='json')

    assert response.status_code == 400
    assert field in response.json()


def test_add_and_remove_category(admin_client):
    added = admin_client.post('/api/v1/admin/settings/add_category/', {'name': ' Math '}, format='json')
    assert added.status_code == 201
    assert added.json()['categories'] == ['Math']

    duplicate = admin_client.post('/api/v1/admin/settings/add_category/', {'name': 'Math'}, format='json')
    assert duplicate.status_code == 400

    removed = admin_client.post('/api/v1/admin/settings/remove_category/', {'name': 'Math'}, format='json')
    assert removed.status_code == 200
    assert removed.json()['categories'] == []

    missing = admin_client.post('/api/v1/admin/settings/remove_category/', {'name': 'Math'}, format='json')
    assert missing.status_code == 404


def test_settings_are_admin_only(user_client):
    assert user_client.get('/api/v1/admin/settings/').status_code == 403


# =============================================================================
# DASHBOARD
# =============================================================================

def test_dashboard_summary(admin_client, user):
    Calculator.objects.create(name='Tip Calculator', component='TipCalculator', category_slug='finance')
    Calculator.objects.create(name='Loan Calculator', component='LoanCalculator', category_slug='finance')
    Calculator.objects.create(name='BMI Calculator', component='BmiCalculator', category_slug='health')
    Calculator.objects.create(
        name='Old', component='TipCalculator', category_slug='finance', is_active=False
    )
    User.objects.filter(pk=user.pk).update(date_joined=timezone.now() - timedelta(days=3))

    body = admin_client.get('/api/v1/admin/dashboard/summary/').json()

    assert body['totals']['users'] == 2
    assert body['totals']['admins'] == 1
    assert body['totals']['calculators'] == 3
    assert body['calculators_per_category'] == {'finance': 2, 'health': 1}
    assert [point['users'] for point in body['user_growth']] == [1, 2]
    assert body['catalog_mode'] == 'fresh'


def test_dashboard_reports_fallback(admin_client, failing_resolver):
    body = admin_client.get('/api/v1/admin/dashboard/summary/').json()

    assert body['catalog_mode'] == 'fallback'
