import pytest

from application.catalog.resolver import CatalogResolver
from infrastructure.persistence.models import Calculator, CalculatorCategory

from conftest import make_calculator, make_category, mock_source

pytestmark = pytest.mark.django_db


# =============================================================================
# PUBLIC
# =============================================================================

def test_list_calculators_merges_database_and_bundled(api_client):
    Calculator.objects.create(
        name='BMI Calculator', slug='bmi', component='BmiCalculator', category_slug='health'
    )

    response = api_client.get('/api/v1/calculators/')

    assert response.status_code == 200
    body = response.json()
    assert body['mode'] == 'fresh'
    slugs = [c['slug'] for c in body['results']]
    assert slugs[0] == 'bmi'
    assert 'kg-to-lb-calculator' in slugs
    assert body['count'] == len(slugs)


def test_list_calculators_reports_fallback(api_client, failing_resolver):
    response = api_client.get('/api/v1/calculators/')

    assert response.status_code == 200
    assert response.json()['mode'] == 'fallback'
    assert response.json()['count'] == len(failing_resolver.local_calculators())


def test_unknown_component_is_served_with_unknown_kind(api_client, install_resolver):
    install_resolver(CatalogResolver(
        mock_source([make_calculator('holo', component='HoloDeckCalculator')]),
        local_calculators=(),
    ))

    item = api_client.get('/api/v1/calculators/').json()['results'][0]

    assert item['kind'] == 'Unknown'
    assert item['client_module'] is None
    assert item['component_available'] is False


def test_retrieve_calculator(api_client):
    response = api_client.get('/api/v1/calculators/gpa-calculator/')

    assert response.status_code == 200
    assert response.json()['component'] == 'GPACalculator'
    assert response.json()['client_module'] == 'calculators/gpa-calculator'
    assert response.json()['component_available'] is True


def test_retrieve_missing_calculator_is_404(api_client):
    response = api_client.get('/api/v1/calculators/nope/')

    assert response.status_code == 404
    assert response.json()['error'] == 'entity_not_found'


def test_categories_endpoint(api_client, install_resolver):
    install_resolver(CatalogResolver(
        mock_source(
            [make_calculator('a', 'health'), make_calculator('b', 'finance')],
            [make_category('health')],
        ),
        local_calculators=(),
    ))

    body = api_client.get('/api/v1/calculator-categories/').json()

    assert body['mode'] == 'fresh'
    assert body['count'] == 1
    assert [c['slug'] for c in body['results'][0]['calculators']] == ['a']

    detail = api_client.get('/api/v1/calculator-categories/health/')
    assert detail.status_code == 200
    assert api_client.get('/api/v1/calculator-categories/finance/').status_code == 404


# =============================================================================
# ADMIN
# =============================================================================

def test_admin_endpoints_require_admin_claim(api_client, user_client):
    assert api_client.get('/api/v1/admin/calculators/').status_code == 401
    assert user_client.get('/api/v1/admin/calculators/').status_code == 403


def test_create_calculator_derives_slug_and_invalidates_cache(admin_client, admin_user):
    before = admin_client.get('/api/v1/calculators/').json()
    assert 'tip-calculator' not in [c['slug'] for c in before['results']]

    response = admin_client.post('/api/v1/admin/calculators/', {
        'name': 'Tip Calculator',
        'description': 'Split the bill',
        'component': 'TipCalculator',
        'category_slug': 'finance',
    }, format='json')

    assert response.status_code == 201, response.content
    assert response.json()['slug'] == 'tip-calculator'
    assert Calculator.objects.get(slug='tip-calculator').created_by == admin_user

    after = admin_client.get('/api/v1/calculators/').json()
    assert 'tip-calculator' in [c['slug'] for c in after['results']]


def test_create_calculator_rejects_unknown_component(admin_client):
    response = admin_client.post('/api/v1/admin/calculators/', {
        'name': 'Holo Deck',
        'component': 'HoloDeckCalculator',
        'category_slug': 'other',
    }, format='json')

    assert response.status_code == 400
    assert 'component' in response.json()


def test_create_calculator_rejects_duplicate_slug(admin_client):
    Calculator.objects.create(name='Tip', slug='tip', component='TipCalculator', category_slug='finance')

    response = admin_client.post('/api/v1/admin/calculators/', {
        'name': 'Tip', 'slug': 'tip', 'component': 'TipCalculator', 'category_slug': 'finance',
    }, format='json')

    assert response.status_code == 400
    assert 'slug' in response.json()


def test_update_and_delete_invalidate_cache(admin_client):
    Calculator.objects.create(
        name='Kg to Lb', slug='kg-to-lb-calculator', component='KgToLbCalculator',
        category_slug='health', description='from the database',
    )
    listed = admin_client.get('/api/v1/calculators/kg-to-lb-calculator/').json()
    assert listed['description'] == 'from the database'

    response = admin_client.patch(
        '/api/v1/admin/calculators/kg-to-lb-calculator/',
        {'description': 'edited'},
        format='json',
    )
    assert response.status_code == 200
    assert admin_client.get('/api/v1/calculators/kg-to-lb-calculator/').json()['description'] == 'edited'

    response = admin_client.delete('/api/v1/admin/calculators/kg-to-lb-calculator/')
    assert response.status_code == 204
    # The bundled record takes over again
    restored = admin_client.get('/api/v1/calculators/kg-to-lb-calculator/').json()
    assert restored['description'] == 'Convert kilograms to pounds quickly and easily.'


def test_admin_calculator_search_and_filter(admin_client):
    Calculator.objects.create(name='Tip Calculator', component='TipCalculator', category_slug='finance')
    Calculator.objects.create(name='BMI Calculator', component='BmiCalculator', category_slug='health')

    by_search = admin_client.get('/api/v1/admin/calculators/', {'search': 'tip'}).json()
    by_category = admin_client.get('/api/v1/admin/calculators/', {'category_slug': 'health'}).json()

    assert [c['slug'] for c in by_search['results']] == ['tip-calculator']
    assert [c['slug'] for c in by_category['results']] == ['bmi-calculator']


def test_calculator_history(admin_client):
    Calculator.objects.create(name='Tip Calculator', component='TipCalculator', category_slug='finance')
    admin_client.patch('/api/v1/admin/calculators/tip-calculator/', {'name': 'Tip'}, format='json')

    history = admin_client.get('/api/v1/admin/calculators/tip-calculator/history/').json()

    assert [h['type'] for h in history] == ['~', '+']


def test_category_crud_invalidates_cache(admin_client):
    Calculator.objects.create(name='Tip Calculator', component='TipCalculator', category_slug='money')
    before = admin_client.get('/api/v1/calculator-categories/').json()
    assert 'money' not in [c['slug'] for c in before['results']]

    response = admin_client.post('/api/v1/admin/calculator-categories/', {
        'name': 'Money',
        'description': 'Money matters',
    }, format='json')
    assert response.status_code == 201, response.content
    assert response.json()['slug'] == 'money'
    assert response.json()['calculators_count'] == 1

    after = admin_client.get('/api/v1/calculator-categories/money/').json()
    assert [c['slug'] for c in after['calculators']] == ['tip-calculator']

    assert admin_client.delete('/api/v1/admin/calculator-categories/money/').status_code == 204
    assert not CalculatorCategory.objects.filter(slug='money').exists()
    assert admin_client.get('/api/v1/calculator-categories/money/').status_code == 404


def test_catalog_refresh(admin_client):
    admin_client.get('/api/v1/calculators/')
    Calculator.objects.create(name='Tip Calculator', component='TipCalculator', category_slug='finance')

    response = admin_client.post('/api/v1/admin/catalog/refresh/')

    assert response.status_code == 200
    assert response.json()['mode'] == 'fresh'
    assert response.json()['calculators'] == 7
    slugs = [c['slug'] for c in admin_client.get('/api/v1/calculators/').json()['results']]
    assert 'tip-calculator' in slugs
