import pytest

from application.suggestions.service import (
    CANNED_SUGGESTIONS,
    GENERIC_SUGGESTION,
    build_prompt,
    match_calculator_kind,
    suggest_next_step,
)
from domain.catalog.registry import CalculatorKind
from infrastructure.persistence.models import SiteSettings


@pytest.mark.parametrize('name', ['Tip Calculator', 'TipCalculator', 'tip-calculator', 'TIP calculator'])
def test_calculator_name_variants_match(name):
    assert match_calculator_kind(name) is CalculatorKind.TIP


@pytest.mark.parametrize('name', ['', 'Holo Deck', 'calculator'])
def test_unmatched_names(name):
    assert match_calculator_kind(name) is CalculatorKind.UNKNOWN


def test_prompt_includes_name_and_context():
    prompt = build_prompt('Loan Calculator', {'monthlyPayment': 420.5, 'loanType': 'auto'})

    assert '"Loan Calculator"' in prompt
    assert 'two-line suggestion' in prompt
    assert '- loanType: auto' in prompt
    assert '- monthlyPayment: 420.5' in prompt
    assert prompt.index('loanType') < prompt.index('monthlyPayment')


def test_canned_and_fallback_sources():
    canned = suggest_next_step('Mortgage Calculator')
    generic = suggest_next_step('Holo Deck')

    assert canned.source == 'canned'
    assert canned.text == CANNED_SUGGESTIONS[CalculatorKind.MORTGAGE]
    assert generic.source == 'fallback'
    assert generic.text == GENERIC_SUGGESTION


@pytest.mark.django_db
def test_suggest_endpoint(api_client):
    response = api_client.post('/api/v1/ai/suggest/', {
        'calculator_name': 'BMI Calculator',
        'context': {'bmi': 22.1, 'category': 'Normal'},
    }, format='json')

    assert response.status_code == 200
    assert response.json() == {
        'suggestion': CANNED_SUGGESTIONS[CalculatorKind.BMI],
        'source': 'canned',
    }


@pytest.mark.django_db
def test_suggest_endpoint_returns_prompt_in_debug(api_client, settings):
    settings.DEBUG = True

    response = api_client.post('/api/v1/ai/suggest/', {
        'calculator_name': 'Loan Calculator',
        'context': {'monthlyPayment': 420.5},
    }, format='json')

    body = response.json()
    assert body['source'] == 'canned'
    assert body['prompt'] == build_prompt('Loan Calculator', {'monthlyPayment': 420.5})


@pytest.mark.django_db
def test_suggest_endpoint_when_disabled(api_client):
    settings = SiteSettings.load()
    settings.ai_suggestions = False
    settings.save()

    response = api_client.post('/api/v1/ai/suggest/', {'calculator_name': 'BMI Calculator'}, format='json')

    assert response.json() == {'suggestion': None, 'enabled': False}


@pytest.mark.django_db
def test_prompt_form_returns_expressions(api_client):
    response = api_client.post('/api/v1/ai/suggest/', {'prompt': 'input'}, format='json')

    assert response.json() == {'suggestions': ['input*2', 'input*input']}


@pytest.mark.django_db
def test_suggest_requires_name_or_prompt(api_client):
    response = api_client.post('/api/v1/ai/suggest/', {}, format='json')

    assert response.status_code == 400
