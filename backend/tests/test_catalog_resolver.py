import logging

from asgiref.sync import async_to_sync

from application.catalog.resolver import (
    CatalogResolver,
    merge_calculators,
    synthesize_categories,
)
from domain.catalog.fallback import LOCAL_CALCULATORS
from domain.catalog.value_objects import ResolutionMode

from conftest import make_calculator, make_category, mock_source


def resolve_calculators(resolver):
    return async_to_sync(resolver.resolve_calculators)()


def resolve_categories(resolver):
    return async_to_sync(resolver.resolve_categories)()


def test_remote_failure_serves_local_list_unchanged():
    resolver = CatalogResolver(mock_source(calculators_error=ConnectionError('offline')))

    result = resolve_calculators(resolver)

    assert result.mode is ResolutionMode.FALLBACK
    assert result.is_fallback
    assert result.items == list(LOCAL_CALCULATORS)
    assert len(result) > 0


def test_remote_failure_is_logged_not_raised(caplog):
    resolver = CatalogResolver(mock_source(calculators_error=RuntimeError('permission denied')))

    with caplog.at_level(logging.WARNING, logger='application.catalog.resolver'):
        resolve_calculators(resolver)

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert errors and errors[0].exc_info is not None


def test_remote_record_wins_slug_conflict():
    remote = make_calculator('bmi-calculator', name='BMI (remote)')
    local = make_calculator('bmi-calculator', name='BMI (local)')
    resolver = CatalogResolver(mock_source([remote]), local_calculators=[local])

    result = resolve_calculators(resolver)

    matching = [c for c in result.items if c.slug == 'bmi-calculator']
    assert len(matching) == 1
    assert matching[0].name == 'BMI (remote)'
    assert result.mode is ResolutionMode.FRESH


def test_merge_never_duplicates_slugs():
    remote = [
        make_calculator('a'),
        make_calculator('b'),
        make_calculator('a', name='second a'),
    ]
    local = [make_calculator('b'), make_calculator('c'), make_calculator('c')]

    merged = merge_calculators(remote, local)

    slugs = [c.slug for c in merged]
    assert len(set(slugs)) == len(slugs)
    assert slugs == ['a', 'b', 'c']
    assert merged[0].name != 'second a'


def test_merge_puts_remote_first_then_missing_local():
    local = [make_calculator('kg-to-lb', name='Kg to Lb')]
    remote = [make_calculator('bmi', name='BMI Calculator')]
    resolver = CatalogResolver(mock_source(remote), local_calculators=local)

    result = resolve_calculators(resolver)

    assert [c.slug for c in result.items] == ['bmi', 'kg-to-lb']
    assert len(result) == 2


def test_second_resolution_uses_cache():
    source = mock_source([make_calculator('bmi')])
    resolver = CatalogResolver(source)

    first = resolve_calculators(resolver)
    second = resolve_calculators(resolver)

    assert first.items == second.items
    assert first.mode == second.mode
    assert source.list_calculators.await_count == 1


def test_fallback_result_is_cached_too():
    source = mock_source(calculators_error=ConnectionError('offline'))
    resolver = CatalogResolver(source)

    resolve_calculators(resolver)
    result = resolve_calculators(resolver)

    assert result.is_fallback
    assert source.list_calculators.await_count == 1


def test_invalidate_forces_refetch():
    source = mock_source([make_calculator('bmi')])
    resolver = CatalogResolver(source)

    resolve_calculators(resolver)
    resolver.invalidate()
    resolve_calculators(resolver)

    assert source.list_calculators.await_count == 2


def test_invalidate_recovers_from_fallback():
    source = mock_source(calculators_error=ConnectionError('offline'))
    resolver = CatalogResolver(source)
    assert resolve_calculators(resolver).is_fallback

    source.list_calculators.side_effect = None
    source.list_calculators.return_value = [make_calculator('bmi')]
    resolver.invalidate()

    result = resolve_calculators(resolver)
    assert result.mode is ResolutionMode.FRESH
    assert result.items[0].slug == 'bmi'


def test_invalidate_on_empty_cache_is_noop():
    resolver = CatalogResolver(mock_source())

    resolver.invalidate()
    resolver.invalidate()

    assert not resolver.is_populated


def test_categories_group_calculators_by_slug():
    source = mock_source(
        calculators=[make_calculator('a', 'health'), make_calculator('b', 'finance')],
        categories=[make_category('health')],
    )
    resolver = CatalogResolver(source, local_calculators=())

    result = resolve_categories(resolver)

    assert result.mode is ResolutionMode.FRESH
    assert [c.slug for c in result.items] == ['health']
    assert [c.slug for c in result.items[0].calculators] == ['a']
    assert all('b' not in [c.slug for c in cat.calculators] for cat in result.items)


def test_orphaned_calculators_are_reported(caplog):
    source = mock_source(
        calculators=[make_calculator('b', 'finance')],
        categories=[make_category('health')],
    )
    resolver = CatalogResolver(source, local_calculators=())

    with caplog.at_level(logging.WARNING, logger='application.catalog.resolver'):
        resolve_categories(resolver)

    assert any('finance' in r.getMessage() for r in caplog.records)


def test_category_failure_synthesizes_one_category_per_slug():
    source = mock_source(
        calculators=[
            make_calculator('a', 'health'),
            make_calculator('b', 'finance'),
            make_calculator('c', 'health'),
        ],
        categories_error=TimeoutError('timed out'),
    )
    resolver = CatalogResolver(source, local_calculators=())

    result = resolve_categories(resolver)

    assert result.mode is ResolutionMode.FALLBACK
    by_slug = {c.slug: c for c in result.items}
    assert set(by_slug) == {'health', 'finance'}
    assert [c.slug for c in by_slug['health'].calculators] == ['a', 'c']
    assert [c.slug for c in by_slug['finance'].calculators] == ['b']


def test_synthesized_category_fields():
    categories = synthesize_categories([make_calculator('a', 'health')])

    assert len(categories) == 1
    category = categories[0]
    assert category.id == 'health'
    assert category.name == 'Health'
    assert category.description == 'health calculators'
    assert category.icon == 'Calculator'


def test_categories_when_everything_is_down_use_local_calculators():
    resolver = CatalogResolver(mock_source(
        calculators_error=ConnectionError('offline'),
        categories_error=ConnectionError('offline'),
    ))

    result = resolve_categories(resolver)

    assert result.is_fallback
    assert {c.slug for c in result.items} == {c.category_slug for c in LOCAL_CALCULATORS}
    total = sum(len(c.calculators) for c in result.items)
    assert total == len(LOCAL_CALCULATORS)


def test_categories_reuse_cached_calculators():
    source = mock_source(
        calculators=[make_calculator('a', 'health')],
        categories=[make_category('health')],
    )
    resolver = CatalogResolver(source, local_calculators=())

    resolve_calculators(resolver)
    resolve_categories(resolver)
    resolve_categories(resolver)

    assert source.list_calculators.await_count == 1
    assert source.list_categories.await_count == 1


def test_returned_lists_are_copies():
    resolver = CatalogResolver(mock_source([make_calculator('bmi')]), local_calculators=())

    first = resolve_calculators(resolver)
    first.items.clear()
    first.items.append(make_calculator('intruder'))

    second = resolve_calculators(resolver)
    assert [c.slug for c in second.items] == ['bmi']


def test_returned_category_calculators_cannot_be_mutated():
    source = mock_source(
        calculators=[make_calculator('a', 'health')],
        categories=[make_category('health')],
    )
    resolver = CatalogResolver(source, local_calculators=())

    first = resolve_categories(resolver)
    assert isinstance(first.items[0].calculators, tuple)
    first.items.pop()

    assert len(resolve_categories(resolver)) == 1


def test_lookup_by_slug():
    resolver = CatalogResolver(
        mock_source([make_calculator('bmi')], [make_category('health')]),
        local_calculators=(),
    )

    assert async_to_sync(resolver.get_calculator)('bmi').slug == 'bmi'
    assert async_to_sync(resolver.get_calculator)('missing') is None
    assert async_to_sync(resolver.get_category)('health').calculators[0].slug == 'bmi'
    assert async_to_sync(resolver.get_category)('finance') is None
