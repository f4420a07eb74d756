"""
Unit tests for locale matching and language resolution.
"""

import re
from dataclasses import replace

import pytest

from ui.errors import InvariantViolation, ShapeError
from ui.i18n.languages import (
    Exact,
    Language,
    Pattern,
    as_match_patterns,
    build_default_catalog,
    matches,
)
from ui.i18n.resolver import apply_resolution, detect_user_language, get_current, resolve_language


# ============================================================================
# Match patterns
# ============================================================================

def test_exact_pattern_requires_equality():
    assert matches(Exact('uk'), 'uk')
    assert not matches(Exact('uk'), 'uk-UA')


def test_regex_pattern_searches_anywhere():
    assert matches(Pattern(re.compile('uk')), 'uk-UA')
    assert matches(Pattern(re.compile('uk')), 'en-uk')
    assert not matches(Pattern(re.compile('^uk')), 'en-uk')


def test_patterns_are_coerced_from_strings_and_regexes():
    patterns = as_match_patterns(['pl', re.compile('^pl-')])
    assert patterns == (Exact('pl'), Pattern(re.compile('^pl-')))
    assert as_match_patterns('pl') == (Exact('pl'),)


def test_unsupported_pattern_raises():
    with pytest.raises(TypeError):
        as_match_patterns(42)


def test_language_matches_if_any_pattern_matches():
    lang = Language(id='pl', display_name='Pl', match_patterns=['pl', re.compile('^pl-')])
    assert lang.matches('pl')
    assert lang.matches('pl-PL')
    assert not lang.matches('plx')


def test_translate_falls_back_to_key():
    lang = Language(id='pl', display_name='Pl', dictionary={'cta': 'Rozpocznij handel'})
    assert lang.translate('cta') == 'Rozpocznij handel'
    assert lang.translate('missing') == 'missing'


# ============================================================================
# Resolution
# ============================================================================

def test_resolves_ukrainian_locale(catalog):
    resolved = resolve_language('uk-UA', catalog)
    assert resolved.id == 'ukr'

    updated = apply_resolution(catalog, resolved)
    assert [(lang.id, lang.is_current) for lang in updated] == [
        ('eng', False),
        ('ukr', True),
        ('pl', False),
    ]


def test_unknown_locale_falls_back_to_first_entry(catalog):
    assert resolve_language('fr-FR', catalog) is catalog[0]
    assert resolve_language('', catalog) is catalog[0]


def test_first_matching_entry_wins(catalog):
    both = catalog + [Language(id='ukr2', display_name='Ukr2', match_patterns='uk-UA')]
    assert resolve_language('uk-UA', both).id == 'ukr'


def test_catalog_order_decides_fallback(catalog):
    reordered = [catalog[2], catalog[0], catalog[1]]
    assert resolve_language('de-DE', reordered).id == 'pl'


def test_empty_catalog_raises():
    with pytest.raises(ValueError):
        resolve_language('en-US', [])


def test_apply_resolution_does_not_mutate_input(catalog):
    before = list(catalog)
    updated = apply_resolution(catalog, catalog[2])

    assert catalog == before
    assert catalog[0].is_current
    assert updated is not catalog
    assert get_current(updated).id == 'pl'


def test_apply_resolution_is_idempotent(catalog):
    once = apply_resolution(catalog, resolve_language('pl-PL', catalog))
    twice = apply_resolution(once, get_current(once))
    assert get_current(twice).id == get_current(once).id == 'pl'
    assert sum(lang.is_current for lang in twice) == 1


def test_clones_keep_dictionary(catalog):
    updated = apply_resolution(catalog, catalog[1])
    assert updated[1].translate('cta') == 'Почати торгівлю'


@pytest.mark.parametrize('flags', [(False, False, False), (True, True, False)])
def test_get_current_requires_exactly_one(catalog, flags):
    broken = [Language(id=lang.id, display_name=lang.display_name, is_current=flag)
              for lang, flag in zip(catalog, flags)]
    with pytest.raises(InvariantViolation):
        get_current(broken)


def test_detect_user_language_returns_updated_catalog(catalog):
    updated = detect_user_language('en-GB', catalog)
    assert get_current(updated).id == 'eng'


# ============================================================================
# Built-in catalog
# ============================================================================

@pytest.mark.parametrize('locale, expected', [
    ('en-US', 'eng'),
    ('en', 'eng'),
    ('uk-UA', 'ukr'),
    ('uk', 'ukr'),
    ('pl-PL', 'pl'),
    ('fr-FR', 'eng'),
    ('de', 'eng'),
])
def test_default_catalog_resolution(locale, expected):
    assert resolve_language(locale, build_default_catalog()).id == expected


def test_default_catalog_starts_with_english_current():
    catalog = build_default_catalog()
    assert catalog[0].id == 'eng'
    assert get_current(catalog).id == 'eng'
    assert len({lang.id for lang in catalog}) == len(catalog)


# ============================================================================
# Language shape
# ============================================================================

@pytest.mark.parametrize('fields', [
    {'id': 1, 'display_name': 'Pl'},
    {'id': 'pl', 'display_name': None},
    {'id': 'pl', 'display_name': 'Pl', 'is_current': 'yes'},
    {'id': 'pl', 'display_name': 'Pl', 'style_variant': None},
    {'id': 'pl', 'display_name': 'Pl', 'dictionary': ['cta']},
])
def test_malformed_language_raises(fields):
    with pytest.raises(ShapeError):
        Language(**fields)


def test_clone_with_malformed_flag_raises(catalog):
    with pytest.raises(ShapeError):
        replace(catalog[0], is_current='yes')
