"""Map a browser locale to one of the catalog languages."""

import logging
from collections.abc import Sequence
from dataclasses import replace

from ui.errors import InvariantViolation
from ui.i18n.languages import Language


def resolve_language(user_locale: str, catalog: Sequence[Language]) -> Language:
    """
    Pick the language for a browser locale.

    Entries are tried in catalog order and the first one with a matching
    pattern wins. If nothing matches, the first catalog entry is returned.

    Args:
        user_locale: Browser locale like 'uk-UA' or 'en-US'.
        catalog: Non-empty catalog.

    Returns:
        One of the catalog entries.

    Raises:
        ValueError: If the catalog is empty.
    """
    if not catalog:
        raise ValueError('Language catalog is empty.')

    for language in catalog:
        if language.matches(user_locale):
            return language

    return catalog[0]


def apply_resolution(catalog: Sequence[Language], resolved: Language) -> list[Language]:
    """
    Return a new catalog where only the resolved language is current.

    Args:
        catalog: Current catalog (left untouched).
        resolved: Language to mark current, matched by id.

    Returns:
        New list of cloned entries.
    """
    return [replace(lang, is_current=lang.id == resolved.id) for lang in catalog]


def get_current(catalog: Sequence[Language]) -> Language:
    """
    Return the single current language.

    Raises:
        InvariantViolation: If zero or several entries are current.
    """
    current = [lang for lang in catalog if lang.is_current]
    if len(current) != 1:
        raise InvariantViolation(
            f'Expected exactly one current language, found {len(current)}.'
        )
    return current[0]


def detect_user_language(user_locale: str, catalog: Sequence[Language]) -> list[Language]:
    """Resolve the locale and return the catalog with that language current."""
    detected = resolve_language(user_locale, catalog)
    logging.info('Locale %r resolved to language %r', user_locale, detected.id)
    return apply_resolution(catalog, detected)
