"""Language catalog stored in Streamlit session_state."""

import logging
import os
from collections.abc import MutableMapping, Sequence

import streamlit as st

from ui.errors import ShapeError
from ui.i18n.languages import Language, build_default_catalog
from ui.i18n.resolver import detect_user_language, get_current
from ui.selection.engine import validate_options

STATE_LANG_CATALOG = 'ui_lang_catalog'
LOCALE_OVERRIDE_KEY = 'LANDING_LOCALE'


class LanguageStore:
    """
    Owner of the language catalog for one session.

    The catalog is kept as a tuple under a single key of the backing mapping
    and is only ever replaced as a whole.

    Args:
        state: Backing mapping, normally st.session_state.
        key: Key under which the catalog is stored.
    """

    def __init__(self, state: MutableMapping, *, key: str = STATE_LANG_CATALOG) -> None:
        self._state = state
        self._key = key

    @property
    def is_initialized(self) -> bool:
        return self._key in self._state

    @property
    def catalog(self) -> tuple[Language, ...]:
        """The stored catalog, or the built-in one if nothing is stored yet."""
        value = self._state.get(self._key)
        if isinstance(value, tuple) and value:
            return value
        return tuple(build_default_catalog())

    def replace(self, catalog: Sequence[Language]) -> None:
        """
        Store a new catalog.

        Raises:
            ShapeError: If an entry is not a Language.
            DuplicateKeyError: If two languages share an id.
            InvariantViolation: If not exactly one language is current.
        """
        catalog = tuple(catalog)
        for lang in catalog:
            if not isinstance(lang, Language):
                raise ShapeError(f'Expected a Language, got {lang!r}')
        validate_options(catalog)
        current = get_current(catalog)

        self._state[self._key] = catalog
        logging.info('Language catalog replaced, current language: %s', current.id)

    def current(self) -> Language:
        return get_current(self.catalog)

    def detect(self, user_locale: str) -> Language:
        """Resolve the locale against the catalog and store the result."""
        self.replace(detect_user_language(user_locale, self.catalog))
        return self.current()

    def translate(self, key: str, **kwargs: object) -> str:
        return self.current().translate(key, **kwargs)

    def reset(self) -> None:
        """
        Drop the stored catalog.

        Called by the host when the page is torn down; the next access falls
        back to the built-in catalog.
        """
        self._state.pop(self._key, None)


def get_language_store() -> LanguageStore:
    """Return the language store of the current Streamlit session."""
    return LanguageStore(st.session_state)


def get_locale_override() -> str | None:
    """
    Read a forced locale from Streamlit secrets or the environment.

    Returns:
        Locale string, or None if not configured.
    """
    try:
        value = str(st.secrets.get(LOCALE_OVERRIDE_KEY, '')).strip()
    except Exception:
        value = ''

    if not value:
        value = str(os.environ.get(LOCALE_OVERRIDE_KEY, '')).strip()

    return value or None


def _browser_locale() -> str | None:
    """Return st.context.locale, or None when no browser context is available."""
    try:
        locale = getattr(st.context, 'locale', None)
    except Exception as exc:
        logging.debug('Browser locale unavailable: %s', exc)
        return None
    return str(locale) if locale else None


def init_language_if_missing(*, default_locale: str | None = None) -> LanguageStore:
    """
    Initialize the language catalog in session_state.

    The locale is taken from default_locale, then LANDING_LOCALE, then the
    browser (st.context.locale). An empty locale falls back to English.

    Args:
        default_locale: Locale like 'uk-UA', or None.

    Returns:
        The session's language store.
    """
    store = get_language_store()
    if store.is_initialized:
        return store

    locale = default_locale or get_locale_override() or _browser_locale() or ''
    store.detect(locale)
    return store
