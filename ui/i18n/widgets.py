"""Widgets related to language selection."""

import streamlit as st

from ui.i18n.languages import Language
from ui.i18n.state import LanguageStore, get_language_store, init_language_if_missing
from ui.i18n.t import t
from ui.selection.engine import SelectionEngine
from ui.selection.widget import selection


def _engine_for(store: LanguageStore, *, key: str) -> SelectionEngine:
    """Return the session's selection engine, reseeding it if the catalog moved on."""
    state_key = f'{key}__engine'
    engine = st.session_state.get(state_key)
    if not isinstance(engine, SelectionEngine) or engine.current.id != store.current().id:
        engine = SelectionEngine(store.catalog, on_change=store.replace)
        st.session_state[state_key] = engine
    return engine


def language_selector(
    *,
    default_locale: str | None = None,
    key: str = 'language_selector',
) -> Language:
    """Render the language selection and keep the catalog in session_state.

    Args:
        default_locale: Locale used on first load, or None to auto-detect.
        key: Streamlit widget key prefix.

    Returns:
        Current language.
    """
    init_language_if_missing(default_locale=default_locale)
    store = get_language_store()

    st.caption(t('language_label'))
    selection(_engine_for(store, key=key), key=key)
    return store.current()
