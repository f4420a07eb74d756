"""Shared pytest fixtures."""

from __future__ import annotations

import re
from types import SimpleNamespace

import pytest

from ui.i18n.languages import Language


@pytest.fixture
def catalog():
    """Three-language catalog with English current."""
    return [
        Language(id='eng', display_name='Eng', match_patterns=re.compile('en-*'), is_current=True,
                 dictionary={'cta': 'Change crypto'}),
        Language(id='ukr', display_name='Укр', style_variant='__i18n_ukr',
                 match_patterns=[re.compile('uk')], dictionary={'cta': 'Почати торгівлю'}),
        Language(id='pl', display_name='Pl', style_variant='__i18n_pl',
                 match_patterns=[re.compile('pl')], dictionary={'cta': 'Rozpocznij handel'}),
    ]


@pytest.fixture
def fake_st(monkeypatch):
    """Replace the streamlit module used by the i18n state with plain objects."""
    fake = SimpleNamespace(session_state={}, secrets={}, context=SimpleNamespace(locale=None))

    import ui.i18n.state as state_module
    import ui.i18n.widgets as widgets_module

    monkeypatch.setattr(state_module, 'st', fake)
    monkeypatch.setattr(widgets_module, 'st', fake)
    monkeypatch.delenv('LANDING_LOCALE', raising=False)
    return fake
