"""
Shared Streamlit landing page application.

Page layout and language handling live here. Brand-specific entry points
should only provide configuration and call `run_landing_app(cfg=...)`.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

import streamlit as st

from landing.components import header_html, headline_html, render_stylesheet
from ui.i18n.widgets import language_selector

LOGFILE_DEFAULT: str = 'landing_log.txt'


@dataclass(frozen=True)
class LandingAppConfig:
    """Configuration for a landing page instance."""

    brand_name: str = 'Chaingex'
    page_title: str = 'Chaingex'
    default_locale: str | None = None
    logfile: str = LOGFILE_DEFAULT


def _setup_logging(*, logfile: str) -> None:
    """Configure logging once per process."""
    if getattr(_setup_logging, '_configured', False):
        return

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
        handlers=[
            logging.FileHandler(logfile, mode='a', encoding='utf-8'),
            logging.StreamHandler(),
        ],
    )
    setattr(_setup_logging, '_configured', True)


def run_landing_app(*, cfg: LandingAppConfig) -> None:
    """Run the Streamlit landing page for the given configuration."""
    _setup_logging(logfile=cfg.logfile)
    st.set_page_config(page_title=cfg.page_title, layout='wide')

    render_stylesheet()

    col_header, col_lang = st.columns([6, 1], vertical_alignment='center')
    with col_lang:
        language = language_selector(default_locale=cfg.default_locale)
    with col_header:
        st.markdown(header_html(language, brand_name=cfg.brand_name), unsafe_allow_html=True)

    st.markdown(headline_html(language), unsafe_allow_html=True)
    logging.debug('Rendered landing page in %s', language.id)
