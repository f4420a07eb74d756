"""
HTML building blocks for the landing page.

Builders return HTML strings so they can be tested without a Streamlit
runtime; only render_stylesheet touches Streamlit.
"""

from html import escape

import streamlit as st

from ui.i18n.languages import Language
from ui.i18n.translations import NAV_KEYS
from ui.styling import HOME_STYLES, STYLESHEET, class_names

BUTTON_SIZES: tuple[str, ...] = ('small', 'large')


def _cls(base_name: str, language: Language | None = None) -> str:
    variant = language.style_variant if language is not None else ''
    return class_names(base_name, variant, HOME_STYLES)


def render_stylesheet() -> None:
    """Inject the page stylesheet."""
    st.markdown(f'<style>{STYLESHEET}</style>', unsafe_allow_html=True)


def button_html(caption: str, size: str = 'small', *, language: Language | None = None) -> str:
    """
    Build a call-to-action button.

    Args:
        caption: Button text.
        size: 'small' or 'large'.
        language: Language used for style variants.

    Raises:
        TypeError: If caption is not a string.
        ValueError: If size is unknown.
    """
    if not isinstance(caption, str):
        raise TypeError('Expected caption to be a string.')
    if size not in BUTTON_SIZES:
        raise ValueError(f'Unknown button size: {size}')

    classes = f"{_cls('button')} {_cls(f'button__{size}', language)}"
    return f'<button class="{classes}">{escape(caption)}</button>'


def navigation_html(language: Language) -> str:
    items = ''.join(
        f'<li class="{_cls("navigation__item", language)}">'
        f'<a class="{_cls("navigation__link")}">{escape(language.translate(key))}</a>'
        f'</li>'
        for key in NAV_KEYS
    )
    return f'<nav><ul class="{_cls("navigation")}">{items}</ul></nav>'


def header_html(language: Language, *, brand_name: str = 'Chaingex') -> str:
    """Build the header: logo, navigation and the small call-to-action button."""
    logo = f'<label class="{_cls("logo")}">{escape(brand_name)}</label>'
    left = f'<div class="{_cls("header__left")}">{logo}{navigation_html(language)}</div>'
    button = button_html(language.translate('cta'), 'small', language=language)
    return f'<header class="{_cls("header")}">{left}{button}</header>'


def headline_html(language: Language) -> str:
    """Build the headline block with title, subtitle and the large button."""
    title = (
        f'<p class="{_cls("headline__title", language)}">'
        f'{escape(language.translate("headline_title"))}</p>'
    )
    subtitle = (
        f'<p class="{_cls("headline__subtitle", language)}">'
        f'{escape(language.translate("headline_subtitle"))}</p>'
    )
    container = f'<div class="{_cls("headline__container")}">{title}{subtitle}</div>'
    button = button_html(language.translate('cta'), 'large', language=language)
    return f'<div class="{_cls("headline")}">{container}{button}</div>'
