"""Translation helper."""

import logging

from ui.i18n.state import get_language_store


def t(key: str, **kwargs: object) -> str:
    """Translate a UI string key using the active language.

    Falls back to the key itself, like Language.translate.

    Args:
        key: Translation key.
        **kwargs: Optional format arguments.

    Returns:
        Translated string.
    """
    lang = get_language_store().current()

    if kwargs:
        try:
            return lang.translate(key, **kwargs)
        except (KeyError, IndexError, ValueError) as exc:
            logging.warning('Could not format translation %r: %s', key, exc)

    return lang.translate(key)
