"""Streamlit rendering of a SelectionEngine (thin glue)."""

import streamlit as st

from ui.selection.engine import SelectionEngine
from ui.styling import SELECT_STYLES, lookup_styled_class_name

CARET: str = '▾'


def selection(engine: SelectionEngine, *, key: str = 'selection') -> None:
    """
    Render the toggle button and, when open, one row per non-current option.

    Clicks are handled in widget callbacks, so the page is rebuilt on the
    following script run with the engine's new state.

    Args:
        engine: Engine holding the options and open/closed state.
        key: Streamlit key prefix.
    """
    current = engine.current
    current_class = lookup_styled_class_name('label', current.style_variant, SELECT_STYLES)

    with st.container(key=f'{current_class}-{key}-current'):
        st.button(
            f'{current.display_name} {CARET}',
            key=f'{key}__toggle',
            on_click=engine.toggle_open,
        )

    if not engine.is_open:
        return

    for option in engine.rest:
        row_class = lookup_styled_class_name('label', option.style_variant, SELECT_STYLES)
        with st.container(key=f'{row_class}-{key}-{option.id}'):
            st.button(
                option.display_name,
                key=f'{key}__option__{option.id}',
                on_click=engine.select,
                args=(option.id,),
            )
