"""Search controls, navigation toolbar and the filtered term list."""

import streamlit as st

from components.illustrations import render_illustration
from utils.catalog import CATEGORY_DISPLAY_ORDER, suggest_terms, terms_to_frame
from utils.controller import Mode
from utils.formatters import format_category, format_preview, format_result_count

QUERY_KEY = "glossary_query"
CATEGORY_KEY = "glossary_category"
TABLE_VIEW_KEY = "glossary_table_view"


def _on_query_change(controller):
    controller.set_query(st.session_state[QUERY_KEY])


def _on_category_change(controller):
    controller.set_category(st.session_state[CATEGORY_KEY])


def _on_reset(controller):
    controller.reset()
    # Widgets mirror the controller, so clear them as well
    st.session_state[QUERY_KEY] = controller.query
    st.session_state[CATEGORY_KEY] = controller.category_filter


def _on_suggestion(controller, name):
    controller.set_query(name)
    st.session_state[QUERY_KEY] = name


def render_filters(controller):
    """Render the search box, category dropdown and reset button."""
    st.session_state.setdefault(QUERY_KEY, controller.query)
    st.session_state.setdefault(CATEGORY_KEY, controller.category_filter)

    st.text_input(
        "Search terms",
        key=QUERY_KEY,
        placeholder="Search... (e.g. phishing, 2FA)",
        on_change=_on_query_change,
        args=(controller,),
    )

    category_col, reset_col = st.columns([3, 1], vertical_alignment="bottom")
    with category_col:
        st.selectbox(
            "Category",
            options=CATEGORY_DISPLAY_ORDER,
            format_func=lambda x: format_category(x, with_icon=False),
            key=CATEGORY_KEY,
            on_change=_on_category_change,
            args=(controller,),
        )
    with reset_col:
        st.button("Reset", key="glossary_reset", on_click=_on_reset, args=(controller,), width="stretch")


def render_nav_toolbar(controller):
    """
    Render the keyboard toolbar.

    Streamlit has no global key capture, so each key of the original
    keyboard model gets a button that dispatches the same key name.
    """
    locked = controller.mode is Mode.DETAIL
    up_col, down_col, enter_col, esc_col = st.columns(4)
    with up_col:
        st.button("↑", key="nav_up", help="Previous term", disabled=locked,
                  on_click=controller.handle_key, args=("ArrowUp",), width="stretch")
    with down_col:
        st.button("↓", key="nav_down", help="Next term", disabled=locked,
                  on_click=controller.handle_key, args=("ArrowDown",), width="stretch")
    with enter_col:
        st.button("Enter", key="nav_enter", help="Open the highlighted term", disabled=locked,
                  on_click=controller.handle_key, args=("Enter",), width="stretch")
    with esc_col:
        st.button("Esc", key="nav_escape", help="Close the open term", disabled=not locked,
                  on_click=controller.handle_key, args=("Escape",), width="stretch")


def render_empty_state(controller, catalog):
    """Render the 'nothing found' message with fuzzy suggestions."""
    st.info("Nothing found.")

    suggestions = suggest_terms(catalog, controller.query, controller.category_filter)
    if suggestions:
        st.caption("Did you mean:")
        for term in suggestions:
            st.button(
                term.name,
                key=f"suggest_{term.id}",
                on_click=_on_suggestion,
                args=(controller, term.name),
            )


def render_term_list(controller, catalog):
    """Render the filtered term list, or the empty state."""
    terms = controller.filtered_terms
    st.caption(format_result_count(len(terms), len(catalog)))

    if not terms:
        render_empty_state(controller, catalog)
        return

    if st.toggle("Table view", key=TABLE_VIEW_KEY):
        st.dataframe(terms_to_frame(terms), hide_index=True, width="stretch")
        return

    for i, term in enumerate(terms):
        focused = i == controller.focused_index
        with st.container(border=True):
            art_col, name_col, open_col = st.columns([1, 4, 1], vertical_alignment="center")
            with art_col:
                render_illustration(term.illustration, width=40)
            with name_col:
                # Clicking the name is the pointer equivalent of hovering
                st.button(
                    term.name,
                    key=f"focus_{term.id}",
                    type="primary" if focused else "tertiary",
                    on_click=controller.hover_focus,
                    args=(i,),
                )
                st.caption(f"{format_category(term.category)} · {format_preview(term.preview)}")
            with open_col:
                st.button("Open", key=f"open_{term.id}", on_click=controller.select, args=(term,))
