"""Detail panel for the selected glossary term."""

import streamlit as st

from components.illustrations import render_illustration
from utils.formatters import format_category, format_link


def render_term_detail(controller):
    """
    Render the detail panel for the selected term, or a placeholder.

    Args:
        controller: GlossaryController for the current session
    """
    term = controller.selected
    if term is None:
        render_placeholder()
        return

    art_col, title_col, close_col = st.columns([1, 4, 1])
    with art_col:
        render_illustration(term.illustration, width=112)
    with title_col:
        st.subheader(term.name)
        st.caption(f"Category: {format_category(term.category)}")
    with close_col:
        st.button("Close", key="detail_close", on_click=controller.close, width="stretch")

    st.markdown(term.definition)

    illustration_col, links_col = st.columns(2)
    with illustration_col:
        with st.container(border=True):
            st.markdown("**Illustration**")
            render_illustration(term.illustration, width=160)
            st.caption("A schematic illustration of the term.")

    with links_col:
        with st.container(border=True):
            st.markdown("**Learn more**")
            if term.links:
                for link in term.links:
                    st.markdown(format_link(link))
            else:
                st.caption("No references for this term yet.")


def render_placeholder():
    """Shown in the detail column while no term is open."""
    render_illustration(None, width=120)
    st.markdown("#### Pick a term on the left")
    st.markdown("A detailed explanation, an illustration and useful links will appear here.")
