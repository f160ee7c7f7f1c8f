"""Reusable dialog listing the whole glossary grouped by category."""

import streamlit as st

from utils.catalog import ALL_CATEGORIES, CATEGORY_DISPLAY_ORDER
from utils.formatters import format_category, format_link


def render_catalog_button(catalog, button_label="📚 Browse all terms", help_text="View every term by category"):
    """
    Render a button that opens the full-catalog dialog when clicked.

    Args:
        catalog: Term catalog to list
        button_label: Text for the button
        help_text: Tooltip text for the button
    """
    if st.button(button_label, help=help_text, width="stretch"):
        show_catalog_dialog(catalog)


def group_by_category(catalog) -> dict:
    """Group terms by category token, in dropdown display order, skipping empty groups."""
    groups = {key: [] for key in CATEGORY_DISPLAY_ORDER if key != ALL_CATEGORIES}
    for term in catalog:
        groups[term.category.value].append(term)
    return {key: terms for key, terms in groups.items() if terms}


@st.dialog("Glossary", width="large")
def show_catalog_dialog(catalog):
    """
    Display every term in a modal dialog.

    Args:
        catalog: Term catalog to list
    """
    st.markdown("### All terms")

    for category_key, terms in group_by_category(catalog).items():
        with st.expander(format_category(category_key), expanded=True):
            for term in terms:
                st.markdown(f"**{term.name}**")
                st.markdown(term.definition)

                for link in term.links:
                    st.caption(format_link(link))

                # Add spacing between terms
                st.markdown("")
