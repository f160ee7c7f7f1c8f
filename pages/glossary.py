import logging

import streamlit as st

from components.term_detail import render_term_detail
from components.term_list import render_filters, render_nav_toolbar, render_term_list
from utils.catalog import CatalogError, get_catalog
from utils.session import get_controller

logger = logging.getLogger(__name__)

st.set_page_config(layout="wide")

try:
    catalog = get_catalog()
except CatalogError as e:
    logger.error("Glossary catalog failed to load: %s", e)
    st.error(f"Unable to load the glossary: {e}")
    st.stop()

controller = get_controller(catalog)

list_col, detail_col = st.columns([1, 2], gap="large")

with list_col:
    st.title("Cyber Glossary")
    st.caption("Pick a term to learn more.")

    render_filters(controller)
    render_nav_toolbar(controller)
    render_term_list(controller, catalog)

    st.caption("Keyboard navigation: ↑ ↓ Enter. Esc closes a term.")

with detail_col:
    render_term_detail(controller)
