import logging

import streamlit as st

from utils.catalog import CatalogError, get_catalog

logger = logging.getLogger(__name__)

st.set_page_config(layout="wide", page_title="Cyber Glossary Explorer")

# Build the shared catalog once per app process
try:
    get_catalog()
except CatalogError as e:
    logger.error("Glossary catalog failed to load: %s", e)
    st.error(f"Unable to load the glossary: {e}")
    st.stop()

# Define pages
pages = [
    st.Page("pages/home.py", title="Home", icon="🏠", default=True),
    st.Page("pages/glossary.py", title="Glossary", icon="📖"),
]

# Top bar navigation
pg = st.navigation(pages, position="top")
pg.run()
