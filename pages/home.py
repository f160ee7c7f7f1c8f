import streamlit as st

from components.glossary_dialog import render_catalog_button
from utils.catalog import category_counts, get_catalog

st.title("Cyber Glossary Explorer")

st.markdown("""
A small alphabet of cyber security: threats to watch out for, the tools that
protect you, and the network basics in between.
""")

catalog = get_catalog()

st.markdown("### What's inside")

table_col, info_col = st.columns(2)

with table_col:
    st.dataframe(category_counts(catalog), hide_index=True, width="stretch")
    render_catalog_button(catalog)

with info_col:
    st.markdown("""
    **Glossary**

    Search terms by name or description, narrow the list by category, and
    move through it with ↑ ↓ and Enter. Open a term to read its definition
    and follow links for further reading.
    """)
