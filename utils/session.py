"""Per-session controller management using Streamlit session state."""

import streamlit as st

from utils.controller import GlossaryController

CONTROLLER_KEY = "glossary_controller"


def get_controller(catalog) -> GlossaryController:
    """
    Get or create the glossary controller for the current browser session.

    The catalog is shared across sessions; the controller and its state are
    private to one session and discarded when it ends.

    Args:
        catalog: Shared term catalog

    Returns:
        GlossaryController: This session's controller
    """
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = GlossaryController(catalog)
    return st.session_state[CONTROLLER_KEY]
