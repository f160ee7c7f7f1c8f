"""Page-level tests driven through Streamlit's AppTest harness."""

import pytest
from streamlit.testing.v1 import AppTest

from components.glossary_definitions import GLOSSARY_TERMS
from utils.session import CONTROLLER_KEY

GLOSSARY_PAGE = "../pages/glossary.py"
HOME_PAGE = "../pages/home.py"


@pytest.fixture
def glossary_app():
    at = AppTest.from_file(GLOSSARY_PAGE, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def get_controller(at):
    return at.session_state[CONTROLLER_KEY]


def test_glossary_page_renders_full_catalog(glossary_app):
    controller = get_controller(glossary_app)
    assert len(controller.filtered_terms) == len(GLOSSARY_TERMS)
    assert controller.focused_index == 0
    assert glossary_app.title[0].value == "Cyber Glossary"


def test_search_filters_list(glossary_app):
    glossary_app.text_input(key="glossary_query").input("phish").run()

    controller = get_controller(glossary_app)
    assert [term.id for term in controller.filtered_terms] == ["phishing"]
    assert controller.query == "phish"


def test_category_filter(glossary_app):
    glossary_app.selectbox(key="glossary_category").set_value("networks").run()

    controller = get_controller(glossary_app)
    assert [term.id for term in controller.filtered_terms] == ["vpn", "router"]


def test_keyboard_toolbar_opens_and_closes_term(glossary_app):
    glossary_app.button(key="nav_down").click().run()
    glossary_app.button(key="nav_enter").click().run()

    controller = get_controller(glossary_app)
    assert controller.selected.id == GLOSSARY_TERMS[1]["id"]
    assert any(sub.value == GLOSSARY_TERMS[1]["name"] for sub in glossary_app.subheader)

    glossary_app.button(key="detail_close").click().run()
    assert controller.selected is None
    assert controller.focused_index == 1


def test_open_button_selects_term(glossary_app):
    glossary_app.button(key="open_vpn").click().run()
    assert get_controller(glossary_app).selected.id == "vpn"


def test_reset_clears_widgets_and_keeps_selection(glossary_app):
    glossary_app.button(key="open_router").click().run()
    glossary_app.text_input(key="glossary_query").input("zzz-no-match").run()

    controller = get_controller(glossary_app)
    assert controller.filtered_terms == ()
    assert controller.focused_index is None

    glossary_app.button(key="glossary_reset").click().run()
    assert glossary_app.text_input(key="glossary_query").value == ""
    assert glossary_app.selectbox(key="glossary_category").value == "all"
    assert len(controller.filtered_terms) == len(GLOSSARY_TERMS)
    assert controller.focused_index == 0
    assert controller.selected.id == "router"


def test_empty_state_offers_suggestions(glossary_app):
    glossary_app.text_input(key="glossary_query").input("phising").run()
    assert any(info.value == "Nothing found." for info in glossary_app.info)

    glossary_app.button(key="suggest_phishing").click().run()
    controller = get_controller(glossary_app)
    assert controller.query == "Phishing"
    assert [term.id for term in controller.filtered_terms] == ["phishing"]


def test_home_page_renders():
    at = AppTest.from_file(HOME_PAGE, default_timeout=30)
    at.run()
    assert not at.exception
    assert at.title[0].value == "Cyber Glossary Explorer"
    assert len(at.dataframe) == 1


def test_suggestions_respect_active_category(glossary_app):
    glossary_app.selectbox(key="glossary_category").set_value("threat").run()
    glossary_app.text_input(key="glossary_query").input("pasword manager").run()

    # Password manager is a protection term, so it is not offered here
    assert not any(button.key == "suggest_password-manager" for button in glossary_app.button)


def test_suggestion_in_filtered_category_yields_results(glossary_app):
    glossary_app.selectbox(key="glossary_category").set_value("networks").run()
    glossary_app.text_input(key="glossary_query").input("ruter").run()

    controller = get_controller(glossary_app)
    assert controller.filtered_terms == ()

    glossary_app.button(key="suggest_router").click().run()
    assert controller.category_filter == "networks"
    assert [term.id for term in controller.filtered_terms] == ["router"]


def test_list_rows_show_illustrations(glossary_app):
    svgs = [md for md in glossary_app.markdown if "<svg" in md.value]
    # One per row plus the detail placeholder
    assert len(svgs) == len(GLOSSARY_TERMS) + 1
