"""Tests for the presentation helpers that do not need a running page."""

from components.glossary_dialog import group_by_category
from components.illustrations import ILLUSTRATIONS, PLACEHOLDER, get_illustration
from components.glossary_definitions import GLOSSARY_TERMS
from utils.catalog import build_catalog


def test_group_by_category_keeps_order_and_skips_empty(catalog):
    groups = group_by_category(catalog)
    assert list(groups) == ["threat", "protection"]
    assert [term.id for term in groups["threat"]] == ["a", "c"]


def test_every_bundled_term_has_an_illustration():
    for term in build_catalog(GLOSSARY_TERMS):
        assert term.illustration in ILLUSTRATIONS


def test_get_illustration_sets_width():
    svg = get_illustration("firewall", width=64)
    assert "width:64px" in svg
    assert "{width}" not in svg


def test_unknown_illustration_falls_back_to_placeholder():
    assert get_illustration("no-such-handle") == PLACEHOLDER.replace("{width}", "96")
    assert get_illustration(None) == get_illustration("no-such-handle")
