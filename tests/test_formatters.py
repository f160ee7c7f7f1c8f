"""Tests for display formatting helpers."""

from utils.catalog import ALL_CATEGORIES, Category, Link
from utils.formatters import format_category, format_link, format_preview, format_result_count


def test_format_category_with_icon():
    assert format_category("threat") == "⚠️ Threats"
    assert format_category(Category.NETWORKS) == "🌐 Networks"


def test_format_category_plain_label():
    assert format_category(Category.PROTECTION, with_icon=False) == "Protection"
    assert format_category(ALL_CATEGORIES) == "All"


def test_format_category_unknown_and_missing():
    assert format_category("misc") == "Misc"
    assert format_category(None) == "N/A"


def test_format_result_count():
    assert format_result_count(8, 8) == "8 terms"
    assert format_result_count(2, 8) == "2 of 8 terms"
    assert format_result_count(0, 8) == "0 of 8 terms"
    assert format_result_count(1, 1) == "1 term"
    assert format_result_count(None, 3) == "N/A"


def test_format_preview():
    assert format_preview("Short text") == "Short text"
    assert format_preview("  spaced\n out ") == "spaced out"
    assert format_preview(None) == ""

    shortened = format_preview("word " * 40, max_length=20)
    assert len(shortened) <= 20
    assert shortened.endswith("…")


def test_format_link():
    link = Link(name="Docs", url="https://example.com", description="Reading")
    assert format_link(link) == "[Docs](https://example.com)  \nReading"
    assert format_link(Link(name="", url="https://example.com")) == "[https://example.com](https://example.com)"
    assert format_link(None) == "N/A"
