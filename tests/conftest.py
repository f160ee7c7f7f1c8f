"""
Shared fixtures for glossary tests.
"""

import pytest

from utils.catalog import build_catalog
from utils.controller import GlossaryController
from tests.factories import make_raw_term


@pytest.fixture
def raw_terms():
    """A(threat), B(protection), C(threat)."""
    return [
        make_raw_term("a", "threat", name="Alpha", preview="First threat", definition="Spoofed email lure"),
        make_raw_term(
            "b",
            "protection",
            name="Bravo",
            preview="A shield",
            definition="Filters network traffic",
            links=[{"name": "Docs", "url": "https://example.com/b", "description": "Reading"}],
        ),
        make_raw_term("c", "threat", name="Charlie", preview="Second threat", definition="Encrypts files"),
    ]


@pytest.fixture
def catalog(raw_terms):
    return build_catalog(raw_terms)


@pytest.fixture
def controller(catalog):
    return GlossaryController(catalog)
