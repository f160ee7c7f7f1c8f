"""Term catalog model, query predicate and the filter/derive pipeline."""

import logging
from dataclasses import dataclass, field
from enum import Enum

import pandas as pd
import streamlit as st
from rapidfuzz import fuzz, process

logger = logging.getLogger(__name__)

# Wildcard category token, only meaningful as a filter value
ALL_CATEGORIES = "all"

# "Did you mean" settings for the empty-state hint
SUGGESTION_LIMIT = 3
SUGGESTION_CUTOFF = 60


class Category(str, Enum):
    THREAT = "threat"
    PROTECTION = "protection"
    NETWORKS = "networks"


CATEGORY_LABELS = {
    ALL_CATEGORIES: "All",
    Category.THREAT.value: "Threats",
    Category.PROTECTION.value: "Protection",
    Category.NETWORKS.value: "Networks",
}

CATEGORY_ICONS = {
    Category.THREAT.value: "⚠️",
    Category.PROTECTION.value: "🛡️",
    Category.NETWORKS.value: "🌐",
}

# Display order for the category dropdown
CATEGORY_DISPLAY_ORDER = [
    ALL_CATEGORIES,
    Category.THREAT.value,
    Category.PROTECTION.value,
    Category.NETWORKS.value,
]


class CatalogError(ValueError):
    """Raised when the raw term definitions cannot form a valid catalog."""


@dataclass(frozen=True)
class Link:
    name: str
    url: str
    description: str = ""


@dataclass(frozen=True)
class Term:
    id: str
    name: str
    category: Category
    preview: str
    definition: str
    links: tuple[Link, ...] = field(default_factory=tuple)
    illustration: str | None = None


REQUIRED_FIELDS = ("id", "name", "category", "preview", "definition")


def _build_term(position: int, raw: dict) -> Term:
    missing = [name for name in REQUIRED_FIELDS if not raw.get(name)]
    if missing:
        raise CatalogError(f"Term #{position} is missing required field(s): {', '.join(missing)}")

    try:
        category = Category(raw["category"])
    except ValueError:
        raise CatalogError(f"Term '{raw['id']}' has unknown category: {raw['category']!r}") from None

    links = tuple(
        Link(
            name=link["name"],
            url=link["url"],
            description=link.get("description", ""),
        )
        for link in raw.get("links", [])
    )

    return Term(
        id=raw["id"],
        name=raw["name"],
        category=category,
        preview=raw["preview"],
        definition=raw["definition"],
        links=links,
        illustration=raw.get("illustration"),
    )


def build_catalog(raw_terms: list[dict]) -> tuple[Term, ...]:
    """
    Build the immutable, ordered term catalog from plain definitions.

    Args:
        raw_terms: List of term dicts (see components/glossary_definitions.py)

    Returns:
        Tuple of Term objects in definition order

    Raises:
        CatalogError: On duplicate ids, missing fields or unknown categories
    """
    terms = []
    seen_ids = set()

    for position, raw in enumerate(raw_terms):
        term = _build_term(position, raw)
        if term.id in seen_ids:
            raise CatalogError(f"Duplicate term id: {term.id!r}")
        seen_ids.add(term.id)
        terms.append(term)

    logger.info("Loaded glossary catalog with %d terms", len(terms))
    return tuple(terms)


@st.cache_resource
def get_catalog() -> tuple[Term, ...]:
    """
    Get the shared term catalog (app-wide singleton).

    Built once per app process and shared read-only across all sessions.
    """
    from components.glossary_definitions import GLOSSARY_TERMS

    return build_catalog(GLOSSARY_TERMS)


def matches(term: Term, query: str | None, category_filter: str | None) -> bool:
    """Return True if the term passes both the category and the text filter."""
    if category_filter and category_filter != ALL_CATEGORIES:
        if term.category != category_filter:
            return False

    if not query:
        return True

    haystack = " ".join([term.name, term.preview, term.definition]).lower()
    return query.lower() in haystack


def derive(catalog, query: str | None, category_filter: str | None) -> tuple[Term, ...]:
    """Filtered view: the catalog subsequence matching query + category, in catalog order."""
    return tuple(term for term in catalog if matches(term, query, category_filter))


def suggest_terms(catalog, query: str, category_filter: str | None = ALL_CATEGORIES,
                  limit: int = SUGGESTION_LIMIT, score_cutoff: int = SUGGESTION_CUTOFF) -> list[Term]:
    """
    Fuzzy "did you mean" suggestions for a query that matched nothing.

    Compares the query against the names of terms in the active category
    only, so picking a suggestion always yields a non-empty view. Never used
    to build the filtered view itself.

    Args:
        catalog: Sequence of Terms to search
        query: User's search input
        category_filter: Active category, or "all"
        limit: Maximum number of suggestions
        score_cutoff: Minimum RapidFuzz score (0-100) to keep a match

    Returns:
        List of Terms, best match first
    """
    if not query or not query.strip():
        return []

    fuzzy_matches = process.extract(
        query,
        [term for term in catalog if matches(term, "", category_filter)],
        scorer=fuzz.WRatio,
        limit=limit,
        score_cutoff=score_cutoff,
        processor=lambda item: item.name.lower() if isinstance(item, Term) else item.lower(),
    )
    return [term for term, _score, _index in fuzzy_matches]


def category_counts(catalog) -> pd.DataFrame:
    """Number of terms per category, in dropdown display order."""
    counts = {category: 0 for category in CATEGORY_DISPLAY_ORDER if category != ALL_CATEGORIES}
    for term in catalog:
        counts[term.category.value] += 1

    return pd.DataFrame({
        "Category": [f"{CATEGORY_ICONS[key]} {CATEGORY_LABELS[key]}" for key in counts],
        "Terms": list(counts.values()),
    })


def terms_to_frame(terms) -> pd.DataFrame:
    """Tabular view of a term sequence (name, category, preview)."""
    return pd.DataFrame(
        {
            "Term": [term.name for term in terms],
            "Category": [CATEGORY_LABELS[term.category.value] for term in terms],
            "Summary": [term.preview for term in terms],
        },
        columns=["Term", "Category", "Summary"],
    )
