"""Glossary session controller: filtering, focus navigation and selection state."""

import logging
from dataclasses import dataclass
from enum import Enum

from utils.catalog import ALL_CATEGORIES, Term, derive

logger = logging.getLogger(__name__)


class Direction(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


class Mode(Enum):
    BROWSING = "browsing"
    DETAIL = "detail"


# Browser key names mapped to controller intents
KEY_BINDINGS = {
    "ArrowDown": "move_forward",
    "ArrowUp": "move_backward",
    "Enter": "activate",
    "Escape": "close",
}


@dataclass
class SessionState:
    query: str = ""
    category_filter: str = ALL_CATEGORIES
    focused_index: int | None = None
    selected: Term | None = None


class GlossaryController:
    """
    Owns the interaction state of one glossary session.

    The view reads `filtered_terms`, `focused_index` and `selected` and sends
    intents back through the public methods. Every intent is total: index
    arithmetic is clamped and intents that make no sense in the current mode
    are ignored rather than raising.
    """

    def __init__(self, catalog):
        self._catalog = tuple(catalog)
        self.state = SessionState()
        self._filtered: tuple[Term, ...] = ()
        self._refilter()

    # Derived state

    @property
    def query(self) -> str:
        return self.state.query

    @property
    def category_filter(self) -> str:
        return self.state.category_filter

    @property
    def filtered_terms(self) -> tuple[Term, ...]:
        return self._filtered

    @property
    def focused_index(self) -> int | None:
        return self.state.focused_index

    @property
    def focused_term(self) -> Term | None:
        if self.state.focused_index is None:
            return None
        return self._filtered[self.state.focused_index]

    @property
    def selected(self) -> Term | None:
        return self.state.selected

    @property
    def mode(self) -> Mode:
        return Mode.DETAIL if self.state.selected is not None else Mode.BROWSING

    def _refilter(self):
        self._filtered = derive(self._catalog, self.state.query, self.state.category_filter)
        # Focus always restarts at the top after a refilter
        self.state.focused_index = 0 if self._filtered else None

    # Filter intents

    def set_query(self, text: str | None):
        self.state.query = text or ""
        self._refilter()
        logger.debug("Query set to %r: %d matches", self.state.query, len(self._filtered))

    def set_category(self, value: str | None):
        self.state.category_filter = value or ALL_CATEGORIES
        self._refilter()
        logger.debug("Category set to %r: %d matches", self.state.category_filter, len(self._filtered))

    def reset(self):
        """Clear query and category filter. Selection is kept."""
        self.state.query = ""
        self.state.category_filter = ALL_CATEGORIES
        self._refilter()
        logger.debug("Filters reset")

    # Navigation intents

    def _is_locked(self, intent: str) -> bool:
        if self.mode is Mode.DETAIL:
            logger.debug("Ignoring %s while a term is open", intent)
            return True
        return False

    def move_focus(self, direction: Direction):
        if self._is_locked("move_focus") or not self._filtered:
            return

        direction = Direction(direction)
        last = len(self._filtered) - 1
        if direction is Direction.FORWARD:
            self.state.focused_index = min(self.state.focused_index + 1, last)
        else:
            self.state.focused_index = max(self.state.focused_index - 1, 0)
        logger.debug("Focus moved %s to %d", direction.value, self.state.focused_index)

    def hover_focus(self, index: int):
        """Pointer-driven focus on list position `index` (clamped)."""
        if self._is_locked("hover_focus") or not self._filtered:
            return
        self.state.focused_index = max(0, min(index, len(self._filtered) - 1))
        logger.debug("Focus set by pointer to %d", self.state.focused_index)

    def activate(self):
        """Open the focused term."""
        if self._is_locked("activate"):
            return
        term = self.focused_term
        if term is not None:
            self.select(term)

    # Selection lifecycle

    def select(self, term: Term | None):
        """Show `term` in detail. Selecting None is the same as closing."""
        if term is None:
            self.close()
            return
        self.state.selected = term
        logger.debug("Selected term %r", term.id)

    def close(self):
        if self.state.selected is not None:
            logger.debug("Closed term %r", self.state.selected.id)
        self.state.selected = None

    def handle_key(self, key: str) -> bool:
        """
        Dispatch a browser key name to the matching intent.

        Returns True if the key is bound, False otherwise.
        """
        intent = KEY_BINDINGS.get(key)
        if intent is None:
            return False

        if intent == "move_forward":
            self.move_focus(Direction.FORWARD)
        elif intent == "move_backward":
            self.move_focus(Direction.BACKWARD)
        elif intent == "activate":
            self.activate()
        else:
            self.close()
        return True
