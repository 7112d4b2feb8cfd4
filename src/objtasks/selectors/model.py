"""Selector model: part kinds and combinator tokens."""

from __future__ import annotations

from enum import StrEnum


class PartKind(StrEnum):
    """Kind of a single part inside a compound selector.

    Declaration order is the required order of parts:

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def unique(self) -> bool:
        """True if the kind may occur at most once per selector."""
        return self in _UNIQUE

    def format(self, value: str) -> str:
        """Render *value* as this kind of selector part."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_RANKS: dict[PartKind, int] = {kind: i for i, kind in enumerate(PartKind)}

_UNIQUE = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})

_AFFIXES: dict[PartKind, tuple[str, str]] = {
    PartKind.ELEMENT: ("", ""),
    PartKind.ID: ("#", ""),
    PartKind.CLASS: (".", ""),
    PartKind.ATTRIBUTE: ("[", "]"),
    PartKind.PSEUDO_CLASS: (":", ""),
    PartKind.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(StrEnum):
    """CSS combinator tokens joining two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
