"""Error hierarchy for objtasks."""
from __future__ import annotations

from typing import Any


class ObjTasksError(Exception):
    """Base error for all objtasks errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Selector builder errors
# ---------------------------------------------------------------------------


class SelectorError(ObjTasksError):
    """A selector part or combinator was rejected."""


class DuplicateError(SelectorError):
    """An element, id or pseudo-element was appended a second time."""

    def __init__(self, kind: Any, **kwargs: Any) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more than one time "
            "inside the selector",
            **kwargs,
        )
        self.kind = kind


class OrderError(SelectorError):
    """A part was appended after a part that must come later."""

    def __init__(self, kind: Any, previous: Any, **kwargs: Any) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            **kwargs,
        )
        self.kind = kind
        self.previous = previous


class CombinatorError(SelectorError):
    """The combinator token is not one of ' ', '>', '+', '~'."""

    def __init__(self, combinator: str, **kwargs: Any) -> None:
        super().__init__(f"Unknown combinator: {combinator!r}", **kwargs)
        self.combinator = combinator


# ---------------------------------------------------------------------------
# JSON errors
# ---------------------------------------------------------------------------


class DeserializationError(ObjTasksError):
    """JSON text could not be turned into an instance of the target shape."""

    def __init__(
        self,
        message: str,
        *,
        shape: type | None = None,
        missing: tuple[str, ...] = (),
        unknown: tuple[str, ...] = (),
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.shape = shape
        self.missing = missing
        self.unknown = unknown
