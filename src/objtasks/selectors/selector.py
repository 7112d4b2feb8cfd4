"""Compound and combined CSS selectors."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from objtasks.errors import DuplicateError, OrderError
from objtasks.selectors.model import PartKind

__all__ = ["Selector", "SimpleSelector", "CombinatorSelector"]

logger = logging.getLogger(__name__)


class Selector(Protocol):
    """Anything that renders to selector text."""

    def stringify(self) -> str: ...


class SimpleSelector:
    """A compound selector built part by part, e.g. ``a#home.nav[href]:hover``.

    Every append method returns ``self`` so calls can be chained. Parts must
    follow the order ``element, id, class, attribute, pseudo-class,
    pseudo-element``; element, id and pseudo-element may appear only once.
    A rejected append leaves the selector unchanged.
    """

    def __init__(self, value: str, kind: PartKind) -> None:
        self.emitted_kinds: list[PartKind] = [kind]
        self.text = kind.format(value)

    # --- appending --------------------------------------------------------------

    def element(self, value: str) -> SimpleSelector:
        return self._append(PartKind.ELEMENT, value)

    def id(self, value: str) -> SimpleSelector:
        return self._append(PartKind.ID, value)

    def class_(self, value: str) -> SimpleSelector:
        return self._append(PartKind.CLASS, value)

    def attribute(self, value: str) -> SimpleSelector:
        """Append ``[value]``; *value* is given without brackets, e.g. ``href$=".png"``."""
        return self._append(PartKind.ATTRIBUTE, value)

    attr = attribute

    def pseudo_class(self, value: str) -> SimpleSelector:
        return self._append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return self._append(PartKind.PSEUDO_ELEMENT, value)

    def _append(self, kind: PartKind, value: str) -> SimpleSelector:
        if kind.unique and kind in self.emitted_kinds:
            logger.debug("Rejected duplicate %s %r after %r", kind, value, self.text)
            raise DuplicateError(kind)
        previous = self.emitted_kinds[-1]
        if kind.rank < previous.rank:
            logger.debug(
                "Rejected %s %r after %s in %r", kind, value, previous, self.text
            )
            raise OrderError(kind, previous)
        self.emitted_kinds.append(kind)
        self.text += kind.format(value)
        return self

    # --- rendering --------------------------------------------------------------

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"SimpleSelector({self.text!r})"


@dataclass(frozen=True)
class CombinatorSelector:
    """Two selectors joined by a combinator token.

    Operands may themselves be combined selectors, so arbitrarily deep
    chains render left to right: ``left + " " + combinator + " " + right``.
    """

    left: Selector
    combinator: str
    right: Selector

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()
