"""Facade for building CSS selectors.

Example::

    builder = css_selector_builder
    builder.combine(
        builder.element("div").id("main").class_("container"),
        "+",
        builder.element("table").id("data"),
    ).stringify()
    # => 'div#main.container + table#data'
"""

from __future__ import annotations

import logging

from objtasks.config import BuilderConfig
from objtasks.errors import CombinatorError
from objtasks.selectors.model import Combinator, PartKind
from objtasks.selectors.selector import CombinatorSelector, Selector, SimpleSelector

__all__ = ["CssSelectorBuilder", "css_selector_builder"]

logger = logging.getLogger(__name__)

_COMBINATORS = frozenset(c.value for c in Combinator)


class CssSelectorBuilder:
    """Stateless entry point; every call returns a fresh selector."""

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()

    def element(self, value: str) -> SimpleSelector:
        return SimpleSelector(value, PartKind.ELEMENT)

    def id(self, value: str) -> SimpleSelector:
        return SimpleSelector(value, PartKind.ID)

    def class_(self, value: str) -> SimpleSelector:
        return SimpleSelector(value, PartKind.CLASS)

    def attribute(self, value: str) -> SimpleSelector:
        return SimpleSelector(value, PartKind.ATTRIBUTE)

    attr = attribute

    def pseudo_class(self, value: str) -> SimpleSelector:
        return SimpleSelector(value, PartKind.PSEUDO_CLASS)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return SimpleSelector(value, PartKind.PSEUDO_ELEMENT)

    def combine(
        self, selector1: Selector, combinator: str, selector2: Selector
    ) -> CombinatorSelector:
        """Join two selectors with *combinator*.

        Any token is accepted unless ``config.strict_combinators`` is set, in
        which case only ``' '``, ``'>'``, ``'+'`` and ``'~'`` pass and anything
        else raises :class:`CombinatorError`.
        """
        if self.config.strict_combinators and combinator not in _COMBINATORS:
            logger.debug("Rejected combinator %r", combinator)
            raise CombinatorError(combinator)
        return CombinatorSelector(selector1, combinator, selector2)


css_selector_builder = CssSelectorBuilder()
