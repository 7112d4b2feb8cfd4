from objtasks.selectors.builder import CssSelectorBuilder, css_selector_builder
from objtasks.selectors.model import Combinator, PartKind
from objtasks.selectors.selector import CombinatorSelector, Selector, SimpleSelector

__all__ = [
    "CssSelectorBuilder",
    "css_selector_builder",
    "Combinator",
    "PartKind",
    "Selector",
    "SimpleSelector",
    "CombinatorSelector",
]
