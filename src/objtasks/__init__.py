"""objtasks -- shapes, JSON helpers and a CSS selector builder."""

from objtasks.config import BuilderConfig, JsonConfig
from objtasks.errors import (
    CombinatorError,
    DeserializationError,
    DuplicateError,
    ObjTasksError,
    OrderError,
    SelectorError,
)
from objtasks.selectors import (
    Combinator,
    CombinatorSelector,
    CssSelectorBuilder,
    PartKind,
    SimpleSelector,
    css_selector_builder,
)
from objtasks.serialization import from_json, to_json
from objtasks.shapes import Circle, Rectangle

__all__ = [
    # shapes
    "Rectangle",
    "Circle",
    # json
    "to_json",
    "from_json",
    # selectors
    "CssSelectorBuilder",
    "css_selector_builder",
    "SimpleSelector",
    "CombinatorSelector",
    "PartKind",
    "Combinator",
    # config
    "BuilderConfig",
    "JsonConfig",
    # errors
    "ObjTasksError",
    "SelectorError",
    "DuplicateError",
    "OrderError",
    "CombinatorError",
    "DeserializationError",
]
