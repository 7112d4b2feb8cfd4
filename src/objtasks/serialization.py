"""JSON helpers: dump any value, load a flat JSON object into a dataclass shape."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from objtasks.config import JsonConfig
from objtasks.errors import DeserializationError

__all__ = ["to_json", "from_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any, config: JsonConfig | None = None) -> str:
    """Return the JSON representation of *obj*.

    Dataclass instances are written as objects of their fields. The default
    output is compact: ``[1,2,3]``, ``{"width":10,"height":20}``.
    """
    cfg = config or JsonConfig()
    separators = (",", ":") if cfg.compact and cfg.indent is None else None
    return json.dumps(
        obj,
        indent=cfg.indent,
        sort_keys=cfg.sort_keys,
        separators=separators,
        default=_default,
    )


def from_json(shape: type[T], text: str) -> T:
    """Build a *shape* instance from a JSON object.

    *shape* must be a dataclass. Every key of the object must name an init
    field of *shape* and every field without a default must be present;
    otherwise :class:`DeserializationError` is raised.
    """
    if not (dataclasses.is_dataclass(shape) and isinstance(shape, type)):
        raise TypeError(f"{shape!r} is not a dataclass type")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DeserializationError(
            f"Invalid JSON for {shape.__name__}: {exc}", shape=shape, cause=exc
        ) from exc
    if not isinstance(data, dict):
        raise DeserializationError(
            f"Expected a JSON object for {shape.__name__}, got {type(data).__name__}",
            shape=shape,
        )

    fields = [f for f in dataclasses.fields(shape) if f.init]
    names = {f.name for f in fields}
    required = [
        f.name
        for f in fields
        if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
    ]
    missing = tuple(name for name in required if name not in data)
    unknown = tuple(key for key in data if key not in names)
    if missing or unknown:
        logger.debug(
            "Rejected %s payload: missing=%s unknown=%s", shape.__name__, missing, unknown
        )
        parts = []
        if missing:
            parts.append("missing " + ", ".join(missing))
        if unknown:
            parts.append("unknown " + ", ".join(unknown))
        raise DeserializationError(
            f"Cannot build {shape.__name__}: " + "; ".join(parts),
            shape=shape,
            missing=missing,
            unknown=unknown,
        )
    return shape(**data)
