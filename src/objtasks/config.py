from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuilderConfig:
    strict_combinators: bool = False  # reject tokens other than ' ', '>', '+', '~'


@dataclass(frozen=True)
class JsonConfig:
    indent: int | None = None
    sort_keys: bool = False
    compact: bool = True  # no spaces after ',' and ':' (ignored when indent is set)
