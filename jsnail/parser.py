"""Object-style access to the readers.

``SnailParser`` is a mixin: model classes inherit it and build their fields with
``self.read_text(...)`` and friends. ``JSnail`` is a ready-made, immutable parser
for callers that prefer an instance over free functions.

Example::

    data = {"name": "John", "age": 30, "isStudent": True, "grades": [95, 88, 75]}

    parser = JSnail()
    parser.read_text(data, "name")         # 'John'
    parser.read_integer(data, "age")       # 30
    parser.read_boolean(data, "isStudent") # True
    parser.read_sequence(data, "grades")   # [95, 88, 75]
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional, TypeVar

from . import access, enums, predicates, readers
from .config.schema import STANDARD_DEFAULTS, StandardDefaults
from .readers import Number

M = TypeVar("M")


class SnailParser:
    """Mixin exposing every reader as a method.

    Defaulted readers take ``default=None``, meaning "use ``self.defaults``".
    Subclasses may override the ``defaults`` class attribute.
    """

    defaults: StandardDefaults = STANDARD_DEFAULTS

    # Lookup and presence
    def read_value(self, source: object, key: object) -> object | None:
        return access.lookup(source, key)

    def has_key(self, source: object, key: object) -> bool:
        return access.has_key(source, key)

    def has_value(self, source: object, key: object) -> bool:
        return access.has_value(source, key)

    # Predicates
    def is_text(self, value: object) -> bool:
        return predicates.is_text(value)

    def is_integer(self, value: object) -> bool:
        return predicates.is_integer(value)

    def is_float(self, value: object) -> bool:
        return predicates.is_float(value)

    def is_numeric(self, value: object) -> bool:
        return predicates.is_numeric(value)

    def is_boolean(self, value: object) -> bool:
        return predicates.is_boolean(value)

    def is_mapping(self, value: object) -> bool:
        return predicates.is_mapping(value)

    def is_sequence(self, value: object) -> bool:
        return predicates.is_sequence(value)

    # Readers
    def try_read_text(self, source: object, key: object) -> str | None:
        return readers.try_read_text(source, key)

    def read_text(self, source: object, key: object, default: Optional[str] = None) -> str:
        fallback = self.defaults.text if default is None else default
        return readers.read_text(source, key, fallback)

    def try_read_integer(self, source: object, key: object) -> int | None:
        return readers.try_read_integer(source, key)

    def read_integer(
        self, source: object, key: object, default: Optional[int] = None
    ) -> int:
        fallback = self.defaults.integer if default is None else default
        return readers.read_integer(source, key, fallback)

    def try_read_float(self, source: object, key: object) -> float | None:
        return readers.try_read_float(source, key)

    def read_float(
        self, source: object, key: object, default: Optional[float] = None
    ) -> float:
        fallback = self.defaults.floating if default is None else default
        return readers.read_float(source, key, fallback)

    def try_read_numeric(self, source: object, key: object) -> Number | None:
        return readers.try_read_numeric(source, key)

    def read_numeric(
        self, source: object, key: object, default: Optional[Number] = None
    ) -> Number:
        fallback = self.defaults.numeric if default is None else default
        return readers.read_numeric(source, key, fallback)

    def try_read_boolean(self, source: object, key: object) -> bool | None:
        return readers.try_read_boolean(source, key)

    def read_boolean(
        self, source: object, key: object, default: Optional[bool] = None
    ) -> bool:
        fallback = self.defaults.boolean if default is None else default
        return readers.read_boolean(source, key, fallback)

    def try_read_sequence(self, source: object, key: object) -> Sequence[Any] | None:
        return readers.try_read_sequence(source, key)

    def read_sequence(self, source: object, key: object) -> Sequence[Any]:
        return readers.read_sequence(source, key)

    def try_read_mapping(self, source: object, key: object) -> Mapping[Any, Any] | None:
        return readers.try_read_mapping(source, key)

    def read_mapping(self, source: object, key: object) -> Mapping[Any, Any]:
        return readers.read_mapping(source, key)

    def try_read_enum(self, source: object, key: object, members: Iterable[M]) -> M | None:
        return enums.try_read_enum(source, key, members)

    def read_enum(
        self, source: object, key: object, members: Iterable[M], default: M
    ) -> M:
        return enums.read_enum(source, key, members, default)


@dataclass(frozen=True)
class JSnail(SnailParser):
    """Concrete parser; `JSnail(defaults=...)` swaps the standard defaults."""

    defaults: StandardDefaults = STANDARD_DEFAULTS
