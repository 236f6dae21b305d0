"""Typed readers over loosely-typed mappings.

Every type comes in two flavours:

- ``try_read_<type>(container, key)`` returns the stored value when its runtime
  type matches, otherwise ``None``.
- ``read_<type>(container, key, default=...)`` returns the same value, or
  ``default`` when the optional reader gives ``None``.

Readers never coerce (``"3"`` is not an integer, ``3`` is not a float) and never
raise for a missing key, a non-mapping container or a mismatched value.

Example::

    >>> data = {"age": 30, "name": "John", "isStudent": True, "grades": [95, 88, 75]}
    >>> read_integer(data, "age")
    30
    >>> read_text(data, "name")
    'John'
    >>> read_integer(data, "missing")
    -1
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Union

from .access import lookup
from .predicates import (
    is_boolean,
    is_float,
    is_integer,
    is_mapping,
    is_numeric,
    is_sequence,
    is_text,
)

Number = Union[int, float]

DEFAULT_TEXT: str = ""
DEFAULT_INTEGER: int = -1
DEFAULT_FLOAT: float = -1.0
DEFAULT_NUMERIC: Number = -1.0
DEFAULT_BOOLEAN: bool = False


def try_read_text(container: object, key: object) -> str | None:
    value = lookup(container, key)
    return value if is_text(value) else None  # type: ignore[return-value]


def read_text(container: object, key: object, default: str = DEFAULT_TEXT) -> str:
    value = try_read_text(container, key)
    return default if value is None else value


def try_read_integer(container: object, key: object) -> int | None:
    """Return an ``int`` value; floats, numeric strings and bools give ``None``."""
    value = lookup(container, key)
    return value if is_integer(value) else None  # type: ignore[return-value]


def read_integer(
    container: object, key: object, default: int = DEFAULT_INTEGER
) -> int:
    value = try_read_integer(container, key)
    return default if value is None else value


def try_read_float(container: object, key: object) -> float | None:
    value = lookup(container, key)
    return value if is_float(value) else None  # type: ignore[return-value]


def read_float(
    container: object, key: object, default: float = DEFAULT_FLOAT
) -> float:
    value = try_read_float(container, key)
    return default if value is None else value


def try_read_numeric(container: object, key: object) -> Number | None:
    """Return an ``int`` or ``float`` value unchanged (no widening to float)."""
    value = lookup(container, key)
    return value if is_numeric(value) else None  # type: ignore[return-value]


def read_numeric(
    container: object, key: object, default: Number = DEFAULT_NUMERIC
) -> Number:
    value = try_read_numeric(container, key)
    return default if value is None else value


def try_read_boolean(container: object, key: object) -> bool | None:
    value = lookup(container, key)
    return value if is_boolean(value) else None  # type: ignore[return-value]


def read_boolean(
    container: object, key: object, default: bool = DEFAULT_BOOLEAN
) -> bool:
    value = try_read_boolean(container, key)
    return default if value is None else value


def try_read_sequence(container: object, key: object) -> Sequence[Any] | None:
    """Return the stored sequence itself (not a copy), or ``None``."""
    value = lookup(container, key)
    return value if is_sequence(value) else None  # type: ignore[return-value]


def read_sequence(container: object, key: object) -> Sequence[Any]:
    """Return the stored sequence, or a new empty list on every fallback."""
    value = try_read_sequence(container, key)
    return [] if value is None else value


def try_read_mapping(container: object, key: object) -> Mapping[Any, Any] | None:
    value = lookup(container, key)
    return value if is_mapping(value) else None  # type: ignore[return-value]


def read_mapping(container: object, key: object) -> Mapping[Any, Any]:
    """Return the stored mapping, or a new empty dict on every fallback."""
    value = try_read_mapping(container, key)
    return {} if value is None else value


__all__ = [
    "DEFAULT_TEXT",
    "DEFAULT_INTEGER",
    "DEFAULT_FLOAT",
    "DEFAULT_NUMERIC",
    "DEFAULT_BOOLEAN",
    "Number",
    "try_read_text",
    "read_text",
    "try_read_integer",
    "read_integer",
    "try_read_float",
    "read_float",
    "try_read_numeric",
    "read_numeric",
    "try_read_boolean",
    "read_boolean",
    "try_read_sequence",
    "read_sequence",
    "try_read_mapping",
    "read_mapping",
]
