"""Runtime type predicates for loosely-typed values.

Each predicate is a plain ``isinstance`` test; nothing is coerced. ``bool`` is a
subclass of ``int`` in Python, so the integer and numeric predicates reject it
explicitly.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

_TEXT_LIKE: tuple[type, ...] = (str, bytes, bytearray)


def is_text(value: object) -> bool:
    return isinstance(value, str)


def is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_float(value: object) -> bool:
    return isinstance(value, float)


def is_numeric(value: object) -> bool:
    """True for integers and floats (never for bool)."""
    return is_integer(value) or is_float(value)


def is_boolean(value: object) -> bool:
    return isinstance(value, bool)


def is_mapping(value: object) -> bool:
    return isinstance(value, Mapping)


def is_sequence(value: object) -> bool:
    """True for ordered sequences such as lists and tuples, but not for strings."""
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_LIKE)


__all__ = [
    "is_text",
    "is_integer",
    "is_float",
    "is_numeric",
    "is_boolean",
    "is_mapping",
    "is_sequence",
]
