"""Coercion helpers for configuration values that arrive as text.

Environment variables are always strings, so overriding a typed default from the
environment needs an explicit conversion step. These helpers:
- accept the target type unchanged
- accept common string representations (case/whitespace-insensitive)
- reject bool for int/float (bool is a subclass of int)
- raise TypeError for type mismatches and ValueError for invalid values

They belong to the configuration boundary only; the readers never coerce.
"""

from __future__ import annotations

import math

_TRUTHY = frozenset({"true", "1", "yes", "y", "on"})
_FALSY = frozenset({"false", "0", "no", "n", "off"})


def _field_label(field: str | None) -> str:
    return str(field) if field else "value"


def coerce_bool(value: object, *, field: str | None = None) -> bool:
    """Coerce a value into a bool.

    Accepted string tokens (case-insensitive, whitespace-insensitive):
    - truthy:  true, 1, yes, y, on
    - falsy:   false, 0, no, n, off
    """
    label = _field_label(field)

    if isinstance(value, bool):
        return value

    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUTHY:
            return True
        if normalized in _FALSY:
            return False
        raise ValueError(
            f"{label} string value {value!r} is not a recognized boolean representation"
        )

    raise TypeError(f"{label} must be a boolean, got {type(value)!r}")


def coerce_int(value: object, *, field: str | None = None) -> int:
    """Coerce a value into an int (bools and fractional strings are rejected)."""
    label = _field_label(field)

    if isinstance(value, bool):
        raise TypeError(f"{label} must be an integer (bool is not allowed)")

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise ValueError(f"{label} must be an integer, got {value!r}") from exc

    raise TypeError(f"{label} must be an integer, got {type(value)!r}")


def coerce_float(value: object, *, field: str | None = None) -> float:
    """Coerce a value into a finite float."""
    label = _field_label(field)

    if isinstance(value, bool):
        raise TypeError(f"{label} must be a number (bool is not allowed)")

    if isinstance(value, (int, float)):
        parsed = float(value)
    elif isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError as exc:
            raise ValueError(f"{label} must be a number, got {value!r}") from exc
    else:
        raise TypeError(f"{label} must be a number, got {type(value)!r}")

    if not math.isfinite(parsed):
        raise ValueError(f"{label} must be a finite number, got {value!r}")
    return parsed


__all__ = ["coerce_bool", "coerce_int", "coerce_float"]
