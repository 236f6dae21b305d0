"""Key lookup and presence checks over mapping-shaped containers.

A key stored with an explicit ``None`` value is treated exactly like a missing
key by :func:`lookup` and :func:`has_value`; only :func:`has_key` can tell the two
apart.
"""

from __future__ import annotations

from collections.abc import Hashable

from .predicates import is_mapping


def lookup(container: object, key: object) -> object | None:
    """Return the value stored under ``key``, or ``None``.

    ``None`` is returned when ``container`` is not a mapping, when the key is
    missing, when it is unhashable, or when the stored value is itself ``None``.
    """
    if not is_mapping(container) or not isinstance(key, Hashable):
        return None
    try:
        return container.get(key)  # type: ignore[union-attr]
    except TypeError:
        # unhashable members of hashable containers, e.g. a tuple holding a list
        return None


def has_key(container: object, key: object) -> bool:
    if not is_mapping(container) or not isinstance(key, Hashable):
        return False
    try:
        return key in container  # type: ignore[operator]
    except TypeError:
        return False


def has_value(container: object, key: object) -> bool:
    """True when ``key`` is present and maps to something other than ``None``."""
    return has_key(container, key) and lookup(container, key) is not None


__all__ = ["lookup", "has_key", "has_value"]
