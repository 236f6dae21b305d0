"""Resolve text values to members of a caller-supplied enumeration.

The member set is passed on every call, either as an ``Enum`` subclass or as any
iterable of members exposing a ``name`` attribute. Matching is exact and
case-sensitive against each member's declared name.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from .access import lookup
from .predicates import is_text
from .utils.logger import get_logger

logger = get_logger(__name__)

M = TypeVar("M")


def _member_by_name(members: Iterable[M], name: str) -> M | None:
    for member in members:
        if member.name == name:  # type: ignore[attr-defined]
            return member
    return None


def try_read_enum(container: object, key: object, members: Iterable[M]) -> M | None:
    """Return the member named by the text stored under ``key``, or ``None``.

    Non-text values, unknown names and errors raised while walking ``members``
    all give ``None``.
    """
    value = lookup(container, key)
    if not is_text(value):
        return None
    try:
        return _member_by_name(members, value)  # type: ignore[arg-type]
    except Exception as exc:  # noqa: BLE001
        logger.debug(
            "Failed to resolve %r against %s: %s", value, type(members).__name__, exc
        )
        return None


def read_enum(
    container: object, key: object, members: Iterable[M], default: M
) -> M:
    member = try_read_enum(container, key, members)
    return default if member is None else member


__all__ = ["try_read_enum", "read_enum"]
