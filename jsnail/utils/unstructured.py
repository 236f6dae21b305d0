"""Entry validation for intentionally unstructured payloads.

The accessor itself never raises; these helpers are for boundaries that must
reject a malformed payload outright, such as configuration files.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

UnstructuredMapping = Mapping[str, Any]


def require_mapping(value: object, *, context: str) -> UnstructuredMapping:
    """Validate an intentionally unstructured mapping at entry."""
    if not isinstance(value, Mapping):
        raise TypeError(f"{context} must be a mapping, got {type(value)!r}")
    return cast(UnstructuredMapping, value)


def optional_mapping(value: object, *, context: str) -> UnstructuredMapping:
    """Like :func:`require_mapping`, but ``None`` stands for an empty section."""
    if value is None:
        return {}
    return require_mapping(value, context=context)
