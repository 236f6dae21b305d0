"""Typed configuration schema for reader defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Dict, Mapping, Optional

from ..access import has_value
from ..readers import (
    DEFAULT_BOOLEAN,
    DEFAULT_FLOAT,
    DEFAULT_INTEGER,
    DEFAULT_NUMERIC,
    DEFAULT_TEXT,
    Number,
    try_read_boolean,
    try_read_integer,
    try_read_numeric,
    try_read_text,
)
from ..utils.parsing import coerce_bool, coerce_float, coerce_int
from ..utils.unstructured import optional_mapping

ENV_PREFIX = "JSNAIL_DEFAULT_"

# field name -> (strict reader, env coercion)
_FIELD_READERS: Dict[str, tuple[Callable[[object, object], Any], Callable[..., Any]]] = {
    "text": (try_read_text, lambda value, field: value),
    "integer": (try_read_integer, coerce_int),
    "floating": (try_read_numeric, coerce_float),
    "numeric": (try_read_numeric, coerce_float),
    "boolean": (try_read_boolean, coerce_bool),
}


@dataclass(frozen=True)
class StandardDefaults:
    """Fallback values used by defaulted readers when the caller passes none.

    Sequence and mapping fallbacks are always fresh empty containers and enum
    fallbacks are always caller-supplied, so neither appears here.
    """

    text: str = DEFAULT_TEXT
    integer: int = DEFAULT_INTEGER
    floating: float = DEFAULT_FLOAT
    numeric: Number = DEFAULT_NUMERIC
    boolean: bool = DEFAULT_BOOLEAN

    @classmethod
    def from_mapping(
        cls, payload: Optional[Mapping[str, Any]]
    ) -> "StandardDefaults":
        section = optional_mapping(payload, context="defaults section")
        unknown = sorted(str(key) for key in section if key not in _FIELD_READERS)
        if unknown:
            raise ValueError(f"Unknown defaults keys: {unknown}")

        overrides: Dict[str, Any] = {}
        for name, (reader, _) in _FIELD_READERS.items():
            if not has_value(section, name):
                continue
            value = reader(section, name)
            if value is None:
                raise TypeError(
                    f"defaults.{name} has wrong type {type(section[name]).__name__}"
                )
            if name == "floating":
                # ints widen to float; bools and strings were already rejected
                value = coerce_float(value, field=f"defaults.{name}")
            overrides[name] = value
        return cls(**overrides)

    def with_env_overrides(
        self, prefix: str = ENV_PREFIX, environ: Optional[Mapping[str, str]] = None
    ) -> "StandardDefaults":
        """Return a copy with fields replaced from ``<prefix><FIELD>`` variables."""
        env = os.environ if environ is None else environ
        overrides: Dict[str, Any] = {}
        for item in fields(self):
            env_key = f"{prefix}{item.name.upper()}"
            if env_key not in env:
                continue
            _, coerce = _FIELD_READERS[item.name]
            overrides[item.name] = coerce(env[env_key], field=env_key)
        if not overrides:
            return self
        return replace(self, **overrides)


STANDARD_DEFAULTS = StandardDefaults()
