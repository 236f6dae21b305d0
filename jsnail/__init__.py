"""Defensive typed access to loosely-typed mappings such as decoded JSON."""

from .access import has_key, has_value, lookup
from .config import ConfigLoader, STANDARD_DEFAULTS, StandardDefaults
from .enums import read_enum, try_read_enum
from .parser import JSnail, SnailParser
from .predicates import (
    is_boolean,
    is_float,
    is_integer,
    is_mapping,
    is_numeric,
    is_sequence,
    is_text,
)
from .readers import (
    read_boolean,
    read_float,
    read_integer,
    read_mapping,
    read_numeric,
    read_sequence,
    read_text,
    try_read_boolean,
    try_read_float,
    try_read_integer,
    try_read_mapping,
    try_read_numeric,
    try_read_sequence,
    try_read_text,
)
from .utils.logger import (
    configure_logging,
    disable_verbose_logging,
    enable_verbose_logging,
    set_global_debug,
    set_log_level,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigLoader",
    "JSnail",
    "STANDARD_DEFAULTS",
    "SnailParser",
    "StandardDefaults",
    "configure_logging",
    "disable_verbose_logging",
    "enable_verbose_logging",
    "has_key",
    "has_value",
    "is_boolean",
    "is_float",
    "is_integer",
    "is_mapping",
    "is_numeric",
    "is_sequence",
    "is_text",
    "lookup",
    "read_boolean",
    "read_enum",
    "read_float",
    "read_integer",
    "read_mapping",
    "read_numeric",
    "read_sequence",
    "read_text",
    "set_global_debug",
    "set_log_level",
    "try_read_boolean",
    "try_read_enum",
    "try_read_float",
    "try_read_integer",
    "try_read_mapping",
    "try_read_numeric",
    "try_read_sequence",
    "try_read_text",
]
