"""
Utility modules for jsnail.
"""

from .logger import (
    get_logger,
    configure_logging,
    is_verbose_enabled,
    set_log_level,
    enable_verbose_logging,
    disable_verbose_logging,
    set_global_debug,
    is_global_debug_enabled,
)

__all__ = [
    "get_logger",
    "configure_logging",
    "is_verbose_enabled",
    "set_log_level",
    "enable_verbose_logging",
    "disable_verbose_logging",
    "set_global_debug",
    "is_global_debug_enabled",
]
