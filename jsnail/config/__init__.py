"""Configuration for reader defaults"""

from .loader import ConfigLoader
from .schema import ENV_PREFIX, STANDARD_DEFAULTS, StandardDefaults

__all__ = [
    "ConfigLoader",
    "ENV_PREFIX",
    "STANDARD_DEFAULTS",
    "StandardDefaults",
]
