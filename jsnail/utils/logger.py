"""
Unified logging for jsnail (jsnail namespace only).

Goals:
- Single logger hierarchy rooted at `jsnail`.
- Quiet by default: records below WARNING are dropped unless verbose mode is on
  (opt-in via JSNAIL_VERBOSE=1 or configure_logging(verbose=True)).
- Debug flag raises verbosity only for our own loggers.
- No root/global logging mutations that could leak into the host application.
"""

import logging
import os
from typing import Optional

BASE_LOGGER_NAME = "jsnail"
VERBOSE_ENV = "JSNAIL_VERBOSE"

# State
_GLOBAL_DEBUG_FLAG: bool = False
_GLOBAL_LOG_LEVEL: int = logging.INFO
_LOGGING_CONFIGURED: bool = False


def is_verbose_enabled() -> bool:
    verbose = os.environ.get(VERBOSE_ENV, "0").strip().lower()
    return verbose in ("1", "true", "yes", "y")


class QuietFilter(logging.Filter):
    """
    Logging filter that drops informational records in quiet mode.

    WARNING and above always pass. Lower levels pass only when verbose mode is
    enabled, so an application embedding jsnail is not flooded by default.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Filter log records based on level and verbosity.

        Args:
            record: Log record to filter

        Returns:
            True if record should be logged
        """
        if record.levelno >= logging.WARNING:
            return True
        return is_verbose_enabled()


def _base_logger() -> logging.Logger:
    return logging.getLogger(BASE_LOGGER_NAME)


def _ensure_base_logger() -> None:
    """Install handler/formatter/quiet filter on the jsnail root logger once."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    base = _base_logger()
    if not base.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        handler.addFilter(QuietFilter())
        base.addHandler(handler)
    base.propagate = False  # contain logs within jsnail namespace
    _LOGGING_CONFIGURED = True


def _logger_name(name: Optional[str]) -> str:
    if name in (None, "", BASE_LOGGER_NAME):
        return BASE_LOGGER_NAME
    if name.startswith(f"{BASE_LOGGER_NAME}."):
        return name
    return f"{BASE_LOGGER_NAME}.{name}"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a child logger under the `jsnail` namespace."""
    _ensure_base_logger()
    logger = logging.getLogger(_logger_name(name))
    logger.propagate = True
    return logger


def configure_logging(
    *, level: int = logging.INFO, debug: bool = False, verbose: bool = False
) -> None:
    """
    Configure the jsnail logging hierarchy.

    - Affects only loggers under the `jsnail` namespace.
    - Sub-WARNING records stay hidden unless `verbose` is True or JSNAIL_VERBOSE=1.
    - When debug=True, elevates to DEBUG for jsnail loggers only.
    """
    global _GLOBAL_DEBUG_FLAG, _GLOBAL_LOG_LEVEL

    if verbose:
        os.environ[VERBOSE_ENV] = "1"
    elif not is_verbose_enabled():
        os.environ[VERBOSE_ENV] = "0"

    _GLOBAL_DEBUG_FLAG = bool(debug)
    resolved_level = logging.DEBUG if debug else int(level)
    _GLOBAL_LOG_LEVEL = resolved_level

    _ensure_base_logger()
    base = _base_logger()
    base.setLevel(resolved_level)
    base.propagate = False

    # Normalize child loggers under jsnail.* to inherit from base
    for name, logger_obj in logging.Logger.manager.loggerDict.items():
        if not isinstance(logger_obj, logging.Logger):
            continue
        if name.startswith(f"{BASE_LOGGER_NAME}."):
            logger_obj.setLevel(logging.NOTSET)
            logger_obj.propagate = True

    for handler in base.handlers:
        handler.setLevel(resolved_level)
        if not any(isinstance(f, QuietFilter) for f in handler.filters):
            handler.addFilter(QuietFilter())


def set_global_debug(debug: bool = True) -> None:
    configure_logging(level=_GLOBAL_LOG_LEVEL, debug=debug, verbose=is_verbose_enabled())


def is_global_debug_enabled() -> bool:
    return _GLOBAL_DEBUG_FLAG


def set_log_level(level: int) -> None:
    configure_logging(level=level, debug=False, verbose=is_verbose_enabled())


def enable_verbose_logging() -> None:
    os.environ[VERBOSE_ENV] = "1"
    configure_logging(level=_GLOBAL_LOG_LEVEL, debug=_GLOBAL_DEBUG_FLAG, verbose=True)


def disable_verbose_logging() -> None:
    os.environ[VERBOSE_ENV] = "0"
    configure_logging(level=_GLOBAL_LOG_LEVEL, debug=_GLOBAL_DEBUG_FLAG, verbose=False)
