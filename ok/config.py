from __future__ import annotations
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

# Defaults
_DEFAULT_MAX_DEPTH = 100
_DEFAULT_HISTORY_FILE = Path.home() / '.ok_history'
_DEFAULT_LOG_LEVEL = 'WARNING'
_LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG')


def int_from_env(var: str, default: int) -> int:
    """Positive integer from `var`; malformed values fall back to `default`."""
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("%s must be an integer, got %r; using %d", var, raw, default)
        return default
    if value < 1:
        logger.warning("%s must be positive, got %d; using %d", var, value, default)
        return default
    return value


def get_max_depth() -> int:
    return int_from_env('OK_MAX_DEPTH', _DEFAULT_MAX_DEPTH)


def get_history_file() -> Path:
    raw = os.environ.get('OK_HISTORY_FILE')
    if not raw:
        return _DEFAULT_HISTORY_FILE
    return Path(raw.strip()).expanduser()


def get_log_level() -> str:
    level = os.environ.get('OK_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper() or _DEFAULT_LOG_LEVEL
    if level not in _LOG_LEVELS:
        logger.warning("unknown OK_LOG_LEVEL %r; using %s", level, _DEFAULT_LOG_LEVEL)
        return _DEFAULT_LOG_LEVEL
    return level
