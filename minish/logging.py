"""
Diagnostic logging for minish

Messages are filtered by a process-wide level (QUIET, ERROR, WARNING, INFO,
DEBUG) taken from MINISH_LOG_LEVEL or the --log-level option. They go to
stderr, indented by verbosity, so they never end up in a file targeted by a
command's stdout redirection or mix with the prompt.
"""

import sys
from enum import Enum


class LogLevel(Enum):
    """Logging levels in order of increasing verbosity"""
    QUIET = -1
    ERROR = 0
    WARNING = 1
    INFO = 2
    DEBUG = 3


_INDENT = {
    LogLevel.ERROR: "",
    LogLevel.WARNING: "  ",
    LogLevel.INFO: "    ",
    LogLevel.DEBUG: "      ",
}

_current_log_level = LogLevel.ERROR


def set_log_level(level: LogLevel) -> None:
    global _current_log_level
    _current_log_level = level


def get_log_level() -> LogLevel:
    return _current_log_level


def get_log_level_string() -> str:
    return _current_log_level.name


def set_log_level_from_string(level_str: str) -> None:
    """
    Set logging level from its name (case-insensitive)

    Raises:
        ValueError: If the name is not a LogLevel
    """
    try:
        level = LogLevel[level_str.strip().upper()]
    except KeyError:
        valid = [level.name for level in LogLevel]
        raise ValueError(f"Invalid log level: {level_str}. Valid levels: {valid}") from None
    set_log_level(level)


def init_logging_from_env(config=None) -> None:
    """
    Apply the level configured through MINISH_LOG_LEVEL

    An invalid value is reported and replaced by ERROR.

    Args:
        config: Config to read from (defaults to the global configuration)
    """
    if config is None:
        from .config import get_config
        config = get_config()
    try:
        set_log_level_from_string(config.log_level)
    except ValueError:
        set_log_level(LogLevel.ERROR)
        log_error(f"minish: ignoring invalid MINISH_LOG_LEVEL={config.log_level!r}, using ERROR")


def should_log(level: LogLevel) -> bool:
    return level.value <= _current_log_level.value


def _log(level: LogLevel, message: str) -> None:
    if should_log(level):
        print(_INDENT[level] + message, file=sys.stderr, flush=True)


def log_error(message: str) -> None:
    _log(LogLevel.ERROR, message)


def log_warning(message: str) -> None:
    _log(LogLevel.WARNING, message)


def log_info(message: str) -> None:
    _log(LogLevel.INFO, message)


def log_debug(message: str) -> None:
    _log(LogLevel.DEBUG, message)


init_logging_from_env()
