"""Logging setup: colored screen output, optional log file, debug switch."""

import logging
import os
import sys
from typing import TextIO

__all__ = [
    "LogObjects",
    "get_logger",
    "init_logger",
    "is_debug",
    "set_debug",
    "should_colorize",
]

_ESC = "\x1b["
RESET = f"{_ESC}0m"

# (level, ansi codes)
LEVEL_STYLES = {
    logging.WARNING: "33;2",
    logging.ERROR: "31;2",
    logging.CRITICAL: "31;1",
}


class _DebugState:
    """Mutable debug flag, initialized from the DEBUG environment variable."""

    value: bool = bool(os.environ.get("DEBUG"))


_debug_state = _DebugState()


def is_debug() -> bool:
    """Return the current debug state."""
    return _debug_state.value


def set_debug(value: bool) -> None:
    """Set the debug state."""
    _debug_state.value = value


def should_colorize(stream: TextIO | None = None) -> bool:
    """Tell if ANSI colors should be used for `stream` (stderr by default).

    NO_COLOR disables colors, FORCE_COLOR forces them, otherwise colors are
    used only when the stream is a TTY.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if stream is None:
        stream = sys.stderr
    return hasattr(stream, "isatty") and stream.isatty()


class LogObjects:
    """Reusable objects for loggers."""

    handlers: list[logging.Handler] = []


class ScreenLogFormatter(logging.Formatter):
    """A formatter adding colors based on the record level."""

    def __init__(self) -> None:
        super().__init__()
        log_format = r"%(name)12s - %(message)s // %(filename)s:%(lineno)d" if is_debug() else r"%(message)s"
        use_colors = should_colorize()
        self._formatters: dict[int, logging.Formatter] = {}
        for level in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL):
            codes = LEVEL_STYLES.get(level)
            if use_colors and codes:
                self._formatters[level] = logging.Formatter(f"{_ESC}{codes}m{log_format}{RESET}")
            else:
                self._formatters[level] = logging.Formatter(log_format)

    def format(self, record: logging.LogRecord) -> str:
        return self._formatters.get(record.levelno, self._formatters[logging.INFO]).format(record)


def init_logger(filename: str | None = None, force_debug: bool = False) -> None:
    """Initialize the logging system.

    Args:
        filename: Optional filename to log to
        force_debug: If True, force debug level
    """
    if force_debug:
        set_debug(True)

    LogObjects.handlers.clear()
    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(logging.Formatter(fmt=r"%(asctime)s [%(levelname)s] %(name)s :: %(message)s :: %(filename)s:%(lineno)d"))
        LogObjects.handlers.append(file_handler)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(ScreenLogFormatter())
    LogObjects.handlers.append(stream_handler)


def get_logger(name: str = "hyprdock", level: int | None = None) -> logging.Logger:
    """Return a named logger.

    Args:
        name (str): logger's name
        level (int): logger's level (auto if not set)

    Returns:
        The logger instance
    """
    logger = logging.getLogger(name)
    if level is None:
        logger.setLevel(logging.DEBUG if is_debug() else logging.WARNING)
    else:
        logger.setLevel(level)
    logger.propagate = False
    for handler in LogObjects.handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.debug('Logger "%s" initialized', name)
    return logger
