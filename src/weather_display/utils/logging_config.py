"""Console logging setup with colored level names."""
from __future__ import annotations
import logging
import os
import sys
from typing import Optional, TextIO, Union


def supports_ansi(stream: Optional[TextIO] = None) -> bool:
    """Detect whether ``stream`` can render ANSI escape codes.

    ``NO_COLOR`` (https://no-color.org/) always wins over ``FORCE_COLOR``.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    stream = stream if stream is not None else sys.stderr
    if not hasattr(stream, "isatty") or not stream.isatty():
        return False
    if sys.platform == "win32":
        return bool(
            os.environ.get("WT_SESSION")  # Windows Terminal
            or os.environ.get("ANSICON")
            or os.environ.get("ConEmuANSI") == "ON"
            or "TERM" in os.environ  # Git Bash, Cygwin
        )
    return True


class LogColors:
    """ANSI color codes used by :class:`ColoredFormatter`."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DEBUG = "\033[36m"     # Cyan
    INFO = "\033[32m"      # Green
    WARNING = "\033[33m"   # Yellow
    ERROR = "\033[31m"     # Red
    CRITICAL = "\033[35m"  # Magenta
    MODULE = "\033[94m"    # Blue


_LEVEL_COLORS = {
    "DEBUG": LogColors.DEBUG,
    "INFO": LogColors.INFO,
    "WARNING": LogColors.WARNING,
    "ERROR": LogColors.ERROR,
    "CRITICAL": LogColors.CRITICAL,
}


class ColoredFormatter(logging.Formatter):
    """Formats records as ``[LEVEL] logger.name - message``."""

    def __init__(self, use_color: bool = True) -> None:
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if not self.use_color:
            formatted = f"[{record.levelname}] {record.name} - {message}"
        else:
            level_color = _LEVEL_COLORS.get(record.levelname, LogColors.RESET)
            formatted = (
                f"{level_color}{LogColors.BOLD}[{record.levelname}]{LogColors.RESET} "
                f"{LogColors.MODULE}{record.name}{LogColors.RESET} - {message}"
            )
        if record.exc_text:
            formatted = f"{formatted}\n{record.exc_text}"
        return formatted


def configure_logging(level: Union[int, str] = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Configure root logging for the command line.

    Args:
        level: Logging level as a number or name (default: INFO).
        stream: Output stream (default: stderr, keeping stdout for the
            rendered weather).

    Example:
        >>> from weather_display.utils.logging_config import configure_logging
        >>> configure_logging("DEBUG")
    """
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")
    stream = stream if stream is not None else sys.stderr

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()
    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter(use_color=supports_ansi(stream)))
    root_logger.addHandler(console_handler)
    # Connection pool chatter is only useful when debugging
    logging.getLogger("urllib3").setLevel(max(level, logging.WARNING))


__all__ = ["LogColors", "ColoredFormatter", "supports_ansi", "configure_logging"]
