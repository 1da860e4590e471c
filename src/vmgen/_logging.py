"""Logging setup for the vmgen command line."""

from __future__ import annotations

import logging
import sys
from typing import ClassVar


class PlainFormatter(logging.Formatter):
    """Formats records as ``[L YYYY-MM-DD HH:MM:SS.mmm module] message``."""

    LEVEL_CODES: ClassVar[dict[str, str]] = {
        "DEBUG": "D",
        "INFO": "I",
        "WARNING": "W",
        "ERROR": "E",
        "CRITICAL": "C",
    }

    def format(self, record: logging.LogRecord) -> str:
        message = f"{self.format_prefix(record)} {record.getMessage()}"
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return message

    def format_prefix(self, record: logging.LogRecord) -> str:
        level_code = self.LEVEL_CODES.get(record.levelname, record.levelname[0])
        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")
        return f"[{level_code} {timestamp}.{int(record.msecs):03d} {short_logger_name(record.name)}]"


class ColoredFormatter(PlainFormatter):
    """``PlainFormatter`` with the prefix colored by level."""

    COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET: ClassVar[str] = "\033[0m"

    def format_prefix(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        return f"{color}{super().format_prefix(record)}{self.RESET}"


def short_logger_name(name: str) -> str:
    """Drop the package prefix from vmgen logger names."""
    if name == "vmgen":
        return "VMGen"
    return name.removeprefix("vmgen.")


def setup_colored_logging(level: int = logging.INFO) -> None:
    """Send log records to stderr, colored when stderr is a terminal.

    Args:
        level: The logging level to use (e.g., logging.INFO, logging.DEBUG)
    """
    supports_color = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
    formatter = ColoredFormatter() if supports_color else PlainFormatter()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers[:] = [handler]
