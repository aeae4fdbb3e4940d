"""
Logging configuration for the EOS disk image utilities.

Provides configurable logging with support for verbose and quiet modes.
"""

import logging
import os
import sys
from typing import TextIO

# Log levels for the application
QUIET = logging.WARNING
NORMAL = logging.INFO
VERBOSE = logging.DEBUG

# Package logger; modules log through children of it
logger = logging.getLogger('eos_image_util')


class ColorFormatter(logging.Formatter):
    """
    Formatter that colours the level on terminals.

    Falls back to plain text when stderr is not a TTY.
    """

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m',
    }

    def __init__(self, fmt: str | None = None, use_colors: bool = True, stream: TextIO | None = None):
        super().__init__(fmt)
        self.use_colors = use_colors and self._supports_color(stream or sys.stderr)

    @staticmethod
    def _supports_color(stream: TextIO) -> bool:
        """Check if the stream is a colour-capable terminal."""
        if 'NO_COLOR' in os.environ:
            return False
        return hasattr(stream, 'isatty') and stream.isatty()

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)

        if self.use_colors and record.levelname in self.COLORS:
            return f"{self.COLORS[record.levelname]}{message}{self.COLORS['RESET']}"

        return message


def setup_logging(
    level: int = NORMAL,
    stream: TextIO | None = None,
    use_colors: bool = True,
    format_string: str | None = None
) -> None:
    """
    Configure logging for the application.

    Args:
        level: Logging level (QUIET, NORMAL, or VERBOSE)
        stream: Output stream (defaults to stderr)
        use_colors: Whether to use colored output
        format_string: Custom format string (optional)
    """
    if stream is None:
        stream = sys.stderr

    if format_string is None:
        if level <= logging.DEBUG:
            format_string = '%(levelname)s: %(name)s: %(message)s'
        else:
            format_string = '%(message)s'

    logger.handlers.clear()

    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColorFormatter(format_string, use_colors, stream))

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (optional, uses package logger if not specified)

    Returns:
        Logger instance
    """
    if name is None:
        return logger
    return logger.getChild(name)
