"""
Program-wide constants, console and logger accessors for pushtofolders.
"""

import logging
from typing import Optional

from rich.console import Console

PROGRAM = "pushtofolders"
LOG_FILE_NAME = "PushToFolders.log"
LOG_DIR_NAME = "PushToFolders"
LOG_DIR_ENV = "PUSHTOFOLDERS_LOG_DIR"

# File extension constants
IMAGE_EXTENSIONS = frozenset((".jpg", ".jpeg", ".png", ".bmp", ".webp"))

# Command-line flags, including the Windows spellings used by shell integrations
SHOW_LOG_FLAGS = ("--show-log", "/showlog")
CLEAR_LOG_FLAGS = ("--clear-log", "/clearlog")
HELP_FLAGS = ("--help", "-h", "/?")
VERSION_FLAGS = ("--version", "-V")

LOG_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_console: Optional[Console] = None
_error_console: Optional[Console] = None


def get_logger() -> logging.Logger:
    """Return the program logger."""
    return logging.getLogger(PROGRAM)


def get_console() -> Console:
    """Return the shared stdout console."""
    global _console
    if _console is None:
        _console = Console(soft_wrap=True, emoji=False, highlight=False)
    return _console


def get_error_console() -> Console:
    """Return the shared console for the diagnostic stream."""
    global _error_console
    if _error_console is None:
        _error_console = Console(stderr=True, soft_wrap=True, emoji=False, highlight=False)
    return _error_console
