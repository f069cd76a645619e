"""
Utility functions for pushtofolders.
"""

import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .constants import IMAGE_EXTENSIONS, LOG_TIME_FORMAT


def is_image_file(path: Union[str, Path]) -> bool:
    """Check whether the path has one of the supported image extensions."""
    return Path(path).suffix.lower() in IMAGE_EXTENSIONS


def timestamp_for_log(when: Optional[datetime] = None) -> str:
    """Format a local wall-clock timestamp at second precision."""
    return (when or datetime.now()).strftime(LOG_TIME_FORMAT)


def split_command_line(text: str) -> List[str]:
    """Split a string into arguments using the Windows command-line rules.

    Whitespace separates arguments outside of quotes. A run of 2n backslashes
    followed by a quote produces n backslashes and toggles quoting, while 2n+1
    backslashes followed by a quote produce n backslashes and a literal quote.
    Inside quotes, a doubled quote is a literal quote. Backslashes that are not
    followed by a quote are kept as-is.
    """
    args = []
    current = []
    in_quotes = False
    started = False
    backslashes = 0
    i = 0

    while i < len(text):
        char = text[i]
        if char == "\\":
            backslashes += 1
        elif char == '"':
            current.append("\\" * (backslashes // 2))
            if backslashes % 2:
                current.append('"')
            elif in_quotes and i + 1 < len(text) and text[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
            backslashes = 0
            started = True
        elif char in " \t" and not in_quotes:
            current.append("\\" * backslashes)
            backslashes = 0
            arg = "".join(current)
            if started or arg:
                args.append(arg)
            current = []
            started = False
        else:
            current.append("\\" * backslashes)
            current.append(char)
            backslashes = 0
            started = True
        i += 1

    current.append("\\" * backslashes)
    arg = "".join(current)
    if started or arg:
        args.append(arg)
    return args


def normalize_arguments(args: Sequence[str], windows: Optional[bool] = None) -> List[str]:
    """Re-split arguments that still carry quotes on Windows.

    Shell integrations on Windows can hand over a whole quoted selection as a
    single argument. Elsewhere the arguments pass through unchanged.
    """
    if windows is None:
        windows = os.name == "nt"
    if not windows:
        return list(args)

    normalized = []
    for arg in args:
        if '"' in arg:
            normalized.extend(split_command_line(arg))
        else:
            normalized.append(arg)
    return normalized
