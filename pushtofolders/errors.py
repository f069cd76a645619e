"""
Error types raised while pushing files into folders.
"""

from pathlib import Path
from typing import Optional


class PushToFoldersError(Exception):
    """Base error for the project.

    ``message`` is the text written to the run log, ``target`` the path it
    concerns and ``user_message`` the line shown on the diagnostic stream.
    """

    def __init__(self, message: str, target: Optional[Path] = None,
                 user_message: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.target = target
        self.user_message = user_message or message


class SourceNotFoundError(PushToFoldersError):
    pass


class NotAFileError(PushToFoldersError):
    pass


class FolderBlockedError(PushToFoldersError):
    """Something other than a directory already uses the folder name."""


class DestinationExistsError(PushToFoldersError):
    pass


class CreateFolderError(PushToFoldersError):
    pass


class MoveFailedError(PushToFoldersError):
    pass


class ScanError(PushToFoldersError):
    pass


def os_error_reason(error: OSError) -> str:
    """Return the platform-reported reason for an OSError."""
    return error.strerror or str(error)
