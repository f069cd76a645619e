"""
pushtofolders - Move images into folders named after their file names.

Each supported image ``photo.jpg`` is moved into a sibling folder
``photo/photo.jpg``. Works on a whole folder or on an explicit selection of
files, and keeps an append-only log of what happened.
"""

__version__ = "1.0.0"


# Public API
from .cli import main
from .config import Config
from .core import FolderPusher
from .file_operations import ExtendedPathFileOperations, FileOperations
from .runlog import RunLogger
from .utils import is_image_file

__all__ = [ "main", "Config", "FolderPusher", "FileOperations", "ExtendedPathFileOperations",
            "RunLogger", "is_image_file" ]
