"""
Filesystem primitives used to push files into folders.

``FileOperations`` works on paths as given. ``ExtendedPathFileOperations``
hands every path to the OS in Windows extended-length form so that long paths
keep working; it is selected automatically on Windows.
"""

import ntpath
import os
from pathlib import Path
from typing import Iterator, Union

PathLike = Union[str, Path]

EXTENDED_PREFIX = "\\\\?\\"
EXTENDED_UNC_PREFIX = "\\\\?\\UNC\\"


def to_extended_path(path: PathLike) -> str:
    """Convert a Windows path to its extended-length (``\\\\?\\``) form."""
    native = str(path)
    if native.startswith(EXTENDED_PREFIX):
        return native

    if not ntpath.isabs(native):
        native = ntpath.join(os.getcwd(), native)
    native = ntpath.normpath(native)

    if native.startswith("\\\\"):
        return EXTENDED_UNC_PREFIX + native[2:]
    return EXTENDED_PREFIX + native


class FileOperations:
    """Thin wrapper over the filesystem calls the mover relies on."""

    def native(self, path: PathLike) -> str:
        """Return the path in the form passed to the OS."""
        return str(path)

    def exists(self, path: PathLike) -> bool:
        return os.path.exists(self.native(path))

    def is_file(self, path: PathLike) -> bool:
        return os.path.isfile(self.native(path))

    def is_dir(self, path: PathLike) -> bool:
        return os.path.isdir(self.native(path))

    def make_dirs(self, directory: PathLike) -> None:
        """Create directory and parents if needed."""
        os.makedirs(self.native(directory), exist_ok=True)

    def rename(self, source: PathLike, dest: PathLike) -> None:
        """Rename source to dest on the same filesystem; no copy fallback."""
        os.rename(self.native(source), self.native(dest))

    def iter_files(self, directory: PathLike) -> Iterator[Path]:
        """Yield the immediate regular files of a directory.

        Symlinks are followed. OSErrors from the scan propagate.
        """
        with os.scandir(self.native(directory)) as entries:
            for entry in entries:
                if entry.is_file():
                    yield Path(directory) / entry.name


class ExtendedPathFileOperations(FileOperations):
    """File operations that address the OS with extended-length paths."""

    def native(self, path: PathLike) -> str:
        return to_extended_path(path)


def get_file_operations() -> FileOperations:
    """Select the file operations variant for the running platform."""
    if os.name == "nt":
        return ExtendedPathFileOperations()
    return FileOperations()
