"""
Core folder-pushing functionality.
"""

from pathlib import Path
from typing import Iterable, Optional, Union

from rich.markup import escape

from .constants import get_console, get_error_console
from .errors import (CreateFolderError, DestinationExistsError, FolderBlockedError,
                     MoveFailedError, NotAFileError, PushToFoldersError, ScanError,
                     SourceNotFoundError, os_error_reason)
from .file_operations import FileOperations, get_file_operations
from .runlog import RunLogger
from .stats import MoveStats
from .utils import is_image_file


class FolderPusher:
    """Moves image files into sibling folders named after their stems."""

    def __init__(self, run_logger: RunLogger, file_ops: Optional[FileOperations] = None,
                 stats_manager: Optional[MoveStats] = None):
        self.run_logger = run_logger
        self.file_ops = file_ops or get_file_operations()
        self.stats_manager = stats_manager or MoveStats()
        self.console = get_console()
        self.error_console = get_error_console()

    def _report(self, error: PushToFoldersError) -> None:
        """Record a hard error in the run log and on the diagnostic stream."""
        self.run_logger.log_error(error.target, error.message)
        self.error_console.print(f"[red]{escape(error.user_message)}[/red]")

    def ensure_directory(self, directory: Path) -> None:
        """Make sure the destination folder exists, creating parents if needed."""
        if self.file_ops.exists(directory):
            if not self.file_ops.is_dir(directory):
                raise FolderBlockedError(
                    "A non-directory with the desired folder name already exists.",
                    target=directory,
                    user_message=f"Cannot create folder '{directory}' because a file exists with that name."
                )
            return

        try:
            self.file_ops.make_dirs(directory)
        except OSError as e:
            reason = os_error_reason(e)
            raise CreateFolderError(
                f"Failed to create folder: {reason}", target=directory,
                user_message=f"Failed to create folder '{directory}': {reason}"
            ) from e

    def _move(self, file_path: Path) -> bool:
        """Move one file, raising on hard errors. Return False on a skip."""
        if not self.file_ops.exists(file_path):
            raise SourceNotFoundError("File does not exist.", target=file_path,
                                      user_message=f"File not found: {file_path}")

        if not self.file_ops.is_file(file_path):
            raise NotAFileError("Path is not a regular file.", target=file_path,
                                user_message=f"Not a file: {file_path}")

        if not is_image_file(file_path):
            self.run_logger.log_info(f"Skipping non-image file: {file_path}")
            return False

        dest_folder = file_path.parent / file_path.stem
        self.ensure_directory(dest_folder)

        dest_file = dest_folder / file_path.name
        if self.file_ops.exists(dest_file):
            raise DestinationExistsError("Destination file already exists.", target=dest_file,
                                         user_message=f"Destination already exists: {dest_file}")

        try:
            self.file_ops.rename(file_path, dest_file)
        except OSError as e:
            message = f"Failed to move file: {os_error_reason(e)}"
            raise MoveFailedError(message, target=dest_file,
                                  user_message=f"Failed to move '{file_path}': {message}") from e

        self.run_logger.log_info(f"Moved {file_path} to {dest_folder}")
        self.console.print(f"Moved '{escape(file_path.name)}' into '{escape(dest_folder.name)}'")
        return True

    def move_file_to_folder(self, file_path: Union[str, Path]) -> bool:
        """Move a file into a sibling folder named after its stem.

        Returns True only when the file was actually moved. Non-image files
        are skipped with an INFO entry; every other refusal is logged as an
        ERROR and reported on the diagnostic stream.
        """
        file_path = Path(file_path)
        try:
            moved = self._move(file_path)
        except PushToFoldersError as e:
            self._report(e)
            self.stats_manager.increment_failed()
            return False

        if moved:
            self.stats_manager.increment_moved()
        else:
            self.stats_manager.increment_skipped()
        return moved

    def process_directory(self, directory: Union[str, Path]) -> bool:
        """Move every image directly inside a directory. No recursion."""
        directory = Path(directory)
        if not self.file_ops.is_dir(directory):
            self._report(PushToFoldersError("The supplied path is not a directory.", target=directory,
                                            user_message=f"The path is not a folder: {directory}"))
            return False

        any_moved = False
        entries = self.file_ops.iter_files(directory)
        while True:
            try:
                file_path = next(entries, None)
            except OSError as e:
                reason = os_error_reason(e)
                self._report(ScanError(f"Failed to scan directory: {reason}", target=directory,
                                       user_message=f"Failed to scan directory '{directory}': {reason}"))
                return False
            if file_path is None:
                break

            if is_image_file(file_path) and self.move_file_to_folder(file_path):
                any_moved = True

        if not any_moved:
            self.console.print(f"No image files found in {escape(str(directory))}")
        return any_moved

    def process_files(self, files: Iterable[Union[str, Path]]) -> bool:
        """Move each listed file in order, carrying on past failures."""
        any_moved = False
        for file_path in files:
            if self.move_file_to_folder(file_path):
                any_moved = True

        if not any_moved:
            self.console.print("No image files were processed.")
        return any_moved
