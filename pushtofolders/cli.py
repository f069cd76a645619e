"""
Command-line interface for pushtofolders.
"""

import sys
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from .config import Config
from .constants import (CLEAR_LOG_FLAGS, HELP_FLAGS, PROGRAM, SHOW_LOG_FLAGS, VERSION_FLAGS,
                        get_console, get_error_console)
from .core import FolderPusher
from .runlog import RunLogger
from .utils import normalize_arguments


def print_usage(log_path: Path, console: Console) -> None:
    """Display usage text including where the log file lives."""
    console.print("PushToFolders - Organise images into same-named folders\n")
    console.print("Usage:")
    console.print(f"  {PROGRAM} \"C:/path/to/folder\"  (command line folder mode)")
    console.print(f"  {PROGRAM} <image1> <image2> ...     (Explorer selection mode)")
    console.print(f"  {PROGRAM} --show-log               (display error log)")
    console.print(f"  {PROGRAM} --clear-log              (clear error log)")
    console.print()
    console.print(f"Log file: {escape(str(log_path))}")


def show_log(run_logger: RunLogger, console: Console, error_console: Console) -> int:
    """Print the log file. An existing empty log still counts as shown."""
    contents = run_logger.read()
    if contents is None:
        error_console.print(f"[red]No log file found at {escape(str(run_logger.path))}[/red]")
        return 1

    console.print(f"Log file: {escape(str(run_logger.path))}")
    console.out(contents, end="", highlight=False)
    return 0


def clear_log(run_logger: RunLogger, console: Console, error_console: Console) -> int:
    """Truncate the log file."""
    if run_logger.clear():
        console.print(f"[green]Log file cleared: {escape(str(run_logger.path))}[/green]")
        return 0

    error_console.print(f"[red]Unable to clear log file at {escape(str(run_logger.path))}[/red]")
    return 1


def main(argv: Optional[Sequence[str]] = None, log_path: Optional[Path] = None) -> int:
    """Main entry point.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])
        log_path: Optional log file location (for testing)
    """
    args: List[str] = normalize_arguments(sys.argv[1:] if argv is None else argv)

    config = Config(log_path=log_path)
    run_logger = RunLogger(config.log_path)
    console = get_console()
    error_console = get_error_console()

    if not args:
        print_usage(run_logger.path, console)
        return 1

    if len(args) == 1:
        flag = args[0]
        if flag in SHOW_LOG_FLAGS:
            return show_log(run_logger, console, error_console)
        if flag in CLEAR_LOG_FLAGS:
            return clear_log(run_logger, console, error_console)
        if flag in HELP_FLAGS:
            print_usage(run_logger.path, console)
            return 0
        if flag in VERSION_FLAGS:
            from . import __version__
            console.print(__version__)
            return 0

    pusher = FolderPusher(run_logger)
    log_hint = escape(str(run_logger.path))

    try:
        if len(args) == 1 and pusher.file_ops.is_dir(args[0]):
            success = pusher.process_directory(Path(args[0]))
            console.print("Finished processing folder.")
            console.print(f"Check the log for any errors: {log_hint}")
        else:
            # Not a single directory: every argument is a file
            success = pusher.process_files(Path(arg) for arg in args)
            console.print(f"Finished processing files. Check the log for any errors: {log_hint}")
    except KeyboardInterrupt:
        error_console.print("\n[red]Operation cancelled by user[/red]")
        return 1

    stats = pusher.stats_manager
    style = "yellow" if stats.has_errors() else "green"
    console.print(f"[{style}]{stats.summary()}[/{style}]")
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
