"""
pytest configuration and fixtures for pushtofolders tests.
"""

import io
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List

import pytest


@dataclass
class CliResult:
    """Result from running CLI command."""
    exit_code: int
    output: str
    error: str


def _detach_log_handlers():
    from pushtofolders.constants import get_logger
    from pushtofolders.runlog import RunLogHandler

    logger = get_logger()
    for handler in list(logger.handlers):
        if isinstance(handler, RunLogHandler):
            logger.removeHandler(handler)
            handler.close()


@pytest.fixture
def log_path(tmp_path):
    """Isolated location for the run log."""
    log_dir = tmp_path / "logs"
    log_dir.mkdir()
    return log_dir / "PushToFolders.log"


@pytest.fixture
def run_logger(log_path):
    """RunLogger writing to the test log path, closed after the test."""
    from pushtofolders.runlog import RunLogger

    logger = RunLogger(log_path)
    yield logger
    logger.close()


@pytest.fixture
def pusher(run_logger):
    """FolderPusher wired to the test run logger."""
    from pushtofolders.core import FolderPusher

    return FolderPusher(run_logger)


@pytest.fixture
def cli_runner(log_path):
    """Create a CLI runner that captures output and uses the test log."""

    def run_cli(*args, log_file=None):
        """Run pushtofolders CLI with given arguments.

        Args:
            *args: Command line arguments (paths, --flags)
            log_file: Optional log path overriding the test default

        Returns:
            CliResult with exit_code, output, and error
        """
        from pushtofolders.cli import main

        # Capture stdout/stderr
        old_stdout = sys.stdout
        old_stderr = sys.stderr
        stdout = io.StringIO()
        stderr = io.StringIO()

        try:
            sys.stdout = stdout
            sys.stderr = stderr

            exit_code = main([str(a) for a in args], log_path=log_file or log_path)

            return CliResult(
                exit_code=exit_code,
                output=stdout.getvalue(),
                error=stderr.getvalue()
            )
        finally:
            sys.stdout = old_stdout
            sys.stderr = old_stderr
            _detach_log_handlers()

    return run_cli


@pytest.fixture
def create_test_files(tmp_path):
    """Helper to create test files in a scratch directory."""

    def create_files(names: List[str], content: bytes = b"test file content") -> Path:
        """Create files by name (subdirectories allowed) and return their directory."""
        test_dir = tmp_path / "test_files"
        test_dir.mkdir(exist_ok=True)

        for name in names:
            file_path = test_dir / name
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_bytes(content)

        return test_dir

    return create_files


@pytest.fixture
def read_log(log_path):
    """Return the current log contents (empty string if missing)."""

    def read() -> str:
        if not log_path.exists():
            return ""
        return log_path.read_text(encoding="utf-8")

    return read
