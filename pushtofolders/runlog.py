"""
Append-only run log for pushtofolders.

Every event is one line of the form::

    [2024-05-01 12:00:00] ERROR: File does not exist. | Target: /photos/a.jpg

Lines from one process are preceded by a ``--- Run started at ... ---``
marker, written just before the first entry of that process.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rich.markup import escape

from .constants import LOG_TIME_FORMAT, get_error_console, get_logger
from .utils import timestamp_for_log


class TargetFormatter(logging.Formatter):
    """Formatter that appends the ``| Target: <path>`` segment when given."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        target = getattr(record, "target", "")
        if target:
            line += f" | Target: {target}"
        return line


class RunLogHandler(logging.FileHandler):
    """UTF-8 append-mode file handler that marks the start of each run.

    Records are emitted under the handler lock, so lines from concurrent
    callers never interleave.
    """

    def __init__(self, log_path: Path):
        super().__init__(log_path, mode="a", encoding="utf-8", errors="backslashreplace")
        self.run_started = False
        self.setLevel(logging.INFO)
        self.setFormatter(TargetFormatter("[%(asctime)s] %(levelname)s: %(message)s",
                                          datefmt=LOG_TIME_FORMAT))

    def emit(self, record: logging.LogRecord) -> None:
        if self.stream is not None and not self.run_started:
            self.stream.write(f"--- Run started at {timestamp_for_log()} ---\n")
            self.run_started = True
        super().emit(record)

    def truncate(self) -> None:
        """Empty the log file while keeping the handle open."""
        self.acquire()
        try:
            self.stream.truncate(0)
        finally:
            self.release()


class RunLogger:
    """Writes INFO and ERROR events to the run log file.

    If the log file cannot be opened a warning is shown once and every later
    call is a no-op; logging never raises into the caller.
    """

    def __init__(self, log_path: Union[str, Path], logger: Optional[logging.Logger] = None):
        self.log_path = Path(log_path)
        self.logger = logger or get_logger()
        self.logger.setLevel(logging.INFO)
        self.logger.propagate = False

        # A fresh logger replaces the file handler of any earlier one
        for handler in list(self.logger.handlers):
            if isinstance(handler, RunLogHandler):
                self.logger.removeHandler(handler)
                handler.close()

        self.handler: Optional[RunLogHandler] = None
        try:
            self.handler = RunLogHandler(self.log_path)
        except OSError:
            get_error_console().print(
                f"[yellow]Warning: Unable to open log file at {escape(str(self.log_path))}[/yellow]"
            )
            return
        self.logger.addHandler(self.handler)

    @property
    def path(self) -> Path:
        return self.log_path

    @property
    def available(self) -> bool:
        """Check if log entries are actually being written."""
        return self.handler is not None

    def log_info(self, message: str) -> None:
        if self.handler is None:
            return
        self.logger.info(message)

    def log_error(self, target: Optional[Union[str, Path]], message: str) -> None:
        if self.handler is None:
            return
        self.logger.error(message, extra={"target": str(target) if target else ""})

    def read(self) -> Optional[str]:
        """Return the log contents, or None if the file is absent or unreadable."""
        if self.handler is not None:
            self.handler.flush()
        try:
            with open(self.log_path, "r", encoding="utf-8", errors="replace") as f:
                return f.read()
        except OSError:
            return None

    def clear(self) -> bool:
        """Truncate the log file. Return False if it cannot be opened."""
        try:
            if self.handler is not None:
                self.handler.truncate()
            else:
                with open(self.log_path, "w", encoding="utf-8"):
                    pass
            return True
        except OSError:
            return False

    def close(self) -> None:
        """Detach and close the file handler."""
        if self.handler is None:
            return
        self.logger.removeHandler(self.handler)
        self.handler.close()
        self.handler = None
