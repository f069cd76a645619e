"""
Configuration management for pushtofolders.

There is no configuration file; settings come from the environment.
"""

import os
import tempfile
from pathlib import Path
from typing import Mapping, Optional

from .constants import LOG_DIR_ENV, LOG_DIR_NAME, LOG_FILE_NAME


class Config:
    """Resolves runtime settings, chiefly where the run log lives."""

    def __init__(self, log_path: Optional[Path] = None,
                 environ: Optional[Mapping[str, str]] = None,
                 windows: Optional[bool] = None):
        self.environ = os.environ if environ is None else environ
        self.windows = os.name == "nt" if windows is None else windows
        if log_path:
            self.log_path = Path(log_path)
        else:
            self.log_path = self._detect_log_path()

    def _env_path(self, name: str) -> Optional[Path]:
        value = self.environ.get(name)
        return Path(value) if value else None

    def _detect_log_path(self) -> Path:
        """Pick a per-user writable location for the log file."""
        override = self._env_path(LOG_DIR_ENV)
        if override:
            return override / LOG_FILE_NAME

        if self.windows:
            local_app_data = self._env_path("LOCALAPPDATA")
            if local_app_data:
                candidate = local_app_data / LOG_DIR_NAME
                try:
                    candidate.mkdir(parents=True, exist_ok=True)
                except OSError:
                    # The logger reports the unusable path when it opens the file
                    pass
                return candidate / LOG_FILE_NAME

            user_profile = self._env_path("USERPROFILE")
            if user_profile:
                return user_profile / LOG_FILE_NAME

        try:
            return Path(tempfile.gettempdir()) / LOG_FILE_NAME
        except FileNotFoundError:
            return Path(LOG_FILE_NAME)
