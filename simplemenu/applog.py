"""Optional dated log file kept in the launcher's home directory."""

from __future__ import annotations

import os
import time
from datetime import date
from pathlib import Path
from typing import TextIO


def default_log_directory() -> Path:
    """The directory logs go to: ``$HOME/.simplemenu``."""
    home = os.environ.get("HOME")
    return (Path(home) if home else Path.home()) / ".simplemenu"


class LaunchLog:
    """Appends tagged lines to a log file named after today's date."""

    def __init__(self, directory: str | os.PathLike | None = None, enabled: bool = False):
        self.directory = Path(directory) if directory is not None else default_log_directory()
        self.enabled = enabled
        self._file: TextIO | None = None

    @property
    def path(self) -> Path:
        today = date.today()
        return self.directory / f"{today.year}-{today.month:02d}-{today.day:02d}.log"

    def enable(self) -> None:
        self.enabled = True

    def log(self, tag: str, message: str) -> None:
        """Write one line when logging is enabled; opens the file on first use."""
        if not self.enabled:
            return
        if self._file is None:
            self._file = open(self.path, "a", encoding="utf-8")
        self._file.write(f"{time.ctime()} | {tag:<5} | {message}\n")
        self._file.flush()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None