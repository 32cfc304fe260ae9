from __future__ import annotations

"""
Logging Settings.

The CLI picks a verbosity and, optionally, a log file. Output formats and
rotation sizes are fixed for the package.
"""

import logging
from dataclasses import dataclass
from typing import Optional

CONSOLE_FORMAT = "ponderfs: %(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_MAX_BYTES = 1024 * 1024
LOG_FILE_BACKUPS = 2


@dataclass(frozen=True)
class LoggingConfig:
    """
    What the logging subsystem should emit and where.

    Attributes:
        level: Minimum numeric severity handed to the outputs.
        console: Write records to stderr.
        log_file: Also append records to this rotating file.
    """
    level: int = logging.WARNING
    console: bool = True
    log_file: Optional[str] = None

    @classmethod
    def for_cli(cls, debug: bool, log_file: Optional[str] = None) -> LoggingConfig:
        """Settings for a CLI run: warnings only unless --debug is given."""
        return cls(level=logging.DEBUG if debug else logging.WARNING, log_file=log_file)
