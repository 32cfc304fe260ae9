from __future__ import annotations

"""
Logging Output Handlers.

Builds the stderr and rotating-file outputs fed by the queue listener. Every
handler built here is marked, so reconfiguration removes only handlers this
package installed and leaves those of test harnesses or host programs alone.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from ponderfs.infra.logging.config import (
    CONSOLE_FORMAT,
    FILE_DATE_FORMAT,
    FILE_FORMAT,
    LOG_FILE_BACKUPS,
    LOG_FILE_MAX_BYTES,
)

_HANDLER_TAG_ATTR: str = "_ponderfs_handler"


def mark_managed(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def is_managed(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def build_console_handler(level: int) -> logging.Handler:
    """Stream records to stderr in the short console format."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return mark_managed(handler)


def build_file_handler(
        log_file: str,
        level: int,
        max_bytes: int = LOG_FILE_MAX_BYTES,
        backups: int = LOG_FILE_BACKUPS,
) -> Optional[logging.Handler]:
    """
    Append records to a size-rotated UTF-8 log file.

    The parent directory is created on demand. When the file cannot be
    opened a warning goes to stderr and None is returned, so a bad
    --log-file never stops a command.
    """
    try:
        parent = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(parent, exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backups,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"ponderfs: WARNING: cannot open log file '{log_file}': {e}\n")
        return None

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
    return mark_managed(handler)
