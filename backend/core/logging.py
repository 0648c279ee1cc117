"""core/logging.py — Structured JSON logging with optional rotating file output.

Call configure_logging() once at application startup (lifespan in api/main.py)
or at the top of a command-line entry point. After that, use the standard
logging.getLogger(__name__) throughout the app.

Output:
  - Console — JSON lines to stdout (the CLI passes stream=sys.stderr so logs
              never mix with command output)
  - File    — JSON lines, rotated at 10 MB, 5 backups kept.
              Only when a log file is configured (LOG_FILE).
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from typing import TextIO

from pythonjsonlogger.json import JsonFormatter


_MAX_BYTES = 10 * 1024 * 1024   # 10 MB per file
_BACKUP_COUNT = 5                # keep 5 rotated files
_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(
    log_level: str = "DEBUG",
    log_file: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure the root logger with a JSON console handler and, optionally,
    a rotating file handler.

    Args:
        log_level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
                   Passed from settings.log_level at startup.
        log_file:  Path of the rotating log file, or None for console only.
        stream:    Console stream; defaults to sys.stdout.
    """
    level = getattr(logging, log_level.upper(), logging.DEBUG)
    formatter = JsonFormatter(_FORMAT)

    # ── Console handler ────────────────────────────────────────────────────────
    console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(console_handler)

    # ── Rotating file handler ──────────────────────────────────────────────────
    if log_file:
        log_dir = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root.addHandler(file_handler)

    logging.getLogger(__name__).debug(
        "Logging configured",
        extra={
            "log_level": log_level,
            "log_file": os.path.abspath(log_file) if log_file else None,
        },
    )
