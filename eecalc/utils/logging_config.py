"""
eecalc logging configuration.

Logs go to stderr so that reports printed on stdout stay clean. Records can
carry run context through `extra=` (submission ID, design region, request
attempt, HTTP status), which both formatters append to the message.

Usage:
    from eecalc.utils.logging_config import get_logger

    logger = get_logger(__name__)
    logger.warning("Weather request failed", extra={"region": "Thames Valley"})
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union


# Read from the environment only; --log-level on the CLI overrides it
DEFAULT_LOG_LEVEL = os.environ.get("EECALC_LOG_LEVEL", "WARNING").upper()

CONTEXT_KEYS = ["submission_id", "region", "attempt", "status_code"]

# Marks handlers owned by setup_logging so repeated calls replace them
_HANDLER_TAG = "_eecalc"


def _context(record: logging.LogRecord) -> dict:
    return {key: getattr(record, key) for key in CONTEXT_KEYS if hasattr(record, key)}


class EecalcFormatter(logging.Formatter):
    """Console formatter: one line per record, colored by level on a TTY."""

    LEVEL_COLORS = {
        "DEBUG": "\033[2m",      # dim
        "WARNING": "\033[33m",   # yellow
        "ERROR": "\033[31m",     # red
        "CRITICAL": "\033[1;31m",
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True):
        super().__init__(fmt="%(levelname)s %(name)s: %(message)s")
        self.use_colors = use_colors and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context(record)
        if context:
            line += " [" + ", ".join(f"{k}={v}" for k, v in context.items()) + "]"

        color = self.LEVEL_COLORS.get(record.levelname) if self.use_colors else None
        return f"{color}{line}{self.RESET}" if color else line


class FileFormatter(logging.Formatter):
    """One JSON object per line, with UTC timestamps."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _level(name: str) -> int:
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else logging.WARNING


def setup_logging(
    level: str = DEFAULT_LOG_LEVEL,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """
    Configure the root logger.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL (unknown names mean WARNING)
        log_file: Also write every record, DEBUG included, to this file as JSON lines
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if log_file else _level(level))

    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root.removeHandler(handler)
            handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(EecalcFormatter())
    console.setLevel(_level(level))
    setattr(console, _HANDLER_TAG, True)
    root.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(FileFormatter())
        file_handler.setLevel(logging.DEBUG)
        setattr(file_handler, _HANDLER_TAG, True)
        root.addHandler(file_handler)

    # requests/urllib3 connection chatter
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def ensure_logging(level: Optional[str] = None, log_file: Optional[Union[str, Path]] = None) -> None:
    """Apply the CLI logging options, replacing any earlier eecalc handlers."""
    setup_logging(level or DEFAULT_LOG_LEVEL, log_file)
