"""Logging configuration for siewriter.

Everything goes to stderr; ``siewriter convert`` writes the SIE document
itself to stdout when no output file is given.
"""

import json
import logging
import sys
from datetime import datetime, timezone

STANDARD_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def _make_formatter(format_type: str) -> logging.Formatter:
    if format_type == "json":
        return JsonFormatter()
    return logging.Formatter(fmt=STANDARD_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(level: str = "WARNING", format_type: str = "standard") -> None:
    """Install a single stderr handler on the root logger.

    Args:
        level: Level name; unknown names fall back to WARNING
        format_type: "standard" or "json"
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_make_formatter(format_type))

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    logging.getLogger("siewriter").setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a siewriter module."""
    return logging.getLogger(name)
