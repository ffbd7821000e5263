"""Centralized logging configuration for the MessageMedia client."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

from messagemedia_messages.config import Configuration


class JsonFormatter(logging.Formatter):
    """Structured JSON log lines for log aggregators."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


TEXT_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
TEXT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(configuration: Configuration | None = None) -> None:
    """Configure the root logger from MM_LOG_LEVEL / MM_LOG_FORMAT.

    Safe to call multiple times; reconfigures on each call.
    """
    configuration = configuration or Configuration()

    level = getattr(logging, configuration.log_level.upper(), logging.INFO)

    if configuration.log_format == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt=TEXT_DATEFMT)

    # Replace existing handlers on the root logger
    root = logging.getLogger()
    root.setLevel(level)
    for h in root.handlers[:]:
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    root.addHandler(handler)

    # Quiet transport loggers unless we're at DEBUG
    if level > logging.DEBUG:
        for name in ("httpx", "httpcore"):
            logging.getLogger(name).setLevel(logging.WARNING)
