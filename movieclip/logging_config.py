"""Logging configuration with JSON formatting for production."""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any


class JSONFormatter(logging.Formatter):
    """Format log records as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Extra fields passed via logger.x(..., extra={...})
        for key in ("timeline", "frame"):
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        return json.dumps(log_data)


class FrameFormatter(logging.Formatter):
    """Human-readable format that tags timeline records with their playhead position."""

    def formatMessage(self, record: logging.LogRecord) -> str:
        message = super().formatMessage(record)
        frame = getattr(record, "frame", None)
        if frame is None:
            return message
        timeline = getattr(record, "timeline", "") or "-"
        return f"{message} @ {timeline}:{frame}"


def configure_logging(level: str | None = None) -> None:
    """Configure logging based on environment.

    In production: structured JSON logs to stdout
    In development: human-readable logs to stdout

    The level comes from ``level``, then ``MOVIECLIP_LOG_LEVEL``, then INFO.
    """
    env = os.environ.get("MOVIECLIP_ENV", "development").lower()
    is_production = env in ("production", "prod", "staging")

    level_name = (level or os.environ.get("MOVIECLIP_LOG_LEVEL", "INFO")).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if is_production:
        formatter = JSONFormatter()
    else:
        formatter = FrameFormatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
