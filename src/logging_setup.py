"""JSON line logging for the scraper and API processes."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict

# `extra=` fields copied onto the JSON payload when a record carries them.
EXTRA_FIELDS = (
    "request_path",
    "method",
    "status_code",
    "latency_ms",
    "client",
    "source",
    "error",
    "records",
    "airports",
    "airlines",
    "errors",
)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for attr in EXTRA_FIELDS:
            value = getattr(record, attr, None)
            if value is not None:
                payload[attr] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(default_level: str | int = logging.INFO) -> None:
    """Install the JSON formatter on the root logger; safe to call repeatedly."""
    level = os.environ.get("LOG_LEVEL", default_level)
    root = logging.getLogger()
    root.setLevel(level)

    stream_handlers = [handler for handler in root.handlers if isinstance(handler, logging.StreamHandler)]
    if stream_handlers:
        for handler in stream_handlers:
            handler.setFormatter(JsonFormatter())
        return

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)
