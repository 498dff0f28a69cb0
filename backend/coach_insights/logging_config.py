import json
import logging
import os
from datetime import datetime, timezone
from logging.config import dictConfig
from typing import Any, Dict

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class JSONFormatter(logging.Formatter):
    """Render each record as a single JSON line.

    Selected by ``COACH_LOG_JSON=1``. Records logged by :mod:`coach_insights.telemetry`
    also carry their event name and payload as JSON fields next to the flattened
    ``TELEMETRY {...}`` message text.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        event = getattr(record, "telemetry_event", None)
        if event is not None:
            payload["event"] = event
            payload["payload"] = getattr(record, "telemetry_payload", {})
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging() -> None:
    """Configure logging from ``COACH_LOG_LEVEL``, ``COACH_LOG_JSON`` and ``COACH_DEBUG_HTTP``."""
    level = os.getenv("COACH_LOG_LEVEL", "INFO").upper()
    formatter = "json" if os.getenv("COACH_LOG_JSON", "0") == "1" else "default"

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": DEFAULT_LOG_FORMAT,
                },
                "json": {
                    "()": JSONFormatter,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": formatter,
                },
            },
            "root": {
                "handlers": ["default"],
                "level": level,
            },
        }
    )

    if os.getenv("COACH_DEBUG_HTTP", "0") == "1":
        logging.getLogger("uvicorn.access").setLevel(logging.DEBUG)
