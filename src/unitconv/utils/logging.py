"""JSON Lines event log for conversion sessions.

Every record carries the event name (``session.start``, ``request.converted``,
``request.rejected``, ``session.end``), the trace id shared by one interactive
session and the request fields passed to :func:`log_event`.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, MutableMapping
from uuid import uuid4

__all__ = [
    "JsonLogFormatter",
    "configure_json_logger",
    "flush_handlers",
    "generate_trace_id",
    "log_event",
]

LOGGER_NAME = "unitconv"


class JsonLogFormatter(logging.Formatter):
    """Render one record per line: timestamp, level, event, trace id, request fields."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        payload: MutableMapping[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z"),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": message,
        }

        trace_id = getattr(record, "trace_id", None)
        if trace_id:
            payload["trace_id"] = trace_id

        payload["event"] = getattr(record, "event", None) or message

        extra_fields = getattr(record, "extra_fields", None)
        if isinstance(extra_fields, Mapping):
            payload.update(extra_fields)

        return json.dumps(payload, ensure_ascii=False)


def configure_json_logger(log_path: Path | None, level: int = logging.INFO) -> logging.Logger:
    """Configure the ``unitconv`` logger.

    Records go to ``log_path`` as JSON Lines. Without a path the logger gets a
    :class:`logging.NullHandler` so the console only shows conversion replies.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_path is not None:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(JsonLogFormatter())
    else:
        handler = logging.NullHandler()

    handler.setLevel(level)
    logger.addHandler(handler)
    return logger


def flush_handlers(logger: logging.Logger) -> None:
    """Flush pending records, called when the CLI context closes."""

    for handler in logger.handlers:
        handler.flush()


def generate_trace_id() -> str:
    return uuid4().hex


def log_event(
    logger: logging.Logger,
    event: str,
    *,
    trace_id: str | None = None,
    level: int = logging.INFO,
    message: str | None = None,
    **fields: Any,
) -> str:
    """Record ``event`` with ``fields`` and return the trace id used.

    Passing the session's ``trace_id`` ties every request of an interactive
    session to its ``session.start``/``session.end`` pair; without one a fresh
    id is generated.
    """

    event_trace_id = trace_id or generate_trace_id()
    extra = {
        "trace_id": event_trace_id,
        "event": event,
        "extra_fields": fields,
    }

    logger.log(level, message or event, extra=extra)
    return event_trace_id
