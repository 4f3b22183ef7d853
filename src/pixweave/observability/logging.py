"""JSON logging for combine runs, with per-run context binding."""

from __future__ import annotations

from datetime import datetime, timezone
import json
import logging
from typing import Any, MutableMapping


# Attribute names every LogRecord carries; anything else came in through `extra`.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

LoggerLike = logging.Logger | logging.LoggerAdapter


class _JsonFormatter(logging.Formatter):
    """Emit one JSON object per record: timestamp, level, logger, event fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, sort_keys=True, default=str)


class RunLogger(logging.LoggerAdapter):
    """Adapter that stamps bound context (e.g. ``run_id``) onto every record."""

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**(self.extra or {}), **kwargs.get("extra", {})}
        return msg, kwargs


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Install the JSON handler on the ``pixweave`` logger and set its level."""

    logger = logging.getLogger("pixweave")
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def get_logger(name: str = "pixweave") -> logging.Logger:
    return logging.getLogger(name)


def bind_logger(logger: logging.Logger, **context: Any) -> RunLogger:
    """Return ``logger`` with ``context`` attached to each event it emits."""

    return RunLogger(logger, context)


def log_event(
    logger: LoggerLike,
    event: str,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    logger.log(level, event, extra={"event": event, **fields})
