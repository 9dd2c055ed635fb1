"""Structured Logging — one JSON line per rejected or computed mixture.

Invariants:
    - Every line carries timestamp, level, logger name, and message
    - Only the mixture extras in _EXTRA_FIELDS are surfaced; other record
      attributes never reach the output
    - LOG_FORMAT=text switches to a plain line for local runs
    - setup_logging installs at most one handler, however often it is called

Design Decisions:
    - Fixed extras allow-list over serializing record.__dict__: the JSON keys
      stay stable for log queries on error_code and path
    - Own handler class marks what setup_logging owns; uvicorn and pytest
      handlers on the root logger are left alone across lifespan restarts
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = ("error_code", "path", "total_mass", "total_volume")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _FuelMixHandler(logging.StreamHandler):
    """Marker subclass so repeated setup replaces instead of stacking."""


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = _FuelMixHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if isinstance(existing, _FuelMixHandler):
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
