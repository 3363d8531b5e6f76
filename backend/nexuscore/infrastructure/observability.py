"""Structured Logging: one JSON line per record, tagged with the service name.

Invariants:
    - Every line has timestamp, level, service, logger, message
    - Video and request fields (video_id, error_code, path, method, operation)
      are copied from `extra` only when set
    - setup_logging() installs at most one handler on the root logger, however
      often the lifespan runs; later calls only swap its formatter and level
    - pymongo's driver loggers stay at WARNING unless the app level is DEBUG
"""

import logging
import json
from datetime import datetime, timezone

SERVICE_NAME = "nexuscore-api"
HANDLER_NAME = "nexuscore"
EXTRA_FIELDS = ("video_id", "error_code", "path", "method", "operation")
DRIVER_LOGGERS = ("pymongo", "pymongo.command", "pymongo.connection", "pymongo.serverSelection")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "service": SERVICE_NAME,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(_extra_fields(record))
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def _extra_fields(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key] for key in EXTRA_FIELDS
        if record.__dict__.get(key) is not None
    }


def build_formatter(fmt: str) -> logging.Formatter:
    return JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure the root logger; safe to call on every app start."""
    handler = next(
        (h for h in logging.root.handlers if h.get_name() == HANDLER_NAME), None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        logging.root.addHandler(handler)
    handler.setFormatter(build_formatter(fmt))

    root_level = getattr(logging, level.upper(), logging.INFO)
    logging.root.setLevel(root_level)
    driver_level = logging.DEBUG if root_level <= logging.DEBUG else logging.WARNING
    for name in DRIVER_LOGGERS:
        logging.getLogger(name).setLevel(driver_level)
    return handler
