"""Structured Logging — JSON or text output for the API process.

Invariants:
    - Every JSON line has timestamp (record creation time, UTC), level, logger, message
    - Record extras named in HERO_LOG_FIELDS are copied through when set
    - setup_logging() replaces the handler it installed earlier instead of stacking another
"""

import json
import logging
from datetime import datetime, timezone

# Extras passed via logger.*(..., extra={...}) by services and error handlers
HERO_LOG_FIELDS = ("hero_id", "alias", "operation", "error_code", "path")

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: getattr(record, key)
            for key in HERO_LOG_FIELDS
            if getattr(record, key, None) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(
    level: str = "INFO", fmt: str = "json", sql_echo: bool = False,
) -> None:
    """Install the root handler. Safe to call more than once."""
    handler = logging.StreamHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT),
    )
    handler._superheroes_handler = True

    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, "_superheroes_handler", False):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # SQL statements only when explicitly requested
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if sql_echo else logging.WARNING,
    )
