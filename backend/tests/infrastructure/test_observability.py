"""Structured Logging — JSON formatter fields and idempotent setup."""

import json
import logging

from app.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.services", logging.INFO, __file__, 1, "Superhero created", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "app.services"
    assert log["message"] == "Superhero created"
    assert "timestamp" in log


def test_json_formatter_extra_fields():
    log = json.loads(JSONFormatter().format(
        _record(hero_id=7, alias="SUPERMAN", operation="create", unrelated="x"),
    ))
    assert log["hero_id"] == 7
    assert log["alias"] == "SUPERMAN"
    assert log["operation"] == "create"
    assert "unrelated" not in log


def test_setup_logging_replaces_own_handler():
    before = list(logging.root.handlers)
    level = logging.root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("WARNING", "text")
        ours = [
            h for h in logging.root.handlers
            if getattr(h, "_superheroes_handler", False)
        ]
        assert len(ours) == 1
        assert not isinstance(ours[0].formatter, JSONFormatter)
        assert logging.root.level == logging.WARNING
    finally:
        for h in list(logging.root.handlers):
            if h not in before:
                logging.root.removeHandler(h)
        logging.root.setLevel(level)


def test_sql_logging_follows_echo_flag():
    sql_logger = logging.getLogger("sqlalchemy.engine")
    before = list(logging.root.handlers)
    level = logging.root.level
    try:
        setup_logging("INFO", "text", sql_echo=True)
        assert sql_logger.level == logging.INFO
        setup_logging("INFO", "text")
        assert sql_logger.level == logging.WARNING
    finally:
        for h in list(logging.root.handlers):
            if h not in before:
                logging.root.removeHandler(h)
        logging.root.setLevel(level)
