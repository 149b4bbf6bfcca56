"""JSON log formatter and settings parsing."""

import json
import logging

from ecoaware.config import Settings
from ecoaware.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "ecoaware.test", logging.WARNING, __file__, 1, "something %s", ("happened",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "ecoaware.test"
    assert log["message"] == "something happened"
    assert "timestamp" in log
    assert "user_id" not in log


def test_json_formatter_surfaces_extra_fields():
    log = json.loads(JSONFormatter().format(
        _record(user_id="u-1", error_code="FORBIDDEN", unrelated="x"),
    ))
    assert log["user_id"] == "u-1"
    assert log["error_code"] == "FORBIDDEN"
    assert "unrelated" not in log


def test_settings_convert_postgres_url():
    settings = Settings(database_url="postgresql://u:p@host:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_settings_keep_other_urls():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"
