from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.core.config import Settings, load_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "APP_TABLE_NAME",
        "APP_AWS_REGION",
        "APP_LOG_LEVEL",
        "APP_ENV",
        "APP_DYNAMODB_ENDPOINT_URL",
    ):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.table_name == "StudentGrades"
    assert settings.aws_region == "us-east-1"
    assert settings.dynamodb_endpoint_url is None
    assert settings.log_level == "INFO"
    assert not settings.is_production


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_TABLE_NAME", "OtherGrades")
    monkeypatch.setenv("APP_LOG_LEVEL", "debug")
    monkeypatch.setenv("APP_ENV", "production")
    settings = load_settings()
    assert settings.table_name == "OtherGrades"
    assert settings.log_level == "DEBUG"
    assert settings.is_production


def test_rejects_unknown_log_level() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="LOUD")
