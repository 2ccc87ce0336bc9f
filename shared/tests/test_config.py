"""Tests for shared settings base and field helpers."""

from pydantic import ValidationError
import pytest

from shared.config import BaseSettings, database_url_field, llm_api_key_field


class ServiceSettings(BaseSettings):
    database_url: str = database_url_field()
    openai_api_key: str = llm_api_key_field("OPENAI_API_KEY")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DATABASE_URL", "OPENAI_API_KEY", "SERVICE_NAME", "LOG_FORMAT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite://")

    settings = ServiceSettings(_env_file=None)

    assert settings.service_name == "site-builder"
    assert settings.log_format == "console"
    assert settings.log_level == "INFO"
    assert settings.openai_api_key == ""


def test_database_url_required():
    with pytest.raises(ValidationError):
        ServiceSettings(_env_file=None)


def test_api_key_read_from_alias(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite://")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

    assert ServiceSettings(_env_file=None).openai_api_key == "sk-test"


def test_log_level_normalized(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite://")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert ServiceSettings(_env_file=None).log_level == "DEBUG"


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite://")
    monkeypatch.setenv("LOG_LEVEL", "LOUD")

    with pytest.raises(ValidationError):
        ServiceSettings(_env_file=None)
