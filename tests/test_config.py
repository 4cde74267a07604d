"""Tests for settings and database URL handling."""

import pytest

from teleprompter.config import Settings
from teleprompter.database import normalize_database_url


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("TELEPROMPTER_QUEUE_BACKEND", "redis")
    monkeypatch.setenv("TELEPROMPTER_DEFAULT_NAMESPACE", "prompts")
    monkeypatch.setenv("TELEPROMPTER_CORS_ORIGINS", "http://a.test, http://b.test")

    settings = Settings()

    assert settings.queue_backend == "redis"
    assert settings.default_namespace == "prompts"
    assert settings.cors_origin_list == ["http://a.test", "http://b.test"]


@pytest.mark.parametrize(
    "url, expected",
    [
        (
            "postgresql://u:p@db:5432/prompts?sslmode=disable",
            "postgresql+asyncpg://u:p@db:5432/prompts",
        ),
        ("sqlite:///./prompts.db", "sqlite+aiosqlite:///./prompts.db"),
        ("sqlite+aiosqlite:///./prompts.db", "sqlite+aiosqlite:///./prompts.db"),
    ],
)
def test_normalize_database_url(url, expected):
    assert normalize_database_url(url) == expected


def test_empty_database_url_is_rejected():
    with pytest.raises(ValueError):
        normalize_database_url("")


def test_entry_point_builds_app_through_factory(monkeypatch):
    from teleprompter import __main__ as entry_point
    from teleprompter import main as main_module

    calls = []
    monkeypatch.setattr(entry_point.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

    entry_point.main()

    [(args, kwargs)] = calls
    assert args == ("teleprompter.main:create_app",)
    assert kwargs["factory"] is True
    # Importing the module must not build an app (and configure file logging)
    assert not hasattr(main_module, "app")
