"""Tests for settings and the CLI entry point."""

import pytest

from clipurl import cli
from clipurl.client import ShortenResult
from clipurl.core.config import EnvironmentType, Settings


def test_defaults(monkeypatch):
    for name in ("PORT", "API_PREFIX", "CORS_ORIGINS", "DATABASE_URL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.PORT == 5000
    assert settings.API_PREFIX == "/api"
    assert settings.CORS_ORIGINS == ["https://clip-url-red.vercel.app", "http://localhost:5000"]
    assert settings.is_sqlite


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("BASE_URL", "https://clip.example/")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("ENVIRONMENT", "production")

    settings = Settings(_env_file=None)

    assert settings.PORT == 8080
    assert settings.BASE_URL == "https://clip.example"
    assert settings.CORS_ORIGINS == ["https://a.example", "https://b.example"]
    assert settings.ENVIRONMENT is EnvironmentType.PRODUCTION


@pytest.mark.parametrize("raw, expected", [
    ("*", ["*"]),
    ("", []),
    (["https://a.example"], ["https://a.example"]),
])
def test_cors_origins_parsing(raw, expected):
    assert Settings(_env_file=None, CORS_ORIGINS=raw).CORS_ORIGINS == expected


def test_app_keeps_the_settings_it_was_given(test_app, test_settings):
    assert test_app.state.settings is test_settings


def test_cli_shorten_prints_short_url(monkeypatch, capsys):
    monkeypatch.setattr(
        cli.ShortenerClient, "shorten",
        lambda self, url, alias: ShortenResult(short_url=f"{self.api_url}/{alias}"),
    )

    assert cli.main(["shorten", "https://example.com", "--alias", "abc", "--api-url", "http://api.test"]) == 0
    assert capsys.readouterr().out.strip() == "http://api.test/abc"


def test_cli_shorten_reports_error(monkeypatch, capsys):
    monkeypatch.setattr(
        cli.ShortenerClient, "shorten",
        lambda self, url, alias: ShortenResult(error="Alias already taken"),
    )

    assert cli.main(["shorten", "https://example.com", "--alias", "dup", "--api-url", "http://api.test"]) == 1
    assert "Alias already taken" in capsys.readouterr().err


def test_cli_requires_a_command():
    with pytest.raises(SystemExit):
        cli.main([])
