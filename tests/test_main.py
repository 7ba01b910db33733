"""
Tests for the example service entry point in main.py.
"""

import pytest

from main import main


@pytest.fixture
def service_env(workdir, monkeypatch):
    monkeypatch.setenv("ENV_VALIDATOR_LOAD_DOTENV", "false")
    monkeypatch.setenv("DATABASE_URL", "postgres://x")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("API_KEY", "key")
    monkeypatch.setenv("LOG_LEVEL", "info")
    monkeypatch.setenv("MAX_CONNECTIONS", "100")


def test_starts_when_configured(service_env, capsys):
    assert main() == 0

    out = capsys.readouterr().out
    assert "Server starting on port 8080" in out
    assert "Max connections: 100" in out


def test_reports_missing_variables(service_env, monkeypatch, capsys):
    monkeypatch.delenv("API_KEY")
    monkeypatch.setenv("LOG_LEVEL", " ")

    assert main() == 1

    err = capsys.readouterr().err
    assert "  - API_KEY\n" in err
    assert "  - LOG_LEVEL (empty)\n" in err


def test_reports_bad_port(service_env, monkeypatch, capsys):
    monkeypatch.setenv("PORT", "http")

    assert main() == 1

    assert "Failed to parse PORT as u16" in capsys.readouterr().err
