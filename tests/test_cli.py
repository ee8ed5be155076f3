"""Tests for the todokit command-line entry point."""

from typing import Any

import pytest
from fastapi import FastAPI

import todokit.cli as cli


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TODOKIT_PORT", raising=False)
    monkeypatch.delenv("TODOKIT_HOST", raising=False)


def test_load_settings_without_flags_uses_defaults() -> None:
    """Unset flags fall back to settings defaults."""
    settings = cli.load_settings([])

    assert settings.host == "127.0.0.1"
    assert settings.port == 5000
    assert settings.request_logging is False


def test_load_settings_flags_override_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Flags win over TODOKIT_* variables."""
    monkeypatch.setenv("TODOKIT_PORT", "7000")

    settings = cli.load_settings(
        [
            "--port",
            "8000",
            "--database-url",
            "sqlite+aiosqlite:///./tasks.db",
            "--store-timeout",
            "1.5",
            "--log-format",
            "json",
            "--request-logging",
        ]
    )

    assert settings.port == 8000
    assert settings.database_url == "sqlite+aiosqlite:///./tasks.db"
    assert settings.store_timeout == 1.5
    assert settings.log_format == "json"
    assert settings.request_logging is True


def test_load_settings_keeps_environment_when_flag_absent(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment values survive when the flag is not passed."""
    monkeypatch.setenv("TODOKIT_PORT", "7000")
    assert cli.load_settings([]).port == 7000


def test_invalid_log_format_exits() -> None:
    """argparse rejects an unknown renderer."""
    with pytest.raises(SystemExit):
        cli.load_settings(["--log-format", "xml"])


def test_main_serves_built_app(monkeypatch: pytest.MonkeyPatch) -> None:
    """main() configures logging and hands the app to uvicorn."""
    served: dict[str, Any] = {}

    def fake_run_app(app: FastAPI, **kwargs: Any) -> None:
        served["app"] = app
        served.update(kwargs)

    monkeypatch.setattr(cli, "run_app", fake_run_app)
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)

    cli.main(["--host", "0.0.0.0", "--port", "5050"])

    assert isinstance(served["app"], FastAPI)
    assert served["host"] == "0.0.0.0"
    assert served["port"] == 5050
    assert served["log_level"] == "INFO"
