"""Tests for environment-driven service settings."""

import pytest
from pydantic import ValidationError

from todokit import Settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Run each test away from any local .env file and TODOKIT_* variables."""
    monkeypatch.chdir(tmp_path)
    for name in ("DATABASE_URL", "STORE_TIMEOUT", "HOST", "PORT", "LOG_LEVEL", "LOG_FORMAT", "CORS_ORIGINS"):
        monkeypatch.delenv(f"TODOKIT_{name}", raising=False)


def test_defaults() -> None:
    """Defaults serve a file-backed store on port 5000."""
    settings = Settings()

    assert settings.database_url == "sqlite+aiosqlite:///./todokit.db"
    assert settings.store_timeout == 5.0
    assert settings.port == 5000
    assert settings.log_format == "console"
    assert settings.cors_origins == ["*"]


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """TODOKIT_* variables override defaults."""
    monkeypatch.setenv("TODOKIT_DATABASE_URL", "sqlite+aiosqlite:///./todo.db")
    monkeypatch.setenv("TODOKIT_STORE_TIMEOUT", "0.25")
    monkeypatch.setenv("TODOKIT_PORT", "8080")
    monkeypatch.setenv("TODOKIT_LOG_FORMAT", "json")
    monkeypatch.setenv("TODOKIT_CORS_ORIGINS", '["http://localhost:3000"]')

    settings = Settings()

    assert settings.database_url == "sqlite+aiosqlite:///./todo.db"
    assert settings.store_timeout == 0.25
    assert settings.port == 8080
    assert settings.log_format == "json"
    assert settings.cors_origins == ["http://localhost:3000"]


def test_env_file_is_read(tmp_path) -> None:
    """A .env file in the working directory is honoured."""
    (tmp_path / ".env").write_text("TODOKIT_PORT=9001\nUNRELATED=1\n")

    assert Settings().port == 9001


@pytest.mark.parametrize("timeout", ["0", "-1"])
def test_non_positive_store_timeout_rejected(monkeypatch: pytest.MonkeyPatch, timeout: str) -> None:
    """The store timeout must be positive."""
    monkeypatch.setenv("TODOKIT_STORE_TIMEOUT", timeout)

    with pytest.raises(ValidationError):
        Settings()


def test_unknown_log_format_rejected() -> None:
    """Only console and json renderers exist."""
    with pytest.raises(ValidationError):
        Settings(log_format="xml")  # type: ignore[arg-type]
