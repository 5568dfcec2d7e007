"""Unit tests for Settings configuration."""

from pathlib import Path

import pytest

from resultflow.shared.config import Settings, get_settings


class TestSettingsDefaults:
    """Test default values for Settings."""

    def test_default_logging_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default logging configuration."""
        monkeypatch.delenv("RESULTFLOW_LOG_LEVEL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"


class TestSettingsEnvironmentLoading:
    """Test loading settings from environment."""

    def test_override_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test overriding log level with the RESULTFLOW_ prefix."""
        monkeypatch.setenv("RESULTFLOW_LOG_LEVEL", "DEBUG")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_unprefixed_vars_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test variables without the prefix do not leak in."""
        monkeypatch.delenv("RESULTFLOW_LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert Settings(_env_file=None).log_level == "INFO"

    def test_case_insensitive_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test environment variables are case insensitive."""
        monkeypatch.setenv("resultflow_log_level", "WARNING")
        assert Settings(_env_file=None).log_level == "WARNING"

    def test_reads_dotenv_file(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Test values are read from .env in the working directory."""
        monkeypatch.delenv("RESULTFLOW_LOG_LEVEL", raising=False)
        (tmp_path / ".env").write_text("RESULTFLOW_LOG_LEVEL=ERROR\n")
        monkeypatch.chdir(tmp_path)
        assert Settings().log_level == "ERROR"

    def test_extra_env_vars_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test extra environment variables are ignored."""
        monkeypatch.setenv("RESULTFLOW_UNKNOWN_SETTING", "value")
        Settings(_env_file=None)  # Should not raise


class TestGetSettings:
    """Test the cached settings accessor."""

    def test_returns_singleton(self) -> None:
        """Test repeated calls return the same instance."""
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test clearing the cache picks up new environment values."""
        first = get_settings()
        monkeypatch.setenv("RESULTFLOW_LOG_LEVEL", "ERROR")
        assert get_settings().log_level == first.log_level

        get_settings.cache_clear()
        assert get_settings().log_level == "ERROR"
