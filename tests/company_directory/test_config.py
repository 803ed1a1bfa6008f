"""Tests for configuration management."""

import json
import os
import tempfile

import pytest
from pydantic import ValidationError

from company_directory.config import NotificationConfig, Settings


class TestNotificationConfig:
    """Tests for notification configuration."""

    def test_defaults(self):
        """Missing buckets are an error by default."""
        config = NotificationConfig()
        assert config.create_missing_buckets is False
        assert config.append_max_attempts == 3
        assert config.append_backoff_seconds == 0.05

    def test_from_file(self):
        """Test loading notification config from file."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
            json.dump(
                {
                    "create_missing_buckets": True,
                    "append_max_attempts": 5,
                    "append_backoff_seconds": 0.2,
                },
                f,
            )
            temp_path = f.name

        try:
            config = NotificationConfig.from_file(temp_path)
            assert config.create_missing_buckets is True
            assert config.append_max_attempts == 5
            assert config.append_backoff_seconds == 0.2
        finally:
            os.unlink(temp_path)

    def test_from_missing_file(self, tmp_path):
        """A missing file falls back to defaults."""
        config = NotificationConfig.from_file(str(tmp_path / "absent.json"))
        assert config == NotificationConfig()

    def test_attempts_must_be_positive(self):
        """At least one append attempt is required."""
        with pytest.raises(ValidationError):
            NotificationConfig(append_max_attempts=0)


class TestSettings:
    """Tests for application settings."""

    def test_settings_defaults(self, monkeypatch, tmp_path):
        """Database URL is derived from the data root."""
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.setenv("DATA_ROOT", str(tmp_path))
        settings = Settings()
        data_root = tmp_path.resolve()
        assert settings.data_root == str(data_root)
        assert settings.database_url == f"sqlite:///{data_root}/company_directory.db"
        assert settings.store_timeout_seconds == 5.0
        assert settings.backend_port == 8000

    def test_settings_from_env(self, monkeypatch):
        """Test loading settings from environment variables."""
        monkeypatch.setenv("DATABASE_URL", "sqlite:///./test.db")
        monkeypatch.setenv("BACKEND_HOST", "127.0.0.1")
        monkeypatch.setenv("BACKEND_PORT", "9000")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("STORE_TIMEOUT_SECONDS", "1.5")

        settings = Settings()
        assert settings.database_url == "sqlite:///./test.db"
        assert settings.backend_host == "127.0.0.1"
        assert settings.backend_port == 9000
        assert settings.log_level == "DEBUG"
        assert settings.store_timeout_seconds == 1.5

    def test_timeout_must_be_positive(self, monkeypatch):
        """A zero store timeout is rejected."""
        monkeypatch.setenv("STORE_TIMEOUT_SECONDS", "0")
        with pytest.raises(ValidationError):
            Settings()
