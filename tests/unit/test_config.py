"""
Unit Tests for the application settings
"""
import pytest
from pydantic import ValidationError

from app.adapters.configuration.config import Settings


class TestCorsOrigins:
    """Tests for the CORS_ORIGINS formats accepted from the environment"""

    def test_csv(self, monkeypatch):
        """Test a comma separated value becomes a list"""
        monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example,")

        settings = Settings(_env_file=None)

        assert settings.CORS_ORIGINS == ["http://a.example", "http://b.example"]

    def test_single_origin(self, monkeypatch):
        """Test a single origin without comma"""
        monkeypatch.setenv("CORS_ORIGINS", "http://a.example")

        assert Settings(_env_file=None).CORS_ORIGINS == ["http://a.example"]

    def test_json_array(self, monkeypatch):
        """Test a JSON array is still accepted"""
        monkeypatch.setenv("CORS_ORIGINS", '["http://a.example", "http://b.example"]')

        assert Settings(_env_file=None).CORS_ORIGINS == ["http://a.example", "http://b.example"]

    def test_default(self, monkeypatch):
        """Test the default origins when the variable is unset"""
        monkeypatch.delenv("CORS_ORIGINS", raising=False)

        assert Settings(_env_file=None).CORS_ORIGINS == ["http://localhost:4200", "http://127.0.0.1:4200"]


class TestOtherSettings:
    """Tests for the remaining validators"""

    def test_sync_postgres_url_uses_asyncpg(self, monkeypatch):
        """Test a psycopg2 URL is rewritten to the async driver"""
        monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg2://u:p@db/pm")

        assert Settings(_env_file=None).DATABASE_URL == "postgresql+asyncpg://u:p@db/pm"

    def test_log_level_upper_cased(self, monkeypatch):
        """Test the log level is normalised"""
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert Settings(_env_file=None).LOG_LEVEL == "DEBUG"

    def test_invalid_log_level(self, monkeypatch):
        """Test an unknown log level is rejected"""
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
