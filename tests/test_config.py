"""Tests for settings and logging configuration."""

import pytest
import structlog
from pydantic import ValidationError

from py_isthmus.config import Settings
from py_isthmus.utils.log_config import configure_logging


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ("ISTHMUS_API_PORT", "ISTHMUS_LOG_LEVEL", "ISTHMUS_MAX_GRID_CELLS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.api_port == 8000
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.max_grid_cells == 1_000_000

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("ISTHMUS_API_PORT", "9001")
        monkeypatch.setenv("ISTHMUS_MAX_GRID_CELLS", "2500")

        settings = Settings(_env_file=None)

        assert settings.api_port == 9001
        assert settings.max_grid_cells == 2500

    def test_grid_limit_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("ISTHMUS_MAX_GRID_CELLS", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestLogging:
    """Test structlog configuration."""

    @pytest.mark.parametrize("fmt", ["json", "console"])
    def test_configure(self, fmt):
        configure_logging("DEBUG", fmt)

        assert structlog.is_configured()

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            configure_logging("LOUD")

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            configure_logging("INFO", "xml")
