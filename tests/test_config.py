"""Tests for settings loading."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from household_ledger.config import LedgerSettings, get_settings


class TestLedgerSettings:
    """Tests for LedgerSettings."""

    def test_defaults(self, monkeypatch):
        """Defaults apply when no LEDGER_* variables are set."""
        for name in ("LEDGER_DATA_FILE", "LEDGER_LOG_LEVEL", "LEDGER_LOG_JSON", "LEDGER_JSON_INDENT"):
            monkeypatch.delenv(name, raising=False)
        settings = LedgerSettings(_env_file=None)
        assert settings.data_file == Path("data.json")
        assert settings.json_indent == 2
        assert settings.log_level == "INFO"
        assert settings.log_json is False

    def test_env_overrides(self, monkeypatch, tmp_path):
        """LEDGER_* environment variables override defaults."""
        monkeypatch.setenv("LEDGER_DATA_FILE", str(tmp_path / "books.json"))
        monkeypatch.setenv("LEDGER_LOG_LEVEL", "debug")
        monkeypatch.setenv("LEDGER_LOG_JSON", "true")
        settings = LedgerSettings(_env_file=None)
        assert settings.data_file == tmp_path / "books.json"
        assert settings.log_level == "DEBUG"
        assert settings.log_level_number == logging.DEBUG
        assert settings.log_json is True

    def test_unknown_log_level_rejected(self):
        """Log levels must be known to the logging module."""
        with pytest.raises(ValidationError):
            LedgerSettings(_env_file=None, log_level="LOUD")

    @pytest.mark.parametrize("indent", [0, -1, 9])
    def test_indent_bounds(self, indent):
        """Indentation is limited to 1-8 so the snapshot stays readable."""
        with pytest.raises(ValidationError):
            LedgerSettings(_env_file=None, json_indent=indent)

    def test_get_settings_is_cached(self):
        """get_settings returns the same instance until cleared."""
        assert get_settings() is get_settings()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
