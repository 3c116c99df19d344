"""Tests for configuration and logging setup."""

import json
import logging
from pathlib import Path

from ledgercore.config import LedgerConfig
from ledgercore.logging_config import JsonFormatter, setup_logging


class TestLedgerConfig:
    """Tests for LedgerConfig."""

    def test_defaults(self):
        """Test default values."""
        config = LedgerConfig()
        assert config.db_path.name == "ledgercore.db"
        assert config.journal_dir.name == "journal"
        assert config.log_level == "WARNING"
        assert config.log_format == "standard"

    def test_from_env(self, monkeypatch, tmp_path):
        """Test environment overrides."""
        monkeypatch.setenv("LEDGERCORE_DB_PATH", str(tmp_path / "x.db"))
        monkeypatch.setenv("LEDGERCORE_JOURNAL_DIR", str(tmp_path / "j"))
        monkeypatch.setenv("LEDGERCORE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LEDGERCORE_LOG_FORMAT", "json")

        config = LedgerConfig.from_env()

        assert config.db_path == Path(tmp_path / "x.db")
        assert config.journal_dir == Path(tmp_path / "j")
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_from_env_defaults(self, monkeypatch):
        """Test unset variables fall back to defaults."""
        for name in ("LEDGERCORE_DB_PATH", "LEDGERCORE_JOURNAL_DIR", "LEDGERCORE_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        assert LedgerConfig.from_env().log_level == "WARNING"


class TestLogging:
    """Tests for logging setup."""

    def test_setup_sets_level_and_handler(self):
        """Test the ledgercore logger is configured once."""
        setup_logging("debug")
        setup_logging("info")
        logger = logging.getLogger("ledgercore")
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

    def test_unknown_level_falls_back(self):
        """Test an unknown level name falls back to WARNING."""
        setup_logging("chatty")
        assert logging.getLogger("ledgercore").level == logging.WARNING

    def test_json_formatter(self):
        """Test JSON output fields."""
        record = logging.LogRecord("ledgercore.x", logging.INFO, __file__, 1, "hello %s", ("world",), None)
        data = json.loads(JsonFormatter().format(record))
        assert data["message"] == "hello world"
        assert data["level"] == "INFO"
        assert data["logger"] == "ledgercore.x"

