"""Configuration management for ledgercore."""

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_HOME = Path.home() / ".ledgercore"


@dataclass
class LedgerConfig:
    """Runtime settings for the command-line application."""

    db_path: Path = field(default_factory=lambda: DEFAULT_HOME / "ledgercore.db")
    journal_dir: Path = field(default_factory=lambda: DEFAULT_HOME / "journal")
    log_level: str = "WARNING"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        defaults = cls()
        return cls(
            db_path=Path(os.getenv("LEDGERCORE_DB_PATH", str(defaults.db_path))),
            journal_dir=Path(os.getenv("LEDGERCORE_JOURNAL_DIR", str(defaults.journal_dir))),
            log_level=os.getenv("LEDGERCORE_LOG_LEVEL", defaults.log_level),
            log_format=os.getenv("LEDGERCORE_LOG_FORMAT", defaults.log_format),
        )
