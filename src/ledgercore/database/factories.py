"""Directory factory functions."""

from pathlib import Path
from typing import Optional

from ledgercore.config import LedgerConfig
from ledgercore.database.memory import InMemoryDirectory
from ledgercore.database.seed import build_seed_customers
from ledgercore.database.sqlalchemy_db import SQLAlchemyDirectory


def create_memory_directory(seed: bool = True) -> InMemoryDirectory:
    """Create an in-memory directory, populated with the seed customers by default."""
    return InMemoryDirectory(build_seed_customers() if seed else ())


def create_sqlite_directory(database_path: Optional[str] = None, seed: bool = True) -> SQLAlchemyDirectory:
    """Create a SQLite-backed directory.

    Args:
        database_path: Path to SQLite database file. If None, uses the
            configured path (LEDGERCORE_DB_PATH or ~/.ledgercore/ledgercore.db)
        seed: Populate an empty database with the seed customers

    Returns:
        SQLAlchemyDirectory instance configured for SQLite
    """
    if database_path is None:
        database_path = str(LedgerConfig.from_env().db_path)

    Path(database_path).parent.mkdir(parents=True, exist_ok=True)
    directory = SQLAlchemyDirectory(f"sqlite:///{database_path}")
    if seed:
        directory.seed(build_seed_customers())
    return directory
