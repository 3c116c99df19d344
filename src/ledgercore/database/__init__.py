"""Database layer for ledgercore application."""

from ledgercore.database.base import CustomerDirectory
from ledgercore.database.memory import InMemoryDirectory
from ledgercore.database.factories import create_memory_directory, create_sqlite_directory

__all__ = [
    "CustomerDirectory",
    "InMemoryDirectory",
    "create_memory_directory",
    "create_sqlite_directory",
]
