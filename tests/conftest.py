"""Shared pytest fixtures for ledgercore tests."""

import logging
from datetime import datetime

import pytest

from ledgercore.database.factories import create_memory_directory, create_sqlite_directory
from ledgercore.domain.account import AccountService
from ledgercore.domain.customer import CustomerService
from ledgercore.domain.transfer import TransferService
from ledgercore.journal import TransactionJournal


@pytest.fixture(autouse=True)
def reset_ledgercore_logging():
    """Drop handlers installed by CLI runs so they don't outlive the runner's streams."""
    yield
    logger = logging.getLogger("ledgercore")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def directory():
    """Create a seeded in-memory directory."""
    return create_memory_directory()


@pytest.fixture
def temp_db(tmp_path):
    """Create a seeded SQLite directory in a temporary file."""
    db_path = tmp_path / "ledgercore.db"
    db = create_sqlite_directory(database_path=str(db_path))
    # Store the path for tests that need it
    db.database_path = str(db_path)
    db.connect()

    yield db

    db.disconnect()


@pytest.fixture
def customer_service(directory):
    """Create a CustomerService over the in-memory directory."""
    return CustomerService(directory)


@pytest.fixture
def account_service(directory):
    """Create an AccountService over the in-memory directory."""
    return AccountService(directory)


@pytest.fixture
def transfer_service(directory):
    """Create a TransferService over the in-memory directory."""
    return TransferService(directory)


@pytest.fixture
def session(customer_service):
    """Log in as the first seed customer (JSMITH)."""
    return customer_service.authenticate("JSMITH", "1234")


@pytest.fixture
def journal(tmp_path):
    """Create a journal in a temporary directory with a fixed clock."""
    return TransactionJournal(tmp_path / "journal", clock=lambda: datetime(2024, 1, 31, 13, 45, 0))


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def cli_args(tmp_path):
    """Common global options pointing the CLI at temporary storage."""
    return [
        "--db-path",
        str(tmp_path / "cli.db"),
        "--journal-dir",
        str(tmp_path / "journal"),
    ]


@pytest.fixture
def jsmith_args(cli_args):
    """Global options logged in as JSMITH."""
    return cli_args + ["--customer", "jsmith", "--password", "1234"]
