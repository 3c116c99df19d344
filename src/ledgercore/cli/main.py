"""Main CLI entry point."""

from pathlib import Path

import click

from ledgercore.config import LedgerConfig
from ledgercore.database.factories import create_sqlite_directory
from ledgercore.journal import TransactionJournal
from ledgercore.logging_config import setup_logging

# Import and register all commands at module level
from ledgercore.cli.commands import (
    login,
    account,
    deposit,
    withdraw,
    transfer,
    history,
    settings,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides LEDGERCORE_DB_PATH environment variable)",
    envvar="LEDGERCORE_DB_PATH",
)
@click.option(
    "--journal-dir",
    type=click.Path(file_okay=False),
    help="Directory for transaction journals (overrides LEDGERCORE_JOURNAL_DIR)",
    envvar="LEDGERCORE_JOURNAL_DIR",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level for diagnostics on stderr (overrides LEDGERCORE_LOG_LEVEL)",
    envvar="LEDGERCORE_LOG_LEVEL",
)
@click.option("--customer", "-c", help="Customer code to log in as", envvar="LEDGERCORE_CUSTOMER")
@click.option("--password", "-p", help="Customer password", envvar="LEDGERCORE_PASSWORD")
@click.pass_context
def cli(
    ctx,
    db_path: str | None,
    journal_dir: str | None,
    log_level: str | None,
    customer: str | None,
    password: str | None,
):
    """Ledgercore - Demo banking ledger.

    Manage the savings, cheque and investment accounts of the demo
    customers: deposit, withdraw, apply monthly interest and transfer
    between your own accounts.
    """
    ctx.ensure_object(dict)
    config = LedgerConfig.from_env()
    setup_logging(level=log_level or config.log_level, format_type=config.log_format)

    # Open the directory only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        directory = create_sqlite_directory(database_path=db_path or str(config.db_path))
        directory.connect()
        ctx.call_on_close(directory.disconnect)
        ctx.obj["directory"] = directory
        ctx.obj["journal"] = TransactionJournal(Path(journal_dir) if journal_dir else config.journal_dir)
        ctx.obj["customer_code"] = customer
        ctx.obj["password"] = password


# Register all commands
login.register_commands(cli)
account.register_commands(cli)
deposit.register_commands(cli)
withdraw.register_commands(cli)
transfer.register_commands(cli)
history.register_commands(cli)
settings.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
