"""Login command."""

import click

from ledgercore.cli.formatting import describe_account, format_balance
from ledgercore.cli.session import require_session


@click.command("login")
@click.pass_context
def login(ctx):
    """Verify credentials and show a summary of your accounts.

    Examples:
        ledgercore -c JSMITH -p 1234 login
    """
    session = require_session(ctx)
    customer = session.customer

    click.echo(f"Login successful for {customer.first_name}!")
    click.echo(f"Customer: {customer.full_name} ({customer.customer_code})")
    for acc in customer.accounts:
        click.echo(f"  {describe_account(acc):24s} {format_balance(acc.balance):>16s}")


def register_commands(cli):
    """Register login command with main CLI."""
    cli.add_command(login)
