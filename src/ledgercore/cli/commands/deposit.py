"""Deposit command."""

import click

from ledgercore.cli.error_handling import handle_domain_error
from ledgercore.cli.formatting import format_balance
from ledgercore.cli.session import require_session
from ledgercore.domain.account import AccountService
from ledgercore.domain.errors import invalid_amount
from ledgercore.utils.amount_parser import parse_amount


@click.command("deposit", context_settings={"ignore_unknown_options": True})
@click.argument("account", metavar="ACCOUNT")
@click.argument("amount", metavar="AMOUNT")
@click.option("--phone", help="Contact phone number recorded with the deposit")
@click.pass_context
def deposit(ctx, account: str, amount: str, phone: str | None):
    """Deposit money into one of your accounts.

    ACCOUNT can be an account number or a type (savings, cheque, investment).

    Examples:
        ledgercore deposit savings 250
        ledgercore deposit C1001 "1,000.00" --phone 555-0100
    """
    session = require_session(ctx)
    service = AccountService(ctx.obj["directory"])
    journal = ctx.obj["journal"]

    try:
        acc = service.get_account(session, account)
        value = parse_amount(amount)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not service.deposit(session, acc, value):
        click.echo(f"Error: {invalid_amount(value)}", err=True)
        ctx.exit(1)

    journal.record_deposit(acc, value, phone=phone)
    click.echo(
        f"Successfully deposited ${value:.2f} to {acc.kind.label} account {acc.account_number}. "
        f"New Balance: {format_balance(acc.balance)}"
    )


def register_commands(cli):
    """Register deposit command with main CLI."""
    cli.add_command(deposit)
