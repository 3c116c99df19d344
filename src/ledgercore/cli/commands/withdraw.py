"""Withdraw command."""

import click

from ledgercore.cli.error_handling import handle_domain_error
from ledgercore.cli.formatting import format_balance
from ledgercore.cli.session import require_session
from ledgercore.domain.account import AccountService
from ledgercore.domain.errors import insufficient_funds, invalid_amount
from ledgercore.utils.amount_parser import parse_amount


@click.command("withdraw", context_settings={"ignore_unknown_options": True})
@click.argument("account", metavar="ACCOUNT")
@click.argument("amount", metavar="AMOUNT")
@click.option("--phone", help="Contact phone number recorded with the withdrawal")
@click.pass_context
def withdraw(ctx, account: str, amount: str, phone: str | None):
    """Withdraw money from one of your accounts.

    Savings accounts charge a $10.00 fee when the balance drops below
    $100.00, cheque accounts may use their overdraft, and investment
    accounts charge a 5% penalty on the amount withdrawn.

    Examples:
        ledgercore withdraw savings 50
        ledgercore withdraw I1001 500
    """
    session = require_session(ctx)
    service = AccountService(ctx.obj["directory"])
    journal = ctx.obj["journal"]

    try:
        acc = service.get_account(session, account)
        value = parse_amount(amount)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if value <= 0:
        click.echo(f"Error: {invalid_amount(value)}", err=True)
        ctx.exit(1)

    if not service.withdraw(session, acc, value):
        click.echo(f"Withdrawal failed. {insufficient_funds(acc.account_number, acc.balance)}", err=True)
        ctx.exit(1)

    journal.record_withdrawal(acc, value, phone=phone)
    click.echo(
        f"Successfully withdrew ${value:.2f} from {acc.account_number}. "
        f"New Balance: {format_balance(acc.balance)}"
    )


def register_commands(cli):
    """Register withdraw command with main CLI."""
    cli.add_command(withdraw)
