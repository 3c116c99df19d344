"""Account inspection and interest commands."""

import click

from ledgercore.cli.error_handling import handle_domain_error
from ledgercore.cli.formatting import account_details, format_balance
from ledgercore.cli.session import require_session
from ledgercore.domain.account import AccountService


@click.group()
def account_group():
    """View accounts and apply interest."""
    pass


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List your accounts."""
    session = require_session(ctx)
    service = AccountService(ctx.obj["directory"])

    accounts = service.list_accounts(session)
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 60)
    for acc in accounts:
        click.echo(
            f"{acc.account_number:8s} | {acc.kind.label:10s} | {acc.branch:16s} | "
            f"{format_balance(acc.balance):>14s}"
        )


@account_group.command("show")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def show_account(ctx, account: str):
    """Show details of one account.

    ACCOUNT can be an account number or a type (savings, cheque, investment).

    Examples:
        ledgercore account show savings
        ledgercore account show I1001
    """
    session = require_session(ctx)
    service = AccountService(ctx.obj["directory"])

    try:
        acc = service.get_account(session, account)
    except ValueError as e:
        handle_domain_error(ctx, e)

    for line in account_details(acc):
        click.echo(line)


@account_group.command("interest")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def apply_interest(ctx, account: str):
    """Apply one month of interest (or investment return) to an account.

    Cheque accounts accrue no interest.

    Examples:
        ledgercore account interest savings
    """
    session = require_session(ctx)
    service = AccountService(ctx.obj["directory"])
    journal = ctx.obj["journal"]

    try:
        acc = service.get_account(session, account)
    except ValueError as e:
        handle_domain_error(ctx, e)

    accrued = service.apply_interest(session, acc)
    if accrued == 0:
        click.echo(f"No interest applied to {acc.kind.label} account {acc.account_number}.")
        return

    journal.record_interest(acc, accrued)
    click.echo(
        f"Applied {format_balance(accrued)} to {acc.kind.label} account {acc.account_number}. "
        f"New Balance: {format_balance(acc.balance)}"
    )


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
