"""Transfer commands."""

import click

from ledgercore.cli.error_handling import handle_domain_error
from ledgercore.cli.formatting import describe_account, format_balance
from ledgercore.cli.session import require_session
from ledgercore.domain.account import AccountService
from ledgercore.domain.entities import TransferDeclined
from ledgercore.domain.transfer import TransferService
from ledgercore.utils.amount_parser import parse_amount


@click.group()
def transfer_group():
    """Transfer money between your own accounts."""
    pass


@transfer_group.command("targets")
@click.argument("source", metavar="SOURCE")
@click.pass_context
def list_targets(ctx, source: str):
    """List the accounts SOURCE can transfer into.

    Examples:
        ledgercore transfer targets savings
    """
    session = require_session(ctx)
    directory = ctx.obj["directory"]

    try:
        source_account = AccountService(directory).get_account(session, source)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(
        f"Transferring from: {describe_account(source_account)} | "
        f"Balance: {format_balance(source_account.balance)}"
    )
    targets = TransferService(directory).list_destinations(session, source_account)
    if not targets:
        click.echo("No other accounts available.")
        return
    for acc in targets:
        click.echo(f"  {describe_account(acc)}")


@transfer_group.command("run", context_settings={"ignore_unknown_options": True})
@click.argument("source", metavar="SOURCE")
@click.argument("destination", metavar="DESTINATION")
@click.argument("amount", metavar="AMOUNT")
@click.pass_context
def run_transfer(ctx, source: str, destination: str, amount: str):
    """Transfer AMOUNT from SOURCE to DESTINATION.

    SOURCE and DESTINATION can be account numbers or types.

    Examples:
        ledgercore transfer run savings cheque 150
        ledgercore transfer run I1001 S1001 500
    """
    session = require_session(ctx)
    directory = ctx.obj["directory"]
    accounts = AccountService(directory)
    journal = ctx.obj["journal"]

    try:
        source_account = accounts.get_account(session, source)
        destination_account = accounts.get_account(session, destination)
        value = parse_amount(amount)
    except ValueError as e:
        handle_domain_error(ctx, e)

    outcome = TransferService(directory).transfer(session, source_account, destination_account, value)
    if isinstance(outcome, TransferDeclined):
        prefix = "Error" if outcome.is_validation_error else "Transfer failed"
        click.echo(f"{prefix}: {outcome.message}", err=True)
        ctx.exit(1)

    journal.record_transfer(source_account, destination_account, outcome)
    click.echo(
        f"Successfully transferred ${outcome.amount:.2f} from {outcome.source_account} "
        f"to {outcome.destination_account}. "
        f"Source Bal: {format_balance(outcome.new_source_balance)}. "
        f"Dest Bal: {format_balance(outcome.new_destination_balance)}."
    )


def register_commands(cli):
    """Register transfer commands with main CLI."""
    cli.add_command(transfer_group, name="transfer")
