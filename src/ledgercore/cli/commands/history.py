"""Transaction history command."""

from datetime import datetime

import click

from ledgercore.cli.error_handling import handle_domain_error
from ledgercore.cli.session import require_session
from ledgercore.domain.account import AccountService
from ledgercore.utils.date_parser import parse_date


@click.command("history")
@click.argument("account", metavar="ACCOUNT")
@click.option("--since", help='Only show entries on or after this date (e.g. "2024-01-31", "this month")')
@click.pass_context
def history(ctx, account: str, since: str | None):
    """Show journal entries for the type of ACCOUNT.

    Journals are kept per account type, so entries from every account
    of that type are listed.

    Examples:
        ledgercore history savings
        ledgercore history C1001 --since "last week"
    """
    session = require_session(ctx)
    journal = ctx.obj["journal"]

    try:
        acc = AccountService(ctx.obj["directory"]).get_account(session, account)
        since_at = datetime.combine(parse_date(since), datetime.min.time()) if since else None
        lines = journal.entries(acc.kind, since=since_at)
    except ValueError as e:
        handle_domain_error(ctx, e)

    filename = acc.kind.journal_filename
    click.echo(f"--- Transactions for {acc.kind.label} Account ({acc.account_number}) ---")
    if not lines:
        click.echo(f"No transactions recorded yet in {filename}.")
        return
    for line in lines:
        click.echo(line)


def register_commands(cli):
    """Register history command with main CLI."""
    cli.add_command(history)
