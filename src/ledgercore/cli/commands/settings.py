"""Customer settings commands."""

import click

from ledgercore.cli.error_handling import handle_domain_error
from ledgercore.cli.session import require_session
from ledgercore.domain.customer import CustomerService


@click.group()
def settings_group():
    """Change your password or contact details."""
    pass


@settings_group.command("password")
@click.argument("current", metavar="CURRENT")
@click.argument("new", metavar="NEW")
@click.argument("confirm", metavar="CONFIRM")
@click.pass_context
def change_password(ctx, current: str, new: str, confirm: str):
    """Change your password.

    Examples:
        ledgercore settings password 1234 s3cret s3cret
    """
    session = require_session(ctx)
    service = CustomerService(ctx.obj["directory"])

    try:
        service.change_password(session, current, new, confirm)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo("Password changed.")


@settings_group.command("contact")
@click.option("--email", help="New email address")
@click.option("--phone", help="New phone number")
@click.pass_context
def update_contact(ctx, email: str | None, phone: str | None):
    """Update your email address and/or phone number.

    Examples:
        ledgercore settings contact --email john@new.example.com
        ledgercore settings contact --phone 555-0100
    """
    session = require_session(ctx)
    service = CustomerService(ctx.obj["directory"])

    try:
        service.update_contact(session, email=email, phone_number=phone)
    except ValueError as e:
        handle_domain_error(ctx, e)

    customer = session.customer
    click.echo(f"Contact details updated. Email: {customer.email}, Phone: {customer.phone_number}")


def register_commands(cli):
    """Register settings commands with main CLI."""
    cli.add_command(settings_group, name="settings")
