"""Resolve the active session for commands that act on a customer."""

import click

from ledgercore.cli.error_handling import handle_domain_error
from ledgercore.domain.customer import CustomerService
from ledgercore.domain.entities import Session


def require_session(ctx: click.Context) -> Session:
    """Authenticate the credentials given to the top-level command.

    Exits with an error if credentials are missing or rejected.
    """
    customer_code = ctx.obj.get("customer_code")
    password = ctx.obj.get("password")
    if not customer_code or password is None:
        click.echo(
            "Error: Log in with --customer and --password "
            "(or LEDGERCORE_CUSTOMER / LEDGERCORE_PASSWORD).",
            err=True,
        )
        ctx.exit(1)

    service = CustomerService(ctx.obj["directory"])
    try:
        return service.authenticate(customer_code, password)
    except ValueError as e:
        handle_domain_error(ctx, e)
