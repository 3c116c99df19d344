"""Utility for resolving account references to a customer's accounts."""

from ledgercore.domain.accounts import Account, AccountKind
from ledgercore.domain.entities import Customer
from ledgercore.domain.errors import NotFoundError, account_not_found


def resolve_account(customer: Customer, reference: str) -> Account:
    """Resolve an account number or kind name to one of the customer's accounts.

    An exact account number ("S1001") wins. Otherwise the reference is
    read as a kind name ("savings", "cheque", "investment") and the first
    account of that kind is returned.

    Args:
        customer: Customer whose accounts are searched
        reference: Account number or kind name

    Returns:
        The matching account

    Raises:
        NotFoundError: If nothing matches
    """
    reference = reference.strip()
    account = customer.get_account_by_number(reference) or customer.get_account_by_number(reference.upper())
    if account is not None:
        return account

    try:
        kind = AccountKind.parse(reference)
    except ValueError:
        raise NotFoundError(account_not_found(reference))

    account = customer.get_account_by_kind(kind)
    if account is None:
        raise NotFoundError(f"No {kind.label} account found for customer {customer.customer_code}")
    return account
