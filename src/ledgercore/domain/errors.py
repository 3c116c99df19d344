"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested customer or account does not exist."""


class AuthenticationError(DomainError):
    """Credentials did not match the stored customer record."""


class LedgerFaultError(RuntimeError):
    """A balance mutation failed after validation had passed.

    Raised inside an atomic balance unit so the unit rolls back.
    """


def customer_not_found(customer_code: str) -> str:
    """Return message for missing customer code."""
    return f"Customer code '{customer_code}' not found"


def account_not_found(reference: str) -> str:
    """Return message for missing account by number or kind."""
    return f"Account '{reference}' not found"


def invalid_amount(amount: float) -> str:
    """Return message for non-positive amounts."""
    return f"Amount must be greater than zero (got {amount:.2f})"


def insufficient_funds(account_number: str, balance: float) -> str:
    """Return message when a withdrawal is declined."""
    return f"Insufficient funds in account {account_number}. Current balance: ${balance:,.2f}"
