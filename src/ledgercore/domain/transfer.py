"""Fund transfers between two accounts owned by the same customer."""

import logging
import math
from typing import Optional, Union

from ledgercore.database.base import CustomerDirectory
from ledgercore.domain.accounts import Account, balance_unit
from ledgercore.domain.entities import (
    Customer,
    Session,
    TransferDeclined,
    TransferDeclineReason,
    TransferResult,
)
from ledgercore.domain.errors import LedgerFaultError, NotFoundError, customer_not_found

logger = logging.getLogger(__name__)

TransferOutcome = Union[TransferResult, TransferDeclined]


def destination_candidates(customer: Customer, source: Account) -> list[Account]:
    """All of the customer's accounts except ``source``."""
    return [
        account for account in customer.accounts if account.account_number != source.account_number
    ]


def _owns(customer: Customer, account: Account) -> bool:
    return any(held is account for held in customer.accounts)


def transfer(source: Account, destination: Optional[Account], amount: float) -> TransferOutcome:
    """Move ``amount`` from ``source`` to ``destination``.

    Validation failures and insufficient funds are returned as
    ``TransferDeclined`` with no balance changed. The withdrawal and the
    deposit run inside one balance unit: if the deposit step faults, the
    source balance is restored and the exception propagates.
    """
    if not math.isfinite(amount) or amount <= 0:
        return TransferDeclined(
            TransferDeclineReason.INVALID_AMOUNT, "Amount must be greater than zero."
        )
    if destination is None:
        return TransferDeclined(
            TransferDeclineReason.NO_DESTINATION, "Please select a destination account."
        )
    if destination.account_number == source.account_number:
        return TransferDeclined(
            TransferDeclineReason.SAME_ACCOUNT, "Cannot transfer to the source account itself."
        )

    with balance_unit(source, destination):
        if not source.withdraw(amount):
            return TransferDeclined(
                TransferDeclineReason.INSUFFICIENT_FUNDS,
                f"Insufficient funds in source account. Balance: ${source.balance:,.2f}",
            )
        if not destination.deposit(amount):
            raise LedgerFaultError(
                f"Deposit of {amount:.2f} to {destination.account_number} was rejected after withdrawal"
            )

    logger.info(
        "Transferred %.2f from %s to %s",
        amount,
        source.account_number,
        destination.account_number,
    )
    return TransferResult(
        source_account=source.account_number,
        destination_account=destination.account_number,
        amount=amount,
        new_source_balance=source.balance,
        new_destination_balance=destination.balance,
    )


class TransferService:
    """Run transfers for a session and persist the resulting balances."""

    def __init__(self, directory: CustomerDirectory):
        """Initialize transfer service.

        Args:
            directory: Customer directory holding account state
        """
        self.directory = directory

    def list_destinations(self, session: Session, source: Account) -> list[Account]:
        """List accounts the session's customer can transfer ``source`` into."""
        return destination_candidates(session.customer, source)

    def transfer(
        self,
        session: Session,
        source: Account,
        destination: Optional[Account],
        amount: float,
    ) -> TransferOutcome:
        """Transfer between two of the session customer's accounts.

        Accounts must be the customer's own objects, as returned by the
        customer's lookups; any other account is declined as NOT_OWNED.

        Raises:
            NotFoundError: If the customer record is no longer in the directory
        """
        customer = session.customer
        if not _owns(customer, source) or (destination is not None and not _owns(customer, destination)):
            logger.warning("Customer %s tried to transfer with an account they do not own", customer.customer_code)
            return TransferDeclined(
                TransferDeclineReason.NOT_OWNED, "Both accounts must belong to the logged-in customer."
            )

        accounts = [source] if destination is None else [source, destination]
        # Persisting is part of the unit so a failed write restores both balances
        with balance_unit(*accounts):
            outcome = transfer(source, destination, amount)
            if isinstance(outcome, TransferResult):
                if not self.directory.update_customer(customer):
                    raise NotFoundError(customer_not_found(customer.customer_code))
        return outcome
