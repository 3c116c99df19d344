"""Domain entities for ledgercore.

Customers own their accounts outright; no account is shared between
customers. Transfer outcomes are plain value objects so callers can
format messages and journal lines without the core doing any I/O.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional

from ledgercore.domain.accounts import Account, AccountKind


@dataclass(eq=False)
class Customer:
    """Bank customer and the ordered list of accounts they own."""

    first_name: str
    last_name: str
    date_of_birth: date
    phone_number: str
    email: str
    customer_code: str
    password: str
    accounts: list[Account] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def add_account(self, account: Account) -> None:
        """Append an account. Duplicates and repeated kinds are allowed."""
        self.accounts.append(account)

    def get_account_by_kind(self, kind: AccountKind) -> Optional[Account]:
        """Return the first owned account of ``kind`` in insertion order."""
        for account in self.accounts:
            if account.kind is kind:
                return account
        return None

    def get_account_by_number(self, account_number: str) -> Optional[Account]:
        for account in self.accounts:
            if account.account_number == account_number:
                return account
        return None


@dataclass(frozen=True)
class Session:
    """The authenticated customer for one caller interaction."""

    customer: Customer

    @property
    def customer_code(self) -> str:
        return self.customer.customer_code


class TransferDeclineReason(Enum):
    """Why a transfer did not move any money."""

    INVALID_AMOUNT = "invalid_amount"
    NO_DESTINATION = "no_destination"
    SAME_ACCOUNT = "same_account"
    NOT_OWNED = "not_owned"
    INSUFFICIENT_FUNDS = "insufficient_funds"


@dataclass(frozen=True)
class TransferResult:
    """Balances of both accounts after a completed transfer."""

    source_account: str
    destination_account: str
    amount: float
    new_source_balance: float
    new_destination_balance: float


@dataclass(frozen=True)
class TransferDeclined:
    """A transfer that was rejected before or at the withdrawal step."""

    reason: TransferDeclineReason
    message: str

    @property
    def is_validation_error(self) -> bool:
        return self.reason is not TransferDeclineReason.INSUFFICIENT_FUNDS
