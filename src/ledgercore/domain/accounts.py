"""Account types and their balance rules.

Each account kind owns its withdrawal and accrual policy. Business
declines (insufficient funds, overdraft exceeded, penalty not covered)
are reported as ``False`` return values and logged, never raised.
"""

import logging
import math
from abc import ABC, abstractmethod
from contextlib import contextmanager
from enum import Enum
from typing import Iterator

logger = logging.getLogger(__name__)

MIN_BALANCE_THRESHOLD = 100.00
MIN_BALANCE_FEE = 10.00
WITHDRAWAL_PENALTY_RATE = 0.05
MONTHS_PER_YEAR = 12.0

DEFAULT_RISK_LEVEL = "Medium"
DEFAULT_INVESTMENT_DETAILS = (
    "Diversified portfolio of 60% technology ETFs and 40% government bonds."
)


class AccountKind(Enum):
    """Closed set of account variants."""

    SAVINGS = "savings"
    CHEQUE = "cheque"
    INVESTMENT = "investment"

    @property
    def label(self) -> str:
        """Human readable name used in listings and journal lines."""
        return _LABELS[self]

    @property
    def journal_filename(self) -> str:
        """Name of the plain-text journal file for this kind."""
        return f"{self.value}.txt"

    @classmethod
    def parse(cls, value: str) -> "AccountKind":
        """Parse a kind name such as ``"savings"`` (case-insensitive).

        Raises:
            ValueError: If the name is not a known account kind
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            names = ", ".join(kind.value for kind in cls)
            raise ValueError(f"Unknown account type '{value}'. Expected one of: {names}")


_LABELS = {
    AccountKind.SAVINGS: "Savings",
    AccountKind.CHEQUE: "Cheque",
    AccountKind.INVESTMENT: "Investment",
}


class Account(ABC):
    """Base account with identity, branch and a mutable balance."""

    kind: AccountKind

    def __init__(self, account_number: str, balance: float, branch: str):
        self._account_number = account_number
        self._branch = branch
        self._balance = float(balance)

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def branch(self) -> str:
        return self._branch

    @property
    def balance(self) -> float:
        return self._balance

    def deposit(self, amount: float) -> bool:
        """Add ``amount`` to the balance.

        Returns:
            True if the deposit was applied, False for a non-positive or non-finite amount
        """
        if not math.isfinite(amount) or amount <= 0:
            logger.warning("Invalid deposit amount %.2f for account %s", amount, self._account_number)
            return False
        self._balance += amount
        logger.info(
            "Deposited %.2f to %s account %s. New balance: %.2f",
            amount,
            self.kind.label,
            self._account_number,
            self._balance,
        )
        return True

    def withdraw(self, amount: float) -> bool:
        """Withdraw ``amount`` according to this account's policy.

        Returns:
            True if the withdrawal succeeded, False if it was declined
        """
        if not math.isfinite(amount) or amount <= 0:
            logger.warning("Withdrawal amount must be positive (got %.2f)", amount)
            return False
        return self._withdraw(amount)

    @abstractmethod
    def _withdraw(self, amount: float) -> bool:
        """Apply the variant withdrawal rule to a positive amount."""

    @abstractmethod
    def apply_interest(self) -> None:
        """Apply one month of accrual to the balance."""

    def _accrue_monthly(self, annual_rate: float, what: str) -> None:
        monthly_rate = annual_rate / MONTHS_PER_YEAR
        gained = self._balance * monthly_rate
        self._balance += gained
        logger.info(
            "Monthly %s applied (%.4f%%) to account %s. Gained %.2f. New balance: %.2f",
            what,
            monthly_rate * 100,
            self._account_number,
            gained,
            self._balance,
        )

    def _restore_balance(self, balance: float) -> None:
        self._balance = balance

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(account_number={self._account_number!r}, "
            f"balance={self._balance!r}, branch={self._branch!r})"
        )


class SavingsAccount(Account):
    """Interest-bearing account with a minimum balance fee."""

    kind = AccountKind.SAVINGS

    def __init__(self, account_number: str, balance: float, annual_interest_rate: float, branch: str):
        super().__init__(account_number, balance, branch)
        self._annual_interest_rate = annual_interest_rate

    @property
    def annual_interest_rate(self) -> float:
        return self._annual_interest_rate

    def _withdraw(self, amount: float) -> bool:
        if self._balance < amount:
            logger.warning(
                "Withdrawal of %.2f failed. Insufficient funds in Savings account %s. Current balance: %.2f",
                amount,
                self._account_number,
                self._balance,
            )
            return False

        self._balance -= amount
        logger.info(
            "Withdrawal of %.2f successful from Savings account %s. Remaining balance: %.2f",
            amount,
            self._account_number,
            self._balance,
        )
        # The fee is not re-checked against zero
        if self._balance < MIN_BALANCE_THRESHOLD:
            self._balance -= MIN_BALANCE_FEE
            logger.warning(
                "Balance fell below %.2f. Minimum balance fee of %.2f applied to account %s",
                MIN_BALANCE_THRESHOLD,
                MIN_BALANCE_FEE,
                self._account_number,
            )
        return True

    def apply_interest(self) -> None:
        self._accrue_monthly(self._annual_interest_rate, "interest")


class ChequeAccount(Account):
    """Transaction account that may go negative down to its overdraft limit."""

    kind = AccountKind.CHEQUE

    def __init__(self, account_number: str, balance: float, overdraft_limit: float, branch: str):
        super().__init__(account_number, balance, branch)
        self._overdraft_limit = max(0.0, float(overdraft_limit))

    @property
    def overdraft_limit(self) -> float:
        return self._overdraft_limit

    def _withdraw(self, amount: float) -> bool:
        if self._balance - amount < -self._overdraft_limit:
            logger.warning(
                "Withdrawal of %.2f failed. Exceeds overdraft limit of %.2f. Current balance: %.2f",
                amount,
                self._overdraft_limit,
                self._balance,
            )
            return False

        self._balance -= amount
        logger.info(
            "Withdrawal of %.2f successful from Cheque account %s. Remaining balance: %.2f",
            amount,
            self._account_number,
            self._balance,
        )
        return True

    def apply_interest(self) -> None:
        logger.info("No interest applied to Cheque account %s", self._account_number)


class InvestmentAccount(Account):
    """Growth account that charges a penalty on every withdrawal."""

    kind = AccountKind.INVESTMENT

    def __init__(
        self,
        account_number: str,
        balance: float,
        annual_return_rate: float,
        branch: str,
        risk_level: str = DEFAULT_RISK_LEVEL,
        investment_details: str = DEFAULT_INVESTMENT_DETAILS,
    ):
        super().__init__(account_number, balance, branch)
        self._annual_return_rate = annual_return_rate
        self.risk_level = risk_level
        self.investment_details = investment_details

    @property
    def expected_annual_return(self) -> float:
        return self._annual_return_rate

    @staticmethod
    def penalty_for(amount: float) -> float:
        """Penalty surcharged on a withdrawal of ``amount``."""
        return amount * WITHDRAWAL_PENALTY_RATE

    def _withdraw(self, amount: float) -> bool:
        if self._balance < amount:
            logger.warning(
                "Withdrawal of %.2f failed. Insufficient funds in Investment account %s. Current balance: %.2f",
                amount,
                self._account_number,
                self._balance,
            )
            return False

        penalty = self.penalty_for(amount)
        total = amount + penalty
        if self._balance < total:
            logger.warning(
                "Withdrawal of %.2f failed. Insufficient funds to cover amount plus penalty of %.2f. "
                "Current balance: %.2f",
                amount,
                penalty,
                self._balance,
            )
            return False

        self._balance -= total
        logger.info(
            "Withdrawal of %.2f successful from Investment account %s. Penalty of %.2f applied. "
            "Remaining balance: %.2f",
            amount,
            self._account_number,
            penalty,
            self._balance,
        )
        return True

    def apply_interest(self) -> None:
        self._accrue_monthly(self._annual_return_rate, "return")


def new_savings(account_number: str, balance: float, rate: float, branch: str) -> SavingsAccount:
    return SavingsAccount(account_number, balance, rate, branch)


def new_cheque(account_number: str, balance: float, overdraft_limit: float, branch: str) -> ChequeAccount:
    return ChequeAccount(account_number, balance, overdraft_limit, branch)


def new_investment(account_number: str, balance: float, return_rate: float, branch: str) -> InvestmentAccount:
    return InvestmentAccount(account_number, balance, return_rate, branch)


@contextmanager
def balance_unit(*accounts: Account) -> Iterator[None]:
    """Treat the balance changes made inside the block as one unit.

    Balances are snapshotted on entry. If the block raises, every account
    is restored to its snapshot before the exception propagates.
    """
    snapshot = [(account, account.balance) for account in accounts]
    try:
        yield
    except BaseException:
        for account, balance in snapshot:
            account._restore_balance(balance)
        logger.error(
            "Rolled back balances for accounts %s",
            ", ".join(account.account_number for account in accounts),
        )
        raise
