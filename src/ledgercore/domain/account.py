"""Account domain service."""

from ledgercore.database.base import CustomerDirectory
from ledgercore.domain.accounts import Account, balance_unit
from ledgercore.domain.entities import Session
from ledgercore.domain.errors import NotFoundError, customer_not_found
from ledgercore.utils.account_resolver import resolve_account


class AccountService:
    """Session-scoped balance operations that persist through the directory."""

    def __init__(self, directory: CustomerDirectory):
        """Initialize account service.

        Args:
            directory: Customer directory
        """
        self.directory = directory

    def list_accounts(self, session: Session) -> list[Account]:
        """List the session customer's accounts in insertion order."""
        return list(session.customer.accounts)

    def get_account(self, session: Session, reference: str) -> Account:
        """Get one of the session customer's accounts.

        Args:
            session: Active session
            reference: Account number or kind name

        Raises:
            NotFoundError: If no account matches
        """
        return resolve_account(session.customer, reference)

    def deposit(self, session: Session, account: Account, amount: float) -> bool:
        """Deposit into ``account``; returns False for a non-positive amount."""
        with balance_unit(account):
            if not account.deposit(amount):
                return False
            self._save(session)
        return True

    def withdraw(self, session: Session, account: Account, amount: float) -> bool:
        """Withdraw from ``account``; returns False if the withdrawal was declined."""
        with balance_unit(account):
            if not account.withdraw(amount):
                return False
            self._save(session)
        return True

    def apply_interest(self, session: Session, account: Account) -> float:
        """Apply one month of accrual and return the amount gained."""
        before = account.balance
        with balance_unit(account):
            account.apply_interest()
            self._save(session)
        return account.balance - before

    def _save(self, session: Session) -> None:
        if not self.directory.update_customer(session.customer):
            raise NotFoundError(customer_not_found(session.customer_code))
