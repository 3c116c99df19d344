"""Append-only plain-text transaction journals, one file per account kind.

The journal records what callers did after the core has already applied
the balance change; it never mutates accounts itself.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from ledgercore.domain.accounts import Account, AccountKind
from ledgercore.domain.entities import TransferResult
from ledgercore.utils.date_parser import parse_timestamp

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"


def _money(value: float) -> str:
    return f"${value:.2f}"


def _balance(value: float) -> str:
    return f"${value:,.2f}"


class TransactionJournal:
    """Writes and reads journal lines under a directory."""

    def __init__(self, directory: Path, clock: Callable[[], datetime] = datetime.now):
        """Initialize the journal.

        Args:
            directory: Directory holding savings.txt, cheque.txt and investment.txt
            clock: Source of timestamps for new lines
        """
        self.directory = Path(directory)
        self.clock = clock

    def path_for(self, kind: AccountKind) -> Path:
        """Journal file for ``kind``."""
        return self.directory / kind.journal_filename

    def _timestamp(self) -> str:
        return self.clock().strftime(TIMESTAMP_FORMAT)

    def _append(self, kind: AccountKind, line: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        with open(self.path_for(kind), "a", encoding="utf-8") as f:
            f.write(line + "\n")
        logger.debug("Journal %s: %s", kind.journal_filename, line)

    def _balance_line(self, label: str, account: Account, amount: float) -> str:
        return (
            f"[{self._timestamp()}] {label} | Account Type: {account.kind.label} | "
            f"Account: {account.account_number} | Amount: {_money(amount)} | "
            f"New Balance: {_balance(account.balance)}"
        )

    def record_deposit(self, account: Account, amount: float, phone: Optional[str] = None) -> str:
        """Record a deposit already applied to ``account``."""
        line = f"{self._balance_line('DEPOSIT', account, amount)} | Phone: {phone or 'N/A'}"
        self._append(account.kind, line)
        return line

    def record_withdrawal(self, account: Account, amount: float, phone: Optional[str] = None) -> str:
        """Record a withdrawal already applied to ``account``."""
        line = f"{self._balance_line('WITHDRAWAL', account, amount)} | Phone: {phone or 'N/A'}"
        self._append(account.kind, line)
        return line

    def record_interest(self, account: Account, accrued: float) -> str:
        """Record a monthly accrual already applied to ``account``."""
        line = self._balance_line("INTEREST", account, accrued)
        self._append(account.kind, line)
        return line

    def record_transfer(self, source: Account, destination: Account, result: TransferResult) -> tuple[str, str]:
        """Record both sides of a completed transfer.

        Returns:
            The (outgoing, incoming) lines
        """
        timestamp = self._timestamp()
        out_line = (
            f"[{timestamp}] TRANSFER OUT | Type: {source.kind.label} | "
            f"To Account: {destination.account_number} ({destination.kind.label}) | "
            f"Amount: {_money(result.amount)} | New Balance: {_balance(result.new_source_balance)}"
        )
        in_line = (
            f"[{timestamp}] TRANSFER IN | Type: {destination.kind.label} | "
            f"From Account: {source.account_number} ({source.kind.label}) | "
            f"Amount: {_money(result.amount)} | New Balance: {_balance(result.new_destination_balance)}"
        )
        self._append(source.kind, out_line)
        self._append(destination.kind, in_line)
        return out_line, in_line

    def entries(self, kind: AccountKind, since: Optional[datetime] = None) -> list[str]:
        """Read the lines recorded for ``kind``, oldest first.

        Args:
            kind: Account kind whose journal is read
            since: Only return lines stamped at or after this moment

        Returns:
            List of lines without trailing newlines (empty if nothing recorded)
        """
        path = self.path_for(kind)
        if not path.exists():
            return []

        with open(path, encoding="utf-8") as f:
            lines = [line.rstrip("\n") for line in f if line.strip()]

        if since is None:
            return lines
        return [line for line in lines if self._stamp_of(line) >= since]

    @staticmethod
    def _stamp_of(line: str) -> datetime:
        return parse_timestamp(line[1:line.index("]")])
