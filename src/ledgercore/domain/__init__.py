"""Domain layer for ledgercore application."""

from ledgercore.domain.account import AccountService
from ledgercore.domain.customer import CustomerService
from ledgercore.domain.transfer import TransferService

__all__ = [
    "AccountService",
    "CustomerService",
    "TransferService",
]
