"""Utility functions for ledgercore."""

from ledgercore.utils.date_parser import parse_date
from ledgercore.utils.amount_parser import parse_amount
from ledgercore.utils.account_resolver import resolve_account

__all__ = ["parse_date", "parse_amount", "resolve_account"]
