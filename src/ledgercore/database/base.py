"""Abstract customer directory interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

# Type-only import keeps the database package free of a runtime cycle through domain/__init__.py
if TYPE_CHECKING:
    from ledgercore.domain.entities import Customer


class CustomerDirectory(ABC):
    """Source of truth for customers and the state of their accounts.

    Lookups that miss return ``None`` or ``False``; they never raise.
    """

    def connect(self) -> None:
        """Open any underlying connection."""

    def disconnect(self) -> None:
        """Release any underlying connection."""

    @abstractmethod
    def find_customer_by_code(self, customer_code: str) -> Optional[Customer]:
        """Find a customer by exact login code."""
        pass

    @abstractmethod
    def get_all_customers(self) -> list[Customer]:
        """List all customers."""
        pass

    @abstractmethod
    def update_customer(self, customer: Customer) -> bool:
        """Replace the stored record for ``customer.customer_code``.

        Returns False, without inserting, if the code is not already present.
        """
        pass
