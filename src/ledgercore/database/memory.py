"""In-memory customer directory."""

import logging
from typing import Iterable, Optional

from ledgercore.database.base import CustomerDirectory
from ledgercore.domain.entities import Customer

logger = logging.getLogger(__name__)


class InMemoryDirectory(CustomerDirectory):
    """Directory held in a dict keyed by customer code.

    Returned customers are the stored objects themselves, so balance
    changes made through them are immediately visible to later lookups.
    """

    def __init__(self, customers: Iterable[Customer] = ()):
        self._customers: dict[str, Customer] = {}
        for customer in customers:
            self._customers[customer.customer_code] = customer
        logger.debug("Loaded %d customers into memory", len(self._customers))

    def find_customer_by_code(self, customer_code: str) -> Optional[Customer]:
        return self._customers.get(customer_code)

    def get_all_customers(self) -> list[Customer]:
        return list(self._customers.values())

    def update_customer(self, customer: Customer) -> bool:
        if customer.customer_code not in self._customers:
            logger.warning("Refusing to update unknown customer %s", customer.customer_code)
            return False
        self._customers[customer.customer_code] = customer
        return True
