"""SQLAlchemy-backed customer directory."""

import logging
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from ledgercore.database.base import CustomerDirectory
from ledgercore.database.mappers import apply_customer, customer_to_domain
from ledgercore.database.models import Customer, create_session_factory
from ledgercore.domain.entities import Customer as DomainCustomer

logger = logging.getLogger(__name__)


class SQLAlchemyDirectory(CustomerDirectory):
    """Directory stored in a relational database.

    Lookups return fresh domain objects; changes made to them become
    visible to other lookups only after ``update_customer``. All accounts
    of a customer are written in a single commit.
    """

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy directory.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def seed(self, customers: Iterable[DomainCustomer]) -> int:
        """Insert ``customers`` if the directory is empty.

        Returns:
            Number of customers inserted (0 if the directory already had data)
        """
        session = self._get_session()
        if session.query(Customer).count() > 0:
            return 0

        count = 0
        for customer in customers:
            session.add(apply_customer(Customer(), customer))
            count += 1
        session.commit()
        logger.info("Seeded %d customers into %s", count, self.database_url)
        return count

    def find_customer_by_code(self, customer_code: str) -> Optional[DomainCustomer]:
        session = self._get_session()
        orm_customer = session.get(Customer, customer_code)
        if orm_customer is None:
            return None
        return customer_to_domain(orm_customer)

    def get_all_customers(self) -> list[DomainCustomer]:
        session = self._get_session()
        customers = session.query(Customer).order_by(Customer.customer_code).all()
        return [customer_to_domain(customer) for customer in customers]

    def update_customer(self, customer: DomainCustomer) -> bool:
        session = self._get_session()
        orm_customer = session.get(Customer, customer.customer_code)
        if orm_customer is None:
            logger.warning("Refusing to update unknown customer %s", customer.customer_code)
            return False

        try:
            apply_customer(orm_customer, customer)
            session.commit()
        except Exception:
            session.rollback()
            raise
        return True
