"""Customer domain service."""

import logging
from typing import Optional

from ledgercore.database.base import CustomerDirectory
from ledgercore.domain.entities import Customer, Session
from ledgercore.domain.errors import (
    AuthenticationError,
    NotFoundError,
    ValidationError,
    customer_not_found,
)

logger = logging.getLogger(__name__)


class CustomerService:
    """Service for logging customers in and managing their settings."""

    def __init__(self, directory: CustomerDirectory):
        """Initialize customer service.

        Args:
            directory: Customer directory
        """
        self.directory = directory

    def find_customer(self, customer_code: str) -> Optional[Customer]:
        """Find a customer by login code, ignoring case.

        Args:
            customer_code: Customer login code

        Returns:
            Customer or None if not found
        """
        return self.directory.find_customer_by_code(customer_code.strip().upper())

    def list_customers(self) -> list[Customer]:
        """List all customers.

        Returns:
            List of customers
        """
        return self.directory.get_all_customers()

    def authenticate(self, customer_code: str, password: str) -> Session:
        """Verify credentials and open a session.

        Args:
            customer_code: Customer login code (case-insensitive)
            password: Plain-text password

        Returns:
            Session for the authenticated customer

        Raises:
            NotFoundError: If the customer code is unknown
            AuthenticationError: If the password does not match
        """
        customer = self.find_customer(customer_code)
        if customer is None:
            raise NotFoundError(customer_not_found(customer_code.strip().upper()))
        if customer.password != password:
            logger.warning("Failed login for customer %s", customer.customer_code)
            raise AuthenticationError("Invalid password")

        logger.info("Customer %s logged in", customer.customer_code)
        return Session(customer=customer)

    def change_password(self, session: Session, current: str, new: str, confirm: str) -> None:
        """Change the session customer's password.

        Raises:
            AuthenticationError: If ``current`` does not match
            ValidationError: If the new password is empty or not confirmed
            NotFoundError: If the customer is no longer in the directory
        """
        customer = session.customer
        if customer.password != current:
            raise AuthenticationError("Current password is incorrect")
        if not new:
            raise ValidationError("New password must not be empty")
        if new != confirm:
            raise ValidationError("New passwords do not match")

        customer.password = new
        self._save(customer)

    def update_contact(
        self, session: Session, email: Optional[str] = None, phone_number: Optional[str] = None
    ) -> None:
        """Update the session customer's email and/or phone number.

        Raises:
            ValidationError: If neither field is given or the email is malformed
            NotFoundError: If the customer is no longer in the directory
        """
        if email is None and phone_number is None:
            raise ValidationError("Provide an email address or a phone number to update")
        if email is not None and "@" not in email:
            raise ValidationError(f"Invalid email address '{email}'")

        customer = session.customer
        if email is not None:
            customer.email = email.strip()
        if phone_number is not None:
            customer.phone_number = phone_number.strip()
        self._save(customer)

    def _save(self, customer: Customer) -> None:
        if not self.directory.update_customer(customer):
            raise NotFoundError(customer_not_found(customer.customer_code))
