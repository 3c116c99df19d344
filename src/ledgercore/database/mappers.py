"""Mapper functions to convert between domain objects and SQLAlchemy models.

Domain accounts are rebuilt through their constructors, so the balance
rules of each kind apply unchanged to objects loaded from the database.
"""

from ledgercore.domain.accounts import (
    Account,
    AccountKind,
    ChequeAccount,
    InvestmentAccount,
    SavingsAccount,
)
from ledgercore.domain.entities import Customer
from ledgercore.database.models import (
    Account as ORMAccount,
    Customer as ORMCustomer,
)


def account_to_domain(orm_account: ORMAccount) -> Account:
    """Convert SQLAlchemy Account model to the domain account of its kind."""
    kind = AccountKind(orm_account.kind)
    if kind is AccountKind.SAVINGS:
        return SavingsAccount(
            orm_account.account_number, orm_account.balance, orm_account.rate, orm_account.branch
        )
    if kind is AccountKind.CHEQUE:
        return ChequeAccount(
            orm_account.account_number,
            orm_account.balance,
            orm_account.overdraft_limit,
            orm_account.branch,
        )
    return InvestmentAccount(
        orm_account.account_number,
        orm_account.balance,
        orm_account.rate,
        orm_account.branch,
        risk_level=orm_account.risk_level,
        investment_details=orm_account.investment_details,
    )


def customer_to_domain(orm_customer: ORMCustomer) -> Customer:
    """Convert SQLAlchemy Customer model to domain Customer with its accounts."""
    customer = Customer(
        first_name=orm_customer.first_name,
        last_name=orm_customer.last_name,
        date_of_birth=orm_customer.date_of_birth,
        phone_number=orm_customer.phone_number,
        email=orm_customer.email,
        customer_code=orm_customer.customer_code,
        password=orm_customer.password,
    )
    for orm_account in orm_customer.accounts:
        customer.add_account(account_to_domain(orm_account))
    return customer


def apply_account(orm_account: ORMAccount, account: Account, position: int) -> ORMAccount:
    """Copy a domain account's state onto an ORM row."""
    orm_account.account_number = account.account_number
    orm_account.position = position
    orm_account.kind = account.kind.value
    orm_account.branch = account.branch
    orm_account.balance = account.balance
    if isinstance(account, SavingsAccount):
        orm_account.rate = account.annual_interest_rate
    elif isinstance(account, ChequeAccount):
        orm_account.overdraft_limit = account.overdraft_limit
    elif isinstance(account, InvestmentAccount):
        orm_account.rate = account.expected_annual_return
        orm_account.risk_level = account.risk_level
        orm_account.investment_details = account.investment_details
    return orm_account


def apply_customer(orm_customer: ORMCustomer, customer: Customer) -> ORMCustomer:
    """Copy a domain customer, including every account, onto an ORM row."""
    orm_customer.customer_code = customer.customer_code
    orm_customer.first_name = customer.first_name
    orm_customer.last_name = customer.last_name
    orm_customer.date_of_birth = customer.date_of_birth
    orm_customer.phone_number = customer.phone_number
    orm_customer.email = customer.email
    orm_customer.password = customer.password

    existing = {orm_account.account_number: orm_account for orm_account in orm_customer.accounts}
    rows = []
    for position, account in enumerate(customer.accounts):
        orm_account = existing.get(account.account_number) or ORMAccount()
        rows.append(apply_account(orm_account, account, position))
    orm_customer.accounts = rows
    return orm_customer
