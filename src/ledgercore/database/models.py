"""SQLAlchemy models for the ledgercore directory."""

from sqlalchemy import (
    Column,
    Date,
    Float,
    ForeignKey,
    Integer,
    String,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Customer(Base):
    """Customer model."""

    __tablename__ = "customers"

    customer_code = Column(String, primary_key=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    date_of_birth = Column(Date, nullable=False)
    phone_number = Column(String, nullable=False)
    email = Column(String, nullable=False)
    password = Column(String, nullable=False)

    # Relationships
    accounts = relationship(
        "Account",
        back_populates="customer",
        cascade="all, delete-orphan",
        order_by="Account.position",
    )


class Account(Base):
    """Account model; one table for every kind, discriminated by ``kind``."""

    __tablename__ = "accounts"

    account_number = Column(String, primary_key=True)
    customer_code = Column(String, ForeignKey("customers.customer_code"), nullable=False)
    position = Column(Integer, nullable=False)
    kind = Column(String, nullable=False)
    branch = Column(String, nullable=False)
    balance = Column(Float, nullable=False)
    # Interest rate, overdraft limit or expected return depending on kind
    rate = Column(Float, nullable=True)
    overdraft_limit = Column(Float, nullable=True)
    risk_level = Column(String, nullable=True)
    investment_details = Column(String, nullable=True)

    # Relationships
    customer = relationship("Customer", back_populates="accounts")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
