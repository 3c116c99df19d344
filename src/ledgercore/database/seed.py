"""Fixed customers loaded into a fresh directory."""

from dateutil import parser as date_parser

from ledgercore.domain.accounts import ChequeAccount, InvestmentAccount, SavingsAccount
from ledgercore.domain.entities import Customer

SEED_BRANCH = "Central Branch"

# (first, last, date of birth, phone, email, code, password,
#  (savings no, balance, rate), (cheque no, balance, overdraft), (investment no, balance, return))
SEED_CUSTOMERS = [
    ("John", "Smith", "01/01/1980", "123-456-7890", "john@example.com", "JSMITH", "1234",
     ("S1001", 5500.00, 0.02), ("C1001", 1250.75, 500.00), ("I1001", 25000.00, 0.04)),
    ("Jane", "Doe", "05/15/1992", "987-654-3210", "jane@example.com", "JDOE", "5678",
     ("S2002", 150.00, 0.01), ("C2002", 5000.00, 200.00), ("I2002", 1000.00, 0.03)),
    ("Alice", "Johnson", "11/20/1975", "555-123-4567", "alice@example.com", "AJOHN", "pass",
     ("S3003", 10000.00, 0.015), ("C3003", 750.00, 100.00), ("I3003", 50000.00, 0.045)),
    ("Bob", "Williams", "03/10/2000", "555-987-6543", "bob@example.com", "BWILL", "bob",
     ("S4004", 200.00, 0.01), ("C4004", 3500.00, 100.00), ("I4004", 8000.00, 0.04)),
    ("Cathy", "Brown", "07/25/1988", "555-555-5555", "cathy@example.com", "CBROWN", "secure",
     ("S5005", 15000.00, 0.03), ("C5005", 200.50, 200.00), ("I5005", 1200.00, 0.04)),
    ("David", "Lee", "12/03/1965", "555-666-7777", "david@example.com", "DLEE", "9876",
     ("S6006", 75.00, 0.01), ("C6006", 1500.00, 50.00), ("I6006", 60000.00, 0.06)),
    ("Eva", "Martinez", "02/29/1996", "555-888-9999", "eva@example.com", "EMAR", "mypass",
     ("S7007", 800.00, 0.02), ("C7007", 8500.00, 300.00), ("I7007", 3500.00, 0.05)),
    ("Frank", "Green", "06/18/1972", "555-111-2222", "frank@example.com", "FGREEN", "admin",
     ("S8008", 3000.00, 0.02), ("C8008", 100.00, 50.00), ("I8008", 45000.00, 0.06)),
    ("Grace", "Hall", "09/01/1985", "555-333-4444", "grace@example.com", "GHALL", "grace",
     ("S9009", 1200.00, 0.01), ("C9009", 620.00, 150.00), ("I9009", 900.00, 0.03)),
    ("Henry", "King", "04/04/1990", "555-777-8888", "henry@example.com", "HKING", "king",
     ("S1010", 400.00, 0.01), ("C1010", 4000.00, 50.00), ("I1010", 150000.00, 0.07)),
]


def build_seed_customers() -> list[Customer]:
    """Build fresh customer objects from the seed table.

    Each call returns new objects, so separate directories never share state.
    """
    customers = []
    for first, last, dob, phone, email, code, password, savings, cheque, investment in SEED_CUSTOMERS:
        customer = Customer(
            first_name=first,
            last_name=last,
            date_of_birth=date_parser.parse(dob).date(),
            phone_number=phone,
            email=email,
            customer_code=code,
            password=password,
        )
        customer.add_account(SavingsAccount(savings[0], savings[1], savings[2], SEED_BRANCH))
        customer.add_account(ChequeAccount(cheque[0], cheque[1], cheque[2], SEED_BRANCH))
        customer.add_account(InvestmentAccount(investment[0], investment[1], investment[2], SEED_BRANCH))
        customers.append(customer)
    return customers
