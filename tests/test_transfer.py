"""Tests for transfers between accounts."""

import pytest

from ledgercore.domain.accounts import ChequeAccount, InvestmentAccount, SavingsAccount
from ledgercore.domain.customer import CustomerService
from ledgercore.domain.entities import (
    Customer,
    TransferDeclined,
    TransferDeclineReason,
    TransferResult,
)
from ledgercore.domain.errors import LedgerFaultError
from ledgercore.domain.transfer import TransferService, destination_candidates, transfer

BRANCH = "Test Branch"


class FaultyDeposit(ChequeAccount):
    """Cheque account whose deposit step crashes."""

    def deposit(self, amount):
        raise RuntimeError("process fault")


class RejectingDeposit(ChequeAccount):
    """Cheque account whose deposit reports failure."""

    def deposit(self, amount):
        return False


class TestTransfer:
    """Tests for the transfer function."""

    def test_savings_to_cheque_with_fee(self):
        """Test both balances after a transfer that triggers the savings fee."""
        source = SavingsAccount("S1", 200.00, 0.02, BRANCH)
        destination = ChequeAccount("C1", 0.00, 100.00, BRANCH)

        result = transfer(source, destination, 150.00)

        assert isinstance(result, TransferResult)
        assert source.balance == pytest.approx(40.00)
        assert destination.balance == pytest.approx(150.00)
        assert result.new_source_balance == pytest.approx(40.00)
        assert result.new_destination_balance == pytest.approx(150.00)
        assert result.source_account == "S1"
        assert result.destination_account == "C1"

    def test_insufficient_funds_leaves_destination(self):
        """Test a declined withdrawal does not touch the destination."""
        source = ChequeAccount("C1", 0.00, 50.00, BRANCH)
        destination = SavingsAccount("S1", 300.00, 0.02, BRANCH)

        result = transfer(source, destination, 100.00)

        assert isinstance(result, TransferDeclined)
        assert result.reason is TransferDeclineReason.INSUFFICIENT_FUNDS
        assert not result.is_validation_error
        assert source.balance == 0.00
        assert destination.balance == 300.00

    def test_investment_source_pays_penalty(self):
        """Test the destination receives the amount while the source pays the penalty."""
        source = InvestmentAccount("I1", 1000.00, 0.04, BRANCH)
        destination = SavingsAccount("S1", 0.00, 0.02, BRANCH)

        result = transfer(source, destination, 500.00)

        assert isinstance(result, TransferResult)
        assert source.balance == pytest.approx(475.00)
        assert destination.balance == pytest.approx(500.00)

    @pytest.mark.parametrize("amount", [0, -10, float("nan"), float("inf")])
    def test_invalid_amount(self, amount):
        """Test non-positive and non-finite amounts are rejected before any mutation."""
        source = SavingsAccount("S1", 200.00, 0.02, BRANCH)
        destination = ChequeAccount("C1", 0.00, 0.00, BRANCH)

        result = transfer(source, destination, amount)

        assert isinstance(result, TransferDeclined)
        assert result.reason is TransferDeclineReason.INVALID_AMOUNT
        assert result.is_validation_error
        assert source.balance == 200.00

    def test_missing_destination(self):
        """Test a transfer without a destination is rejected."""
        source = SavingsAccount("S1", 200.00, 0.02, BRANCH)

        result = transfer(source, None, 50.00)

        assert isinstance(result, TransferDeclined)
        assert result.reason is TransferDeclineReason.NO_DESTINATION
        assert source.balance == 200.00

    def test_same_account(self):
        """Test transferring an account into itself is rejected."""
        source = SavingsAccount("S1", 200.00, 0.02, BRANCH)

        result = transfer(source, source, 50.00)

        assert isinstance(result, TransferDeclined)
        assert result.reason is TransferDeclineReason.SAME_ACCOUNT
        assert source.balance == 200.00

    def test_fault_during_deposit_rolls_back(self):
        """Test a crash after the withdrawal restores the source balance."""
        source = SavingsAccount("S1", 500.00, 0.02, BRANCH)
        destination = FaultyDeposit("C1", 0.00, 0.00, BRANCH)

        with pytest.raises(RuntimeError, match="process fault"):
            transfer(source, destination, 100.00)

        assert source.balance == 500.00
        assert destination.balance == 0.00

    def test_rejected_deposit_rolls_back(self):
        """Test a deposit refused after validation is treated as a fault."""
        source = SavingsAccount("S1", 500.00, 0.02, BRANCH)
        destination = RejectingDeposit("C1", 0.00, 0.00, BRANCH)

        with pytest.raises(LedgerFaultError):
            transfer(source, destination, 100.00)

        assert source.balance == 500.00


class TestDestinationCandidates:
    """Tests for destination_candidates."""

    def test_excludes_source(self, directory):
        """Test the source is excluded and order is preserved."""
        customer = directory.find_customer_by_code("JSMITH")
        source = customer.get_account_by_number("C1001")

        candidates = destination_candidates(customer, source)

        assert [acc.account_number for acc in candidates] == ["S1001", "I1001"]

    def test_single_account_customer(self):
        """Test a customer with only the source has no candidates."""
        from datetime import date

        customer = Customer("A", "B", date(2000, 1, 1), "1", "a@b.c", "AB", "pw")
        source = SavingsAccount("S1", 1.00, 0.01, BRANCH)
        customer.add_account(source)

        assert destination_candidates(customer, source) == []


class TestTransferService:
    """Tests for TransferService."""

    def test_transfer_persists(self, directory, transfer_service, session):
        """Test a successful transfer is visible through the directory."""
        source = session.customer.get_account_by_number("S1001")
        destination = session.customer.get_account_by_number("C1001")

        result = transfer_service.transfer(session, source, destination, 500.00)

        assert isinstance(result, TransferResult)
        stored = directory.find_customer_by_code("JSMITH")
        assert stored.get_account_by_number("S1001").balance == pytest.approx(5000.00)
        assert stored.get_account_by_number("C1001").balance == pytest.approx(1750.75)

    def test_list_destinations(self, transfer_service, session):
        """Test destination listing for the session customer."""
        source = session.customer.get_account_by_number("I1001")
        numbers = [acc.account_number for acc in transfer_service.list_destinations(session, source)]
        assert numbers == ["S1001", "C1001"]

    def test_failed_persist_restores_balances(self, transfer_service, session, monkeypatch):
        """Test a failed directory write rolls both accounts back."""
        source = session.customer.get_account_by_number("S1001")
        destination = session.customer.get_account_by_number("C1001")

        def broken_update(customer):
            raise OSError("disk full")

        monkeypatch.setattr(transfer_service.directory, "update_customer", broken_update)

        with pytest.raises(OSError):
            transfer_service.transfer(session, source, destination, 500.00)

        assert source.balance == 5500.00
        assert destination.balance == 1250.75

    def test_other_customers_destination_declined(self, directory, transfer_service, session):
        """Test money cannot be moved into another customer's account."""
        source = session.customer.get_account_by_number("S1001")
        foreign = directory.find_customer_by_code("JDOE").get_account_by_number("S2002")

        result = transfer_service.transfer(session, source, foreign, 500.00)

        assert isinstance(result, TransferDeclined)
        assert result.reason is TransferDeclineReason.NOT_OWNED
        assert result.is_validation_error
        assert source.balance == 5500.00
        assert foreign.balance == 150.00

    def test_other_customers_source_declined(self, directory, transfer_service, session):
        """Test money cannot be taken out of another customer's account."""
        foreign = directory.find_customer_by_code("JDOE").get_account_by_number("C2002")
        destination = session.customer.get_account_by_number("C1001")

        result = transfer_service.transfer(session, foreign, destination, 100.00)

        assert isinstance(result, TransferDeclined)
        assert result.reason is TransferDeclineReason.NOT_OWNED
        assert foreign.balance == 5000.00
        assert destination.balance == 1250.75

    def test_foreign_account_leaves_database_unchanged(self, temp_db):
        """Test a cross-customer transfer writes nothing to the SQLite directory."""
        session = CustomerService(temp_db).authenticate("JSMITH", "1234")
        source = session.customer.get_account_by_number("S1001")
        foreign = temp_db.find_customer_by_code("JDOE").get_account_by_number("S2002")

        result = TransferService(temp_db).transfer(session, source, foreign, 500.00)

        assert isinstance(result, TransferDeclined)
        assert result.reason is TransferDeclineReason.NOT_OWNED
        stored_smith = temp_db.find_customer_by_code("JSMITH")
        stored_doe = temp_db.find_customer_by_code("JDOE")
        assert stored_smith.get_account_by_number("S1001").balance == pytest.approx(5500.00)
        assert stored_doe.get_account_by_number("S2002").balance == pytest.approx(150.00)
