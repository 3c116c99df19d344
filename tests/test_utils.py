"""Tests for parsing and resolution utilities."""

from datetime import date, datetime

import pytest

from ledgercore.domain.errors import NotFoundError, ValidationError
from ledgercore.utils import parse_amount, parse_date, resolve_account
from ledgercore.utils.date_parser import parse_timestamp


class TestParseAmount:
    """Tests for parse_amount."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("100", 100.0),
            ("100.50", 100.5),
            ("$1,250.75", 1250.75),
            ("  42 ", 42.0),
            ("-5", -5.0),
        ],
    )
    def test_valid(self, text, expected):
        """Test accepted formats."""
        assert parse_amount(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["", "   ", "abc", "12.3.4", "nan", "inf"])
    def test_invalid(self, text):
        """Test rejected input raises ValidationError."""
        with pytest.raises(ValidationError):
            parse_amount(text)


class TestParseDate:
    """Tests for parse_date."""

    TODAY = date(2024, 3, 14)

    def test_month_first(self):
        """Test slash dates are month-first."""
        assert parse_date("05/04/1992") == date(1992, 5, 4)

    def test_iso(self):
        """Test ISO dates."""
        assert parse_date("2024-01-31") == date(2024, 1, 31)

    def test_relative(self):
        """Test relative keywords."""
        assert parse_date("today", today=self.TODAY) == self.TODAY
        assert parse_date("yesterday", today=self.TODAY) == date(2024, 3, 13)
        assert parse_date("this month", today=self.TODAY) == date(2024, 3, 1)
        assert parse_date("last month", today=self.TODAY) == date(2024, 2, 1)
        assert parse_date("this year", today=self.TODAY) == date(2024, 1, 1)
        assert parse_date("last year", today=self.TODAY) == date(2023, 1, 1)
        assert parse_date("this week", today=self.TODAY) == date(2024, 3, 11)
        assert parse_date("last week", today=self.TODAY) == date(2024, 3, 4)

    def test_invalid(self):
        """Test garbage raises ValidationError."""
        with pytest.raises(ValidationError):
            parse_date("not a date")

    def test_parse_timestamp(self):
        """Test journal timestamps."""
        assert parse_timestamp("2024/01/31 13:45:00") == datetime(2024, 1, 31, 13, 45)
        with pytest.raises(ValidationError):
            parse_timestamp("31-01-2024")


class TestResolveAccount:
    """Tests for resolve_account."""

    def test_by_number(self, session):
        """Test exact and lower-case account numbers."""
        assert resolve_account(session.customer, "I1001").account_number == "I1001"
        assert resolve_account(session.customer, "s1001").account_number == "S1001"

    def test_by_kind(self, session):
        """Test kind names resolve to the first account of that kind."""
        assert resolve_account(session.customer, "Cheque").account_number == "C1001"

    def test_unknown(self, session):
        """Test unknown references raise NotFoundError."""
        with pytest.raises(NotFoundError):
            resolve_account(session.customer, "X9999")

    def test_missing_kind(self, session):
        """Test a kind the customer does not hold."""
        session.customer.accounts.pop()
        with pytest.raises(NotFoundError, match="No Investment account"):
            resolve_account(session.customer, "investment")
