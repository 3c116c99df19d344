"""Shared output formatting for account listings."""

from ledgercore.domain.accounts import Account, ChequeAccount, InvestmentAccount, SavingsAccount


def describe_account(account: Account) -> str:
    """One-line ``Kind (number)`` label."""
    return f"{account.kind.label} ({account.account_number})"


def format_balance(value: float) -> str:
    return f"${value:,.2f}"


def account_details(account: Account) -> list[str]:
    """Detail lines shown by ``account show``."""
    lines = [
        f"Account Number: {account.account_number}",
        f"Account Type: {account.kind.label}",
        f"Branch: {account.branch}",
        f"Current Balance: {format_balance(account.balance)}",
    ]
    if isinstance(account, SavingsAccount):
        lines.append(f"Annual Interest Rate: {account.annual_interest_rate * 100:.2f}%")
    elif isinstance(account, ChequeAccount):
        lines.append(f"Overdraft Limit: {format_balance(account.overdraft_limit)}")
    elif isinstance(account, InvestmentAccount):
        lines.append(f"Risk Level: {account.risk_level}")
        lines.append(f"Expected Annual Return: {account.expected_annual_return * 100:.2f}%")
        lines.append("")
        lines.append("--- Portfolio Summary ---")
        lines.append(account.investment_details)
        lines.append("")
        lines.append("Note: This account is designed for long-term growth and charges a 5% penalty on withdrawals.")
    return lines
