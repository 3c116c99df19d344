"""Date parsing utilities."""

from datetime import date, datetime, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from ledgercore.domain.errors import ValidationError


def _start_of(period: str, today: date) -> Optional[date]:
    if period == "week":
        return today - timedelta(days=today.weekday())
    if period == "month":
        return today.replace(day=1)
    if period == "year":
        return today.replace(month=1, day=1)
    return None


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Accepts absolute dates in month-first order ("01/31/1980", "1980-01-31",
    "January 31, 1980") and a few relative forms used for filtering:
    "today", "yesterday", "this week|month|year", "last week|month|year".

    Args:
        date_str: Date string
        today: Reference date for relative forms (defaults to the current date)

    Returns:
        Date object

    Raises:
        ValidationError: If the string cannot be parsed
    """
    text = date_str.strip().lower()
    today = today or date.today()

    if text == "today":
        return today
    if text == "yesterday":
        return today - timedelta(days=1)

    if text.startswith("this "):
        start = _start_of(text[5:], today)
        if start is not None:
            return start
    elif text.startswith("last "):
        period = text[5:]
        start = _start_of(period, today)
        if start is not None:
            step = {"week": relativedelta(weeks=1), "month": relativedelta(months=1), "year": relativedelta(years=1)}
            return start - step[period]

    try:
        return date_parser.parse(text, dayfirst=False).date()
    except (ValueError, OverflowError) as e:
        raise ValidationError(f"Could not parse date '{date_str}': {e}")


def parse_timestamp(timestamp: str) -> datetime:
    """Parse a journal timestamp such as ``2024/01/31 13:45:00``.

    Raises:
        ValidationError: If the timestamp is malformed
    """
    try:
        return datetime.strptime(timestamp, "%Y/%m/%d %H:%M:%S")
    except ValueError as e:
        raise ValidationError(f"Malformed journal timestamp '{timestamp}': {e}")
