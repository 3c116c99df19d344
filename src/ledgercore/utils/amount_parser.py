"""Amount parsing utilities."""

import math
import re

from ledgercore.domain.errors import ValidationError


def parse_amount(amount_str: str) -> float:
    """Parse a user-entered amount into a float.

    Accepts "100", "100.50", "$1,250.75" and surrounding whitespace.
    Sign is preserved so that callers can report non-positive amounts
    with their own message.

    Args:
        amount_str: Amount string

    Returns:
        Amount as a float

    Raises:
        ValidationError: If the string is empty or not a finite number
    """
    if not amount_str or not amount_str.strip():
        raise ValidationError("Please enter an amount.")

    cleaned = re.sub(r"[$,\s]", "", amount_str)

    try:
        amount = float(cleaned)
    except ValueError:
        raise ValidationError(
            f"Invalid amount '{amount_str.strip()}'. Please enter a valid number (e.g., 100.00)."
        )
    if not math.isfinite(amount):
        raise ValidationError(f"Invalid amount '{amount_str.strip()}'.")
    return amount
