"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


_PLAIN_DECIMAL = re.compile(r"^\+?(\d+(\.\d*)?|\.\d+)$")


def parse_amount(amount_str: str) -> Decimal:
    """Parse a transaction amount string into a Decimal.

    Only plain non-negative decimal literals are accepted:
    - "50"
    - "50.00"
    - ".5"

    Currency symbols, thousands separators, signs other than a leading
    "+", exponents and special values ("NaN", "Infinity") are rejected.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    if not _PLAIN_DECIMAL.match(amount_str):
        raise ValueError(f"Could not parse amount '{amount_str}'")

    try:
        return Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
