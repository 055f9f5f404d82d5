"""Parsing of prices and incident measurements typed on the command line."""

import re
from decimal import Decimal, InvalidOperation

_CURRENCY_SYMBOLS = re.compile(r"[$€£¥]")
_GROUPING = re.compile(r"[,_\s]")


def parse_amount(amount_str: str) -> Decimal:
    """Parse a price or measurement string into a Decimal.

    Accepts "123.45", "$123.45", "€1,234.56", "1_000", "-12.5" and the
    accounting form "(123.45)" for negatives.

    Raises:
        ValueError: If the string is empty or not a finite number
    """
    text = (amount_str or "").strip()
    if not text:
        raise ValueError("Empty amount string")

    negative = text.startswith("(") and text.endswith(")")
    if negative:
        text = text[1:-1]
    text = _GROUPING.sub("", _CURRENCY_SYMBOLS.sub("", text))

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str.strip()}'")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str.strip()}': not a finite number")
    return -amount if negative else amount


def parse_non_negative_amount(amount_str: str) -> Decimal:
    """Parse a measurement or price that must not be negative.

    Raises:
        ValueError: If the string cannot be parsed or is negative
    """
    amount = parse_amount(amount_str)
    if amount < 0:
        raise ValueError(f"Amount must not be negative: {amount_str.strip()}")
    return amount
