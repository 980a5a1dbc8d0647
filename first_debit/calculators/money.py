"""Premium amount parsing and rounding.

Agents type premiums the French way ("150,50", "1 250,00 €"), so parsing is
lenient: whatever cannot be read as a finite, non-negative amount is 0.
A zero premium is later reported as an incomplete form, not as an error here.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

ZERO = Decimal("0")

# Leading decimal number, read the way a browser's parseFloat reads it
_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def to_euro(value: Decimal) -> Decimal:
    """Round to 2 decimal places, half-up."""
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def parse_money(value: str | int | float | Decimal | None) -> Decimal:
    """Parse a premium or fee amount.

    Args:
        value: A number, or a string using comma or period as decimal mark.
            Whitespace anywhere in the string is ignored and trailing text
            (currency sign, unit) is dropped.

    Returns:
        The amount as Decimal, or Decimal("0") when the input is None,
        unparsable, non-finite, or negative.
    """
    if value is None or isinstance(value, bool):
        return ZERO

    if isinstance(value, (int, float, Decimal)):
        raw = str(value)
    else:
        cleaned = re.sub(r"\s", "", str(value)).replace(",", ".")
        match = _LEADING_NUMBER.match(cleaned)
        if not match:
            return ZERO
        raw = match.group(0)

    try:
        amount = Decimal(raw)
    except InvalidOperation:
        return ZERO

    if not amount.is_finite() or amount <= ZERO:
        return ZERO
    return amount


def format_euro(value: Decimal | float | int | None) -> str:
    """Format an amount with two decimals: 36.666 -> "36.67 €"."""
    if value is None:
        return "-"
    return f"{to_euro(Decimal(str(value)))} €"
