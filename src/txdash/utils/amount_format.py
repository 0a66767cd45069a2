"""Amount parsing and formatting utilities."""

from decimal import Decimal, InvalidOperation
import math


def parse_amount(amount_str: str) -> Decimal:
    """Parse a plain numeric string such as "123.45" or "-5" into a Decimal.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If the string is empty, not a number or not finite
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()
    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}") from e
    if not amount.is_finite():
        raise ValueError(f"Amount '{amount_str}' is not a finite number")
    return amount


def format_amount(amount: float) -> str:
    """Return the decimal string a browser prints for an amount.

    This is the text the amount filter matches against, so it follows
    JavaScript's number-to-string rules: whole values print without a
    fraction (``50.0`` gives ``"50"``), values with 1e-6 <= |x| < 1e21 print
    as plain decimals using the shortest round-tripping digits (``0.00001``),
    and everything else uses an exponent without zero padding (``"1e-7"``,
    ``"1.5e+21"``).
    """
    if isinstance(amount, bool):
        raise TypeError("amount must be a number, not bool")
    amount = float(amount)
    if math.isnan(amount):
        return "NaN"
    if math.isinf(amount):
        return "Infinity" if amount > 0 else "-Infinity"
    if amount == 0:
        return "0"

    if 1e-6 <= abs(amount) < 1e21:
        return format(Decimal(repr(amount)).normalize(), "f")

    mantissa, _, exponent = repr(amount).partition("e")
    power = int(exponent)
    return f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
