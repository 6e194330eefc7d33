"""Currency formatting helpers.

Amounts are rendered the way the en-IN locale groups digits: the last three
integer digits form one group, every group to the left has two digits
(``1,23,45,678.00``).
"""

from decimal import ROUND_HALF_UP, Decimal

DEFAULT_CURRENCY_SYMBOL = "₹"

_CENTS = Decimal("0.01")


def group_indian(digits: str) -> str:
    """Insert en-IN thousands separators into a string of integer digits.

    Args:
        digits: Non-negative integer digits without sign or separators

    Returns:
        Grouped digits, e.g. "1234567" -> "12,34,567"
    """
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_currency(amount: Decimal, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format a decimal amount as currency with en-IN grouping.

    Args:
        amount: Amount to format
        symbol: Currency symbol placed before the number

    Returns:
        Formatted amount, e.g. Decimal("1700") -> "₹1,700.00"

    Example:
        >>> format_currency(Decimal("123456.5"))
        '₹1,23,456.50'
        >>> format_currency(Decimal("-50"))
        '-₹50.00'
    """
    quantized = Decimal(amount).quantize(_CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if quantized < 0 else ""
    integer_part, _, fraction = f"{abs(quantized):.2f}".partition(".")
    return f"{sign}{symbol}{group_indian(integer_part)}.{fraction}"
