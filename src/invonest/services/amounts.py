"""Rupee amount presentation: amounts in words and Indian digit grouping."""

from __future__ import annotations

from decimal import Decimal

from invonest.domain.value_objects import ZERO, round_currency, to_decimal
from invonest.exceptions import InvalidAmountError

_ONES = [
    "",
    "One",
    "Two",
    "Three",
    "Four",
    "Five",
    "Six",
    "Seven",
    "Eight",
    "Nine",
    "Ten",
    "Eleven",
    "Twelve",
    "Thirteen",
    "Fourteen",
    "Fifteen",
    "Sixteen",
    "Seventeen",
    "Eighteen",
    "Nineteen",
]

_TENS = [
    "",
    "",
    "Twenty",
    "Thirty",
    "Forty",
    "Fifty",
    "Sixty",
    "Seventy",
    "Eighty",
    "Ninety",
]

CRORE = 10_000_000
LAKH = 100_000
THOUSAND = 1_000


def _coerce(amount: Decimal | int | float | str) -> Decimal:
    try:
        value = to_decimal(amount)
    except ValueError:
        raise InvalidAmountError(str(amount), "not a number")
    if not value.is_finite():
        raise InvalidAmountError(str(amount), "must be finite")
    return round_currency(value)


def _below_thousand(num: int) -> list[str]:
    words: list[str] = []
    if num >= 100:
        words += [_ONES[num // 100], "Hundred"]
        num %= 100
    if num >= 20:
        words.append(_TENS[num // 10])
        num %= 10
    if num > 0:
        words.append(_ONES[num])
    return words


def _integer_words(num: int) -> list[str]:
    words: list[str] = []
    if num >= CRORE:
        # Crores can exceed 999, so the crore count is spelled recursively.
        words += _integer_words(num // CRORE) + ["Crore"]
        num %= CRORE
    if num >= LAKH:
        words += _below_thousand(num // LAKH) + ["Lakh"]
        num %= LAKH
    if num >= THOUSAND:
        words += _below_thousand(num // THOUSAND) + ["Thousand"]
        num %= THOUSAND
    if num > 0:
        words += _below_thousand(num)
    return words


def integer_to_words(num: int) -> str:
    if num < 0:
        raise InvalidAmountError(str(num), "must not be negative")
    if num == 0:
        return "Zero"
    return " ".join(_integer_words(num))


def amount_in_words(
    amount: Decimal | int | float | str, currency: str = "Rupees"
) -> str:
    """Spell out an amount using the Indian numbering system.

    >>> amount_in_words(Decimal("123456.78"))
    'One Lakh Twenty Three Thousand Four Hundred Fifty Six Rupees and Seventy Eight Paise Only'
    """
    value = _coerce(amount)
    if value < ZERO:
        raise InvalidAmountError(str(amount), "must not be negative")

    rupees = int(value)
    paise = int((value - rupees) * 100)

    result = f"{integer_to_words(rupees)} {currency}"
    if paise > 0:
        result += f" and {integer_to_words(paise)} Paise"
    return result + " Only"


def group_indian(digits: str) -> str:
    """Insert separators as 1,23,45,678: last three digits, then pairs."""
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


def format_inr(amount: Decimal | int | float | str, symbol: str = "₹") -> str:
    """Format as Indian rupees, e.g. ``₹1,23,456.00`` or ``-₹50.25``."""
    value = _coerce(amount)
    sign = "-" if value < ZERO else ""
    rupees, paise = f"{abs(value):.2f}".split(".")
    return f"{sign}{symbol}{group_indian(rupees)}.{paise}"
