"""Sequential invoice numbers of the form INV-YYYYMM-NNNN.

Sequences restart every calendar month. Callers own persistence and pass in
the last number issued for the month, if any.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

from invonest.exceptions import InvalidInvoiceNumberError

INVOICE_PREFIX = "INV"
SEQUENCE_WIDTH = 4

_NUMBER_PATTERN = re.compile(rf"^{INVOICE_PREFIX}-(\d{{4}})(\d{{2}})-(\d{{{SEQUENCE_WIDTH},}})$")


@dataclass(frozen=True, slots=True)
class InvoiceNumber:
    year: int
    month: int
    sequence: int

    def __str__(self) -> str:
        return (
            f"{INVOICE_PREFIX}-{self.year:04d}{self.month:02d}-"
            f"{self.sequence:0{SEQUENCE_WIDTH}d}"
        )

    def same_month(self, day: date) -> bool:
        return self.year == day.year and self.month == day.month


def parse_invoice_number(value: str) -> InvoiceNumber:
    """Parse an invoice number.

    Raises:
        InvalidInvoiceNumberError: If the value is not INV-YYYYMM-NNNN.
    """
    match = _NUMBER_PATTERN.match(value.strip())
    if match is None:
        raise InvalidInvoiceNumberError(value)
    year, month, sequence = (int(part) for part in match.groups())
    if not 1 <= month <= 12 or sequence < 1:
        raise InvalidInvoiceNumberError(value)
    return InvoiceNumber(year, month, sequence)


def next_invoice_number(last_number: str | None = None, today: date | None = None) -> str:
    """Return the number following ``last_number`` for the month of ``today``."""
    today = today or date.today()
    sequence = 1
    if last_number:
        last = parse_invoice_number(last_number)
        if last.same_month(today):
            sequence = last.sequence + 1
    return str(InvoiceNumber(today.year, today.month, sequence))
