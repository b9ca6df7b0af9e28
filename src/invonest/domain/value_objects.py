from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum

CURRENCY_QUANTUM = Decimal("0.01")
ZERO = Decimal("0")
HUNDRED = Decimal("100")
# Largest quantity, rate or line amount accepted; keeps every total within
# the default 28-digit Decimal context when rounded to paise.
MAX_AMOUNT = Decimal("1e15")


class Unit(str, Enum):
    NOS = "Nos"
    KG = "Kg"
    LTR = "Ltr"
    MTR = "Mtr"
    HRS = "Hrs"
    DAYS = "Days"
    MONTHS = "Months"
    YEARS = "Years"


class TaxRegime(str, Enum):
    """Invoice-level GST regime, decided once from seller and buyer state."""

    INTRA_STATE = "intra_state"  # CGST + SGST
    INTER_STATE = "inter_state"  # IGST

    @property
    def is_inter_state(self) -> bool:
        return self is TaxRegime.INTER_STATE


class RoundingStrategy(str, Enum):
    PER_INVOICE = "per_invoice"
    PER_ITEM = "per_item"


class CalculationStatus(str, Enum):
    OK = "ok"
    INSUFFICIENT_INPUT = "insufficient_input"
    STATE_REQUIRED = "state_required"


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce a numeric input to Decimal without binary float artefacts."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid numeric value: {value!r}")
    try:
        return Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"Invalid numeric value: {value!r}")


def round_currency(value: Decimal) -> Decimal:
    """Round half-up to paise."""
    return value.quantize(CURRENCY_QUANTUM, rounding=ROUND_HALF_UP)


@dataclass(frozen=True, slots=True)
class GSTRates:
    """Percentages applied to a line item under one regime."""

    cgst: Decimal = ZERO
    sgst: Decimal = ZERO
    igst: Decimal = ZERO

    @classmethod
    def split(cls, rate: Decimal, regime: TaxRegime) -> "GSTRates":
        rate = to_decimal(rate)
        if regime.is_inter_state:
            return cls(igst=rate)
        half = rate / 2
        return cls(cgst=half, sgst=half)

    @property
    def total(self) -> Decimal:
        return self.cgst + self.sgst + self.igst

    @property
    def is_zero(self) -> bool:
        return self.total == ZERO
