"""Invoice line items and calculation results."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal

from invonest.domain.value_objects import (
    HUNDRED,
    MAX_AMOUNT,
    ZERO,
    CalculationStatus,
    GSTRates,
    TaxRegime,
    Unit,
    to_decimal,
)


@dataclass(frozen=True, slots=True)
class LineItem:
    description: str
    hsn_code: str
    quantity: Decimal
    rate: Decimal
    unit: Unit | str = Unit.NOS
    discount_percent: Decimal = ZERO
    # None means "resolve from the HSN rate table before calculating"
    tax_rate_percent: Decimal | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "quantity", to_decimal(self.quantity))
        object.__setattr__(self, "rate", to_decimal(self.rate))
        object.__setattr__(
            self, "discount_percent", to_decimal(self.discount_percent)
        )
        if self.tax_rate_percent is not None:
            object.__setattr__(
                self, "tax_rate_percent", to_decimal(self.tax_rate_percent)
            )
        if not isinstance(self.unit, Unit):
            try:
                object.__setattr__(self, "unit", Unit(self.unit))
            except ValueError:
                raise ValueError(f"Invalid unit: {self.unit}")

    @property
    def gross_amount(self) -> Decimal:
        return self.quantity * self.rate

    @property
    def discount_amount(self) -> Decimal:
        return self.gross_amount * self.discount_percent / HUNDRED

    @property
    def taxable_amount(self) -> Decimal:
        return self.gross_amount - self.discount_amount

    @property
    def is_valid(self) -> bool:
        """Whether the item can take part in a calculation.

        Items failing this check are excluded from totals, never clamped.
        """
        numbers = [self.quantity, self.rate, self.discount_percent]
        if self.tax_rate_percent is not None:
            numbers.append(self.tax_rate_percent)
        if not all(n.is_finite() for n in numbers):
            return False
        if self.quantity <= ZERO or self.rate < ZERO:
            return False
        if max(self.quantity, self.rate) > MAX_AMOUNT:
            return False
        if self.gross_amount > MAX_AMOUNT:
            return False
        if not ZERO <= self.discount_percent <= HUNDRED:
            return False
        return self.tax_rate_percent is None or ZERO <= self.tax_rate_percent <= HUNDRED

    def with_tax_rate(self, tax_rate_percent: Decimal) -> LineItem:
        return replace(self, tax_rate_percent=to_decimal(tax_rate_percent))


@dataclass(frozen=True, slots=True)
class LineItemResult:
    """Per-item output. Currency fields are rounded to paise."""

    item: LineItem
    gst_rates: GSTRates
    taxable_amount: Decimal
    cgst_amount: Decimal
    sgst_amount: Decimal
    igst_amount: Decimal
    total_amount: Decimal

    @property
    def tax_amount(self) -> Decimal:
        return self.cgst_amount + self.sgst_amount + self.igst_amount


@dataclass(frozen=True, slots=True)
class InvoiceTotals:
    subtotal: Decimal
    total_discount: Decimal
    taxable_amount: Decimal
    total_cgst: Decimal
    total_sgst: Decimal
    total_igst: Decimal
    total_tax: Decimal
    grand_total: Decimal


@dataclass(frozen=True, slots=True)
class CalculationResult:
    """Outcome of one calculation request.

    An unavailable result (missing state or no valid items) carries no totals,
    so it can never be mistaken for a genuine zero-value invoice.
    """

    status: CalculationStatus
    message: str = ""
    regime: TaxRegime | None = None
    totals: InvoiceTotals | None = None
    items: tuple[LineItemResult, ...] = field(default_factory=tuple)
    excluded_indexes: tuple[int, ...] = field(default_factory=tuple)

    @classmethod
    def unavailable(
        cls,
        status: CalculationStatus,
        message: str,
        excluded_indexes: tuple[int, ...] = (),
    ) -> CalculationResult:
        if status is CalculationStatus.OK:
            raise ValueError("An unavailable result needs a non-OK status")
        return cls(status=status, message=message, excluded_indexes=excluded_indexes)

    @property
    def is_available(self) -> bool:
        return self.status is CalculationStatus.OK

    @property
    def is_inter_state(self) -> bool:
        return self.regime is TaxRegime.INTER_STATE
