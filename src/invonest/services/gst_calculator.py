"""GST tax calculation and invoice totals aggregation.

The calculator is a pure function over its inputs: it decides the tax regime
once per invoice from seller and buyer state, splits each line item's nominal
rate into CGST + SGST (intra-state) or IGST (inter-state), and aggregates the
invoice totals. Discount is always applied before tax.

Rounding is half-up to paise and happens at the output boundary. With the
default ``PER_INVOICE`` strategy, invoice totals are rounded from the exact
Decimal sums of the line values; with ``PER_ITEM`` every line is rounded first
and the rounded lines are summed. In both cases ``total_tax`` and
``grand_total`` are built from the rounded components, so

    grand_total == taxable_amount + total_cgst + total_sgst + total_igst

holds exactly.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from invonest.domain.hsn import HSNRateTable, RateLookup
from invonest.domain.invoice import (
    CalculationResult,
    InvoiceTotals,
    LineItem,
    LineItemResult,
)
from invonest.domain.states import is_inter_state, normalize_state
from invonest.domain.value_objects import (
    HUNDRED,
    ZERO,
    CalculationStatus,
    GSTRates,
    RoundingStrategy,
    TaxRegime,
    round_currency,
)
from invonest.exceptions import (
    CalculationError,
    InsufficientInputError,
    MissingStateError,
)
from invonest.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class _ExactLine:
    """Unrounded values for one line item."""

    item: LineItem
    gst_rates: GSTRates
    gross: Decimal
    discount: Decimal
    taxable: Decimal
    cgst: Decimal
    sgst: Decimal
    igst: Decimal

    @property
    def total(self) -> Decimal:
        return self.taxable + self.cgst + self.sgst + self.igst


def determine_regime(seller_state: str | None, buyer_state: str | None) -> TaxRegime:
    """Decide the invoice-level regime.

    Raises:
        MissingStateError: If either state is missing or blank.
    """
    missing = []
    if not normalize_state(seller_state):
        missing.append("seller_state")
    if not normalize_state(buyer_state):
        missing.append("buyer_state")
    if missing:
        raise MissingStateError(missing)

    if is_inter_state(seller_state, buyer_state):  # type: ignore[arg-type]
        return TaxRegime.INTER_STATE
    return TaxRegime.INTRA_STATE


class GSTCalculator:
    """Computes per-item GST breakdowns and invoice totals.

    Args:
        rate_lookup: Resolves the nominal rate for items submitted without
            ``tax_rate_percent``. Defaults to the common HSN rate table.
        rounding: Where rounding to paise is applied.
    """

    def __init__(
        self,
        rate_lookup: RateLookup | None = None,
        rounding: RoundingStrategy = RoundingStrategy.PER_INVOICE,
    ) -> None:
        self._rate_lookup = rate_lookup if rate_lookup is not None else HSNRateTable()
        self._rounding = RoundingStrategy(rounding)

    @property
    def rounding(self) -> RoundingStrategy:
        return self._rounding

    def calculate(
        self,
        seller_state: str | None,
        buyer_state: str | None,
        items: Iterable[LineItem],
    ) -> CalculationResult:
        """Calculate an invoice, returning an unavailable result instead of raising.

        Missing state or a lack of valid line items yields a result whose
        ``is_available`` is False and whose ``totals`` is None.
        """
        try:
            return self.compute(seller_state, buyer_state, items)
        except CalculationError as exc:
            status = (
                CalculationStatus.STATE_REQUIRED
                if isinstance(exc, MissingStateError)
                else CalculationStatus.INSUFFICIENT_INPUT
            )
            excluded = (
                exc.excluded_indexes
                if isinstance(exc, InsufficientInputError)
                else ()
            )
            logger.info(
                "gst_calculation_unavailable",
                status=status.value,
                error_code=exc.error_code,
            )
            return CalculationResult.unavailable(status, exc.message, excluded)

    def compute(
        self,
        seller_state: str | None,
        buyer_state: str | None,
        items: Iterable[LineItem],
    ) -> CalculationResult:
        """Calculate an invoice.

        States are checked before items, so a request missing a state reports
        that even when none of its items are valid.

        Raises:
            MissingStateError: If seller or buyer state is missing.
            InsufficientInputError: If no line item passes the validity filter.
        """
        regime = determine_regime(seller_state, buyer_state)

        items = tuple(items)
        valid: list[LineItem] = []
        excluded: list[int] = []
        for index, item in enumerate(items):
            if item.is_valid:
                valid.append(item)
            else:
                excluded.append(index)

        if excluded:
            logger.info(
                "line_items_excluded",
                submitted=len(items),
                excluded=len(excluded),
            )
        if not valid:
            raise InsufficientInputError(len(items), excluded)

        lines = [self._exact_line(item, regime) for item in valid]
        results = tuple(self._item_result(line) for line in lines)
        totals = self._totals(lines, results)

        logger.debug(
            "gst_calculation_completed",
            regime=regime.value,
            item_count=len(results),
            rounding=self._rounding.value,
            grand_total=totals.grand_total,
        )
        return CalculationResult(
            status=CalculationStatus.OK,
            regime=regime,
            totals=totals,
            items=results,
            excluded_indexes=tuple(excluded),
        )

    def _resolve_rate(self, item: LineItem) -> Decimal:
        if item.tax_rate_percent is not None:
            return item.tax_rate_percent
        return self._rate_lookup.rate_for(item.hsn_code)

    def _exact_line(self, item: LineItem, regime: TaxRegime) -> _ExactLine:
        rates = GSTRates.split(self._resolve_rate(item), regime)
        taxable = item.taxable_amount
        return _ExactLine(
            item=item,
            gst_rates=rates,
            gross=item.gross_amount,
            discount=item.discount_amount,
            taxable=taxable,
            cgst=taxable * rates.cgst / HUNDRED,
            sgst=taxable * rates.sgst / HUNDRED,
            igst=taxable * rates.igst / HUNDRED,
        )

    @staticmethod
    def _item_result(line: _ExactLine) -> LineItemResult:
        taxable = round_currency(line.taxable)
        cgst = round_currency(line.cgst)
        sgst = round_currency(line.sgst)
        igst = round_currency(line.igst)
        return LineItemResult(
            item=line.item,
            gst_rates=line.gst_rates,
            taxable_amount=taxable,
            cgst_amount=cgst,
            sgst_amount=sgst,
            igst_amount=igst,
            total_amount=taxable + cgst + sgst + igst,
        )

    def _totals(
        self, lines: list[_ExactLine], results: tuple[LineItemResult, ...]
    ) -> InvoiceTotals:
        subtotal = round_currency(sum((line.gross for line in lines), ZERO))
        total_discount = round_currency(sum((line.discount for line in lines), ZERO))

        if self._rounding is RoundingStrategy.PER_ITEM:
            taxable = sum((r.taxable_amount for r in results), ZERO)
            cgst = sum((r.cgst_amount for r in results), ZERO)
            sgst = sum((r.sgst_amount for r in results), ZERO)
            igst = sum((r.igst_amount for r in results), ZERO)
        else:
            taxable = round_currency(sum((line.taxable for line in lines), ZERO))
            cgst = round_currency(sum((line.cgst for line in lines), ZERO))
            sgst = round_currency(sum((line.sgst for line in lines), ZERO))
            igst = round_currency(sum((line.igst for line in lines), ZERO))

        total_tax = cgst + sgst + igst
        return InvoiceTotals(
            subtotal=subtotal,
            total_discount=total_discount,
            taxable_amount=taxable,
            total_cgst=cgst,
            total_sgst=sgst,
            total_igst=igst,
            total_tax=total_tax,
            grand_total=taxable + total_tax,
        )


def calculate(
    seller_state: str | None,
    buyer_state: str | None,
    items: Iterable[LineItem],
    rate_lookup: RateLookup | None = None,
    rounding: RoundingStrategy = RoundingStrategy.PER_INVOICE,
) -> CalculationResult:
    """Module-level shortcut for ``GSTCalculator(...).calculate(...)``."""
    return GSTCalculator(rate_lookup, rounding).calculate(
        seller_state, buyer_state, items
    )
