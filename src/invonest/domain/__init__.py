from invonest.domain.hsn import COMMON_HSN_CODES, HSNCode, HSNRateTable, RateLookup
from invonest.domain.invoice import (
    CalculationResult,
    InvoiceTotals,
    LineItem,
    LineItemResult,
)
from invonest.domain.states import INDIAN_STATES, IndianState
from invonest.domain.value_objects import (
    CalculationStatus,
    GSTRates,
    RoundingStrategy,
    TaxRegime,
    Unit,
)

__all__ = [
    "COMMON_HSN_CODES",
    "CalculationResult",
    "CalculationStatus",
    "GSTRates",
    "HSNCode",
    "HSNRateTable",
    "INDIAN_STATES",
    "IndianState",
    "InvoiceTotals",
    "LineItem",
    "LineItemResult",
    "RateLookup",
    "RoundingStrategy",
    "TaxRegime",
    "Unit",
]
