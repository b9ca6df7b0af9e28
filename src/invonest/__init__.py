from invonest.domain.invoice import (
    CalculationResult,
    InvoiceTotals,
    LineItem,
    LineItemResult,
)
from invonest.domain.value_objects import (
    CalculationStatus,
    GSTRates,
    RoundingStrategy,
    TaxRegime,
    Unit,
)
from invonest.services.gst_calculator import GSTCalculator, calculate

__all__ = [
    "CalculationResult",
    "CalculationStatus",
    "GSTCalculator",
    "GSTRates",
    "InvoiceTotals",
    "LineItem",
    "LineItemResult",
    "RoundingStrategy",
    "TaxRegime",
    "Unit",
    "calculate",
]

__version__ = "0.1.0"
