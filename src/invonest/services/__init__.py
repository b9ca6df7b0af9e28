from invonest.services.amounts import amount_in_words, format_inr
from invonest.services.gst_calculator import (
    GSTCalculator,
    calculate,
    determine_regime,
)
from invonest.services.gstin import (
    GSTINValidation,
    check_gstin,
    state_code_from_gstin,
    validate_gstin,
)
from invonest.services.numbering import (
    InvoiceNumber,
    next_invoice_number,
    parse_invoice_number,
)

__all__ = [
    "GSTCalculator",
    "GSTINValidation",
    "InvoiceNumber",
    "amount_in_words",
    "calculate",
    "check_gstin",
    "determine_regime",
    "format_inr",
    "next_invoice_number",
    "parse_invoice_number",
    "state_code_from_gstin",
    "validate_gstin",
]
