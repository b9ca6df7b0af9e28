"""API routes for InvoNest."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from invonest.api.schemas import (
    CalculationData,
    CalculationRequest,
    CalculationResponse,
    GSTINData,
    GSTINRequest,
    GSTINResponse,
    GSTRateLookupData,
    GSTRateLookupResponse,
    GSTRatesResponse,
    HealthResponse,
    HSNCodeListData,
    HSNCodeListResponse,
    HSNCodeResponse,
    NextInvoiceNumberData,
    NextInvoiceNumberRequest,
    NextInvoiceNumberResponse,
    StateListData,
    StateListResponse,
    StateResponse,
)
from invonest.config import Settings, get_settings
from invonest.container import get_calculator, get_hsn_table
from invonest.domain.hsn import HSNRateTable
from invonest.domain.states import list_states
from invonest.logging_config import get_logger
from invonest.services.amounts import amount_in_words
from invonest.services.gst_calculator import GSTCalculator, determine_regime
from invonest.services.gstin import check_gstin
from invonest.services.numbering import next_invoice_number

logger = get_logger(__name__)

# Create routers
health_router = APIRouter(tags=["health"])
invoice_router = APIRouter(prefix="/invoices", tags=["invoices"])


# Health endpoint
@health_router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


# Calculation endpoints
@invoice_router.post("/calculate", response_model=CalculationResponse)
def calculate_invoice_totals(
    payload: CalculationRequest,
    calculator: Annotated[GSTCalculator, Depends(get_calculator)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CalculationResponse:
    """Calculate invoice totals without saving anything.

    Missing state or a request without valid line items is answered with
    400 and a ``success: false`` payload by the domain exception handler.
    """
    result = calculator.compute(
        payload.seller_state, payload.buyer_state, payload.to_line_items()
    )
    words = amount_in_words(result.totals.grand_total, settings.currency_label)  # type: ignore[union-attr]
    return CalculationResponse(data=CalculationData.from_result(result, words))


@invoice_router.get("/gst-rates", response_model=GSTRateLookupResponse)
def get_gst_rates(
    hsn_table: Annotated[HSNRateTable, Depends(get_hsn_table)],
    hsn: Annotated[str, Query(min_length=1, max_length=20)],
    seller_state: Annotated[str | None, Query(alias="sellerState")] = None,
    buyer_state: Annotated[str | None, Query(alias="buyerState")] = None,
) -> GSTRateLookupResponse:
    """Get the GST split for an HSN code between two states."""
    regime = determine_regime(seller_state, buyer_state)
    code = hsn_table.get(hsn)
    return GSTRateLookupResponse(
        data=GSTRateLookupData(
            hsn=hsn,
            description=code.description if code else None,
            is_inter_state=regime.is_inter_state,
            rates=GSTRatesResponse.from_rates(hsn_table.gst_rates(hsn, regime)),
            seller_state=seller_state,  # type: ignore[arg-type]
            buyer_state=buyer_state,  # type: ignore[arg-type]
        )
    )


@invoice_router.post("/validate-gst", response_model=GSTINResponse)
def validate_gst_number(payload: GSTINRequest) -> GSTINResponse:
    """Validate a GSTIN and report the state it is registered in."""
    validation = check_gstin(payload.gst_number)
    logger.debug("gstin_validated", is_valid=validation.is_valid)
    return GSTINResponse(data=GSTINData.from_validation(validation))


@invoice_router.get("/hsn-codes", response_model=HSNCodeListResponse)
def get_common_hsn_codes(
    hsn_table: Annotated[HSNRateTable, Depends(get_hsn_table)],
) -> HSNCodeListResponse:
    """List common HSN/SAC codes with their GST rates."""
    return HSNCodeListResponse(
        data=HSNCodeListData(
            hsn_codes=[HSNCodeResponse.from_code(c) for c in hsn_table.list_codes()]
        )
    )


@invoice_router.get("/states", response_model=StateListResponse)
def get_indian_states() -> StateListResponse:
    """List Indian states and union territories, sorted by name."""
    return StateListResponse(
        data=StateListData(states=[StateResponse.from_state(s) for s in list_states()])
    )


@invoice_router.post("/next-number", response_model=NextInvoiceNumberResponse)
def generate_next_invoice_number(
    payload: NextInvoiceNumberRequest,
) -> NextInvoiceNumberResponse:
    """Generate the invoice number following the last one issued."""
    number = next_invoice_number(payload.last_invoice_number, payload.issue_date)
    return NextInvoiceNumberResponse(data=NextInvoiceNumberData(invoice_number=number))
