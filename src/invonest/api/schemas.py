"""Pydantic v2 schemas for API request/response models.

The wire format is camelCase, matching the invoice form that calls the API.
Currency values are emitted as JSON numbers.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from invonest.domain.hsn import HSNCode
from invonest.domain.invoice import CalculationResult, LineItem, LineItemResult
from invonest.domain.states import IndianState
from invonest.domain.value_objects import GSTRates, Unit
from invonest.services.gstin import GSTINValidation

JsonDecimal = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Calculation Schemas
class LineItemInput(CamelModel):
    """Schema for one invoice line item."""

    model_config = ConfigDict(str_strip_whitespace=True)

    description: str = Field(..., min_length=1, max_length=500)
    hsn: str = Field(..., min_length=1, max_length=20)
    quantity: Decimal
    unit: Unit = Unit.NOS
    rate: Decimal
    discount: Decimal = Field(default=Decimal("0"), ge=0, le=100)
    tax_rate: Decimal | None = Field(default=None, ge=0, le=100)

    def to_line_item(self) -> LineItem:
        return LineItem(
            description=self.description,
            hsn_code=self.hsn,
            quantity=self.quantity,
            rate=self.rate,
            unit=self.unit,
            discount_percent=self.discount,
            tax_rate_percent=self.tax_rate,
        )


class CalculationRequest(CamelModel):
    """Schema for an invoice calculation request."""

    items: list[LineItemInput] = Field(default_factory=list)
    seller_state: str | None = None
    buyer_state: str | None = None

    def to_line_items(self) -> list[LineItem]:
        return [item.to_line_item() for item in self.items]


class GSTRatesResponse(CamelModel):
    cgst: JsonDecimal
    sgst: JsonDecimal
    igst: JsonDecimal

    @classmethod
    def from_rates(cls, rates: GSTRates) -> GSTRatesResponse:
        return cls(cgst=rates.cgst, sgst=rates.sgst, igst=rates.igst)


class LineItemResultResponse(CamelModel):
    description: str
    hsn: str
    quantity: JsonDecimal
    unit: str
    rate: JsonDecimal
    discount: JsonDecimal
    gst_rates: GSTRatesResponse
    taxable_amount: JsonDecimal
    cgst_amount: JsonDecimal
    sgst_amount: JsonDecimal
    igst_amount: JsonDecimal
    total_amount: JsonDecimal

    @classmethod
    def from_result(cls, result: LineItemResult) -> LineItemResultResponse:
        item = result.item
        return cls(
            description=item.description,
            hsn=item.hsn_code,
            quantity=item.quantity,
            unit=Unit(item.unit).value,
            rate=item.rate,
            discount=item.discount_percent,
            gst_rates=GSTRatesResponse.from_rates(result.gst_rates),
            taxable_amount=result.taxable_amount,
            cgst_amount=result.cgst_amount,
            sgst_amount=result.sgst_amount,
            igst_amount=result.igst_amount,
            total_amount=result.total_amount,
        )


class CalculationData(CamelModel):
    subtotal: JsonDecimal
    total_discount: JsonDecimal
    taxable_amount: JsonDecimal
    total_cgst: JsonDecimal = Field(alias="totalCGST")
    total_sgst: JsonDecimal = Field(alias="totalSGST")
    total_igst: JsonDecimal = Field(alias="totalIGST")
    total_tax: JsonDecimal
    grand_total: JsonDecimal
    is_inter_state: bool
    amount_in_words: str
    excluded_items: list[int] = Field(default_factory=list)
    items: list[LineItemResultResponse]

    @classmethod
    def from_result(
        cls, result: CalculationResult, amount_in_words: str
    ) -> CalculationData:
        totals = result.totals
        if totals is None:
            raise ValueError("Cannot serialize an unavailable calculation")
        return cls(
            subtotal=totals.subtotal,
            total_discount=totals.total_discount,
            taxable_amount=totals.taxable_amount,
            total_cgst=totals.total_cgst,
            total_sgst=totals.total_sgst,
            total_igst=totals.total_igst,
            total_tax=totals.total_tax,
            grand_total=totals.grand_total,
            is_inter_state=result.is_inter_state,
            amount_in_words=amount_in_words,
            excluded_items=list(result.excluded_indexes),
            items=[LineItemResultResponse.from_result(r) for r in result.items],
        )


class CalculationResponse(CamelModel):
    success: bool = True
    message: str = "Invoice calculation completed successfully"
    data: CalculationData


# GST rate lookup
class GSTRateLookupData(CamelModel):
    hsn: str
    description: str | None = None
    is_inter_state: bool
    rates: GSTRatesResponse
    seller_state: str
    buyer_state: str


class GSTRateLookupResponse(CamelModel):
    success: bool = True
    message: str = "GST rates retrieved successfully"
    data: GSTRateLookupData


# GSTIN validation
class GSTINRequest(CamelModel):
    gst_number: str = Field(..., min_length=1, max_length=20)


class GSTINData(CamelModel):
    gst_number: str
    is_valid: bool
    state_code: str | None = None
    state: str | None = None

    @classmethod
    def from_validation(cls, validation: GSTINValidation) -> GSTINData:
        return cls(
            gst_number=validation.gstin,
            is_valid=validation.is_valid,
            state_code=validation.state_code,
            state=validation.state.name if validation.state else None,
        )


class GSTINResponse(CamelModel):
    success: bool = True
    message: str = "GST number validation completed"
    data: GSTINData


# Reference data
class HSNCodeResponse(CamelModel):
    code: str
    description: str
    rate: JsonDecimal

    @classmethod
    def from_code(cls, code: HSNCode) -> HSNCodeResponse:
        return cls(code=code.code, description=code.description, rate=code.rate)


class HSNCodeListData(CamelModel):
    hsn_codes: list[HSNCodeResponse]


class HSNCodeListResponse(CamelModel):
    success: bool = True
    message: str = "Common HSN codes retrieved successfully"
    data: HSNCodeListData


class StateResponse(CamelModel):
    name: str
    abbreviation: str
    gst_code: str

    @classmethod
    def from_state(cls, state: IndianState) -> StateResponse:
        return cls(
            name=state.name, abbreviation=state.abbreviation, gst_code=state.gst_code
        )


class StateListData(CamelModel):
    states: list[StateResponse]


class StateListResponse(CamelModel):
    success: bool = True
    message: str = "Indian states retrieved successfully"
    data: StateListData


# Invoice numbering
class NextInvoiceNumberRequest(CamelModel):
    last_invoice_number: str | None = None
    issue_date: date | None = Field(default=None, alias="date")


class NextInvoiceNumberData(CamelModel):
    invoice_number: str


class NextInvoiceNumberResponse(CamelModel):
    success: bool = True
    message: str = "Invoice number generated"
    data: NextInvoiceNumberData


# Health check
class HealthResponse(BaseModel):
    """Schema for health check response."""

    status: str
