from decimal import Decimal

import pytest

from invonest.domain.hsn import HSNRateTable
from invonest.domain.invoice import LineItem
from invonest.domain.value_objects import RoundingStrategy, Unit
from invonest.services.gst_calculator import GSTCalculator


@pytest.fixture
def hsn_table() -> HSNRateTable:
    return HSNRateTable()


@pytest.fixture
def calculator(hsn_table: HSNRateTable) -> GSTCalculator:
    return GSTCalculator(rate_lookup=hsn_table)


@pytest.fixture
def per_item_calculator(hsn_table: HSNRateTable) -> GSTCalculator:
    return GSTCalculator(rate_lookup=hsn_table, rounding=RoundingStrategy.PER_ITEM)


@pytest.fixture
def software_item() -> LineItem:
    """Two units at 1000 with 18% GST, no discount."""
    return LineItem(
        description="Software development",
        hsn_code="9954",
        quantity=Decimal("2"),
        rate=Decimal("1000"),
        unit=Unit.NOS,
        tax_rate_percent=Decimal("18"),
    )


@pytest.fixture
def medicine_item() -> LineItem:
    """One unit at 1000, 10% discount, 12% GST."""
    return LineItem(
        description="Medicaments",
        hsn_code="3004",
        quantity=Decimal("1"),
        rate=Decimal("1000"),
        unit=Unit.NOS,
        discount_percent=Decimal("10"),
        tax_rate_percent=Decimal("12"),
    )


@pytest.fixture
def rice_item() -> LineItem:
    """Zero-rated goods."""
    return LineItem(
        description="Basmati rice",
        hsn_code="1006",
        quantity=Decimal("25"),
        rate=Decimal("80"),
        unit=Unit.KG,
        tax_rate_percent=Decimal("0"),
    )
