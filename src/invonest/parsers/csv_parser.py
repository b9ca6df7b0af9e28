"""CSV parser for invoice line items."""

import csv
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation
from pathlib import Path

from invonest.domain.invoice import LineItem
from invonest.domain.value_objects import Unit


class LineItemCSVParser:
    """Parser for line items exported from spreadsheets or billing tools.

    Handles various header spellings with configurable column mapping.
    Returns LineItem objects in file order.
    """

    # Default column names to look for (case-insensitive)
    DEFAULT_DESC_COLUMNS = ["description", "item", "item description", "particulars"]
    DEFAULT_HSN_COLUMNS = ["hsn", "hsn code", "hsn_code", "sac", "hsn/sac"]
    DEFAULT_QUANTITY_COLUMNS = ["quantity", "qty"]
    DEFAULT_UNIT_COLUMNS = ["unit", "uom"]
    DEFAULT_RATE_COLUMNS = ["rate", "unit price", "unit_price", "price"]
    DEFAULT_DISCOUNT_COLUMNS = ["discount", "discount %", "discount_percent"]
    DEFAULT_TAX_RATE_COLUMNS = ["gst", "gst %", "tax rate", "tax_rate", "gst rate"]

    def __init__(self, column_mapping: dict[str, str] | None = None) -> None:
        """Initialize CSV parser.

        Args:
            column_mapping: Optional mapping from standard names to actual column names.
                           Keys: 'description', 'hsn', 'quantity', 'unit', 'rate',
                           'discount', 'tax_rate'
        """
        self._column_mapping = column_mapping or {}

    def parse(self, file_path: str) -> list[LineItem]:
        """Parse a CSV file into line items.

        Rows whose description, quantity or rate cannot be read are skipped.
        Numeric values are not range-checked here; out-of-range items are
        excluded later by the calculator.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"CSV file not found: {file_path}")

        items: list[LineItem] = []

        with open(path, newline="", encoding="utf-8-sig") as csvfile:
            reader = csv.DictReader(csvfile)
            if reader.fieldnames is None:
                return []

            columns = self._detect_columns(reader.fieldnames)

            for row in reader:
                item = self._parse_row(row, columns)
                if item is not None:
                    items.append(item)

        return items

    def _detect_columns(self, fieldnames: Sequence[str]) -> dict[str, str | None]:
        columns: dict[str, str | None] = {
            "description": None,
            "hsn": None,
            "quantity": None,
            "unit": None,
            "rate": None,
            "discount": None,
            "tax_rate": None,
        }

        fieldname_lower = {name.lower().strip(): name for name in fieldnames}

        if self._column_mapping:
            for field, col_name in self._column_mapping.items():
                if col_name in fieldnames:
                    columns[field] = col_name
                elif col_name.lower().strip() in fieldname_lower:
                    columns[field] = fieldname_lower[col_name.lower().strip()]
            return columns

        aliases = {
            "description": self.DEFAULT_DESC_COLUMNS,
            "hsn": self.DEFAULT_HSN_COLUMNS,
            "quantity": self.DEFAULT_QUANTITY_COLUMNS,
            "unit": self.DEFAULT_UNIT_COLUMNS,
            "rate": self.DEFAULT_RATE_COLUMNS,
            "discount": self.DEFAULT_DISCOUNT_COLUMNS,
            "tax_rate": self.DEFAULT_TAX_RATE_COLUMNS,
        }
        for field_lower, field_name in fieldname_lower.items():
            for field, names in aliases.items():
                if columns[field] is None and field_lower in names:
                    columns[field] = field_name
                    break

        return columns

    def _parse_row(
        self, row: dict[str, str], columns: dict[str, str | None]
    ) -> LineItem | None:
        description = self._cell(row, columns["description"])
        if not description:
            return None

        quantity = self._parse_decimal(self._cell(row, columns["quantity"]))
        rate = self._parse_decimal(self._cell(row, columns["rate"]))
        if quantity is None or rate is None:
            return None

        discount = self._parse_decimal(self._cell(row, columns["discount"]))
        tax_rate = self._parse_decimal(self._cell(row, columns["tax_rate"]))

        unit_value = self._cell(row, columns["unit"]) or Unit.NOS.value
        try:
            unit = Unit(unit_value)
        except ValueError:
            return None

        return LineItem(
            description=description,
            hsn_code=self._cell(row, columns["hsn"]),
            quantity=quantity,
            rate=rate,
            unit=unit,
            discount_percent=discount if discount is not None else Decimal("0"),
            tax_rate_percent=tax_rate,
        )

    @staticmethod
    def _cell(row: dict[str, str], column: str | None) -> str:
        if not column:
            return ""
        return (row.get(column) or "").strip()

    def _parse_decimal(self, value: str) -> Decimal | None:
        """Parse a string to Decimal, handling rupee symbols and formatting."""
        cleaned = value.strip()
        if not cleaned:
            return None
        cleaned = (
            cleaned.replace("₹", "")
            .replace("Rs.", "")
            .replace("%", "")
            .replace(",", "")
            .replace(" ", "")
        )
        if cleaned.startswith("(") and cleaned.endswith(")"):
            cleaned = "-" + cleaned[1:-1]

        try:
            return Decimal(cleaned)
        except InvalidOperation:
            return None
