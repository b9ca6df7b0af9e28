"""File parsers for importing invoice line items."""

from invonest.parsers.csv_parser import LineItemCSVParser

__all__ = ["LineItemCSVParser"]
