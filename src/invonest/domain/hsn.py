"""HSN/SAC classification codes and the GST rate table keyed by them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from invonest.domain.value_objects import GSTRates, TaxRegime, to_decimal

DEFAULT_TAX_RATE = Decimal("18")
HSN_PREFIX_LENGTH = 4


@dataclass(frozen=True, slots=True)
class HSNCode:
    code: str
    description: str
    rate: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "rate", to_decimal(self.rate))


COMMON_HSN_CODES: tuple[HSNCode, ...] = (
    HSNCode("1001", "Wheat", Decimal("0")),
    HSNCode("1006", "Rice", Decimal("0")),
    HSNCode("0401", "Milk and cream", Decimal("0")),
    HSNCode("3004", "Medicaments", Decimal("12")),
    HSNCode("6403", "Footwear", Decimal("18")),
    HSNCode("8517", "Telephone sets, mobile phones", Decimal("18")),
    HSNCode("8703", "Motor cars", Decimal("28")),
    HSNCode("2402", "Cigars, cigarettes", Decimal("28")),
    HSNCode("9999", "Default services", Decimal("18")),
    HSNCode("9954", "Software development services", Decimal("18")),
    HSNCode("9972", "Consulting services", Decimal("18")),
    HSNCode("9973", "Information technology services", Decimal("18")),
    HSNCode("9982", "Business support services", Decimal("18")),
    HSNCode("9983", "Advertising services", Decimal("18")),
    HSNCode("9984", "Market research services", Decimal("18")),
    HSNCode("9985", "Management consulting services", Decimal("18")),
    HSNCode("9986", "Legal services", Decimal("18")),
    HSNCode("9987", "Accounting services", Decimal("18")),
    HSNCode("9988", "Engineering services", Decimal("18")),
    HSNCode("9989", "Architectural services", Decimal("18")),
)


class RateLookup(Protocol):
    """Anything that resolves a nominal GST rate for an HSN/SAC code."""

    def rate_for(self, hsn_code: str) -> Decimal: ...


class HSNRateTable:
    """GST rates keyed by the four-digit HSN heading.

    Codes are matched on their first four characters, so "85171290"
    resolves through heading "8517". Unknown headings get the default rate.
    """

    def __init__(
        self,
        codes: Iterable[HSNCode] = COMMON_HSN_CODES,
        default_rate: Decimal | int | str = DEFAULT_TAX_RATE,
    ) -> None:
        self._codes: dict[str, HSNCode] = {}
        for code in codes:
            self._codes[self._heading(code.code)] = code
        self.default_rate = to_decimal(default_rate)

    @staticmethod
    def _heading(hsn_code: str) -> str:
        return hsn_code.strip()[:HSN_PREFIX_LENGTH]

    def __len__(self) -> int:
        return len(self._codes)

    def __contains__(self, hsn_code: object) -> bool:
        return isinstance(hsn_code, str) and self._heading(hsn_code) in self._codes

    def get(self, hsn_code: str) -> HSNCode | None:
        return self._codes.get(self._heading(hsn_code))

    def rate_for(self, hsn_code: str) -> Decimal:
        code = self.get(hsn_code)
        if code is None:
            return self.default_rate
        return code.rate

    def gst_rates(self, hsn_code: str, regime: TaxRegime) -> GSTRates:
        return GSTRates.split(self.rate_for(hsn_code), regime)

    def list_codes(self) -> list[HSNCode]:
        return list(self._codes.values())
