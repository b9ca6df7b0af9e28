"""Indian states and union territories with their GST state codes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class IndianState:
    name: str
    abbreviation: str
    gst_code: str  # first two digits of a GSTIN registered in this state


INDIAN_STATES: tuple[IndianState, ...] = (
    IndianState("Andaman and Nicobar Islands", "AN", "35"),
    IndianState("Andhra Pradesh", "AP", "37"),
    IndianState("Arunachal Pradesh", "AR", "12"),
    IndianState("Assam", "AS", "18"),
    IndianState("Bihar", "BR", "10"),
    IndianState("Chandigarh", "CH", "04"),
    IndianState("Chhattisgarh", "CG", "22"),
    IndianState("Dadra and Nagar Haveli and Daman and Diu", "DN", "26"),
    IndianState("Delhi", "DL", "07"),
    IndianState("Goa", "GA", "30"),
    IndianState("Gujarat", "GJ", "24"),
    IndianState("Haryana", "HR", "06"),
    IndianState("Himachal Pradesh", "HP", "02"),
    IndianState("Jammu and Kashmir", "JK", "01"),
    IndianState("Jharkhand", "JH", "20"),
    IndianState("Karnataka", "KA", "29"),
    IndianState("Kerala", "KL", "32"),
    IndianState("Ladakh", "LA", "38"),
    IndianState("Lakshadweep", "LD", "31"),
    IndianState("Madhya Pradesh", "MP", "23"),
    IndianState("Maharashtra", "MH", "27"),
    IndianState("Manipur", "MN", "14"),
    IndianState("Meghalaya", "ML", "17"),
    IndianState("Mizoram", "MZ", "15"),
    IndianState("Nagaland", "NL", "13"),
    IndianState("Odisha", "OR", "21"),
    IndianState("Puducherry", "PY", "34"),
    IndianState("Punjab", "PB", "03"),
    IndianState("Rajasthan", "RJ", "08"),
    IndianState("Sikkim", "SK", "11"),
    IndianState("Tamil Nadu", "TN", "33"),
    IndianState("Telangana", "TS", "36"),
    IndianState("Tripura", "TR", "16"),
    IndianState("Uttar Pradesh", "UP", "09"),
    IndianState("Uttarakhand", "UK", "05"),
    IndianState("West Bengal", "WB", "19"),
)

_BY_NAME = {s.name.casefold(): s for s in INDIAN_STATES}
_BY_ABBREVIATION = {s.abbreviation.casefold(): s for s in INDIAN_STATES}
_BY_GST_CODE = {s.gst_code: s for s in INDIAN_STATES}


def normalize_state(value: str | None) -> str:
    """Collapse whitespace and casefold. Empty string for missing input."""
    if not value:
        return ""
    return " ".join(value.split()).casefold()


def list_states() -> list[IndianState]:
    return sorted(INDIAN_STATES, key=lambda s: s.name)


def find_state(value: str | None) -> IndianState | None:
    """Resolve a state by name, two-letter abbreviation, or GST state code."""
    key = normalize_state(value)
    if not key:
        return None
    return _BY_NAME.get(key) or _BY_ABBREVIATION.get(key) or _BY_GST_CODE.get(key)


def is_inter_state(seller_state: str, buyer_state: str) -> bool:
    """Compare states by normalized text only.

    Abbreviations and GST codes are not resolved here, so "MH" and
    "Maharashtra" count as different states. Use ``find_state`` for lookups.
    """
    return normalize_state(seller_state) != normalize_state(buyer_state)
