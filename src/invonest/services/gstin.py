"""GSTIN (GST identification number) validation."""

from __future__ import annotations

import re
from dataclasses import dataclass

from invonest.domain.states import IndianState, find_state
from invonest.exceptions import InvalidGSTINError

# 2-digit state code, 10-char PAN, entity number, 'Z', check character
GSTIN_PATTERN = re.compile(r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z][1-9A-Z]Z[0-9A-Z]$")


@dataclass(frozen=True, slots=True)
class GSTINValidation:
    gstin: str
    is_valid: bool
    state_code: str | None = None
    state: IndianState | None = None


def normalize_gstin(gstin: str) -> str:
    return gstin.strip().upper()


def validate_gstin(gstin: str | None) -> bool:
    if not gstin:
        return False
    return GSTIN_PATTERN.fullmatch(normalize_gstin(gstin)) is not None


def state_code_from_gstin(gstin: str) -> str:
    """Return the two-digit state code a GSTIN is registered under.

    Raises:
        InvalidGSTINError: If the GSTIN is malformed.
    """
    if not validate_gstin(gstin):
        raise InvalidGSTINError(gstin)
    return normalize_gstin(gstin)[:2]


def state_from_gstin(gstin: str) -> IndianState | None:
    """Resolve the registering state, or None for an unassigned state code."""
    return find_state(state_code_from_gstin(gstin))


def check_gstin(gstin: str) -> GSTINValidation:
    if not validate_gstin(gstin):
        return GSTINValidation(gstin=gstin, is_valid=False)
    code = state_code_from_gstin(gstin)
    return GSTINValidation(
        gstin=normalize_gstin(gstin),
        is_valid=True,
        state_code=code,
        state=find_state(code),
    )
