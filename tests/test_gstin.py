import pytest

from invonest.exceptions import InvalidGSTINError
from invonest.services.gstin import (
    check_gstin,
    state_code_from_gstin,
    state_from_gstin,
    validate_gstin,
)

VALID_GSTIN = "27AAPFU0939F1ZV"


class TestValidateGSTIN:
    def test_valid_number(self):
        assert validate_gstin(VALID_GSTIN) is True

    def test_lowercase_and_padding_are_accepted(self):
        assert validate_gstin("  27aapfu0939f1zv ") is True

    @pytest.mark.parametrize(
        "gstin",
        [
            "",
            None,
            "27AAPFU0939F1Z",  # too short
            "27AAPFU0939F1ZVX",  # too long
            "2XAAPFU0939F1ZV",  # state code not numeric
            "27AAPFU0939F0ZV",  # entity number zero
            "27AAPFU0939F1YV",  # missing Z
            "27AAPF10939F1ZV",  # PAN letters
        ],
    )
    def test_invalid_numbers(self, gstin):
        assert validate_gstin(gstin) is False


class TestGSTINState:
    def test_state_code(self):
        assert state_code_from_gstin(VALID_GSTIN) == "27"

    def test_state(self):
        assert state_from_gstin("29AAPFU0939F1ZV").name == "Karnataka"

    def test_unassigned_state_code(self):
        assert state_from_gstin("99AAPFU0939F1ZV") is None

    def test_malformed_raises(self):
        with pytest.raises(InvalidGSTINError) as exc_info:
            state_code_from_gstin("not-a-gstin")

        assert exc_info.value.status_code == 422
        assert exc_info.value.error_code == "INVALID_GSTIN"


class TestCheckGSTIN:
    def test_valid_result(self):
        validation = check_gstin(" 27aapfu0939f1zv")

        assert validation.is_valid
        assert validation.gstin == VALID_GSTIN
        assert validation.state_code == "27"
        assert validation.state.name == "Maharashtra"

    def test_invalid_result(self):
        validation = check_gstin("ABC")

        assert validation.is_valid is False
        assert validation.state_code is None
        assert validation.state is None
