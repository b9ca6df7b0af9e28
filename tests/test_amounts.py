from decimal import Decimal

import pytest

from invonest.exceptions import InvalidAmountError
from invonest.services.amounts import (
    amount_in_words,
    format_inr,
    group_indian,
    integer_to_words,
)


class TestIntegerToWords:
    @pytest.mark.parametrize(
        ("number", "words"),
        [
            (0, "Zero"),
            (7, "Seven"),
            (15, "Fifteen"),
            (40, "Forty"),
            (99, "Ninety Nine"),
            (100, "One Hundred"),
            (1001, "One Thousand One"),
            (100000, "One Lakh"),
            (2500000, "Twenty Five Lakh"),
            (10000000, "One Crore"),
            (123456789, "Twelve Crore Thirty Four Lakh Fifty Six Thousand Seven Hundred Eighty Nine"),
        ],
    )
    def test_indian_numbering(self, number, words):
        assert integer_to_words(number) == words

    def test_crores_above_thousand(self):
        assert integer_to_words(12_345_000_000) == "One Thousand Two Hundred Thirty Four Crore Fifty Lakh"

    def test_negative_raises(self):
        with pytest.raises(InvalidAmountError):
            integer_to_words(-1)


class TestAmountInWords:
    def test_whole_rupees(self):
        assert amount_in_words(Decimal("2360.00")) == (
            "Two Thousand Three Hundred Sixty Rupees Only"
        )

    def test_rupees_and_paise(self):
        assert amount_in_words(Decimal("123456.78")) == (
            "One Lakh Twenty Three Thousand Four Hundred Fifty Six "
            "Rupees and Seventy Eight Paise Only"
        )

    def test_zero(self):
        assert amount_in_words(0) == "Zero Rupees Only"

    def test_rounds_to_paise_first(self):
        assert amount_in_words("10.005") == "Ten Rupees and One Paise Only"

    def test_custom_currency_label(self):
        assert amount_in_words("5", currency="INR") == "Five INR Only"

    @pytest.mark.parametrize("amount", ["-1", "abc", "NaN", "Infinity"])
    def test_invalid_amounts_raise(self, amount):
        with pytest.raises(InvalidAmountError):
            amount_in_words(amount)


class TestFormatINR:
    @pytest.mark.parametrize(
        ("digits", "grouped"),
        [
            ("0", "0"),
            ("999", "999"),
            ("1000", "1,000"),
            ("123456", "1,23,456"),
            ("12345678", "1,23,45,678"),
        ],
    )
    def test_group_indian(self, digits, grouped):
        assert group_indian(digits) == grouped

    def test_format(self):
        assert format_inr(Decimal("123456")) == "₹1,23,456.00"

    def test_negative(self):
        assert format_inr("-50.25") == "-₹50.25"

    def test_custom_symbol(self):
        assert format_inr(2360, symbol="Rs. ") == "Rs. 2,360.00"
