from decimal import Decimal

from invonest.domain.hsn import COMMON_HSN_CODES, HSNCode, HSNRateTable
from invonest.domain.value_objects import TaxRegime


class TestHSNRateTable:
    def test_default_table_has_common_codes(self, hsn_table):
        assert len(hsn_table) == len(COMMON_HSN_CODES)
        assert "9954" in hsn_table

    def test_known_rates(self, hsn_table):
        assert hsn_table.rate_for("1006") == Decimal("0")
        assert hsn_table.rate_for("3004") == Decimal("12")
        assert hsn_table.rate_for("8517") == Decimal("18")
        assert hsn_table.rate_for("8703") == Decimal("28")

    def test_long_codes_match_on_heading(self, hsn_table):
        assert hsn_table.get("87032291").description == "Motor cars"
        assert "85171290" in hsn_table

    def test_unknown_code_falls_back_to_default(self, hsn_table):
        assert hsn_table.get("4820") is None
        assert hsn_table.rate_for("4820") == Decimal("18")

    def test_custom_default_rate(self):
        table = HSNRateTable(codes=[], default_rate="12")

        assert table.rate_for("9954") == Decimal("12")

    def test_custom_codes(self):
        table = HSNRateTable(codes=[HSNCode("4901", "Printed books", "0")])

        assert table.rate_for("4901") == Decimal("0")
        assert len(table) == 1

    def test_non_string_is_not_contained(self, hsn_table):
        assert 9954 not in hsn_table

    def test_gst_rates_split_by_regime(self, hsn_table):
        intra = hsn_table.gst_rates("3004", TaxRegime.INTRA_STATE)
        inter = hsn_table.gst_rates("3004", TaxRegime.INTER_STATE)

        assert intra.cgst == intra.sgst == Decimal("6")
        assert inter.igst == Decimal("12")
