from invonest.domain.states import (
    INDIAN_STATES,
    find_state,
    is_inter_state,
    list_states,
    normalize_state,
)


class TestStateTable:
    def test_covers_states_and_union_territories(self):
        assert len(INDIAN_STATES) == 36

    def test_gst_codes_are_unique(self):
        codes = [s.gst_code for s in INDIAN_STATES]

        assert len(codes) == len(set(codes))

    def test_list_is_sorted_by_name(self):
        names = [s.name for s in list_states()]

        assert names == sorted(names)


class TestFindState:
    def test_by_name(self):
        assert find_state("karnataka").gst_code == "29"

    def test_by_abbreviation(self):
        assert find_state("TN").name == "Tamil Nadu"

    def test_by_gst_code(self):
        assert find_state("07").name == "Delhi"

    def test_unknown_or_missing(self):
        assert find_state("Atlantis") is None
        assert find_state(None) is None
        assert find_state("   ") is None


class TestStateComparison:
    def test_normalize_collapses_whitespace_and_case(self):
        assert normalize_state("  Uttar   PRADESH ") == "uttar pradesh"

    def test_normalize_missing_is_empty(self):
        assert normalize_state(None) == ""

    def test_abbreviation_is_not_resolved(self):
        assert is_inter_state("MH", "Maharashtra") is True

    def test_gst_code_is_not_resolved(self):
        assert is_inter_state("27", "Maharashtra") is True

    def test_inter_state(self):
        assert is_inter_state("Maharashtra", "Karnataka") is True
        assert is_inter_state("Maharashtra", " MAHARASHTRA ") is False
