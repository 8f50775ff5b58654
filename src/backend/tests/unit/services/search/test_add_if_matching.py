"""
Unit tests for the substring match primitive

Tests add_if_matching() which every matcher reports through.
"""

import pytest

from flowsearch.services.search.matchers.base import add_all_matching, add_if_matching


@pytest.mark.unit
class TestAddIfMatching:
    """Test case-insensitive substring matching"""

    @pytest.mark.parametrize("term,value", [
        ("csv", "Ingest-CSV-Reader"),
        ("CSV", "writes csv backups"),
        ("n1", "n1"),
        ("N1", "n1"),
        ("reader", "Ingest-CSV-Reader"),
        ("-csv-", "Ingest-CSV-Reader"),
    ])
    def test_appends_on_substring(self, term, value):
        matches = []
        add_if_matching(term, value, "Name", matches)
        assert matches == [f"Name: {value}"]

    @pytest.mark.parametrize("term,value", [
        ("csv", "Archive"),
        ("csv reader", "Ingest-CSV-Reader"),
        ("c s v", "csv"),
        ("archives", "Archive"),
    ])
    def test_no_append_without_contiguous_substring(self, term, value):
        matches = []
        add_if_matching(term, value, "Name", matches)
        assert matches == []

    @pytest.mark.parametrize("term", ["csv", "x", "None"])
    def test_none_value_is_noop(self, term):
        matches = []
        add_if_matching(term, None, "Comments", matches)
        assert matches == []

    def test_empty_value_never_matches(self):
        matches = []
        add_if_matching("a", "", "Comments", matches)
        assert matches == []

    def test_reports_original_case_value(self):
        """Label carries the attribute value, not the query term"""
        matches = []
        add_if_matching("ingest", "Ingest-CSV-Reader", "Source name", matches)
        assert matches == ["Source name: Ingest-CSV-Reader"]

    def test_appends_after_existing_entries(self):
        matches = ["Id: n1"]
        add_if_matching("n", "Name n", "Name", matches)
        assert matches == ["Id: n1", "Name: Name n"]

    def test_non_ascii_case_folding(self):
        matches = []
        add_if_matching("STRASSE", "Hauptstraße", "Name", matches)
        assert matches == ["Name: Hauptstraße"]


@pytest.mark.unit
class TestAddAllMatching:
    """Test matching over a list of values"""

    def test_keeps_value_order_and_skips_none(self):
        matches = []
        add_all_matching("fail", ["failure", None, "success", "comms.failure"], "Relationship", matches)
        assert matches == ["Relationship: failure", "Relationship: comms.failure"]

    def test_duplicate_values_are_not_deduplicated(self):
        matches = []
        add_all_matching("a", ["a", "a"], "Relationship", matches)
        assert matches == ["Relationship: a", "Relationship: a"]
