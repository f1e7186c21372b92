"""
tests/test_filters.py

Studio/franchise narrowing and selection helpers.
"""

from __future__ import annotations

import pytest

from roi_core.filters import (
    Selection,
    filter_by_selection,
    filter_records,
    franchise_options,
    normalize_selection,
    studio_options,
)
from roi_core.projections import GroupBy


def _titles(records) -> list[str]:
    return [r.title for r in records]


class TestFilterRecords:
    def test_no_predicates_is_identity(self, records) -> None:
        out = filter_records(records)
        assert out == records
        assert out is not records

    def test_studio(self, records) -> None:
        assert _titles(filter_records(records, studio="Beta")) == ["B1", "B2"]

    def test_franchise(self, records) -> None:
        assert _titles(filter_records(records, franchise="Hero")) == ["A1", "A2", "B1"]

    def test_both_are_anded(self, records) -> None:
        assert _titles(filter_records(records, studio="Alpha", franchise="Hero")) == ["A1", "A2"]

    def test_exact_case_sensitive_match(self, records) -> None:
        assert filter_records(records, studio="alpha") == []
        assert filter_records(records, studio="Alpha ") == []

    def test_no_match_is_empty(self, records) -> None:
        assert filter_records(records, studio="Gamma") == []

    def test_empty_input(self) -> None:
        assert filter_records([], studio="Alpha", franchise="Hero") == []

    @pytest.mark.parametrize("studio, franchise", [("Alpha", "Hero"), ("Beta", "Hero"), ("Beta", "Space"), ("Alpha", "Space")])
    def test_composition_matches_combined(self, records, studio: str, franchise: str) -> None:
        combined = filter_records(records, studio=studio, franchise=franchise)
        assert filter_records(filter_records(records, studio=studio), franchise=franchise) == combined
        assert filter_records(filter_records(records, franchise=franchise), studio=studio) == combined


class TestSelection:
    def test_normalize_blank_values(self) -> None:
        assert normalize_selection({"studio": "  ", "franchise": ""}) == Selection()
        assert normalize_selection(None) == Selection()

    def test_normalize_strips(self) -> None:
        assert normalize_selection({"studio": " Alpha ", "franchise": "Hero"}) == Selection("Alpha", "Hero")

    def test_group_by_follows_studio(self) -> None:
        assert Selection().group_by is GroupBy.STUDIO
        assert Selection(studio="Alpha").group_by is GroupBy.FRANCHISE

    def test_color_by_follows_franchise(self) -> None:
        assert Selection(studio="Alpha").color_by is GroupBy.STUDIO
        assert Selection(studio="Alpha", franchise="Hero").color_by is GroupBy.FRANCHISE

    def test_filter_by_selection(self, records) -> None:
        assert _titles(filter_by_selection(records, Selection(studio="Alpha", franchise="Independent"))) == ["A3"]


class TestOptions:
    def test_studio_options_sorted_distinct(self, records) -> None:
        assert studio_options(records) == ["Alpha", "Beta"]

    def test_franchise_options_within_studio(self, records) -> None:
        assert franchise_options(records, "Alpha") == ["Hero", "Independent"]
        assert franchise_options(records, "Beta") == ["Hero", "Space"]

    def test_franchise_options_without_studio(self, records) -> None:
        assert franchise_options(records, None) == []
