"""
tests/test_metrics.py

Page payloads assembled from a prepared context.
"""

from __future__ import annotations

import json

import pytest

from roi_core.data import prepare_context
from roi_core.filters import Selection
from roi_core.metrics_debug import compute_debug
from roi_core.metrics_overview import compute_actors, compute_overview


def _data_ctx(records) -> dict:
    return {
        "files": ["movie_database.csv"],
        "dataset_path": "/data/movie_database.csv",
        "raw_row_count": len(records) + 1,
        "records": tuple(records),
        "skipped_rows": [{"row": 6, "title": "Broken", "reason": "Unparsable release date 'x' (row 6)"}],
    }


class TestComputeOverview:
    def test_all_studios(self, records) -> None:
        sel = Selection()
        payload = compute_overview(sel, prepare_context(sel, _data_ctx(records)))
        assert payload["kpis"] == {"movie_count": 5, "average_roi": pytest.approx(2.0)}
        assert payload["group_by"] == "studio"
        assert payload["domain"] == {"start_year": 2000, "end_year": 2020}
        assert [a["actor"] for a in payload["actors"]["top"]] == ["Cara", "Ann", "Dan"]
        assert payload["actors"]["top"][0]["rank"] == 1
        assert set(payload["charts"]) == {"roi_over_time", "roi_distribution"}
        json.dumps(payload)

    def test_studio_selected_groups_by_franchise(self, records) -> None:
        sel = Selection(studio="Alpha")
        payload = compute_overview(sel, prepare_context(sel, _data_ctx(records)))
        assert payload["kpis"]["movie_count"] == 3
        assert payload["group_by"] == "franchise"
        assert payload["charts"]["roi_distribution"]["encoding"]["x"]["field"] == "franchise"
        assert payload["charts"]["roi_over_time"]["encoding"]["color"]["field"] == "studio"

    def test_franchise_selected_colors_by_franchise(self, records) -> None:
        sel = Selection(studio="Alpha", franchise="Hero")
        payload = compute_overview(sel, prepare_context(sel, _data_ctx(records)))
        assert payload["charts"]["roi_over_time"]["encoding"]["color"]["field"] == "franchise"

    def test_empty_selection(self, records) -> None:
        sel = Selection(studio="Nobody")
        payload = compute_overview(sel, prepare_context(sel, _data_ctx(records)))
        assert payload["kpis"] == {"movie_count": 0, "average_roi": 0.0}
        assert payload["actors"] == {"top": [], "bottom": []}
        assert payload["domain"] is None
        assert payload["charts"] == {}


def test_compute_actors(records) -> None:
    sel = Selection()
    payload = compute_actors(sel, prepare_context(sel, _data_ctx(records)))
    assert payload["filters"] == {"studio": None, "franchise": None}
    assert [a["actor"] for a in payload["bottom"]] == ["Dan", "Ann", "Cara"]
    assert payload["bottom"][0]["average_roi"] == pytest.approx(-15.0)


def test_compute_debug(records) -> None:
    sel = Selection(studio="Beta")
    payload = compute_debug(sel, prepare_context(sel, _data_ctx(records)))
    assert payload["row_counts"] == {"raw_rows": 6, "movie_rows": 5, "filtered_rows": 2, "skipped_rows": 1}
    assert payload["cleaning_checks"]["empty_cast_rows"] == 0
    assert payload["skipped_details"][0]["title"] == "Broken"
