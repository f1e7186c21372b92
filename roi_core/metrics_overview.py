from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List, Sequence

from roi_core.actors import aggregate_actors, average_roi
from roi_core.charts import roi_distribution_chart, roi_over_time_chart, to_vega_spec
from roi_core.filters import Selection
from roi_core.models import ActorStat, MovieRecord
from roi_core.projections import project_distribution, project_time_series


def _actor_rows(stats: Sequence[ActorStat]) -> List[Dict[str, Any]]:
    return [{"rank": i, **asdict(s)} for i, s in enumerate(stats, start=1)]


def compute_actors(selection: Selection, ctx: Dict[str, Any]) -> Dict[str, Any]:
    records: Sequence[MovieRecord] = ctx.get("filtered_records", [])
    ranking = aggregate_actors(records)
    return {
        "filters": asdict(selection),
        "top": _actor_rows(ranking.top),
        "bottom": _actor_rows(ranking.bottom),
    }


def compute_overview(selection: Selection, ctx: Dict[str, Any]) -> Dict[str, Any]:
    records: Sequence[MovieRecord] = ctx.get("filtered_records", [])
    group_by = selection.group_by
    if not records:
        return {
            "filters": asdict(selection),
            "kpis": {"movie_count": 0, "average_roi": 0.0},
            "actors": {"top": [], "bottom": []},
            "group_by": group_by.value,
            "domain": None,
            "charts": {},
        }

    series = project_time_series(records)
    distribution = project_distribution(records, group_by)
    actors = compute_actors(selection, ctx)
    return {
        "filters": asdict(selection),
        "kpis": {"movie_count": len(records), "average_roi": average_roi(records)},
        "actors": {"top": actors["top"], "bottom": actors["bottom"]},
        "group_by": group_by.value,
        "domain": {"start_year": series.domain.start_year, "end_year": series.domain.end_year},
        "charts": {
            "roi_over_time": to_vega_spec(roi_over_time_chart(series, color_by=selection.color_by)),
            "roi_distribution": to_vega_spec(roi_distribution_chart(distribution)),
        },
    }
