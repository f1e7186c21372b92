from __future__ import annotations

from typing import Any, Dict

import altair as alt

from roi_core.projections import DistributionView, GroupBy, TimeSeriesView

alt.data_transformers.disable_max_rows()

CHART_HEIGHT = 300


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
    """Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
    return chart.to_dict()


def roi_over_time_chart(view: TimeSeriesView, *, color_by: GroupBy = GroupBy.STUDIO) -> alt.Chart:
    df = view.to_frame()
    x_scale = alt.Scale(domain=view.domain.as_strings()) if view.domain else alt.Undefined
    return (
        alt.Chart(df, description="ROI over time")
        .mark_point(size=100, opacity=0.6)
        .encode(
            x=alt.X("release_date:T", title="Release Date", axis=alt.Axis(format="%Y", labelAngle=0), scale=x_scale),
            y=alt.Y("roi:Q", title="ROI (%)"),
            color=alt.Color(f"{color_by.value}:N", title=color_by.label),
            tooltip=[
                alt.Tooltip("title:N", title="Movie"),
                alt.Tooltip("release_date:T", title="Release Date", format="%B %d, %Y"),
                alt.Tooltip("roi:Q", title="ROI", format=".0f"),
                alt.Tooltip("budget:Q", title="Adjusted Budget", format="$,.0f"),
                alt.Tooltip("box_office:Q", title="Adjusted Box Office", format="$,.0f"),
                alt.Tooltip("studio:N", title="Studio"),
                alt.Tooltip("franchise:N", title="Franchise"),
            ],
        )
        .properties(width="container", height=CHART_HEIGHT)
    )


def roi_distribution_chart(view: DistributionView) -> alt.Chart:
    df = view.to_frame()
    key = view.group_by.value
    return (
        alt.Chart(df, description="ROI distribution")
        .mark_boxplot(extent=1.5, median={"color": "white"})
        .encode(
            x=alt.X(f"{key}:N", title=view.label, axis=alt.Axis(labelAngle=-45, labelLimit=200)),
            y=alt.Y("roi:Q", title="ROI (%)", scale=alt.Scale(zero=False)),
            color=alt.Color(f"{key}:N", title=view.label),
        )
        .properties(width="container", height=CHART_HEIGHT)
    )
