import logging
from contextlib import contextmanager
from typing import Dict, List, Optional

import streamlit as st

from roi_core.data import load_dashboard_data, prepare_context, records_to_frame
from roi_core.filters import Selection, franchise_options
from roi_core.metrics_overview import compute_overview

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


# ---------- UI / layout helpers ----------
def inject_base_styles():
    if st.session_state.get("_base_css_injected"):
        return
    st.markdown(
        """
        <style>
        .card {border: 1px solid #e5e7eb;border-radius: 12px;padding: 16px;background: #ffffff;
               box-shadow: 0 1px 2px rgba(0,0,0,0.04); margin-bottom: 12px;}
        .card-title {font-weight: 600;font-size: 1.0rem;color: #111827;margin-bottom: 8px;}
        .metric-value {font-size: 1.6rem;font-weight: 700;color: #111827;}
        .actor-item {font-size: 0.95rem;color: #374151;padding: 2px 0;}
        .chip-row {display: flex;flex-wrap: wrap;gap: 6px;margin-top: 6px;}
        .chip {background: #f3f4f6;border: 1px solid #e5e7eb;border-radius: 14px;padding: 4px 10px;font-size: 0.85rem;color: #374151;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.session_state["_base_css_injected"] = True


@contextmanager
def card(title: str):
    container = st.container()
    container.markdown(f"<div class='card'><div class='card-title'>{title}</div>", unsafe_allow_html=True)
    body = container.container()
    with body:
        yield body
    container.markdown("</div>", unsafe_allow_html=True)


def format_selection_summary(selection: Selection) -> str:
    chips = [
        f"Studio: {selection.studio}" if selection.studio else "Studio: All",
        f"Franchise: {selection.franchise}" if selection.franchise else "Franchise: All",
    ]
    return "".join([f"<span class='chip'>{txt}</span>" for txt in chips])


def render_actor_list(rows: List[Dict[str, object]]):
    if not rows:
        st.caption("No actors with 2+ movies in this selection.")
        return
    for row in rows:
        st.markdown(f"<div class='actor-item'>{row['actor']}: {row['average_roi']:.1f}%</div>", unsafe_allow_html=True)


# ---------- UI setup ----------
st.set_page_config(page_title="Movie ROI Analytics", layout="wide")
inject_base_styles()
st.title("Movie ROI Analytics")

data_ctx = load_dashboard_data()
all_records = data_ctx.get("records", ())
if not data_ctx.get("files"):
    st.error("Failed to load the movie database. Place movie_database.csv next to app.py or set MOVIE_ROI_DATASET.")
    st.stop()
if not all_records:
    st.error("The movie database has no usable rows.")
    st.stop()

with st.sidebar:
    st.markdown("### Filters")
    studio_choice = st.selectbox("Studio", options=["All Studios"] + list(data_ctx.get("studios", [])), index=0)
    studio: Optional[str] = None if studio_choice == "All Studios" else studio_choice
    franchise: Optional[str] = None
    if studio:
        franchise_choice = st.selectbox("Franchise", options=["All Franchises"] + franchise_options(all_records, studio), index=0)
        franchise = None if franchise_choice == "All Franchises" else franchise_choice
    skipped = data_ctx.get("skipped_rows", [])
    if skipped:
        st.markdown("---")
        st.caption(f"{len(skipped)} rows skipped (unparsable release date).")

selection = Selection(studio=studio, franchise=franchise)
ctx = prepare_context(selection, data_ctx)
payload = compute_overview(selection, ctx)

st.markdown(f"<div class='chip-row'>{format_selection_summary(selection)}</div>", unsafe_allow_html=True)

c1, c2, c3 = st.columns(3)
with c1:
    with card("Average ROI"):
        st.markdown(f"<div class='metric-value'>{payload['kpis']['average_roi']:.2f}%</div>", unsafe_allow_html=True)
        st.caption(f"{payload['kpis']['movie_count']} movies")
with c2:
    with card("Top ROI Actors (2+ Movies)"):
        render_actor_list(payload["actors"]["top"])
with c3:
    with card("Lowest ROI Actors (2+ Movies)"):
        render_actor_list(payload["actors"]["bottom"])

charts = payload.get("charts", {})
if not charts:
    st.info("No movies match this selection.")
else:
    left, right = st.columns(2)
    with left:
        with card("ROI Over Time"):
            st.vega_lite_chart(charts["roi_over_time"], use_container_width=True)
    with right:
        title = f"{selection.studio} Franchise Performance" if selection.studio else "Studio Performance"
        with card(title):
            st.vega_lite_chart(charts["roi_distribution"], use_container_width=True)

export_df = records_to_frame(ctx["filtered_records"])
st.download_button(
    "Export CSV",
    data=export_df.to_csv(index=False).encode("utf-8"),
    file_name="movies.csv",
    mime="text/csv",
)
