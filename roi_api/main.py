from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np
import pandas as pd
from fastapi import FastAPI, Query
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from roi_api.schemas import MetaListResponse, SelectionModel
from roi_core.data import load_dashboard_data, prepare_context, records_to_frame
from roi_core.filters import Selection, franchise_options, normalize_selection
from roi_core.metrics_debug import compute_debug
from roi_core.metrics_overview import compute_actors, compute_overview


app = FastAPI(title="Movie ROI Analytics API", version="0.1.0")
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _selection_from_model(model: SelectionModel) -> Selection:
    return normalize_selection(model.model_dump())


def _error(exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": str(exc), "type": type(exc).__name__})


def _json(data: object) -> JSONResponse:
    """Return JSON with safe encoding for pandas/numpy objects."""

    def _safe_float(value: object) -> float | None:
        try:
            out = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return None
        if math.isnan(out) or math.isinf(out):
            return None
        return out

    return JSONResponse(
        content=jsonable_encoder(
            data,
            custom_encoder={
                type(pd.NA): lambda _: None,
                np.integer: int,
                float: _safe_float,
                np.floating: _safe_float,
                np.bool_: bool,
                np.ndarray: lambda arr: arr.tolist(),
                pd.Timestamp: lambda ts: ts.isoformat(),
            },
        )
    )


@app.get("/meta/studios", response_model=MetaListResponse)
def meta_studios():
    try:
        data_ctx = load_dashboard_data()
        return _json({"values": list(data_ctx.get("studios", []) or [])})
    except Exception as exc:
        logger.exception("meta_studios failed")
        return _error(exc)


@app.get("/meta/franchises", response_model=MetaListResponse)
def meta_franchises(studio: Optional[str] = Query(default=None)):
    try:
        data_ctx = load_dashboard_data()
        return _json({"values": franchise_options(data_ctx.get("records", ()), (studio or "").strip() or None)})
    except Exception as exc:
        logger.exception("meta_franchises failed")
        return _error(exc)


@app.post("/overview")
def overview(selection: SelectionModel):
    try:
        data_ctx = load_dashboard_data()
        sel = _selection_from_model(selection)
        ctx = prepare_context(sel, data_ctx)
        return _json(compute_overview(sel, ctx))
    except Exception as exc:
        logger.exception("overview failed")
        return _error(exc)


@app.post("/actors")
def actors(selection: SelectionModel):
    try:
        data_ctx = load_dashboard_data()
        sel = _selection_from_model(selection)
        ctx = prepare_context(sel, data_ctx)
        return _json(compute_actors(sel, ctx))
    except Exception as exc:
        logger.exception("actors failed")
        return _error(exc)


@app.post("/records")
def records(selection: SelectionModel, limit: int = Query(default=500, ge=1, le=5000)):
    try:
        data_ctx = load_dashboard_data()
        sel = _selection_from_model(selection)
        ctx = prepare_context(sel, data_ctx)
        filtered = ctx["filtered_records"]
        rows = records_to_frame(filtered[:limit]).to_dict(orient="records")
        return _json({"total": len(filtered), "records": rows})
    except Exception as exc:
        logger.exception("records failed")
        return _error(exc)


@app.post("/debug")
def debug(selection: SelectionModel):
    try:
        data_ctx = load_dashboard_data()
        sel = _selection_from_model(selection)
        ctx = prepare_context(sel, data_ctx)
        return _json(compute_debug(sel, ctx))
    except Exception as exc:
        logger.exception("debug failed")
        return _error(exc)


@app.post("/export")
def export_records(selection: SelectionModel):
    data_ctx = load_dashboard_data()
    sel = _selection_from_model(selection)
    ctx = prepare_context(sel, data_ctx)
    export_df = records_to_frame(ctx["filtered_records"])
    csv_bytes = export_df.to_csv(index=False).encode("utf-8")
    return Response(content=csv_bytes, media_type="text/csv", headers={"Content-Disposition": "attachment; filename=movies.csv"})
