"""Core (UI-agnostic) movie ROI logic.

This package contains:
- row normalization (CSV text -> MovieRecord) and dataset loading
- studio/franchise filtering
- actor ROI rankings and chart projections
- page compute functions (JSON-serializable payloads)
- chart helpers (Altair -> Vega-Lite spec dict)
"""
