from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

from roi_core.filters import Selection


def compute_debug(selection: Selection, ctx: Dict[str, Any]) -> Dict[str, Any]:
    records = ctx.get("records", ())
    filtered = ctx.get("filtered_records", [])
    skipped = ctx.get("skipped_rows", []) or []
    return {
        "filters": asdict(selection),
        "dataset_path": ctx.get("dataset_path"),
        "row_counts": {
            "raw_rows": int(ctx.get("raw_row_count", 0) or 0),
            "movie_rows": len(records),
            "filtered_rows": len(filtered),
            "skipped_rows": len(skipped),
        },
        "cleaning_checks": {
            "zero_budget_rows": sum(1 for r in records if r.budget <= 0),
            "zero_box_office_rows": sum(1 for r in records if r.box_office <= 0),
            "empty_cast_rows": sum(1 for r in records if not r.cast),
        },
        "skipped_details": list(skipped),
    }
