from __future__ import annotations

import logging
import re
from dataclasses import asdict
from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Literal, Mapping, Optional, Sequence, Tuple

import pandas as pd

from roi_core.config import Settings, get_settings
from roi_core.errors import MalformedDateError
from roi_core.filters import Selection, filter_by_selection, normalize_selection, studio_options
from roi_core.models import DEFAULT_FRANCHISE, DEFAULT_STUDIO, MOVIE_COLUMNS, MovieRecord
from roi_core.roi import compute_roi

logger = logging.getLogger(__name__)

OnError = Literal["raise", "skip"]

_CURRENCY_CHARS = re.compile(r"[$,]")
_LEADING_NUMBER = re.compile(r"^\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_EDGE_QUOTES = re.compile(r'^"|"$')
# Dates must name a year; "today", "now" and bare numbers resolve against the clock.
_YEAR = re.compile(r"\d{4}")


# ---------------- Field parsing ----------------
def parse_currency(value: object) -> float:
    """Parse "$1,234.5"-style text; anything without a leading number is 0."""
    if value is None:
        return 0.0
    s = _CURRENCY_CHARS.sub("", str(value))
    match = _LEADING_NUMBER.match(s)
    if not match:
        return 0.0
    amount = float(match.group(0))
    return amount if amount > 0 else 0.0


def parse_cast(value: object) -> Tuple[str, ...]:
    if value is None:
        return ()
    s = _EDGE_QUOTES.sub("", str(value))
    return tuple(name for name in (part.strip() for part in s.split(",")) if name)


def parse_release_date(value: object, row_number: Optional[int] = None) -> date:
    text = "" if value is None else str(value).strip()
    if not text or not _YEAR.search(text):
        raise MalformedDateError(value, row_number)
    try:
        ts = pd.to_datetime(text)
    except (ValueError, TypeError, OverflowError) as exc:
        raise MalformedDateError(value, row_number) from exc
    if pd.isna(ts):
        raise MalformedDateError(value, row_number)
    return ts.date()


def _text(row: Mapping[str, object], column: str) -> str:
    value = row.get(column)
    if value is None:
        return ""
    return str(value).strip()


# ---------------- Row normalization ----------------
def normalize_row(row: Mapping[str, object], row_number: Optional[int] = None) -> MovieRecord:
    """Parse one raw CSV row into a MovieRecord; only a bad release date fails."""
    budget = parse_currency(row.get("Adjusted Budget"))
    box_office = parse_currency(row.get("Adjusted International Box Office"))
    return MovieRecord(
        title=_text(row, "Movie Title"),
        studio=_text(row, "Studio") or DEFAULT_STUDIO,
        franchise=_text(row, "Franchise") or DEFAULT_FRANCHISE,
        release_date=parse_release_date(row.get("Release Date"), row_number),
        budget=budget,
        box_office=box_office,
        cast=parse_cast(row.get("Cast")),
        roi=compute_roi(budget, box_office),
    )


def normalize_rows(
    rows: Sequence[Mapping[str, object]],
    *,
    on_error: OnError = "raise",
) -> Tuple[List[MovieRecord], List[Dict[str, object]]]:
    """Normalize every row, returning ``(records, skipped)``.

    With ``on_error="raise"`` the first malformed row aborts the call. With
    ``"skip"`` rejected rows are reported in ``skipped`` and the rest are kept.
    Duplicate rows are not merged.
    """
    if on_error not in ("raise", "skip"):
        raise ValueError(f"on_error must be 'raise' or 'skip', got {on_error!r}")
    records: List[MovieRecord] = []
    skipped: List[Dict[str, object]] = []
    for idx, row in enumerate(rows, start=1):
        try:
            records.append(normalize_row(row, row_number=idx))
        except MalformedDateError as exc:
            if on_error == "raise":
                raise
            skipped.append({"row": idx, "title": _text(row, "Movie Title"), "reason": str(exc)})
    return records, skipped


def records_to_frame(records: Sequence[MovieRecord]) -> pd.DataFrame:
    columns = list(MOVIE_COLUMNS.values()) + ["roi"]
    df = pd.DataFrame([asdict(r) for r in records], columns=columns)
    df["cast"] = df["cast"].apply(lambda names: ", ".join(names))
    return df


# ---------------- Dataset loading ----------------
def get_dataset_path(settings: Optional[Settings] = None) -> Optional[Path]:
    settings = settings or get_settings()
    for candidate in settings.dataset_candidates:
        if candidate.is_file():
            return candidate
    return None


def file_signature(path: Path) -> Tuple[str, float]:
    return str(path), path.stat().st_mtime


def read_movie_rows(path: Path) -> List[Dict[str, str]]:
    df = pd.read_csv(path, dtype=str, keep_default_na=False, skip_blank_lines=True)
    df.columns = [str(c).strip() for c in df.columns]
    missing = [c for c in MOVIE_COLUMNS if c not in df.columns]
    if missing:
        logger.warning("Dataset %s is missing columns: %s", path, ", ".join(missing))
    return df.to_dict(orient="records")


@lru_cache(maxsize=4)
def _load_dashboard_data_cached(file_sig: Tuple[str, float]) -> Dict[str, object]:
    path = Path(file_sig[0])
    rows = read_movie_rows(path)
    records, skipped = normalize_rows(rows, on_error="skip")
    for item in skipped:
        logger.warning("Skipping row %s (%s): %s", item["row"], item["title"], item["reason"])
    logger.info("Loaded %d movies from %s (%d skipped)", len(records), path, len(skipped))
    return {
        "files": [path.name],
        "dataset_path": str(path),
        "raw_row_count": len(rows),
        "records": tuple(records),
        "skipped_rows": skipped,
        "studios": studio_options(records),
    }


def load_dashboard_data() -> Dict[str, object]:
    path = get_dataset_path()
    if path is None:
        logger.warning("No movie dataset found")
        return {"files": [], "dataset_path": None, "raw_row_count": 0, "records": (), "skipped_rows": [], "studios": []}
    return _load_dashboard_data_cached(file_signature(path))


def prepare_context(selection: dict | Selection, data_ctx: Dict[str, object]) -> Dict[str, object]:
    records: Sequence[MovieRecord] = data_ctx.get("records", ())
    sel = selection if isinstance(selection, Selection) else normalize_selection(selection)
    return {
        "selection": sel,
        "records": records,
        "filtered_records": filter_by_selection(records, sel),
        "dataset_path": data_ctx.get("dataset_path"),
        "raw_row_count": data_ctx.get("raw_row_count", 0),
        "skipped_rows": data_ctx.get("skipped_rows", []),
    }
