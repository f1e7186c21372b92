from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from roi_core.models import MovieRecord
from roi_core.projections import GroupBy


@dataclass(frozen=True)
class Selection:
    studio: Optional[str] = None
    franchise: Optional[str] = None

    @property
    def group_by(self) -> GroupBy:
        # Drilling into one studio breaks its movies down by franchise.
        return GroupBy.FRANCHISE if self.studio else GroupBy.STUDIO

    @property
    def color_by(self) -> GroupBy:
        return GroupBy.FRANCHISE if self.franchise else GroupBy.STUDIO


def _as_choice(value: object) -> Optional[str]:
    if value is None:
        return None
    s = str(value).strip()
    return s or None


def normalize_selection(raw: Optional[dict]) -> Selection:
    raw = raw or {}
    return Selection(studio=_as_choice(raw.get("studio")), franchise=_as_choice(raw.get("franchise")))


def filter_records(
    records: Sequence[MovieRecord],
    studio: Optional[str] = None,
    franchise: Optional[str] = None,
) -> List[MovieRecord]:
    """Keep records matching every given predicate; order is preserved.

    Matching is exact and case-sensitive. ``None`` or an empty string means
    "no predicate" for that field.
    """
    out = list(records)
    if studio:
        out = [r for r in out if r.studio == studio]
    if franchise:
        out = [r for r in out if r.franchise == franchise]
    return out


def filter_by_selection(records: Sequence[MovieRecord], selection: Selection) -> List[MovieRecord]:
    return filter_records(records, studio=selection.studio, franchise=selection.franchise)


def studio_options(records: Iterable[MovieRecord]) -> List[str]:
    return sorted({r.studio for r in records})


def franchise_options(records: Iterable[MovieRecord], studio: Optional[str]) -> List[str]:
    if not studio:
        return []
    return sorted({r.franchise for r in records if r.studio == studio})
