"""Chart-ready projections of a (filtered) record set.

Both views are plain frozen data, rebuilt from scratch on every call. The
rendering side only needs them converted to a frame (``to_frame``) to build
its chart specs.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from roi_core.errors import EmptyDatasetDomainError
from roi_core.models import MovieRecord

DOMAIN_STEP_YEARS = 5


class GroupBy(str, Enum):
    STUDIO = "studio"
    FRANCHISE = "franchise"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class AxisDomain:
    start_year: int
    end_year: int

    @property
    def start(self) -> date:
        return date(self.start_year, 1, 1)

    @property
    def end(self) -> date:
        return date(self.end_year, 12, 31)

    def as_strings(self) -> List[str]:
        return [self.start.isoformat(), self.end.isoformat()]


@dataclass(frozen=True)
class TimeSeriesPoint:
    title: str
    release_date: date
    year: int
    roi: float
    studio: str
    franchise: str
    budget: float
    box_office: float


@dataclass(frozen=True)
class TimeSeriesView:
    points: Tuple[TimeSeriesPoint, ...] = field(default_factory=tuple)
    domain: Optional[AxisDomain] = None

    def to_frame(self) -> pd.DataFrame:
        df = pd.DataFrame(
            [asdict(p) for p in self.points],
            columns=["title", "release_date", "year", "roi", "studio", "franchise", "budget", "box_office"],
        )
        df["release_date"] = pd.to_datetime(df["release_date"])
        return df


@dataclass(frozen=True)
class DistributionPoint:
    group: str
    roi: float
    title: str


@dataclass(frozen=True)
class DistributionView:
    group_by: GroupBy
    points: Tuple[DistributionPoint, ...] = field(default_factory=tuple)

    @property
    def label(self) -> str:
        return self.group_by.label

    def groups(self) -> List[str]:
        """Distinct group keys in first-seen order."""
        return list(dict.fromkeys(p.group for p in self.points))

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [(p.group, p.roi, p.title) for p in self.points],
            columns=[self.group_by.value, "roi", "title"],
        )


def infer_axis_domain(years: Iterable[int]) -> AxisDomain:
    """Widen the year span outwards to the nearest multiples of five."""
    years = list(years)
    if not years:
        raise EmptyDatasetDomainError("Cannot infer an axis domain from zero records")
    lo, hi = min(years), max(years)
    start = lo - lo % DOMAIN_STEP_YEARS
    end = -(-hi // DOMAIN_STEP_YEARS) * DOMAIN_STEP_YEARS
    return AxisDomain(start_year=start, end_year=end)


def project_time_series(records: Sequence[MovieRecord], fallback_domain: Optional[AxisDomain] = None) -> TimeSeriesView:
    ordered = sorted(records, key=lambda r: r.release_date)
    points = tuple(
        TimeSeriesPoint(
            title=r.title,
            release_date=r.release_date,
            year=r.year,
            roi=r.roi,
            studio=r.studio,
            franchise=r.franchise,
            budget=r.budget,
            box_office=r.box_office,
        )
        for r in ordered
    )
    domain = infer_axis_domain(p.year for p in points) if points else fallback_domain
    return TimeSeriesView(points=points, domain=domain)


def project_distribution(records: Sequence[MovieRecord], group_by: GroupBy) -> DistributionView:
    key = group_by.value
    points = tuple(DistributionPoint(group=getattr(r, key), roi=r.roi, title=r.title) for r in records)
    return DistributionView(group_by=group_by, points=points)
