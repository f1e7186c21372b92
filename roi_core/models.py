from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Tuple

MOVIE_COLUMNS = {
    "Movie Title": "title",
    "Studio": "studio",
    "Franchise": "franchise",
    "Release Date": "release_date",
    "Adjusted Budget": "budget",
    "Adjusted International Box Office": "box_office",
    "Cast": "cast",
}

DEFAULT_STUDIO = "Unknown"
DEFAULT_FRANCHISE = "Independent"


@dataclass(frozen=True)
class MovieRecord:
    """One normalized release. ``roi`` is derived once, at normalization time."""

    title: str
    studio: str
    franchise: str
    release_date: date
    budget: float
    box_office: float
    cast: Tuple[str, ...]
    roi: float

    @property
    def year(self) -> int:
        return self.release_date.year

    def to_row(self) -> Dict[str, str]:
        """Render the record back into the raw column layout it was read from."""
        return {
            "Movie Title": self.title,
            "Studio": self.studio,
            "Franchise": self.franchise,
            "Release Date": self.release_date.isoformat(),
            "Adjusted Budget": f"${self.budget:,}",
            "Adjusted International Box Office": f"${self.box_office:,}",
            "Cast": ", ".join(self.cast),
        }


@dataclass(frozen=True)
class ActorStat:
    actor: str
    movie_count: int
    total_roi: float
    average_roi: float


@dataclass(frozen=True)
class ActorRanking:
    top: Tuple[ActorStat, ...] = field(default_factory=tuple)
    bottom: Tuple[ActorStat, ...] = field(default_factory=tuple)
