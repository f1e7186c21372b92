from __future__ import annotations

from datetime import date
from typing import Dict, List, Sequence

import pytest

from roi_core.models import MovieRecord
from roi_core.roi import compute_roi


def make_record(
    title: str = "Movie",
    *,
    studio: str = "Studio A",
    franchise: str = "Independent",
    release_date: date = date(2010, 6, 1),
    budget: float = 100.0,
    box_office: float = 250.0,
    cast: Sequence[str] = (),
    roi: float | None = None,
) -> MovieRecord:
    return MovieRecord(
        title=title,
        studio=studio,
        franchise=franchise,
        release_date=release_date,
        budget=budget,
        box_office=box_office,
        cast=tuple(cast),
        roi=compute_roi(budget, box_office) if roi is None else roi,
    )


@pytest.fixture()
def raw_rows() -> List[Dict[str, str]]:
    return [
        {
            "Movie Title": "Star Saga",
            "Studio": "Lucas",
            "Franchise": "Saga",
            "Release Date": "2003-05-16",
            "Adjusted Budget": "$100,000,000",
            "Adjusted International Box Office": "$500,000,000",
            "Cast": '"Ann Lee, Bob Stone"',
        },
        {
            "Movie Title": "Star Saga II",
            "Studio": "Lucas",
            "Franchise": "Saga",
            "Release Date": "2017-12-15",
            "Adjusted Budget": "$200,000,000",
            "Adjusted International Box Office": "$250,000,000",
            "Cast": "Ann Lee, Cara Moss",
        },
        {
            "Movie Title": "Quiet Room",
            "Studio": "",
            "Franchise": "",
            "Release Date": "2009-02-20",
            "Adjusted Budget": "",
            "Adjusted International Box Office": "$1,000",
            "Cast": "",
        },
    ]


@pytest.fixture()
def records() -> List[MovieRecord]:
    return [
        make_record("A1", studio="Alpha", franchise="Hero", release_date=date(2003, 1, 10), cast=["Ann", "Bob"], roi=10.0),
        make_record("A2", studio="Alpha", franchise="Hero", release_date=date(2011, 7, 4), cast=["Ann"], roi=-20.0),
        make_record("A3", studio="Alpha", franchise="Independent", release_date=date(2008, 3, 1), cast=["Cara"], roi=50.0),
        make_record("B1", studio="Beta", franchise="Hero", release_date=date(2017, 11, 2), cast=["Cara", "Dan"], roi=30.0),
        make_record("B2", studio="Beta", franchise="Space", release_date=date(2011, 7, 4), cast=["Dan"], roi=-60.0),
    ]


@pytest.fixture()
def record_factory():
    return make_record
