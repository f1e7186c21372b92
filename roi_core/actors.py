from __future__ import annotations

from typing import List, Sequence

import pandas as pd

from roi_core.models import ActorRanking, ActorStat, MovieRecord

MIN_MOVIES = 2
RANK_SIZE = 5


def actor_stats(records: Sequence[MovieRecord]) -> pd.DataFrame:
    """Per-actor movie count, total and average ROI, in first-seen actor order.

    Every cast entry counts, so a name listed twice in one cast counts twice.
    """
    pairs = [(actor, r.roi) for r in records for actor in r.cast]
    if not pairs:
        return pd.DataFrame(columns=["actor", "movie_count", "total_roi", "average_roi"])
    df = pd.DataFrame(pairs, columns=["actor", "roi"])
    stats = (
        df.groupby("actor", sort=False)["roi"]
        .agg(movie_count="count", total_roi="sum")
        .reset_index()
    )
    stats["average_roi"] = stats["total_roi"] / stats["movie_count"]
    return stats


def _to_stats(df: pd.DataFrame) -> List[ActorStat]:
    return [
        ActorStat(
            actor=str(row.actor),
            movie_count=int(row.movie_count),
            total_roi=float(row.total_roi),
            average_roi=float(row.average_roi),
        )
        for row in df.itertuples(index=False)
    ]


def aggregate_actors(records: Sequence[MovieRecord]) -> ActorRanking:
    """Rank actors with at least two movies by average ROI, best and worst five."""
    stats = actor_stats(records)
    qualifying = stats[stats["movie_count"] >= MIN_MOVIES]
    if qualifying.empty:
        return ActorRanking()
    # Stable sort keeps first-seen actors ahead on ties.
    ranked = _to_stats(qualifying.sort_values("average_roi", ascending=False, kind="stable"))
    return ActorRanking(top=tuple(ranked[:RANK_SIZE]), bottom=tuple(reversed(ranked[-RANK_SIZE:])))


def average_roi(records: Sequence[MovieRecord]) -> float:
    if not records:
        return 0.0
    return sum(r.roi for r in records) / len(records)
