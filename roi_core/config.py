"""
roi_core/config.py

Dataset location settings, read once from the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

PROJECT_DIR = Path(__file__).resolve().parents[1]
DATASET_FILENAME = "movie_database.csv"
DATA_SUBDIRS = ("", "public", "data")


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    dataset_path: Optional[Path] = None

    @property
    def dataset_candidates(self) -> Tuple[Path, ...]:
        """Paths tried in order when looking for the dataset."""
        if self.dataset_path is not None:
            return (self.dataset_path,)
        return tuple(self.data_dir / sub / DATASET_FILENAME if sub else self.data_dir / DATASET_FILENAME for sub in DATA_SUBDIRS)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    raw_path = (os.getenv("MOVIE_ROI_DATASET") or "").strip()
    raw_dir = (os.getenv("MOVIE_ROI_DATA_DIR") or "").strip()
    return Settings(
        data_dir=Path(raw_dir).expanduser() if raw_dir else PROJECT_DIR,
        dataset_path=Path(raw_path).expanduser() if raw_path else None,
    )
