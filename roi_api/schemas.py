from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class SelectionModel(BaseModel):
    studio: Optional[str] = None
    franchise: Optional[str] = None


class MetaListResponse(BaseModel):
    values: List[str]
