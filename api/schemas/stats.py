# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-07
# Description: stats.py
# -----------------------------------------------------------------------------
from typing import Optional

from pydantic import BaseModel


class StatsResponse(BaseModel):
    collection_name: str
    total_vectors: int
    embedding_backend: str
    embedding_model: str
    embedding_ready: bool
    embedding_dimension: Optional[int] = None
