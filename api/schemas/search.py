# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Description: search.py
# -----------------------------------------------------------------------------
from typing import Optional, Any, Dict, List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

import settings


class SearchRequest(BaseModel):
    # Blank query is rejected by the router with the API's own error payload, not a 422
    query: Optional[str] = None
    subject: Optional[str] = None
    topic: Optional[str] = None
    course: Optional[str] = None
    top_k: int = Field(
        settings.DEFAULT_TOP_K,
        ge=1,
        validation_alias=AliasChoices("topK", "top_k"),
    )


class SearchMatch(BaseModel):
    id: str
    score: Optional[float] = None
    metadata: Dict[str, Any] = {}


class SearchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    matches: List[SearchMatch]
    total: int
    search_query: str = Field(..., serialization_alias="searchQuery")
    filters: Dict[str, str] = {}
