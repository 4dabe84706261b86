# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Description: QuestionQueryService
# -----------------------------------------------------------------------------
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import settings
from embedding.QuestionEmbedder import QuestionEmbedder
from utility.logging_utils import get_class_logger
from vectorstore.QuestionVectorStore import QuestionVectorStore

FILTER_FIELDS = ("subject", "topic", "course")


class InvalidQuery(ValueError):
    """Raised when the search text is missing or blank."""


@dataclass
class SearchQuery:
    text: str
    subject: Optional[str] = None
    topic: Optional[str] = None
    course: Optional[str] = None
    top_k: int = settings.DEFAULT_TOP_K

    def build_filter(self) -> Optional[Dict[str, str]]:
        """Equality terms for the non-empty tags only; None when there are none."""
        flt = {key: getattr(self, key) for key in FILTER_FIELDS if getattr(self, key)}
        return flt or None


@dataclass
class SearchResult:
    matches: List[Dict[str, Any]]
    search_query: str
    filters: Dict[str, str] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.matches)


class QuestionQueryService:
    """
    Free text -> embedding -> filtered top-K search.
    Store matches are returned as-is.
    """

    def __init__(
        self,
        *,
        store: QuestionVectorStore,
        embedder: QuestionEmbedder,
        logger: logging.Logger | None = None,
    ) -> None:
        self.store = store
        self.embedder = embedder
        self.logger = logger or get_class_logger(self.__class__)

    def search(self, query: SearchQuery) -> SearchResult:
        if not query.text or not query.text.strip():
            raise InvalidQuery("Query is required")

        vector = self.embedder.embed(query.text)
        flt = query.build_filter()

        self.logger.info(
            "Searching for %r (top_k=%d, filter=%s)",
            query.text,
            query.top_k,
            flt,
        )
        matches = self.store.query(vector, top_k=query.top_k, filter=flt)
        self.logger.info("Found %d matches", len(matches))

        return SearchResult(
            matches=matches,
            search_query=query.text,
            filters=flt or {},
        )
