# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-15
# Description: QuestionVectorStore
# -----------------------------------------------------------------------------

from typing import Protocol, Sequence, Dict, Any, List, runtime_checkable

from embedding.VectorRecord import VectorRecord


class StoreUnavailable(RuntimeError):
    """Raised when the vector store rejects or cannot serve a request."""


@runtime_checkable
class QuestionVectorStore(Protocol):
    def test_connection(self) -> bool:
        ...

    def upsert(self, records: Sequence[VectorRecord]) -> None:
        ...

    def query(
            self,
            vector: Sequence[float],
            top_k: int = 10,
            filter: Dict[str, str] | None = None,
    ) -> List[Dict[str, Any]]:
        ...

    def count(self) -> int:
        ...
