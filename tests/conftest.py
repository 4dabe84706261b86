# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-12
# Description: conftest.py
# -----------------------------------------------------------------------------

import hashlib
import sys
from pathlib import Path
from typing import Any, Dict, List

import numpy as np
import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from embedding.QuestionEmbedder import QuestionEmbedder  # noqa: E402
from ingestion.QuestionFileLoader import QuestionFileLoader  # noqa: E402
from services.QuestionIngestService import QuestionIngestService  # noqa: E402
from services.QuestionQueryService import QuestionQueryService  # noqa: E402


class FakeEmbeddingModel:
    """Deterministic unit vectors derived from a hash of the text."""

    def __init__(self, dim: int = 8, nested: bool = False):
        self.dim = dim
        self.nested = nested
        self.calls: List[str] = []

    def run(self, text: str, *, pooling: str = "mean", normalize: bool = True):
        self.calls.append(text)
        digest = hashlib.sha256(text.encode("utf-8")).digest()
        arr = np.frombuffer(digest[: self.dim], dtype=np.uint8).astype(np.float32) + 1.0
        if normalize:
            arr = arr / np.linalg.norm(arr)
        values = arr.tolist()
        return [values] if self.nested else values


class RecordingStore:
    """In-memory vector store keyed by id; records every call."""

    def __init__(self, matches: List[Dict[str, Any]] | None = None, fail_upsert: bool = False):
        self.vectors: Dict[str, Any] = {}
        self.upsert_calls: List[List[Any]] = []
        self.query_calls: List[Dict[str, Any]] = []
        self.matches = matches or []
        self.fail_upsert = fail_upsert

    def test_connection(self) -> bool:
        return True

    def upsert(self, records):
        if self.fail_upsert:
            from vectorstore.QuestionVectorStore import StoreUnavailable
            raise StoreUnavailable("store is down")
        self.upsert_calls.append(list(records))
        for rec in records:
            self.vectors[rec.id] = rec

    def query(self, vector, top_k=10, filter=None):
        self.query_calls.append({"vector": list(vector), "top_k": top_k, "filter": filter})
        return list(self.matches)

    def count(self) -> int:
        return len(self.vectors)


class SleepRecorder:
    def __init__(self):
        self.calls: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def fake_model() -> FakeEmbeddingModel:
    return FakeEmbeddingModel()


@pytest.fixture
def embedder(fake_model) -> QuestionEmbedder:
    return QuestionEmbedder(model_factory=lambda: fake_model)


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def sleeper() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def ingest_service(tmp_path, store, embedder, sleeper) -> QuestionIngestService:
    return QuestionIngestService(
        file_loader=QuestionFileLoader(base_dir=tmp_path),
        store=store,
        embedder=embedder,
        batch_pause_seconds=1.0,
        record_pause_every=5,
        record_pause_seconds=0.2,
        sleep=sleeper,
    )


@pytest.fixture
def query_service(store, embedder) -> QuestionQueryService:
    return QuestionQueryService(store=store, embedder=embedder)
