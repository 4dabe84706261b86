# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Description: test_api_routes.py
# -----------------------------------------------------------------------------
import json

import pytest
from starlette.testclient import TestClient

from api.dependencies import get_ingest_service, get_query_service, get_stats_service
from api.main import app
from conftest import RecordingStore
from config.Config import Config
from services.QuestionQueryService import QuestionQueryService
from services.QuestionStatsService import QuestionStatsService


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_search_success_payload(client, embedder):
    matches = [{"id": "q1", "score": 0.87, "metadata": {"subject": "Math", "cleanedQuestion": "2+2"}}]
    store = RecordingStore(matches=matches)
    app.dependency_overrides[get_query_service] = lambda: QuestionQueryService(store=store, embedder=embedder)

    resp = client.post(
        "/api/search-questions",
        json={"query": "What is 2+2?", "subject": "Math", "topic": "", "topK": 3},
    )

    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data == {
        "success": True,
        "matches": matches,
        "total": 1,
        "searchQuery": "What is 2+2?",
        "filters": {"subject": "Math"},
    }
    assert store.query_calls[0]["top_k"] == 3
    assert store.query_calls[0]["filter"] == {"subject": "Math"}


def test_search_empty_query_is_400(client, embedder, store):
    app.dependency_overrides[get_query_service] = lambda: QuestionQueryService(store=store, embedder=embedder)

    resp = client.post("/api/search-questions", json={"query": "   "})

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Query is required"}
    assert store.query_calls == []


def test_search_failure_is_500(client, embedder):
    class ExplodingStore(RecordingStore):
        def query(self, vector, top_k=10, filter=None):
            raise RuntimeError("index offline")

    app.dependency_overrides[get_query_service] = lambda: QuestionQueryService(
        store=ExplodingStore(), embedder=embedder
    )

    resp = client.post("/api/search-questions", json={"query": "What is 2+2?"})

    assert resp.status_code == 500
    body = resp.json()
    assert body["success"] is False
    assert "index offline" in body["error"]


def test_migrate_success_payload(client, ingest_service, tmp_path, store):
    (tmp_path / "questions.json").write_text(
        json.dumps([
            {"id": "1", "question": "What is 2+2?"},
            {"id": "2", "question": "x"},
            {"question": "no id here"},
        ]),
        encoding="utf-8",
    )
    app.dependency_overrides[get_ingest_service] = lambda: ingest_service

    resp = client.post("/api/migrate-to", json={"batchSize": 10})

    assert resp.status_code == 200, resp.text
    assert resp.json() == {
        "success": True,
        "message": "Migration completed successfully",
        "stats": {
            "totalDocuments": 3,
            "totalProcessed": 1,
            "errors": 1,
            "skipped": 1,
            "finalBatchSize": 1,
        },
    }
    assert len(store.upsert_calls) == 1


def test_migrate_accepts_json_file_path_alias_and_limit(client, ingest_service, tmp_path):
    (tmp_path / "bank.json").write_text(
        json.dumps([{"id": str(i), "question": f"Question {i}?"} for i in range(5)]),
        encoding="utf-8",
    )
    app.dependency_overrides[get_ingest_service] = lambda: ingest_service

    resp = client.post("/api/migrate-to", json={"jsonFilePath": "bank.json", "limit": 2})

    assert resp.status_code == 200, resp.text
    assert resp.json()["stats"]["totalDocuments"] == 2


def test_migrate_without_source_is_500(client, ingest_service):
    app.dependency_overrides[get_ingest_service] = lambda: ingest_service

    resp = client.post("/api/migrate-to")

    assert resp.status_code == 500
    body = resp.json()
    assert body["success"] is False
    assert body["error"].startswith("No JSON file found")


def test_stats(client, embedder, store):
    app.dependency_overrides[get_stats_service] = lambda: QuestionStatsService(
        cfg=Config(), store=store, embedder=embedder
    )

    resp = client.get("/stats")

    assert resp.status_code == 200
    data = resp.json()
    assert data["collection_name"] == "cat-questions"
    assert data["total_vectors"] == 0
    assert data["embedding_ready"] is False
