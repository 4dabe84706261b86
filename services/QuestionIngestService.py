# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-21
# Description: QuestionIngestService.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

import settings
from embedding.QuestionEmbedder import EmbeddingFailure, QuestionEmbedder
from embedding.VectorRecord import VectorRecord
from ingestion.QuestionFileLoader import QuestionFileLoader
from ingestion.SourceRecordReader import SourceRecordReader
from preprocessing.TextNormalizer import TextTooShort
from utility.logging_utils import get_class_logger
from vectorstore.QuestionVectorStore import QuestionVectorStore


@dataclass(frozen=True)
class Accepted:
    record: VectorRecord


@dataclass(frozen=True)
class Skipped:
    reason: str
    detail: str = ""


@dataclass(frozen=True)
class Failed:
    doc_id: str
    error: Exception


RecordOutcome = Union[Accepted, Skipped, Failed]


@dataclass
class IngestStats:
    total_documents: int = 0
    total_processed: int = 0
    errors: int = 0
    skipped: int = 0
    final_batch_size: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "totalDocuments": self.total_documents,
            "totalProcessed": self.total_processed,
            "errors": self.errors,
            "skipped": self.skipped,
            "finalBatchSize": self.final_batch_size,
        }


class QuestionIngestService:
    """
    Owns the bulk migration pipeline:
      - locate + read the question JSON (via QuestionFileLoader)
      - derive id / text / metadata per record
      - embed (QuestionEmbedder)
      - batch upsert into the vector store with pacing pauses

    A bad record never aborts the run; it is counted as skipped or as an error.
    A failed upsert does abort the run.
    """

    def __init__(
        self,
        *,
        file_loader: QuestionFileLoader,
        store: QuestionVectorStore,
        embedder: QuestionEmbedder,
        reader: SourceRecordReader | None = None,
        batch_pause_seconds: float | None = None,
        record_pause_every: int | None = None,
        record_pause_seconds: float | None = None,
        sleep: Callable[[float], None] = time.sleep,
        logger: logging.Logger | None = None,
    ) -> None:
        self.file_loader = file_loader
        self.store = store
        self.embedder = embedder
        self.reader = reader or SourceRecordReader()
        self.batch_pause_seconds = (
            settings.BATCH_PAUSE_SECONDS if batch_pause_seconds is None else batch_pause_seconds
        )
        self.record_pause_every = record_pause_every or settings.RECORD_PAUSE_EVERY
        self.record_pause_seconds = (
            settings.RECORD_PAUSE_SECONDS if record_pause_seconds is None else record_pause_seconds
        )
        self.sleep = sleep
        self.logger = logger or get_class_logger(self.__class__)

    def migrate(
        self,
        *,
        batch_size: int = settings.DEFAULT_BATCH_SIZE,
        limit: Optional[int] = None,
        source_locator: Optional[str] = None,
    ) -> IngestStats:
        self.logger.info("Starting migration from JSON (source=%s)", source_locator or "<auto>")
        records = self.file_loader.load_records(source_locator)
        return self.ingest(records, batch_size=batch_size, limit=limit)

    def ingest(
        self,
        records: Sequence[Any],
        *,
        batch_size: int = settings.DEFAULT_BATCH_SIZE,
        limit: Optional[int] = None,
    ) -> IngestStats:
        if batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {batch_size}")

        docs = list(records)
        if limit:
            docs = docs[:limit]
            self.logger.info("Limited to %d questions", len(docs))

        stats = IngestStats(total_documents=len(docs))
        batch: List[VectorRecord] = []

        self.logger.info("Processing %d documents (batch_size=%d)", len(docs), batch_size)

        for doc in docs:
            outcome = self.process_record(doc)

            if isinstance(outcome, Skipped):
                stats.skipped += 1
                self.logger.warning("Skipping document (%s): %s", outcome.reason, outcome.detail)
                continue

            if isinstance(outcome, Failed):
                stats.errors += 1
                self.logger.error("Error processing document %s: %s", outcome.doc_id, outcome.error)
                continue

            batch.append(outcome.record)
            stats.total_processed += 1

            if len(batch) >= batch_size:
                self.store.upsert(batch)
                self.logger.info(
                    "Processed %d documents (%d errors, %d skipped)",
                    stats.total_processed,
                    stats.errors,
                    stats.skipped,
                )
                batch = []
                self.sleep(self.batch_pause_seconds)

            if stats.total_processed % self.record_pause_every == 0:
                self.sleep(self.record_pause_seconds)

        if batch:
            self.store.upsert(batch)
            self.logger.info("Final batch: %d vectors", len(batch))
        stats.final_batch_size = len(batch)

        self.logger.info(
            "Migration completed: %d/%d processed, %d errors, %d skipped",
            stats.total_processed,
            stats.total_documents,
            stats.errors,
            stats.skipped,
        )
        return stats

    def process_record(self, doc: Any) -> RecordOutcome:
        """
        Turn one raw record into Accepted / Skipped / Failed.
        Skipped records never reach the embedder.
        """
        if not isinstance(doc, Mapping):
            return Skipped("missing_id", f"not an object: {SourceRecordReader.describe(doc)}")

        doc_id = self.reader.extract_id(doc)
        if not doc_id:
            return Skipped("missing_id", f"no valid ID found: {SourceRecordReader.describe(doc)}")

        text = self.reader.extract_text(doc)
        if not text:
            return Skipped("missing_text", f"document {doc_id} has no question text")
        if not isinstance(text, str):
            return Failed(doc_id, TypeError(f"question text must be a string, got {type(text).__name__}"))

        try:
            embedding = self.embedder.embed(text)
        except (TextTooShort, EmbeddingFailure) as e:
            return Failed(doc_id, e)

        try:
            record = VectorRecord.from_embedding(
                id=doc_id,
                embedding=embedding,
                metadata=self.reader.build_metadata(doc, text),
            )
        except (TypeError, ValueError) as e:
            return Failed(doc_id, e)

        return Accepted(record)


if __name__ == "__main__":
    import argparse

    from api.AppContainer import AppContainer

    parser = argparse.ArgumentParser(description="Migrate question JSON into the vector store")
    parser.add_argument("--batch-size", type=int, default=settings.DEFAULT_BATCH_SIZE)
    parser.add_argument("--limit", type=int, default=None)
    parser.add_argument("--source", default=None, help="JSON path relative to the source base dir")
    args = parser.parse_args()

    container = AppContainer()
    result = container.ingest_service.migrate(
        batch_size=args.batch_size,
        limit=args.limit,
        source_locator=args.source,
    )
    print(result.to_dict())
