# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Description: AppContainer.py
# -----------------------------------------------------------------------------
from functools import partial

import settings
from config.Config import Config
from embedding.EmbeddingModel import build_embedding_model
from embedding.QuestionEmbedder import QuestionEmbedder
from health.ChromaHealth import ChromaHealth
from health.EmbeddingHealth import EmbeddingHealth
from health.TestRunner import TestRunner
from ingestion.QuestionFileLoader import QuestionFileLoader
from services.QuestionHealthService import QuestionHealthService
from services.QuestionIngestService import QuestionIngestService
from services.QuestionQueryService import QuestionQueryService
from services.QuestionStatsService import QuestionStatsService
from utility.logging_utils import get_class_logger
from vectorstore.ChromaQuestionVectorStore import ChromaQuestionVectorStore


class AppContainer:
    """
    Owns heavy object instantiation and application wiring.
    Singleton instances are provided via FastAPI dependencies.

    The embedding model itself is not loaded here; QuestionEmbedder loads it
    on first use.
    """

    def __init__(self, cfg: Config | None = None) -> None:
        # Configuration
        self.cfg = cfg or Config.from_env()
        self.logger = get_class_logger(self.__class__)
        self.logger.info("Building application container: %s", self.cfg.summary())

        # Core infrastructure (one embedder shared by ingest + query)
        self.embedder = QuestionEmbedder(model_factory=partial(build_embedding_model, self.cfg))
        self.store = ChromaQuestionVectorStore(cfg=self.cfg)

        # Source discovery for migrations
        self.file_loader = QuestionFileLoader()

        self.ingest_service = QuestionIngestService(
            file_loader=self.file_loader,
            store=self.store,
            embedder=self.embedder,
        )

        self.query_service = QuestionQueryService(
            store=self.store,
            embedder=self.embedder,
        )

        self.stats_service = QuestionStatsService(
            cfg=self.cfg,
            store=self.store,
            embedder=self.embedder,
        )

        # Smoke tests / health
        self.test_runner = TestRunner(
            embedding_health=EmbeddingHealth(
                self.embedder,
                expected_dim=settings.EXPECTED_EMBEDDING_DIM or None,
            ),
            chroma_health=ChromaHealth(self.store),
        )
        self.health_service = QuestionHealthService(
            test_runner=self.test_runner,
            collection_name=self.cfg.collection_name,
        )
