# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-21
# Description: QuestionStatsService.py
# -----------------------------------------------------------------------------

import logging
from typing import Any, Dict

from config.Config import Config
from embedding.QuestionEmbedder import QuestionEmbedder
from utility.logging_utils import get_class_logger
from vectorstore.QuestionVectorStore import QuestionVectorStore


class QuestionStatsService:
    """
    Stats service for the /stats endpoint.

    Responsibilities:
      - count vectors in the collection
      - report which embedding backend/model is configured and whether it is loaded
    """

    def __init__(
        self,
        *,
        cfg: Config,
        store: QuestionVectorStore,
        embedder: QuestionEmbedder,
        logger: logging.Logger | None = None,
    ) -> None:
        self.cfg = cfg
        self.store = store
        self.embedder = embedder
        self.logger = logger or get_class_logger(self.__class__)

    def get_stats(self) -> Dict[str, Any]:
        self.logger.info("Stats for collection='%s'", self.cfg.collection_name)

        try:
            total_vectors = self.store.count()
        except Exception as e:
            self.logger.error("Failed to count collection '%s': %s", self.cfg.collection_name, e)
            total_vectors = 0

        return {
            "collection_name": self.cfg.collection_name,
            "total_vectors": total_vectors,
            "embedding_backend": self.cfg.embedding_backend,
            "embedding_model": (
                self.cfg.openai_azure_embed_deployment
                if self.cfg.embedding_backend == "azure"
                else self.cfg.embedding_model_name
            ),
            "embedding_ready": self.embedder.is_ready,
            "embedding_dimension": self.embedder.dimension,
        }
