# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-14
# Description: QuestionEmbedder
# -----------------------------------------------------------------------------
import logging
import threading
import time
from typing import Callable, List, Optional

from embedding.EmbeddingModel import EmbeddingModel
from embedding.VectorRecord import flatten_embedding
from preprocessing.TextNormalizer import TextNormalizer
from utility.logging_utils import get_class_logger


class EmbeddingFailure(RuntimeError):
    """Raised when the embedding model cannot be loaded or invoked."""


class QuestionEmbedder:
    """
    Process-wide embedding generator shared by ingestion and search.

    The model is created lazily by ``model_factory`` on first use. Loading is
    single-flight: concurrent first callers wait on the same lock and all get
    the one instance that was built. A failed load leaves the embedder
    uninitialised so a later call can try again.
    """

    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"

    def __init__(
            self,
            model_factory: Callable[[], EmbeddingModel],
            *,
            pooling: str = "mean",
            normalize: bool = True,
            logger: logging.Logger | None = None,
    ):
        self.model_factory = model_factory
        self.pooling = pooling
        self.normalize = normalize
        self.logger = logger or get_class_logger(self.__class__)

        self._model: Optional[EmbeddingModel] = None
        self._state = self.UNINITIALIZED
        self._lock = threading.Lock()
        self._dimension: Optional[int] = None
        self.load_count = 0

    @property
    def state(self) -> str:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state == self.READY

    @property
    def dimension(self) -> Optional[int]:
        """Output dimension, known once the first vector was produced."""
        return self._dimension

    def get_or_init(self) -> EmbeddingModel:
        model = self._model
        if model is not None:
            return model

        with self._lock:
            # Another thread may have finished loading while we waited
            if self._model is not None:
                return self._model

            self._state = self.LOADING
            self.load_count += 1
            start = time.time()
            try:
                model = self.model_factory()
            except Exception as e:
                self._state = self.UNINITIALIZED
                self.logger.exception("Embedding model load failed: %s", e)
                raise EmbeddingFailure(f"Embedding model load failed: {e}") from e

            elapsed = (time.time() - start) * 1000.0
            self._model = model
            self._state = self.READY
            self.logger.info("Embedding model ready (%.1f ms)", elapsed)
            return model

    def embed(self, text: str) -> List[float]:
        """
        Normalise → ensure model → run (mean pooling, L2-normalised).
        Raises TextTooShort for unusable text and EmbeddingFailure for model errors.
        """
        clean_text = TextNormalizer.normalize(text)
        model = self.get_or_init()

        try:
            output = model.run(clean_text, pooling=self.pooling, normalize=self.normalize)
            vector = flatten_embedding(output)
        except Exception as e:
            self.logger.error("Embedding call failed: %s", e)
            raise EmbeddingFailure(f"Embedding generation failed: {e}") from e

        if not vector:
            raise EmbeddingFailure("Embedding model returned an empty vector")

        if self._dimension is None:
            self._dimension = len(vector)
            self.logger.info("Embedding dimension: %d", self._dimension)
        elif len(vector) != self._dimension:
            raise EmbeddingFailure(
                f"Embedding dimension changed: expected {self._dimension}, got {len(vector)}"
            )

        return vector
