# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-06
# Description: EmbeddingHealth
# -----------------------------------------------------------------------------
import math
import time
import logging
from typing import Optional

from embedding.QuestionEmbedder import QuestionEmbedder
from utility.logging_utils import get_logger


class EmbeddingHealth:
    """
    Smoke test for the embedding generator.

    Verifies:
      - the model loads and the embedding call completes
      - the vector is non-empty and unit length
      - the vector dimension matches the expected dimension (if provided)
    """

    def __init__(
        self,
        embedder: QuestionEmbedder,
        expected_dim: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.embedder = embedder
        self.expected_dim = expected_dim
        self.logger = logger or get_logger(__name__)

    def run(self) -> bool:
        """
        Run the embedding smoke test.

        Returns:
            True if the embedding call succeeds and the vector passes all checks.
        """
        test_text = "Question bank embedding healthcheck"
        self.logger.info("Running embedding healthcheck")

        try:
            start = time.time()
            vector = self.embedder.embed(test_text)
            elapsed_ms = (time.time() - start) * 1000.0
        except Exception as e:
            self.logger.exception("Embedding healthcheck FAILED: %s", e)
            return False

        if not vector:
            self.logger.error("No embedding data returned.")
            return False

        dim = len(vector)
        norm = math.sqrt(sum(x * x for x in vector))
        self.logger.info(
            "Embedding call succeeded in %.1f ms. Returned dimension: %d, norm: %.4f",
            elapsed_ms,
            dim,
            norm,
        )

        if abs(norm - 1.0) > 1e-3:
            self.logger.warning("Embedding is not L2-normalised (norm=%.4f).", norm)
            return False

        if self.expected_dim and dim != self.expected_dim:
            self.logger.warning(
                "Dimension mismatch: expected %d, got %d.",
                self.expected_dim,
                dim,
            )
            return False

        self.logger.info("Embedding healthcheck PASSED.")
        return True
