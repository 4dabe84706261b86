# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-06
# Description: ChromaHealth
# -----------------------------------------------------------------------------

from typing import Optional
import logging

from utility.logging_utils import get_logger
from vectorstore.QuestionVectorStore import QuestionVectorStore


class ChromaHealth:
    """
    Read-only healthcheck for the question collection: it must answer count().
    No test vectors are written, since the collection holds live data.
    """

    def __init__(self, store: QuestionVectorStore, logger: Optional[logging.Logger] = None):
        self.store = store
        self.logger = logger or get_logger(__name__)

    def run(self) -> bool:
        self.logger.info("Running Chroma healthcheck")
        if not self.store.test_connection():
            self.logger.error("Chroma healthcheck FAILED: collection unreachable")
            return False

        try:
            total = self.store.count()
        except Exception as e:
            self.logger.exception("Chroma healthcheck FAILED: %s", e)
            return False

        self.logger.info("Chroma healthcheck PASSED (%d vectors).", total)
        return True
