# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-07
# Description: TestRunner
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Dict, Optional

from utility.logging_utils import get_class_logger

from health.ChromaHealth import ChromaHealth
from health.EmbeddingHealth import EmbeddingHealth


class TestRunner:
    """
    Orchestrates all smoke tests and reports a consolidated result.

    Tests included:
      - EmbeddingHealth (embedding model load + call)
      - ChromaHealth    (vector store reachability)
    """

    __test__ = False  # not a pytest class

    def __init__(
        self,
        embedding_health: EmbeddingHealth,
        chroma_health: ChromaHealth,
        logger: Optional[logging.Logger] = None,
    ):
        self.embedding_health = embedding_health
        self.chroma_health = chroma_health
        self.logger = logger or get_class_logger(self.__class__)

    # -------------------------------------------------------------------------
    def run_all(self) -> Dict[str, bool]:
        """
        Run all configured smoke tests.

        :return: Dict mapping test names to True/False.
        """
        self.logger.info("Starting smoke test suite")

        results: Dict[str, bool] = {}

        try:
            self.logger.info("Running ChromaHealth.run()")
            ok_chroma = self.chroma_health.run()
            results["chroma_health"] = ok_chroma
            self._log_result("ChromaHealth", ok_chroma)
        except Exception as e:
            self.logger.exception("ChromaHealth.run() raised an exception: %s", e)
            results["chroma_health"] = False

        try:
            self.logger.info("Running EmbeddingHealth.run()")
            ok_embed = self.embedding_health.run()
            results["embedding_health"] = ok_embed
            self._log_result("EmbeddingHealth", ok_embed)
        except Exception as e:
            self.logger.exception("EmbeddingHealth.run() raised an exception: %s", e)
            results["embedding_health"] = False

        self._log_summary(results)
        return results

    # -------------------------------------------------------------------------
    def _log_result(self, name: str, ok: bool) -> None:
        if ok:
            self.logger.info("%s: PASS", name)
        else:
            self.logger.error("%s: FAIL", name)

    def _log_summary(self, results: Dict[str, bool]) -> None:
        total = len(results)
        passed = sum(1 for v in results.values() if v)
        failed = total - passed

        self.logger.info("Smoke test summary: %d total, %d passed, %d failed", total, passed, failed)

        for name, ok in results.items():
            status = "PASS" if ok else "FAIL"
            self.logger.info("  %s: %s", name, status)
