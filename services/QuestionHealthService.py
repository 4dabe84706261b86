# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Description: QuestionHealthService.py
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Optional

from health.TestRunner import TestRunner
from api.schemas.health import DeepHealthResponse, SmokeTestSummary


@dataclass
class QuestionHealthService:
    """
    Wraps TestRunner, which runs smoke tests against the embedding
    model and the vector store.
    Returns DeepHealthResponse for API layer
    """

    test_runner: TestRunner
    collection_name: Optional[str] = None

    def deep_health(self) -> DeepHealthResponse:

        results = self.test_runner.run_all()

        total = len(results)
        passed = sum(1 for ok in results.values() if ok)
        failed = total - passed

        overall_status = "ok" if failed == 0 else "error"

        summary = SmokeTestSummary(
            total=total,
            passed=passed,
            failed=failed,
        )

        return DeepHealthResponse(
            status=overall_status,
            results=results,
            summary=summary,
            collection_name=self.collection_name,
        )
