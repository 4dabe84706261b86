# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-07
# Description: stats.py
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_stats_service
from api.schemas.stats import StatsResponse
from services.QuestionStatsService import QuestionStatsService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/stats",
    tags=["stats"]
)

@router.get("", response_model=StatsResponse)
def get_stats(
    svc: QuestionStatsService = Depends(get_stats_service),
) -> StatsResponse:
    logger.info("Getting vector stats")
    return StatsResponse(**svc.get_stats())
