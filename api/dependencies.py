# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-07
# Description: dependencies.py
# -----------------------------------------------------------------------------
from functools import lru_cache

from api.AppContainer import AppContainer
from services.QuestionHealthService import QuestionHealthService
from services.QuestionIngestService import QuestionIngestService
from services.QuestionQueryService import QuestionQueryService
from services.QuestionStatsService import QuestionStatsService


@lru_cache
def get_container() -> AppContainer:
    # built on first request, then reused for the life of the process
    return AppContainer()

def get_health_service() -> QuestionHealthService:
    return get_container().health_service

def get_stats_service() -> QuestionStatsService:
    return get_container().stats_service

def get_ingest_service() -> QuestionIngestService:
    return get_container().ingest_service

def get_query_service() -> QuestionQueryService:
    return get_container().query_service
