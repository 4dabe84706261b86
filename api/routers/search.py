# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Description: search router
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_query_service
from api.schemas.errors import error_response
from api.schemas.search import SearchRequest, SearchResponse, SearchMatch
from services.QuestionQueryService import InvalidQuery, QuestionQueryService, SearchQuery

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["search"])


@router.post("/search-questions", response_model=SearchResponse, response_model_by_alias=True)
def post_search_questions(
    req: SearchRequest,
    svc: QuestionQueryService = Depends(get_query_service),
):
    query = SearchQuery(
        text=req.query or "",
        subject=req.subject,
        topic=req.topic,
        course=req.course,
        top_k=req.top_k,
    )

    try:
        result = svc.search(query)
    except InvalidQuery as e:
        logger.warning("POST /api/search-questions -> 400 (%s)", e)
        return error_response(400, e)
    except Exception as e:
        logger.exception("Search error: %s", e)
        return error_response(500, e)

    return SearchResponse(
        matches=[SearchMatch(**m) for m in result.matches],
        total=result.total,
        search_query=result.search_query,
        filters=result.filters,
    )
