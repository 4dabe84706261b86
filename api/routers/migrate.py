# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-23
# Description: migrate.py
# -----------------------------------------------------------------------------
import logging
from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import get_ingest_service
from api.schemas.errors import error_response
from api.schemas.migrate import IngestStatsModel, MigrateRequest, MigrateResponse
from services.QuestionIngestService import QuestionIngestService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["migrate"])


@router.post("/migrate-to", response_model=MigrateResponse, response_model_by_alias=True)
def post_migrate(
    req: Optional[MigrateRequest] = None,
    svc: QuestionIngestService = Depends(get_ingest_service),
):
    req = req or MigrateRequest()
    logger.info(
        "POST /api/migrate-to (start) batch_size=%d limit=%s source='%s'",
        req.batch_size,
        req.limit,
        req.source_locator or "<auto>",
    )

    try:
        stats = svc.migrate(
            batch_size=req.batch_size,
            limit=req.limit,
            source_locator=req.source_locator,
        )
    except Exception as e:
        logger.exception("Migration error: %s", e)
        return error_response(500, e)

    resp = MigrateResponse(
        message="Migration completed successfully",
        stats=IngestStatsModel(
            total_documents=stats.total_documents,
            total_processed=stats.total_processed,
            errors=stats.errors,
            skipped=stats.skipped,
            final_batch_size=stats.final_batch_size,
        ),
    )
    logger.info("POST /api/migrate-to (done) stats=%s", stats.to_dict())
    return resp
