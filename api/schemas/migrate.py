# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-22
# Description: migrate.py
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

import settings


class MigrateRequest(BaseModel):
    batch_size: int = Field(
        settings.DEFAULT_BATCH_SIZE,
        ge=1,
        validation_alias=AliasChoices("batchSize", "batch_size"),
    )
    limit: Optional[int] = Field(None, ge=1)
    # JSON path relative to the source base dir; "jsonFilePath" kept for older clients
    source_locator: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("sourceLocator", "jsonFilePath", "source_locator"),
    )


class IngestStatsModel(BaseModel):
    total_documents: int = Field(..., serialization_alias="totalDocuments")
    total_processed: int = Field(..., serialization_alias="totalProcessed")
    errors: int
    skipped: int
    final_batch_size: int = Field(..., serialization_alias="finalBatchSize")


class MigrateResponse(BaseModel):
    success: bool = True
    message: str
    stats: IngestStatsModel
