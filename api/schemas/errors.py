# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: errors.py
# -----------------------------------------------------------------------------
import traceback
from typing import Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel

import settings


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    stack: Optional[str] = None


def error_response(status_code: int, exc: Exception | str) -> JSONResponse:
    """{success: false, error} payload; stack trace only when QVS_DEBUG_ERRORS is on."""
    message = str(exc)
    stack = None
    if settings.DEBUG_ERRORS and isinstance(exc, Exception):
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    payload = ErrorResponse(error=message, stack=stack)
    return JSONResponse(status_code=status_code, content=payload.model_dump(exclude_none=True))
