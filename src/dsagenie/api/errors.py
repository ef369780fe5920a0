"""
Every failure leaves the API as HTTP 500 with {"success": false, "error": ...}.
"""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .models.common import APIError

logger = logging.getLogger(__name__)


def error_response(exc: BaseException) -> JSONResponse:
    return JSONResponse(status_code=500, content=APIError(error=str(exc)).model_dump())


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = [
        f"{'.'.join(str(part) for part in error['loc'] if part != 'body') or 'body'}: {error['msg']}"
        for error in exc.errors()
    ]
    logger.warning(f"Rejected request to {request.url.path}: {messages}")
    return JSONResponse(status_code=500, content=APIError(error="; ".join(messages)).model_dump())
