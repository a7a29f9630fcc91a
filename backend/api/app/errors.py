# app/errors.py
import logging
from typing import Optional

import aiosqlite
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.models import ErrorResponse

logger = logging.getLogger(__name__)


class APIError(Exception):
    status_code = 500

    def __init__(self, message: str, developer_details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.developer_details = developer_details


class NotFoundError(APIError):
    status_code = 404


class DecodeError(APIError):
    """A stored row could not be turned into a response model."""
    status_code = 500


def error_response(status_code: int, message: str, developer_details: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=message, developer_details=developer_details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc)
    else:
        logger.warning("%s %s: %s (%s)", request.method, request.url.path, exc.message, exc.developer_details)
    return error_response(exc.status_code, exc.message, exc.developer_details)


async def database_error_handler(request: Request, exc: aiosqlite.Error) -> JSONResponse:
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(500, "Database error", str(exc))


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(aiosqlite.Error, database_error_handler)
