"""
Turns every failure into the {"error": {"message": ...}} envelope.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": {"message": message}})


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # DatabaseError is an HTTPException and lands in the first branch
    if isinstance(exc, StarletteHTTPException):
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}")
        return _error_response(exc.status_code, str(exc.detail))

    if isinstance(exc, SQLAlchemyError):
        # Raised outside the service, e.g. while committing the request session
        logger.error(f"Database error on {request.url.path}: {exc}")
        return _error_response(500, "Database operation failed")

    logger.error(f"Unexpected error on {request.url.path}: {exc}", exc_info=True)
    return _error_response(500, "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    # A bare Exception handler is only seen by ServerErrorMiddleware, which re-raises
    for exc_class in (StarletteHTTPException, SQLAlchemyError, Exception):
        app.add_exception_handler(exc_class, global_exception_handler)
