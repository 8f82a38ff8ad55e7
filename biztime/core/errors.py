"""
Error signal and central responder.

Handlers raise ApiError (or let a store failure escape); the exception
handlers registered here are the only place that writes an error
response. Every error body has the same envelope:

    {"error": {"message": ..., "status": ...}, "message": ...}
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A failure carrying the message and HTTP status to answer with."""

    def __init__(self, message: str, status: int = 500):
        super().__init__(message)
        self.message = message
        self.status = status

    def to_dict(self) -> dict:
        return {"message": self.message, "status": self.status or 500}


def _envelope(error: dict, message: str, status: int) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content={"error": error, "message": message},
    )


def error_response(err: ApiError) -> JSONResponse:
    return _envelope(err.to_dict(), err.message, err.status or 500)


def register_error_handlers(app: FastAPI) -> None:
    """Register the central responder on the FastAPI application."""

    @app.exception_handler(ApiError)
    async def handle_api_error(_request: Request, exc: ApiError) -> JSONResponse:
        exc.status = exc.status or 500
        if exc.status >= 500:
            logger.error("%s", exc.message)
        else:
            logger.warning("%s", exc.message)
        return error_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        # Unmatched routes land here as 404 "Not Found", wrong verbs as 405
        logger.warning("%s %s -> %s", request.method, request.url.path, exc.status_code)
        return error_response(ApiError(str(exc.detail), exc.status_code))

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Malformed ids and bodies fail like any other bad input: 500
        err = ApiError("Invalid request", 500)
        error = err.to_dict()
        error["details"] = jsonable_encoder(exc.errors())
        logger.error("Request validation failed: %s", exc.errors())
        return _envelope(error, err.message, err.status)

    @app.exception_handler(SQLAlchemyError)
    async def handle_store_error(_request: Request, exc: SQLAlchemyError) -> JSONResponse:
        # Serialize the driver's own error when there is one (constraint, connectivity)
        native = getattr(exc, "orig", None) or exc
        message = str(native)
        logger.error("Store failure: %s", message, exc_info=exc)
        error = {
            "message": message,
            "status": 500,
            "type": type(native).__name__,
        }
        return _envelope(error, message, 500)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(ApiError("Internal Server Error", 500))
