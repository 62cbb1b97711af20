from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from dog_breeds.application.errors import AppError
from dog_breeds.interfaces.http.envelope import error_envelope
from dog_breeds.interfaces.http.schemas.breeds import describe_validation_errors

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"
ROUTE_NOT_FOUND = "Route not found"
VALIDATION_FAILED = "Validation failed"
PARTIAL_METHODS = frozenset({"PUT", "PATCH"})


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:  # noqa: WPS430
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            # Backend detail stays in the log
            logger.error(
                "Application error handled: %s - %s (status: %d)",
                exc.code,
                exc.message,
                exc.status_code,
                exc_info=exc,
                extra={"path": request.url.path, "method": request.method},
            )
            return JSONResponse(status_code=exc.status_code, content=error_envelope(INTERNAL_ERROR))
        logger.info(
            "Application error handled: %s - %s (status: %d)",
            exc.code,
            exc.message,
            exc.status_code,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(status_code=exc.status_code, content=error_envelope(exc.message))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(  # noqa: WPS430
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = describe_validation_errors(
            exc.errors(), partial=request.method in PARTIAL_METHODS
        )
        logger.info(
            "Request validation failed: %s",
            message,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_envelope(VALIDATION_FAILED, message),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:  # noqa: WPS430
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND, content=error_envelope(ROUTE_NOT_FOUND)
            )
        return JSONResponse(status_code=exc.status_code, content=error_envelope(str(exc.detail)))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:  # noqa: WPS430
        logger.error(
            "Unhandled error",
            exc_info=exc,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_envelope(INTERNAL_ERROR),
        )
