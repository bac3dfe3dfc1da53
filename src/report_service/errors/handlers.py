"""FastAPI exception handlers producing a uniform error body."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from report_service.errors.exceptions import ReportServiceError, ValidationError
from report_service.models.requests import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


def _render(exc: ReportServiceError) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(code=exc.code, message=exc.message))
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app."""

    @app.exception_handler(ReportServiceError)
    async def report_service_error_handler(request: Request, exc: ReportServiceError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.code}")
        return _render(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        # Schema failures use the same 400 shape as domain validation
        logger.warning(f"Rejected request body on {request.url.path}: {len(exc.errors())} error(s)")
        return _render(ValidationError("Invalid request body"))
