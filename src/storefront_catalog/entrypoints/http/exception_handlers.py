"""Error translation for the HTTP API.

Every failure leaves the API as an ``ErrorResponse`` body. Domain errors
pick their status from ``STATUS_BY_ERROR_CODE``; retryable ones (the item
source was unavailable) also carry ``Retry-After``.
"""

import logging
from typing import Any, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront_catalog.domain.errors import DomainError
from storefront_catalog.entrypoints.http.error_responses import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)

HTTP_422 = 422  # HTTP_422_UNPROCESSABLE_CONTENT (name differs across Starlette releases)

# Unlisted codes map to 400
STATUS_BY_ERROR_CODE: dict[str, int] = {
    "VALIDATION_ERROR": HTTP_422,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CATALOG_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
    "CATALOG_NOT_LOADED": status.HTTP_503_SERVICE_UNAVAILABLE,
}

RETRY_AFTER_SECONDS = "5"

# Location prefixes FastAPI puts in front of the parameter name
_LOCATION_PREFIXES = ("body", "query", "header", "path")


def _error_response(
    status_code: int,
    detail: str,
    code: str,
    errors: Sequence[dict[str, Any]] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        detail=detail,
        code=code,
        errors=[ErrorDetail(**error) for error in errors] if errors else None,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


def _request_context(request: Request) -> dict[str, Any]:
    return {"path": request.url.path, "method": request.method}


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Map a domain error to its status code.

    5xx are logged at ERROR with the error context, client errors at INFO.
    """
    status_code = STATUS_BY_ERROR_CODE.get(exc.error_code, status.HTTP_400_BAD_REQUEST)
    log_extra = {
        "error_code": exc.error_code,
        "error_message": exc.message,
        **_request_context(request),
    }

    if status_code >= 500:
        logger.error("Catalog request failed", extra={**log_extra, "context": exc.context})
    else:
        logger.info("Catalog request rejected", extra=log_extra)

    return _error_response(
        status_code,
        detail=exc.message,
        code=exc.error_code,
        errors=getattr(exc, "errors", None),
        headers={"Retry-After": RETRY_AFTER_SECONDS} if exc.retryable else None,
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Pydantic rejected a query parameter, header or body field.

    e.g. ``price_max=abc``, ``page_size=500`` or ``min_rating=7``.
    """
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part not in _LOCATION_PREFIXES),
            "message": error["msg"],
            "code": error["type"],
        }
        for error in exc.errors()
    ]

    logger.info("Request validation error", extra={"errors": errors, **_request_context(request)})

    return _error_response(
        HTTP_422,
        detail="Invalid request parameters",
        code="VALIDATION_ERROR",
        errors=errors,
    )


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    """Conversion failures in mappers (e.g. Decimal parsing) are client errors."""
    logger.info("Value error", extra={"error_message": str(exc), **_request_context(request)})

    return _error_response(HTTP_422, detail=str(exc), code="INVALID_VALUE")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Anything else: full traceback in the log, generic message to the client."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "error_message": str(exc),
            **_request_context(request),
        },
    )

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred",
        code="INTERNAL_ERROR",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(ValueError, handle_value_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.debug("Exception handlers registered")
