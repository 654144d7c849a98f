"""
API error handling and exception mapping.

This module converts domain errors and request validation failures into
the shared ErrorResponse envelope.
"""

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.schemas.base import ErrorResponse
from app.domain_core.exceptions import DomainError
from app.infra.config.logging_config import get_logger

logger = get_logger("api.errors")

# status.HTTP_422_UNPROCESSABLE_ENTITY is deprecated in current starlette
HTTP_422 = 422

STATUS_CODE_MAPPING = {
    "DECK_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "SLIDE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "VALIDATION_ERROR": HTTP_422,
}


def _respond(status_code: int, error: str, detail: str) -> JSONResponse:
    body = ErrorResponse(error=error, detail=detail)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map domain errors to their HTTP status codes."""
    logger.warning("error.domain", code=exc.code, detail=exc.message)
    status_code = STATUS_CODE_MAPPING.get(
        exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return _respond(status_code, exc.code, exc.message)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Flatten pydantic errors into one readable detail string."""
    logger.warning("error.validation", errors=str(exc.errors()))

    formatted_errors = []
    for error in exc.errors():
        location = " -> ".join(str(loc) for loc in error["loc"])
        formatted_errors.append(f"{location}: {error['msg']}")

    return _respond(
        HTTP_422,
        "VALIDATION_ERROR",
        "Validation failed: " + "; ".join(formatted_errors),
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    logger.warning("error.http", status_code=exc.status_code, detail=str(exc.detail))
    return _respond(exc.status_code, f"HTTP_{exc.status_code}", str(exc.detail))


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("error.unexpected", error_type=type(exc).__name__)
    return _respond(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred. Please try again later.",
    )


def setup_error_handlers(app) -> None:
    """Register the handlers on a FastAPI application."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
