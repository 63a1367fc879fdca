"""Global exception handlers translating errors into JSON responses.

Every failure response carries a ``detail`` message; validation failures add
an ``errors`` mapping from field name to messages.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from users_api.domain.common.exceptions import DomainError
from users_api.domain.common.field_errors import FieldErrors, merge_field_errors
from users_api.exceptions import UsersApiError, ValidationError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_users_api_error_handler(app)
    _register_domain_error_handler(app)
    _register_request_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_users_api_error_handler(app: FastAPI) -> None:
    @app.exception_handler(UsersApiError)
    async def users_api_error_handler(request: Request, exc: UsersApiError) -> JSONResponse:
        logger.info(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
        content: dict[str, object] = {"detail": exc.message}
        if isinstance(exc, ValidationError):
            content["errors"] = exc.errors
        return JSONResponse(status_code=exc.status_code, content=content)


def _register_domain_error_handler(app: FastAPI) -> None:
    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        logger.warning(f"Domain error on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            content={"detail": exc.message},
        )


def _register_request_validation_error_handler(app: FastAPI) -> None:
    """Malformed requests (bad JSON, non-UUID ids, non-integer paging) are client input errors."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info(f"Malformed request on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": "The request could not be parsed",
                "errors": _request_errors(exc),
            },
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all; never leaks internal details."""
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An unexpected error occurred. Please try again later."},
        )


def _error_field(loc: tuple[int | str, ...]) -> str:
    """
    Name the offending input from a validation error location.

    ("body", "login") -> "login", ("path", "user_id") -> "user_id",
    ("body", 0, "op") -> "body[0].op", ("body",) -> "body".
    """
    source, *parts = loc or ("body",)
    field = str(source) if not parts or isinstance(parts[0], int) else ""
    for part in parts:
        if isinstance(part, int):
            field += f"[{part}]"
        else:
            field = f"{field}.{part}" if field else str(part)
    return field


def _request_errors(exc: RequestValidationError) -> FieldErrors:
    reports: list[FieldErrors] = []
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            field = "body"
        else:
            field = _error_field(tuple(error.get("loc", ())))
        reports.append({field: [str(error.get("msg", "Invalid value"))]})
    return merge_field_errors(*reports)
