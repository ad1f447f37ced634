"""Error Handlers — global exception handlers that emit RFC 7807 problem details.

Invariants:
    - UsersApiError → problem details with the error's own http_status
    - StarletteHTTPException (404, 405, ...) → problem details, framework headers kept
    - RequestValidationError → 400 problem details with field-level "errors"
    - Exception (catch-all) → 500 problem details, never leaks internal details
    - problem_details_enabled=False → 4xx become bare statuses; 5xx always carry a body

Design Decisions:
    - Four-layer handler: domain, HTTP status pages, validation, catch-all
"""

import logging
from collections.abc import Mapping
from http import HTTPStatus

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from users_api.core.errors import ErrorSeverity, InternalError, UsersApiError
from users_api.core.problem_details import ProblemDetails, build_problem_details
from users_api.services.problem_response import problem_response

logger = logging.getLogger(__name__)

_SEVERITY_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_users_api_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _render(
    request: Request,
    problem: ProblemDetails,
    headers: Mapping[str, str] | None = None,
) -> Response:
    """Problem response, or a bare status when 4xx bodies are disabled."""
    settings = request.app.state.settings
    if problem.status < 500 and not settings.problem_details_enabled:
        return Response(status_code=problem.status, headers=headers)
    return problem_response(problem, headers)


def _register_users_api_error_handler(app: FastAPI) -> None:
    """Register Users API domain/internal error handler."""

    @app.exception_handler(UsersApiError)
    async def users_api_error_handler(request: Request, exc: UsersApiError):
        logger.log(
            _SEVERITY_LOG_LEVELS[exc.severity],
            f"UsersApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return _render(request, exc.to_problem_details(request.url.path))


def _register_http_error_handler(app: FastAPI) -> None:
    """Register status code pages for framework-raised HTTP errors."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.info(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}",
            extra={"status_code": exc.status_code, "path": request.url.path},
        )
        if exc.status_code < 400:
            return Response(status_code=exc.status_code, headers=exc.headers)
        problem = build_problem_details(
            exc.status_code,
            detail=_http_detail(exc),
            instance=request.url.path,
        )
        return _render(request, problem, exc.headers)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return _render(request, _build_validation_problem(request, exc))


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all. Never leaks internal details."""
        error = InternalError()
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
            extra={"error_code": error.code, "path": request.url.path},
        )
        return problem_response(error.to_problem_details(request.url.path))


def _http_detail(exc: StarletteHTTPException) -> str | None:
    """Keep only details that say more than the reason phrase."""
    if not isinstance(exc.detail, str):
        return None
    try:
        phrase = HTTPStatus(exc.status_code).phrase
    except ValueError:
        phrase = None
    return None if exc.detail == phrase else exc.detail


def _build_validation_problem(
    request: Request, exc: RequestValidationError,
) -> ProblemDetails:
    """Build structured validation problem with per-field errors."""
    return build_problem_details(
        status.HTTP_400_BAD_REQUEST,
        detail="One or more request parameters are invalid.",
        instance=request.url.path,
        errors=[
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    )
