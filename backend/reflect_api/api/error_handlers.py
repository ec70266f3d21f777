"""Error Handlers — global exception handlers that always answer with an envelope.

Invariants:
    - ReflectError → its kind's failure envelope and status
    - RequestValidationError → InvalidAmount envelope (400), field details logged only
    - Exception (catch-all) → InternalError envelope (500), never leaks internals

Design Decisions:
    - Three-layer handler: domain (ReflectError), validation (Pydantic), catch-all (Exception)
    - Malformed input shares the InvalidAmount message: the wire taxonomy is a
      closed set and clients already branch on it
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from reflect_api.core.envelope import fail
from reflect_api.core.errors import ErrorKind, ReflectError, status_for

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_reflect_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_reflect_error_handler(app: FastAPI) -> None:
    """Register domain fault handler."""

    @app.exception_handler(ReflectError)
    async def reflect_error_handler(request: Request, exc: ReflectError):
        logger.error(
            f"ReflectError: {exc.detail}",
            extra={
                "error_code": exc.code,
                "error_kind": exc.kind.value,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {_summarize(exc)}",
            extra={
                "error_kind": ErrorKind.INVALID_AMOUNT.value,
                "path": request.url.path,
            },
        )
        return _envelope_response(ErrorKind.INVALID_AMOUNT)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return _envelope_response(ErrorKind.INTERNAL_ERROR)


def _envelope_response(kind: ErrorKind) -> JSONResponse:
    return JSONResponse(status_code=status_for(kind), content=fail(kind).to_dict())


def _summarize(exc: RequestValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )
