# filmgraph/services/api/errors.py
from __future__ import annotations

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from filmgraph.common.logging import get_logger
from filmgraph.domain.errors import (
    DuplicateConflictError, FilmgraphError, InvalidArgumentError, NotFoundError,
)

logger = get_logger(__name__)

_STATUS = {
    NotFoundError: (HTTPStatus.NOT_FOUND, "Not found"),
    DuplicateConflictError: (HTTPStatus.CONFLICT, "Conflict"),
    InvalidArgumentError: (HTTPStatus.BAD_REQUEST, "Validation error"),
}


def _body(error: str, message: str) -> dict:
    return {"error": error, "message": message}


async def _domain_error(request: Request, exc: FilmgraphError) -> JSONResponse:
    status, label = next(
        (v for t, v in _STATUS.items() if isinstance(exc, t)),
        (HTTPStatus.INTERNAL_SERVER_ERROR, "Internal error"),
    )
    log = logger.error if status >= HTTPStatus.INTERNAL_SERVER_ERROR else logger.warning
    log("%s: %s", label, exc.message)
    return JSONResponse(status_code=status, content=_body(label, exc.message))


async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    first = next(iter(exc.errors()), None)
    if first:
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{field}: {first.get('msg', 'invalid value')}"
    else:
        message = "Unknown validation error"
    logger.warning("Request validation failed: %s", message)
    return JSONResponse(status_code=HTTPStatus.BAD_REQUEST, content=_body("Validation error", message))


async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error: %s", exc)
    return JSONResponse(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        content=_body("Internal error", "An unexpected error occurred"),
    )


def install_error_handlers(app: FastAPI) -> None:
    for exc_type in (*_STATUS, FilmgraphError):
        app.add_exception_handler(exc_type, _domain_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(Exception, _unexpected_error)
