"""Translate domain errors into HTTP responses.

Services raise app.core.errors exceptions without knowing about HTTP;
these handlers give them their status codes and body shapes.

Request validation on the add-operations (POST to a content collection)
answers 400 ``{success: false, message}`` like an unknown parent id does;
every other route keeps FastAPI's 422 ``{detail}``.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import InvalidReferenceError, NotFoundError

logger = logging.getLogger(__name__)

_ADD_ROUTES = frozenset(
    {
        "/api/courses",
        "/api/modules",
        "/api/videos",
        "/api/assessments",
        "/api/questions",
    }
)


def _is_add_operation(request: Request) -> bool:
    return request.method == "POST" and request.url.path.rstrip("/") in _ADD_ROUTES


def _describe(exc: RequestValidationError) -> str:
    problems = [
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
        for err in exc.errors()
    ]
    return "Validation failed - " + "; ".join(problems)


async def _invalid_reference(request: Request, exc: Exception) -> JSONResponse:
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=400, content={"success": False, "message": str(exc)}
    )


async def _not_found(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def _validation_failed(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    if _is_add_operation(request):
        message = _describe(exc)
        logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
        return JSONResponse(
            status_code=400, content={"success": False, "message": message}
        )
    return await request_validation_exception_handler(request, exc)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidReferenceError, _invalid_reference)
    app.add_exception_handler(NotFoundError, _not_found)
    app.add_exception_handler(RequestValidationError, _validation_failed)
