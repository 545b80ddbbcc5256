"""
Exception handlers that give every failure the same ``{"error": message}``
body.

- ``HTTPException`` (raised by routers, or by Starlette for unknown routes)
  keeps its status and puts its detail under ``error``.
- ``RequestValidationError`` becomes a 400 whose message depends on the
  endpoint, see the ``error_message`` classmethods in ``quiz_schemas``.
- Anything else is a 500 echoing the exception message.
"""

import logging
from typing import Optional, get_type_hints

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _body_schema_for(request: Request) -> Optional[type]:
    # the matched endpoint's body parameter carries the error_message rules
    endpoint = request.scope.get("endpoint")
    if endpoint is None:
        return None
    for hint in get_type_hints(endpoint).values():
        if isinstance(hint, type) and issubclass(hint, BaseModel) and hasattr(hint, "error_message"):
            return hint
    return None


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code >= 400:
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        message = "Malformed JSON body"
    else:
        schema = _body_schema_for(request)
        message = schema.error_message(errors) if schema is not None else "Invalid request body"
    logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
