"""
Exception handlers producing ``{"message": ...}`` error bodies.

FastAPI renders errors as ``{"detail": ...}`` and request validation
failures as 422.  Clients of this service expect a single ``message``
key and a 400 for bad request bodies, so the handlers below replace
the defaults.  ``register_exception_handlers`` is called from
``create_app``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from card_store_api.app.schemas.card import CARD_FIELDS_REQUIRED, MALFORMED_BODY


logger = logging.getLogger(__name__)


# Detail FastAPI uses when a request body cannot be decoded at all.
BODY_PARSE_ERROR = "There was an error parsing the body"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render any ``HTTPException`` with its status and a ``message`` body.

    A body FastAPI could not decode (e.g. invalid UTF-8) is reported
    with the same message as any other malformed JSON.
    """
    message = str(exc.detail)
    if exc.status_code == status.HTTP_400_BAD_REQUEST and message == BODY_PARSE_ERROR:
        message = MALFORMED_BODY
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Turn request body validation failures into 400 responses.

    A body that cannot be decoded as JSON gets its own message; every
    other failure means the required card fields were missing or not
    usable strings.
    """
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        message = MALFORMED_BODY
    else:
        message = CARD_FIELDS_REQUIRED
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the ``message``-style error handlers to ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
