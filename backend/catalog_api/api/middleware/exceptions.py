"""Map exceptions escaping the routes to `{"error": ...}` JSON responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from catalog_api.core.exceptions import DomainValidationError

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Ocurrió un error interno"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def domain_validation_handler(
    request: Request, exc: DomainValidationError
) -> JSONResponse:
    logger.warning(f"Validation error on {request.method} {request.url.path}: {exc.message}")
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Collapse pydantic request errors into a single readable message."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    message = "; ".join(messages) or "Solicitud inválida."
    logger.warning(f"Invalid request on {request.method} {request.url.path}: {message}")
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"HTTP {exc.status_code} on {request.method} {request.url.path}: {exc.detail}")
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


class FaultBarrierMiddleware(BaseHTTPMiddleware):
    """Last line of defense: anything unhandled becomes a generic 500."""

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except DomainValidationError as exc:
            return await domain_validation_handler(request, exc)
        except Exception as exc:
            logger.error(
                f"Unhandled error on {request.method} {request.url.path}: {exc}",
                exc_info=True,
            )
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainValidationError, domain_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_middleware(FaultBarrierMiddleware)
