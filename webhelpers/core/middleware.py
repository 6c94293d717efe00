import json
import logging
import time
from http import HTTPStatus
from typing import Callable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from ..response import ResponseWrapper
from .config import Config


logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def request_id_for(request: Request) -> str:
    """Return the request's correlation id, assigning one on first use."""
    request_id = getattr(request.state, "request_id", None)
    if request_id is None:
        request_id = request.headers.get(REQUEST_ID_HEADER) or f"{int(time.time() * 1000)}-{id(request)}"
        request.state.request_id = request_id
    return request_id


def _render(request: Request, envelope: ResponseWrapper) -> JSONResponse:
    request_id = request_id_for(request)
    envelope = envelope.with_request_context(request_id=request_id, path=request.url.path)
    response = envelope.to_json_response()
    # Unhandled-exception responses are built outside the user middleware.
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


def _status_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Request failed"


async def log_requests(request: Request, call_next: Callable):
    start_time = time.time()
    request_id = request_id_for(request)

    # Unhandled exceptions propagate to global_exception_handler, which logs them.
    response = await call_next(request)
    process_time = time.time() - start_time
    # Only log slow requests (>1s) or errors
    if process_time > 1.0 or response.status_code >= 400:
        logger.info(f"[{request_id}] {request.method} {request.url.path} - {response.status_code} - {process_time:.2f}s")
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


async def http_exception_handler(request: Request, exc: HTTPException):
    logger.warning(f"[{request_id_for(request)}] {request.method} {request.url.path} failed ({exc.status_code}): {exc.detail}")
    if isinstance(exc.detail, str):
        envelope = ResponseWrapper.error(exc.detail, exc.status_code)
    else:
        envelope = ResponseWrapper.error(
            _status_phrase(exc.status_code),
            exc.status_code,
            technical_message=json.dumps(exc.detail, default=str),
        )
    response = _render(request, envelope)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"[{request_id_for(request)}] Validation failed for {request.method} {request.url.path}: {exc.errors()}")
    if Config.expose_technical_messages():
        envelope = ResponseWrapper.error(
            "Request validation failed", HTTPStatus.BAD_REQUEST, technical_message=str(exc.errors())
        )
    else:
        envelope = ResponseWrapper.bad_request("Request validation failed")
    return _render(request, envelope)


async def global_exception_handler(request: Request, exc: Exception):
    request_id = request_id_for(request)
    logger.error(f"[{request_id}] Unhandled exception in {request.method} {request.url.path}: {str(exc)}", exc_info=True)

    if Config.expose_technical_messages():
        envelope = ResponseWrapper.error(
            "Internal server error", HTTPStatus.INTERNAL_SERVER_ERROR, technical_message=f"{type(exc).__name__}: {exc}"
        )
    else:
        envelope = ResponseWrapper.server_error("Internal server error")
    return _render(request, envelope)


def install_handlers(app: FastAPI) -> FastAPI:
    """Register request logging and envelope-rendering exception handlers."""

    @app.middleware("http")
    async def _log_requests(request, call_next):
        return await log_requests(request, call_next)

    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    return app
