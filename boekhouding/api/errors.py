# boekhouding/api/errors.py
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from boekhouding.logging_setup import get_logger

log = get_logger(__name__)


class RequestBodyError(Exception):
    status_code = 400
    message = "Bad request"


class InvalidJSONBody(RequestBodyError):
    status_code = 400
    message = "Invalid JSON body"


class BodyTooLarge(RequestBodyError):
    status_code = 413
    message = "Request body too large"


def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse({"ok": False, "error": message}, status_code=status_code, headers=headers)


async def _body_error(request: Request, exc: RequestBodyError) -> JSONResponse:
    log.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    headers = {"Connection": "close"} if isinstance(exc, BodyTooLarge) else None
    return error_response(exc.status_code, exc.message, headers)


async def _http_error(request: Request, exc: StarletteHTTPException) -> Response:
    # routing errors under /api get the JSON error shape, static files keep the default
    if not request.url.path.startswith("/api/"):
        return await http_exception_handler(request, exc)
    return error_response(exc.status_code, str(exc.detail), exc.headers)


async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
    log.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(500, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestBodyError, _body_error)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(Exception, _unhandled)
