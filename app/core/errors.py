"""
Error types and the central JSON error envelope

Every fault raised while handling a request ends up here and is turned into
{"success": false, "message": ..., "error": ...}. Internal detail is only
exposed when running in the development tier.
"""
import logging
import traceback
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "Internal Server Error"


class AppError(Exception):
    """Base error carrying the HTTP status to answer with"""
    status_code = 500

    def __init__(self, message: str = DEFAULT_MESSAGE, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(AppError):
    status_code = 404


class AuthenticationError(AppError):
    status_code = 401


class PermissionDeniedError(AppError):
    status_code = 403


class PayloadTooLargeError(AppError):
    status_code = 413

    def __init__(self, message: str = "request entity too large"):
        super().__init__(message)


class DatabaseConnectionError(Exception):
    """Raised at startup when the database cannot be reached"""


def status_for(exc: Exception) -> int:
    status = getattr(exc, "status_code", None) or getattr(exc, "status", None)
    if isinstance(status, int) and 400 <= status <= 599:
        return status
    return 500


def message_for(exc: Exception) -> str:
    if isinstance(exc, StarletteHTTPException):
        return str(exc.detail) if exc.detail else DEFAULT_MESSAGE
    return getattr(exc, "message", None) or str(exc) or DEFAULT_MESSAGE


def error_envelope(exc: Exception, expose_detail: bool) -> dict:
    detail = {}
    if expose_detail:
        detail = {
            "type": exc.__class__.__name__,
            "message": str(exc),
            "stack": traceback.format_exception(type(exc), exc, exc.__traceback__),
        }
    return {
        "success": False,
        "message": message_for(exc),
        "error": detail,
    }


def envelope_response(exc: Exception, expose_detail: bool) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("Unhandled error", exc_info=(type(exc), exc, exc.__traceback__))
    headers = getattr(exc, "headers", None)
    return JSONResponse(
        status_code=status_code,
        content=error_envelope(exc, expose_detail),
        headers=headers,
    )


def register_error_handlers(app: FastAPI, expose_detail: bool):
    """
    Attach the envelope handlers; call once while building the app.

    Unexpected exceptions are normally converted by ErrorEnvelopeMiddleware
    inside the CORS layer; the Exception handler here only covers faults
    raised outside the middleware stack.
    """

    def _respond(exc: Exception) -> JSONResponse:
        return envelope_response(exc, expose_detail)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return _respond(exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return _respond(exc)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        return _respond(exc)
