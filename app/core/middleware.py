"""
ASGI middleware: request body size limit and the error envelope fallback
"""
from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from app.core.errors import PayloadTooLargeError, envelope_response

LIMITED_CONTENT_TYPES = ("application/json", "application/x-www-form-urlencoded")


class BodyLimitMiddleware:
    """
    Reject JSON / form bodies above max_body_size with a 413 envelope.

    Limited bodies are read up front (the handler parses them in full
    anyway) and replayed to the app once they fit. Other content types,
    such as multipart uploads, stream through untouched.
    """

    def __init__(self, app: ASGIApp, max_body_size: int):
        self.app = app
        self.max_body_size = max_body_size

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = Headers(scope=scope)
        content_type = headers.get("content-type", "").split(";")[0].strip().lower()
        if content_type not in LIMITED_CONTENT_TYPES:
            await self.app(scope, receive, send)
            return

        declared = headers.get("content-length", "")
        if declared.isdigit() and int(declared) > self.max_body_size:
            await self._reject(scope, receive, send)
            return

        chunks = []
        size = 0
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] == "http.disconnect":
                return
            chunk = message.get("body", b"")
            size += len(chunk)
            if size > self.max_body_size:
                await self._reject(scope, receive, send)
                return
            chunks.append(chunk)
            more_body = message.get("more_body", False)

        body = b"".join(chunks)
        replayed = False

        async def replay() -> Message:
            nonlocal replayed
            if not replayed:
                replayed = True
                return {"type": "http.request", "body": body, "more_body": False}
            return await receive()

        await self.app(scope, replay, send)

    async def _reject(self, scope: Scope, receive: Receive, send: Send):
        error = PayloadTooLargeError()
        response = JSONResponse(
            status_code=error.status_code,
            content={"success": False, "message": error.message, "error": {}},
        )
        await response(scope, receive, send)


class ErrorEnvelopeMiddleware:
    """
    Turn unexpected exceptions into the JSON error envelope.

    Sits just inside CORSMiddleware so 500 responses still carry the
    cross-origin headers. Faults after the response has started are
    re-raised for the server to log.
    """

    def __init__(self, app: ASGIApp, expose_detail: bool):
        self.app = app
        self.expose_detail = expose_detail

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def tracking_send(message: Message):
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, tracking_send)
        except Exception as exc:
            if response_started:
                raise
            response = envelope_response(exc, self.expose_detail)
            await response(scope, receive, send)
