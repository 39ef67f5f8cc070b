"""Request body size enforcement for the upload endpoint."""

from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from palette_api.config import get_settings
from palette_api.core.exceptions import PayloadTooLargeError


class UploadLimitMiddleware:
    """Cap the request body of ``POST <path>``.

    A declared ``Content-Length`` over the limit is answered with 400 before
    any of the body is read. Otherwise ``receive`` is wrapped so reading stops
    with ``PayloadTooLargeError`` as soon as the streamed body passes the
    limit, which covers chunked uploads.
    """

    def __init__(self, app: ASGIApp, path: str = "/analyze") -> None:
        self.app = app
        self.path = path

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] != "POST" or scope["path"] != self.path:
            await self.app(scope, receive, send)
            return

        settings = get_settings()
        limit = settings.max_upload_bytes + settings.multipart_overhead_bytes

        headers = dict(scope["headers"])
        content_length = headers.get(b"content-length", b"").decode("latin-1")
        if content_length.isdigit() and int(content_length) > limit:
            exc = PayloadTooLargeError(settings.max_upload_bytes)
            scope["app"].state.events.log_rejection(exc.code, exc.message)
            response = JSONResponse(status_code=400, content={"error": exc.message})
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > limit:
                    raise PayloadTooLargeError(settings.max_upload_bytes)
            return message

        await self.app(scope, limited_receive, send)
