"""ASGI middleware."""

from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Receive, Scope, Send


class BodySizeLimitMiddleware:
    """Reject requests whose declared Content-Length exceeds a limit (413).

    Runs before routing and body parsing. Bodies sent without a
    Content-Length header are not checked.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int):
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length", "")
        if content_length.isdigit() and int(content_length) > self.max_body_bytes:
            response = JSONResponse(status_code=413, content={"message": "Request body too large"})
            await response(scope, receive, send)
            return

        await self.app(scope, receive, send)
