"""
clacks.middleware.clacks

Purpose:
    ASGI middleware that puts X-Clacks-Overhead on every response, then
    delegates to the wrapped application.

Notes:
    - Pure ASGI (not BaseHTTPMiddleware) so streaming responses and
      websockets pass through untouched.
    - The header behaves as if set before the wrapped app runs: if the app
      sends its own X-Clacks-Overhead, the app's value is kept.
    - Exceptions from the wrapped app are never caught here.

Example:
    from starlette.applications import Starlette
    from starlette.responses import PlainTextResponse
    from starlette.routing import Route

    async def hello(request):
        return PlainTextResponse("Hello, World!")

    app = clacks.wrap(Starlette(routes=[Route("/", hello)]))
    # uvicorn module:app
"""

from __future__ import annotations

from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from clacks.contracts.clacks_header import CLACKS_HEADER

# Messages that open a response to the client.
_RESPONSE_START_TYPES = frozenset(
    {
        "http.response.start",
        "websocket.accept",
        "websocket.http.response.start",
    }
)


class ClacksMiddleware:
    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in ("http", "websocket"):
            await self.app(scope, receive, send)
            return

        async def send_with_clacks(message: Message) -> None:
            if message["type"] in _RESPONSE_START_TYPES:
                message = _with_clacks_header(message)
            await send(message)

        await self.app(scope, receive, send_with_clacks)


def _with_clacks_header(message: Message) -> Message:
    message = {**message, "headers": list(message.get("headers") or [])}
    headers = MutableHeaders(raw=message["headers"])
    headers.setdefault(CLACKS_HEADER.name, CLACKS_HEADER.value)
    return message


def wrap(app: ASGIApp) -> ASGIApp:
    """Return `app` wrapped so every response carries X-Clacks-Overhead."""
    return ClacksMiddleware(app)
