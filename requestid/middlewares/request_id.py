from __future__ import annotations

from starlette.types import ASGIApp, Receive, Scope, Send

from requestid.core.generator import generate_request_id
from requestid.core.types import REQUEST_ID_HEADER, RequestID

_HEADER_KEY = REQUEST_ID_HEADER.encode("latin-1")


class RequestIDMiddleware:
    """Tag every HTTP and websocket request with a fresh request id.

    The id is appended to the request headers as ``x-request-id`` (after any
    value the client already sent) and stored in the request state under the
    ``RequestID`` key. Responses are not touched: ``send`` goes to the inner
    app as is. Lifespan traffic is forwarded without generating anything.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in ("http", "websocket"):
            await self.app(scope, receive, send)
            return

        rid = generate_request_id()

        # append, never replace
        scope["headers"] = [*scope.get("headers", ()), (_HEADER_KEY, rid.encode("latin-1"))]

        state = scope.get("state")
        if state is None:
            state = scope["state"] = {}
        state[RequestID] = RequestID(rid)

        await self.app(scope, receive, send)


def request_id_transform(app: ASGIApp) -> RequestIDMiddleware:
    return RequestIDMiddleware(app)
