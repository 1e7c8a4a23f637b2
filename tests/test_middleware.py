import asyncio

import pytest

from requestid.core.types import REQUEST_ID_HEADER, RequestID
from requestid.middlewares import request_id as middleware_mod
from requestid.middlewares.request_id import RequestIDMiddleware, request_id_transform

HEADER = REQUEST_ID_HEADER.encode()


def _http_scope(headers=None):
    return {
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": list(headers or []),
    }


async def _receive():
    return {"type": "http.request", "body": b"", "more_body": False}


def _run(app, scope, receive=_receive):
    sent = []

    async def send(message):
        sent.append(message)

    asyncio.run(app(scope, receive, send))
    return sent


class RecordingApp:
    def __init__(self):
        self.scopes = []

    async def __call__(self, scope, receive, send):
        self.scopes.append(scope)
        await send({"type": "http.response.start", "status": 201, "headers": [(b"x-a", b"1")]})
        await send({"type": "http.response.body", "body": b"fixed body", "more_body": False})


def test_header_and_state_are_set_before_inner_app_runs():
    inner = RecordingApp()
    _run(RequestIDMiddleware(inner), _http_scope())

    scope = inner.scopes[0]
    values = [v for k, v in scope["headers"] if k == HEADER]
    assert len(values) == 1
    rid = values[0].decode()
    assert len(rid) == 10 and rid.isalnum() and rid.isascii()
    assert scope["state"][RequestID] == RequestID(rid)


def test_appends_after_existing_header():
    inner = RecordingApp()
    scope = _http_scope([(b"accept", b"*/*"), (HEADER, b"preset123")])
    _run(RequestIDMiddleware(inner), scope)

    headers = inner.scopes[0]["headers"]
    values = [v for k, v in headers if k == HEADER]
    assert values[0] == b"preset123"
    assert len(values) == 2
    assert headers[-1] == (HEADER, values[1])
    assert inner.scopes[0]["state"][RequestID].value == values[1].decode()


def test_existing_state_is_kept():
    inner = RecordingApp()
    scope = _http_scope()
    scope["state"] = {"db": "conn"}
    _run(RequestIDMiddleware(inner), scope)

    assert inner.scopes[0]["state"]["db"] == "conn"
    assert RequestID in inner.scopes[0]["state"]


def test_response_passes_through_unchanged():
    plain = _run(RecordingApp(), _http_scope())
    wrapped = _run(request_id_transform(RecordingApp()), _http_scope())
    assert wrapped == plain


def test_lifespan_is_forwarded_without_generating(monkeypatch):
    calls = []
    monkeypatch.setattr(middleware_mod, "generate_request_id", lambda: calls.append(1) or "x")

    async def not_ready_app(scope, receive, send):
        assert scope["type"] == "lifespan"
        message = await receive()
        assert message["type"] == "lifespan.startup"
        await send({"type": "lifespan.startup.failed", "message": "db down"})

    async def receive():
        return {"type": "lifespan.startup"}

    scope = {"type": "lifespan", "asgi": {"version": "3.0"}}
    sent = _run(RequestIDMiddleware(not_ready_app), scope, receive)

    assert sent == [{"type": "lifespan.startup.failed", "message": "db down"}]
    assert calls == []
    assert "state" not in scope


def test_inner_app_errors_propagate():
    async def broken(scope, receive, send):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        _run(RequestIDMiddleware(broken), _http_scope())
