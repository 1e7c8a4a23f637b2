from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from starlette.requests import HTTPConnection

from requestid.core.types import RequestID


def extract_request_id(conn: HTTPConnection) -> str:
    """Return the id stored by RequestIDMiddleware.

    Reads the request state only, never the ``x-request-id`` header, so a
    client-supplied header cannot stand in for the generated id. Raises
    ``MissingRequestIDError`` (400) when the middleware is not installed.
    """
    return RequestID.from_connection(conn).value


def get_request_id(conn: HTTPConnection) -> str:
    return extract_request_id(conn)


RequestIDDep = Annotated[str, Depends(get_request_id)]
