from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel

if TYPE_CHECKING:
    from starlette.requests import HTTPConnection


REQUEST_ID_HEADER = "x-request-id"


@dataclass(frozen=True)
class RequestID:
    """Request identifier as stored in the per-request state.

    The class doubles as the state key, so a lookup by ``RequestID`` can only
    ever hand back a value written by the request id middleware.
    """

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_connection(cls, conn: "HTTPConnection") -> "RequestID":
        from requestid.core.errors import MissingRequestIDError

        found = conn.scope.get("state", {}).get(cls)
        if not isinstance(found, cls):
            raise MissingRequestIDError()
        return found


class ErrorBody(BaseModel):
    code: Literal[
        "missing_request_id",
        "internal_error",
    ]
    message: str
    requestId: str


class ErrorResponse(BaseModel):
    error: ErrorBody
