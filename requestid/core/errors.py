from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.requests import HTTPConnection

from requestid.core.types import ErrorBody, ErrorResponse, RequestID

MISSING_REQUEST_ID_MESSAGE = "request id is missing"


class MissingRequestIDError(HTTPException):
    """Raised when a handler asks for the request id of a request that never
    went through RequestIDMiddleware. Always a wiring problem in the app."""

    def __init__(self, message: str = MISSING_REQUEST_ID_MESSAGE) -> None:
        super().__init__(status_code=400, detail=message)


def current_request_id(conn: HTTPConnection, default: str = "unknown") -> str:
    try:
        return RequestID.from_connection(conn).value
    except MissingRequestIDError:
        return default


def json_error(request: Request, status_code: int, code: str, message: str) -> JSONResponse:
    payload = ErrorResponse(
        error=ErrorBody(
            code=code,  # type: ignore
            message=message,
            requestId=current_request_id(request),
        )
    )
    return JSONResponse(status_code=status_code, content=payload.model_dump())


def missing_request_id_handler(request: Request, exc: MissingRequestIDError) -> JSONResponse:
    return json_error(request, exc.status_code, "missing_request_id", exc.detail)


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    return json_error(request, 500, "internal_error", "internal error")
