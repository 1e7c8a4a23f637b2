from __future__ import annotations

import logging

from fastapi import APIRouter, Request, WebSocket

from requestid.core.types import REQUEST_ID_HEADER
from requestid.dependencies import RequestIDDep

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/v1/request-id")
def echo_request_id(request: Request, request_id: RequestIDDep):
    logger.debug("echoing request id")
    return {
        "requestId": request_id,
        "headers": request.headers.getlist(REQUEST_ID_HEADER),
    }


@router.websocket("/v1/ws/request-id")
async def ws_request_id(websocket: WebSocket, request_id: RequestIDDep):
    await websocket.accept()
    await websocket.send_json({"requestId": request_id})
    await websocket.close()
