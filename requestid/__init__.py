__version__ = "1.0.0"

from requestid.core.errors import MissingRequestIDError
from requestid.core.generator import generate_request_id
from requestid.core.types import REQUEST_ID_HEADER, RequestID
from requestid.dependencies import RequestIDDep, extract_request_id, get_request_id
from requestid.middlewares.request_id import RequestIDMiddleware, request_id_transform

__all__ = [
    "REQUEST_ID_HEADER",
    "MissingRequestIDError",
    "RequestID",
    "RequestIDDep",
    "RequestIDMiddleware",
    "extract_request_id",
    "generate_request_id",
    "get_request_id",
    "request_id_transform",
]
