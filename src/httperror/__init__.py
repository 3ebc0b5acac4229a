"""Status-coded HTTP errors that render as JSON responses."""

from . import constructors
from .asgi import send_http_error
from .config import ResponseConfig
from .constructors import *  # noqa: F401,F403
from .constructors import CONSTRUCTORS
from .exceptions import (
    BaseError,
    ErrorPayload,
    HTTPError,
    ResponseCommittedError,
    StatusCoded,
    find_http_error,
    is_http_error,
    new,
)
from .http import Status, reason_phrase
from .responses import JSONResponse, Response, ResponseSink, exception_to_response

__all__ = [
    "CONSTRUCTORS",
    "BaseError",
    "ErrorPayload",
    "HTTPError",
    "JSONResponse",
    "Response",
    "ResponseCommittedError",
    "ResponseConfig",
    "ResponseSink",
    "Status",
    "StatusCoded",
    "exception_to_response",
    "find_http_error",
    "is_http_error",
    "new",
    "reason_phrase",
    "send_http_error",
    *(name for name in constructors.__all__ if name not in ("CONSTRUCTORS", "Constructor")),
]
