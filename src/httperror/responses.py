"""Response primitives."""

from __future__ import annotations

from typing import Any, Iterable, MutableMapping, Protocol

import msgspec

from .config import DEFAULT_RESPONSE_CONFIG, JSON_CONTENT_TYPE, ResponseConfig
from .exceptions import HTTPError
from .http import Status
from .serialization import json_encode

Headers = tuple[tuple[str, str], ...]


class ResponseSink(Protocol):
    """Write-once view of an in-flight HTTP response owned by the host server.

    ``headers`` may be changed until ``write_status`` commits the status line,
    which happens at most once. ``write`` appends body bytes.
    """

    @property
    def headers(self) -> MutableMapping[str, str]:  # pragma: no cover - protocol
        ...

    def write_status(self, status: int) -> None:  # pragma: no cover - protocol
        ...

    def write(self, data: bytes) -> Any:  # pragma: no cover - protocol
        ...


class Response(msgspec.Struct, frozen=True):
    """Immutable response payload."""

    status: int = int(Status.OK)
    headers: Headers = ()
    body: bytes = b""

    def with_headers(self, headers: Iterable[tuple[str, str]]) -> "Response":
        """Return a new response with ``headers`` appended."""

        return Response(status=self.status, headers=self.headers + tuple(headers), body=self.body)

    def header(self, name: str) -> str | None:
        """Return the last value for ``name``, compared case-insensitively."""

        wanted = name.lower()
        value = None
        for key, candidate in self.headers:
            if key.lower() == wanted:
                value = candidate
        return value

    def write_to(self, sink: ResponseSink) -> None:
        """Replay this response onto a live ``sink``."""

        for name, value in self.headers:
            sink.headers[name] = value
        sink.write_status(self.status)
        if self.body:
            sink.write(self.body)


def JSONResponse(
    data: Any,
    *,
    status: int = int(Status.OK),
    headers: Iterable[tuple[str, str]] | None = None,
) -> Response:
    """Create a JSON response encoded via :mod:`msgspec`."""

    default_headers = (("content-type", JSON_CONTENT_TYPE),)
    combined = default_headers + tuple(headers or ())
    return Response(status=status, headers=combined, body=json_encode(data))


def exception_to_response(exc: HTTPError, config: ResponseConfig | None = None) -> Response:
    """Render ``exc`` as an immutable :class:`Response`."""

    config = config or DEFAULT_RESPONSE_CONFIG
    return Response(
        status=exc.code,
        headers=config.headers(),
        body=exc.to_response_body(trailing_newline=config.trailing_newline),
    )


__all__ = [
    "Headers",
    "JSONResponse",
    "Response",
    "ResponseSink",
    "exception_to_response",
]
