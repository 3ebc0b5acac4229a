"""Status-coded HTTP errors."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping, Protocol, runtime_checkable

import msgspec

from .config import DEFAULT_RESPONSE_CONFIG, ResponseConfig
from .http import Status, reason_phrase
from .serialization import json_encode

if TYPE_CHECKING:  # pragma: no cover - typing helpers only
    from .responses import ResponseSink

logger = logging.getLogger(__name__)


class BaseError(Exception):
    """Base error type."""


class ResponseCommittedError(BaseError, RuntimeError):
    """Raised when a response is modified after its status line was written."""


class ErrorPayload(msgspec.Struct, frozen=True):
    """JSON wire representation of an :class:`HTTPError`."""

    code: int
    status: str
    message: str


@runtime_checkable
class StatusCoded(Protocol):
    """Anything exposing the ``code``/``status``/``message`` triple."""

    @property
    def code(self) -> int: ...

    @property
    def status(self) -> str: ...

    @property
    def message(self) -> str: ...


def _safe_str(value: Any) -> str:
    try:
        return value if isinstance(value, str) else str(value)
    except Exception:
        try:
            return repr(value)
        except Exception:
            return f"<{type(value).__name__}>"


def format_message(template: Any, args: tuple[Any, ...]) -> str:
    """Apply printf-style ``args`` to ``template``.

    The template is used verbatim when there is nothing to substitute, and a
    single mapping argument supplies named placeholders. Formatting never
    raises: when the arguments do not fit the template, or an argument cannot
    be rendered, the template and the arguments are joined with spaces.
    """

    text = _safe_str(template)
    if not args:
        return text
    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values = args[0]
    try:
        return text % values
    except Exception as exc:
        logger.warning("Could not format HTTP error message %r: %s", text, _safe_str(exc))
        return " ".join([text, *(_safe_str(arg) for arg in args)])


class HTTPError(BaseError):
    """Structured HTTP error that is msgspec serializable.

    ``status`` is looked up from ``code`` and ``message`` defaults to it. All
    three attributes are read-only once the error exists.
    """

    def __init__(self, code: int | Status, *message_args: Any) -> None:
        code = int(code)
        status = reason_phrase(code)
        if message_args:
            message = format_message(message_args[0], message_args[1:])
        else:
            message = status
        super().__init__(code, message)
        self._payload = ErrorPayload(code=code, status=status, message=message)

    @property
    def code(self) -> int:
        return self._payload.code

    @property
    def status(self) -> str:
        return self._payload.status

    @property
    def message(self) -> str:
        return self._payload.message

    def __str__(self) -> str:
        if self.status == self.message:
            return f"[{self.code}] {self.status}"
        return f"[{self.code}] {self.status}: {self.message}"

    def __repr__(self) -> str:
        return f"HTTPError(code={self.code!r}, status={self.status!r}, message={self.message!r})"

    def to_payload(self) -> ErrorPayload:
        return self._payload

    def to_response_body(self, *, trailing_newline: bool = False) -> bytes:
        return json_encode(self._payload, trailing_newline=trailing_newline)

    def respond(self, sink: "ResponseSink", config: ResponseConfig | None = None) -> None:
        """Write this error to ``sink`` as a JSON response.

        The body is encoded before the sink is touched, so an encoding failure
        leaves the response uncommitted. Failures raised by the sink propagate.
        """

        config = config or DEFAULT_RESPONSE_CONFIG
        body = self.to_response_body(trailing_newline=config.trailing_newline)
        for name, value in config.headers():
            sink.headers[name] = value
        sink.write_status(self.code)
        sink.write(body)
        logger.debug("Responded with HTTP error %s", self)


def new(code: int | Status, *message_args: Any) -> HTTPError:
    """Return an :class:`HTTPError` for ``code``.

    With no ``message_args`` the message is the reason phrase. Otherwise the
    first argument is a ``%``-style template and the rest fill it in.
    """

    return HTTPError(code, *message_args)


def find_http_error(err: object) -> HTTPError | None:
    """Return the :class:`HTTPError` that ``err`` is, or was raised from."""

    seen: set[int] = set()
    current = err
    while isinstance(current, BaseException) and id(current) not in seen:
        if isinstance(current, HTTPError):
            return current
        seen.add(id(current))
        current = current.__cause__
    return None


def is_http_error(err: object) -> bool:
    """Return ``True`` if ``err`` is an :class:`HTTPError` or wraps one."""

    return find_http_error(err) is not None


__all__ = [
    "BaseError",
    "ErrorPayload",
    "HTTPError",
    "ResponseCommittedError",
    "StatusCoded",
    "find_http_error",
    "format_message",
    "is_http_error",
    "new",
]
