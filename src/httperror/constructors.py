"""Per-status shortcuts for building :class:`~httperror.exceptions.HTTPError` values."""

from __future__ import annotations

from typing import Any, Callable

from .exceptions import HTTPError
from .http import Status, is_error, reason_phrase

Constructor = Callable[..., HTTPError]


def _constructor(status: Status) -> Constructor:
    code = int(status)

    def construct(*message_args: Any) -> HTTPError:
        return HTTPError(code, *message_args)

    construct.__name__ = construct.__qualname__ = status.name.lower()
    construct.__doc__ = f"Return an :class:`HTTPError` for ``{code} {reason_phrase(code)}``."
    return construct


bad_request = _constructor(Status.BAD_REQUEST)
unauthorized = _constructor(Status.UNAUTHORIZED)
payment_required = _constructor(Status.PAYMENT_REQUIRED)
forbidden = _constructor(Status.FORBIDDEN)
not_found = _constructor(Status.NOT_FOUND)
method_not_allowed = _constructor(Status.METHOD_NOT_ALLOWED)
not_acceptable = _constructor(Status.NOT_ACCEPTABLE)
proxy_authentication_required = _constructor(Status.PROXY_AUTHENTICATION_REQUIRED)
request_timeout = _constructor(Status.REQUEST_TIMEOUT)
conflict = _constructor(Status.CONFLICT)
gone = _constructor(Status.GONE)
length_required = _constructor(Status.LENGTH_REQUIRED)
precondition_failed = _constructor(Status.PRECONDITION_FAILED)
request_entity_too_large = _constructor(Status.REQUEST_ENTITY_TOO_LARGE)
request_uri_too_long = _constructor(Status.REQUEST_URI_TOO_LONG)
unsupported_media_type = _constructor(Status.UNSUPPORTED_MEDIA_TYPE)
requested_range_not_satisfiable = _constructor(Status.REQUESTED_RANGE_NOT_SATISFIABLE)
expectation_failed = _constructor(Status.EXPECTATION_FAILED)
im_a_teapot = _constructor(Status.IM_A_TEAPOT)
misdirected_request = _constructor(Status.MISDIRECTED_REQUEST)
unprocessable_entity = _constructor(Status.UNPROCESSABLE_ENTITY)
locked = _constructor(Status.LOCKED)
failed_dependency = _constructor(Status.FAILED_DEPENDENCY)
too_early = _constructor(Status.TOO_EARLY)
upgrade_required = _constructor(Status.UPGRADE_REQUIRED)
precondition_required = _constructor(Status.PRECONDITION_REQUIRED)
too_many_requests = _constructor(Status.TOO_MANY_REQUESTS)
request_header_fields_too_large = _constructor(Status.REQUEST_HEADER_FIELDS_TOO_LARGE)
unavailable_for_legal_reasons = _constructor(Status.UNAVAILABLE_FOR_LEGAL_REASONS)
internal_server_error = _constructor(Status.INTERNAL_SERVER_ERROR)
not_implemented = _constructor(Status.NOT_IMPLEMENTED)
bad_gateway = _constructor(Status.BAD_GATEWAY)
service_unavailable = _constructor(Status.SERVICE_UNAVAILABLE)
gateway_timeout = _constructor(Status.GATEWAY_TIMEOUT)
http_version_not_supported = _constructor(Status.HTTP_VERSION_NOT_SUPPORTED)
variant_also_negotiates = _constructor(Status.VARIANT_ALSO_NEGOTIATES)
insufficient_storage = _constructor(Status.INSUFFICIENT_STORAGE)
loop_detected = _constructor(Status.LOOP_DETECTED)
not_extended = _constructor(Status.NOT_EXTENDED)
network_authentication_required = _constructor(Status.NETWORK_AUTHENTICATION_REQUIRED)

CONSTRUCTORS: dict[str, int] = {status.name.lower(): int(status) for status in Status if is_error(status)}


__all__ = [
    "CONSTRUCTORS",
    "Constructor",
    "bad_gateway",
    "bad_request",
    "conflict",
    "expectation_failed",
    "failed_dependency",
    "forbidden",
    "gateway_timeout",
    "gone",
    "http_version_not_supported",
    "im_a_teapot",
    "insufficient_storage",
    "internal_server_error",
    "length_required",
    "locked",
    "loop_detected",
    "method_not_allowed",
    "misdirected_request",
    "network_authentication_required",
    "not_acceptable",
    "not_extended",
    "not_found",
    "not_implemented",
    "payment_required",
    "precondition_failed",
    "precondition_required",
    "proxy_authentication_required",
    "request_entity_too_large",
    "request_header_fields_too_large",
    "request_timeout",
    "request_uri_too_long",
    "requested_range_not_satisfiable",
    "service_unavailable",
    "too_early",
    "too_many_requests",
    "unauthorized",
    "unavailable_for_legal_reasons",
    "unprocessable_entity",
    "unsupported_media_type",
    "upgrade_required",
    "variant_also_negotiates",
]
