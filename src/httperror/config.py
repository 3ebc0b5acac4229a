"""Response configuration objects."""

from __future__ import annotations

from msgspec import Struct

JSON_CONTENT_TYPE = "application/json"


class ResponseConfig(Struct, frozen=True):
    """Typed configuration for how an :class:`~httperror.exceptions.HTTPError` is emitted."""

    content_type: str = JSON_CONTENT_TYPE
    extra_headers: tuple[tuple[str, str], ...] = ()
    trailing_newline: bool = True

    def headers(self) -> tuple[tuple[str, str], ...]:
        """Return the content type header followed by ``extra_headers``.

        Names compare case-insensitively and each appears once, keeping its
        first position and its last value.
        """

        merged: dict[str, tuple[str, str]] = {}
        for name, value in (("content-type", self.content_type),) + self.extra_headers:
            merged[name.lower()] = (name, value)
        return tuple(merged.values())


DEFAULT_RESPONSE_CONFIG = ResponseConfig()


__all__ = ["DEFAULT_RESPONSE_CONFIG", "JSON_CONTENT_TYPE", "ResponseConfig"]
