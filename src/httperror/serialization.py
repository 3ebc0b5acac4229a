from __future__ import annotations

from typing import Any, Protocol, cast

import msgspec


class _JSONModule(Protocol):
    def encode(self, obj: Any) -> bytes: ...

    def decode(self, data: bytes) -> Any: ...


_json = cast(_JSONModule, getattr(msgspec, "json"))


def json_encode(value: Any, *, trailing_newline: bool = False) -> bytes:
    """Serialize ``value`` to JSON bytes using msgspec."""

    encoded = _json.encode(value)
    if trailing_newline:
        return encoded + b"\n"
    return encoded


def json_decode(data: bytes) -> Any:
    """Deserialize JSON ``data`` into native Python values."""

    return _json.decode(data)


__all__ = ["json_decode", "json_encode"]
