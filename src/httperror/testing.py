"""Testing helpers."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, Iterator

from .exceptions import ResponseCommittedError
from .serialization import json_decode


class _CommitGuardedHeaders(MutableMapping[str, str]):
    """Case-insensitive header map that refuses changes once committed."""

    def __init__(self, sink: "RecordingResponseSink") -> None:
        self._sink = sink
        self._values: dict[str, tuple[str, str]] = {}

    def __getitem__(self, name: str) -> str:
        return self._values[name.lower()][1]

    def __setitem__(self, name: str, value: str) -> None:
        self._sink._ensure_uncommitted(f"set header {name!r}")
        self._values[name.lower()] = (name, value)

    def __delitem__(self, name: str) -> None:
        self._sink._ensure_uncommitted(f"delete header {name!r}")
        del self._values[name.lower()]

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._values.values())

    def __len__(self) -> int:
        return len(self._values)


class RecordingResponseSink:
    """In-memory response sink that enforces write-once status semantics."""

    __test__ = False

    def __init__(self) -> None:
        self._headers = _CommitGuardedHeaders(self)
        self.status: int | None = None
        self.body = bytearray()

    @property
    def headers(self) -> MutableMapping[str, str]:
        return self._headers

    @property
    def committed(self) -> bool:
        return self.status is not None

    def write_status(self, status: int) -> None:
        self._ensure_uncommitted("write status")
        self.status = status

    def write(self, data: bytes) -> int:
        if self.status is None:
            self.write_status(200)
        self.body.extend(data)
        return len(data)

    def json(self) -> Any:
        return json_decode(bytes(self.body))

    def _ensure_uncommitted(self, action: str) -> None:
        if self.status is not None:
            raise ResponseCommittedError(f"Cannot {action}: status {self.status} already written")


__all__ = ["RecordingResponseSink"]
