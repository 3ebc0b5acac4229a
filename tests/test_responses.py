from __future__ import annotations

import logging

import msgspec
import pytest

from httperror.config import ResponseConfig
from httperror.exceptions import HTTPError, ResponseCommittedError, new
from httperror.responses import JSONResponse, Response, exception_to_response
from httperror.serialization import json_decode
from httperror.testing import RecordingResponseSink


def test_respond_writes_status_header_and_body() -> None:
    sink = RecordingResponseSink()
    new(404, "Thing not found").respond(sink)
    assert sink.status == 404
    assert sink.headers["Content-Type"] == "application/json"
    assert sink.json() == {"code": 404, "status": "Not Found", "message": "Thing not found"}
    assert bytes(sink.body).endswith(b"\n")


@pytest.mark.parametrize("code", [400, 418, 500, 799])
def test_respond_status_matches_code(code: int) -> None:
    sink = RecordingResponseSink()
    new(code).respond(sink)
    assert sink.status == code
    assert sink.json()["code"] == code


def test_respond_commits_the_sink() -> None:
    sink = RecordingResponseSink()
    new(400).respond(sink)
    assert sink.committed
    with pytest.raises(ResponseCommittedError):
        sink.headers["x-late"] = "1"
    with pytest.raises(ResponseCommittedError):
        sink.write_status(200)


def test_respond_honours_config() -> None:
    sink = RecordingResponseSink()
    config = ResponseConfig(
        content_type="application/problem+json",
        extra_headers=(("cache-control", "no-store"),),
        trailing_newline=False,
    )
    new(503).respond(sink, config)
    assert sink.headers["content-type"] == "application/problem+json"
    assert sink.headers["cache-control"] == "no-store"
    assert bytes(sink.body) == b'{"code":503,"status":"Service Unavailable","message":"Service Unavailable"}'


def test_respond_logs_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="httperror.exceptions"):
        new(404).respond(RecordingResponseSink())
    assert "[404] Not Found" in caplog.text


def test_respond_propagates_sink_failures() -> None:
    class BrokenSink(RecordingResponseSink):
        def write(self, data: bytes) -> int:
            raise OSError("connection reset")

    with pytest.raises(OSError):
        new(500).respond(BrokenSink())


def test_respond_on_committed_sink_raises() -> None:
    sink = RecordingResponseSink()
    sink.write(b"partial")
    with pytest.raises(ResponseCommittedError):
        new(500).respond(sink)
    assert sink.status == 200


def test_respond_propagates_encoding_failures_before_writing() -> None:
    class Unencodable(HTTPError):
        def to_response_body(self, *, trailing_newline: bool = False) -> bytes:
            return msgspec.json.encode(object())

    sink = RecordingResponseSink()
    with pytest.raises(TypeError):
        Unencodable(500).respond(sink)
    assert not sink.committed
    assert len(sink.headers) == 0


def test_exception_to_response_serializes() -> None:
    response = exception_to_response(new(400, "bad request"))
    assert response.status == 400
    assert response.header("Content-Type") == "application/json"
    assert json_decode(response.body) == {"code": 400, "status": "Bad Request", "message": "bad request"}


def test_exception_to_response_replays_onto_sink() -> None:
    sink = RecordingResponseSink()
    exception_to_response(new(429)).write_to(sink)
    assert sink.status == 429
    assert sink.json()["status"] == "Too Many Requests"


def test_response_with_headers() -> None:
    base = Response(status=204)
    updated = base.with_headers((("x-test", "1"),))
    assert updated.headers[-1] == ("x-test", "1")
    assert base.headers == ()
    assert updated.header("X-TEST") == "1"
    assert updated.header("missing") is None


def test_json_response_encodes_data() -> None:
    response = JSONResponse({"ok": True}, status=201, headers=(("x-request-id", "abc"),))
    assert response.status == 201
    assert response.headers == (("content-type", "application/json"), ("x-request-id", "abc"))
    assert json_decode(response.body) == {"ok": True}
