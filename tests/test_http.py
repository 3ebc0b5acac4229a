from __future__ import annotations

import pytest

from httperror.http import Status, ensure_status, is_error, reason_phrase


def test_ensure_status_validates_range() -> None:
    assert ensure_status(Status.OK) == 200
    assert ensure_status(404) == 404
    with pytest.raises(ValueError):
        ensure_status(99)
    with pytest.raises(ValueError):
        ensure_status(600)


def test_reason_phrase_for_known_and_unknown_statuses() -> None:
    assert reason_phrase(Status.OK) == "OK"
    assert reason_phrase(404) == "Not Found"
    assert reason_phrase(418) == "I'm a teapot"
    assert reason_phrase(413) == "Request Entity Too Large"
    assert reason_phrase(511) == "Network Authentication Required"
    assert reason_phrase(299) == ""
    assert reason_phrase(799) == ""
    assert reason_phrase(-1) == ""


def test_every_status_has_a_reason_phrase() -> None:
    for status in Status:
        assert reason_phrase(status), status


def test_is_error_covers_client_and_server_codes() -> None:
    assert is_error(Status.BAD_REQUEST)
    assert is_error(Status.IM_A_TEAPOT)
    assert is_error(Status.INTERNAL_SERVER_ERROR)
    assert not is_error(Status.NO_CONTENT)
    assert not is_error(Status.PERMANENT_REDIRECT)
    with pytest.raises(ValueError):
        is_error(700)
