from __future__ import annotations

import httperror
from httperror import constructors
from httperror.constructors import (
    CONSTRUCTORS,
    bad_gateway,
    im_a_teapot,
    internal_server_error,
    not_found,
    unauthorized,
)
from httperror.http import Status, is_error


def test_constructor_uses_fixed_code_and_default_message() -> None:
    error = not_found()
    assert error.code == 404
    assert error.message == "Not Found"
    assert str(internal_server_error()) == "[500] Internal Server Error"


def test_constructor_forwards_message_arguments() -> None:
    assert im_a_teapot("Ah ah ah %s", "foo").message == "Ah ah ah foo"
    assert unauthorized("token expired").message == "token expired"
    assert bad_gateway("upstream %s returned %d", "billing", 502).message == "upstream billing returned 502"


def test_every_error_status_has_a_constructor() -> None:
    expected = {status.name.lower(): int(status) for status in Status if is_error(status)}
    assert CONSTRUCTORS == expected
    for name, code in CONSTRUCTORS.items():
        factory = getattr(constructors, name)
        assert factory.__name__ == name
        assert factory().code == code
        assert name in constructors.__all__


def test_constructors_exported_from_package() -> None:
    assert httperror.not_found is not_found
    assert "gateway_timeout" in httperror.__all__
    assert httperror.gateway_timeout().code == 504
