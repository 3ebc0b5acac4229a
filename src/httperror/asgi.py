"""Emit HTTP errors through an ASGI ``send`` callable."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Mapping

from .config import ResponseConfig
from .exceptions import HTTPError
from .responses import Response, exception_to_response

logger = logging.getLogger(__name__)

Send = Callable[[Mapping[str, Any]], Awaitable[None]]


async def send_response(response: Response, send: Send) -> None:
    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": [(name.encode("latin-1"), value.encode("latin-1")) for name, value in response.headers],
        }
    )
    await send({"type": "http.response.body", "body": response.body, "more_body": False})


async def send_http_error(error: HTTPError, send: Send, config: ResponseConfig | None = None) -> None:
    """Send ``error`` as a complete JSON response over ASGI."""

    await send_response(exception_to_response(error, config), send)
    logger.debug("Sent HTTP error %s over ASGI", error)


__all__ = ["Send", "send_http_error", "send_response"]
