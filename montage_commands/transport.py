from __future__ import annotations

import httpx
from loguru import logger

from .errors import EmptyResponseError, TransportError


class HttpTransport:
    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._transport = transport

    async def send(self, request: httpx.Request, failure_title: str | None = None) -> str:
        logger.debug(f"POST {request.url}")
        try:
            # No timeout: a wedged service blocks only this command.
            async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
                response = await client.send(request)
        except httpx.HTTPError as exc:
            raise TransportError(
                f"request to {request.url} failed: {exc}",
                title=failure_title,
            ) from exc

        body = response.text
        if not body.strip():
            if not response.is_success:
                raise TransportError(
                    f"Montage responded with HTTP {response.status_code}",
                    title=failure_title,
                )
            raise EmptyResponseError(
                "body was empty. Did the request succeed?",
                title=failure_title,
            )
        return body
