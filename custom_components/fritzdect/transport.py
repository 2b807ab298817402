"""HTTP transport for the FRITZ!Box local web interface."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

import aiohttp

from .const import DEFAULT_REQUEST_TIMEOUT
from .exceptions import FritzTransportError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """Status line and decoded body of one HTTP exchange."""

    status: int
    reason: str
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class Transport(Protocol):
    """Anything able to send a parameterized GET."""

    async def get(
        self, url: str, params: Mapping[str, str] | None = None
    ) -> TransportResponse: ...

    async def close(self) -> None: ...


class AiohttpTransport:
    """aiohttp-backed transport.

    Network failures and timeouts raise :class:`FritzTransportError`.
    Non-2xx responses are returned as-is so callers can log the status
    before rejecting them.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        request_timeout: int = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        self._session = session
        self._close_session = False
        self._request_timeout = request_timeout

    async def get(
        self, url: str, params: Mapping[str, str] | None = None
    ) -> TransportResponse:
        if self._session is None:
            self._session = aiohttp.ClientSession()
            self._close_session = True

        try:
            async with asyncio.timeout(self._request_timeout):
                async with self._session.get(url, params=params) as resp:
                    body = await resp.text()
                    return TransportResponse(
                        status=resp.status,
                        reason=resp.reason or "",
                        body=body,
                    )
        except TimeoutError as exc:
            _LOGGER.error("Timeout talking to %s", url)
            raise FritzTransportError(
                f"Timeout communicating with {url}"
            ) from exc
        except aiohttp.ClientError as exc:
            raise FritzTransportError(
                f"Cannot reach {url}: {exc}"
            ) from exc

    async def close(self) -> None:
        """Close the HTTP session if we own it."""
        if self._session and self._close_session:
            await self._session.close()
            self._session = None
            self._close_session = False

    async def __aenter__(self) -> AiohttpTransport:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
