"""FRITZ!Box home automation API over local HTTP and XML."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from .auth import solve_challenge
from .const import (
    COMMAND_PATH,
    DEFAULT_REQUEST_TIMEOUT,
    LOGIN_PATH,
    SENTINEL_SID,
)
from .exceptions import (
    FritzDeviceNotFoundError,
    FritzLoginError,
    FritzTransportError,
)
from .models import Device, DeviceStats, Session, SessionInfo, classify
from .parser import parse_device_list, parse_device_stats, parse_session_info
from .transport import AiohttpTransport, Transport, TransportResponse

_LOGGER = logging.getLogger(__name__)


class Command(Enum):
    """AHA-HTTP switch commands and their protocol keywords."""

    GET_DEVICE_LIST_INFOS = "getdevicelistinfos"
    GET_BASIC_DEVICE_STATS = "getbasicdevicestats"
    SET_SWITCH_OFF = "setswitchoff"
    SET_SWITCH_ON = "setswitchon"
    SET_SWITCH_TOGGLE = "setswitchtoggle"


class FritzGateway:
    """Async client for the FRITZ!Box home automation interface."""

    def __init__(
        self,
        host: str,
        transport: Transport | None = None,
        request_timeout: int = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        self._host = host
        self._transport: Transport = transport or AiohttpTransport(
            request_timeout=request_timeout
        )
        self._close_transport = transport is None

    @property
    def host(self) -> str:
        return self._host

    # ------------------------------------------------------------------
    #  Login
    # ------------------------------------------------------------------

    async def _session_info(
        self, params: dict[str, str] | None = None
    ) -> SessionInfo:
        url = f"http://{self._host}{LOGIN_PATH}"
        response = await self._transport.get(url, params)
        self._raise_for_status(LOGIN_PATH, response)
        return parse_session_info(response.body)

    async def authenticate(self, user: str, password: str) -> Session:
        """Run the challenge/response login and return a session.

        An already valid session id from the first request is reused
        without sending credentials.
        """
        _LOGGER.debug("Requesting session info from %s", self._host)
        info = await self._session_info()

        if info.session_id != SENTINEL_SID:
            _LOGGER.debug("Reusing existing session on %s", self._host)
            return Session(host=self._host, session_id=info.session_id)

        if info.block_time:
            _LOGGER.debug(
                "Login on %s blocked for %s s", self._host, info.block_time
            )

        response = solve_challenge(password, info.challenge)
        info = await self._session_info(
            {"username": user, "response": response}
        )

        if info.session_id == SENTINEL_SID:
            raise FritzLoginError(
                "login error - sid is still the default after login attempt"
            )

        _LOGGER.debug("Logged in to %s as %s", self._host, user)
        return Session(host=self._host, session_id=info.session_id)

    # ------------------------------------------------------------------
    #  Command dispatch
    # ------------------------------------------------------------------

    async def dispatch(
        self, command: Command, session: Session, ain: str | None = None
    ) -> str:
        """Send one switch command and return the raw response body."""
        params = {"switchcmd": command.value, "sid": session.session_id}
        if ain is not None:
            params["ain"] = ain

        url = f"http://{session.host}{COMMAND_PATH}"
        response = await self._transport.get(url, params)
        _LOGGER.info(
            "[fritz api] %s status: %s %s",
            command.value,
            response.status,
            response.reason,
        )
        self._raise_for_status(command.value, response)
        return response.body

    @staticmethod
    def _raise_for_status(what: str, response: TransportResponse) -> None:
        if not response.ok:
            raise FritzTransportError(
                f"{what} failed: HTTP {response.status} {response.reason}",
                status=response.status,
            )

    # ------------------------------------------------------------------
    #  Device list
    # ------------------------------------------------------------------

    async def list_devices(self, session: Session) -> list[Device]:
        """Fetch and classify every device, in gateway order."""
        xml = await self.dispatch(Command.GET_DEVICE_LIST_INFOS, session)
        devices = [classify(record) for record in parse_device_list(xml)]
        _LOGGER.debug("Listed %s devices", len(devices))
        return devices

    @staticmethod
    def find_device(devices: Iterable[Device], ain: str) -> Device:
        for device in devices:
            if device.identifier == ain:
                return device
        raise FritzDeviceNotFoundError(
            f"Cannot find device with ain {ain!r}"
        )

    # ------------------------------------------------------------------
    #  Per-device commands
    # ------------------------------------------------------------------

    async def fetch_device_stats(
        self, session: Session, ain: str
    ) -> list[DeviceStats]:
        xml = await self.dispatch(Command.GET_BASIC_DEVICE_STATS, session, ain)
        return parse_device_stats(xml)

    async def turn_on_switch_device(self, session: Session, ain: str) -> None:
        await self.dispatch(Command.SET_SWITCH_ON, session, ain)

    async def turn_off_switch_device(self, session: Session, ain: str) -> None:
        await self.dispatch(Command.SET_SWITCH_OFF, session, ain)

    async def toggle_switch_device(self, session: Session, ain: str) -> None:
        await self.dispatch(Command.SET_SWITCH_TOGGLE, session, ain)

    # ------------------------------------------------------------------
    #  Session lifecycle
    # ------------------------------------------------------------------

    async def close(self) -> None:
        """Close the transport if we own it."""
        if self._close_transport:
            await self._transport.close()

    async def __aenter__(self) -> FritzGateway:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
