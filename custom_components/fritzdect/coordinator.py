"""Data update coordinator for the FRITZ!DECT integration."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from http import HTTPStatus
from typing import TypeVar

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import ConfigEntryAuthFailed, HomeAssistantError
from homeassistant.helpers.update_coordinator import (
    DataUpdateCoordinator,
    UpdateFailed,
)

from .const import DOMAIN, UPDATE_INTERVAL
from .exceptions import FritzError, FritzLoginError, FritzTransportError
from .gateway import FritzGateway
from .models import Device, Session

_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")

GatewayCall = Callable[[FritzGateway, Session], Awaitable[_T]]


class FritzDataUpdateCoordinator(DataUpdateCoordinator[dict[str, Device]]):
    """Poll the device list and keep the login session alive.

    The gateway never re-authenticates on its own; a poll or command that
    comes back 403 logs in again once and retries.
    """

    def __init__(
        self,
        hass: HomeAssistant,
        entry: ConfigEntry | None,
        gateway: FritzGateway,
        user: str,
        password: str,
    ) -> None:
        super().__init__(
            hass,
            _LOGGER,
            config_entry=entry,
            name=DOMAIN,
            update_interval=UPDATE_INTERVAL,
        )
        self.gateway = gateway
        self._user = user
        self._password = password
        self.session: Session | None = None

    async def async_login(self) -> Session:
        self.session = await self.gateway.authenticate(
            self._user, self._password
        )
        return self.session

    async def async_get_session(self) -> Session:
        """Return the current session, logging in first if needed."""
        if self.session is None:
            return await self.async_login()
        return self.session

    async def _async_call(self, call: GatewayCall[_T]) -> _T:
        """Run ``call`` with the session, logging in again once on 403."""
        session = await self.async_get_session()
        try:
            return await call(self.gateway, session)
        except FritzTransportError as err:
            if err.status != HTTPStatus.FORBIDDEN:
                raise
            _LOGGER.debug(
                "Session rejected by %s, logging in again", self.gateway.host
            )
            session = await self.async_login()
            return await call(self.gateway, session)

    async def _async_list_devices(self) -> list[Device]:
        return await self._async_call(
            lambda gateway, session: gateway.list_devices(session)
        )

    async def async_run_command(self, call: GatewayCall[None]) -> None:
        """Run a device command on behalf of an entity service call."""
        try:
            await self._async_call(call)
        except FritzLoginError as err:
            raise HomeAssistantError(
                f"Login to {self.gateway.host} rejected"
            ) from err
        except FritzError as err:
            raise HomeAssistantError(
                f"Command failed on {self.gateway.host}: {err}"
            ) from err

    async def _async_update_data(self) -> dict[str, Device]:
        try:
            devices = await self._async_list_devices()
        except FritzLoginError as err:
            raise ConfigEntryAuthFailed(
                f"Login to {self.gateway.host} rejected"
            ) from err
        except FritzError as err:
            raise UpdateFailed(
                f"Error communicating with {self.gateway.host}: {err}"
            ) from err

        return {device.identifier: device for device in devices}


@dataclass(slots=True)
class FritzRuntimeData:
    """Objects shared by the platforms of one config entry."""

    gateway: FritzGateway
    coordinator: FritzDataUpdateCoordinator
