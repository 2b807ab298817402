"""Support for FRITZ!DECT switches (smart plugs)."""

from __future__ import annotations

import logging
from typing import Any

from homeassistant.components.switch import SwitchDeviceClass, SwitchEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import DOMAIN
from .coordinator import FritzRuntimeData
from .entity import FritzEntity
from .models import SwitchablePlug

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up FRITZ!DECT switches from a config entry."""
    data: FritzRuntimeData = hass.data[DOMAIN][config_entry.entry_id]
    coordinator = data.coordinator

    tracked: set[str] = set()

    @callback
    def _async_add_new() -> None:
        new_ids = {
            idx
            for idx, device in (coordinator.data or {}).items()
            if isinstance(device, SwitchablePlug)
        } - tracked
        if new_ids:
            tracked.update(new_ids)
            async_add_entities(
                FritzSwitch(coordinator, idx) for idx in new_ids
            )

    _async_add_new()
    config_entry.async_on_unload(
        coordinator.async_add_listener(_async_add_new)
    )


class FritzSwitch(FritzEntity, SwitchEntity):
    """Representation of a FRITZ!DECT plug's relay."""

    _attr_device_class = SwitchDeviceClass.OUTLET

    @property
    def is_on(self) -> bool:
        return self._device.is_on()

    async def async_turn_on(self, **kwargs: Any) -> None:
        await self.coordinator.async_run_command(self._device.turn_on)
        await self.coordinator.async_request_refresh()

    async def async_turn_off(self, **kwargs: Any) -> None:
        await self.coordinator.async_run_command(self._device.turn_off)
        await self.coordinator.async_request_refresh()

    async def async_toggle(self, **kwargs: Any) -> None:
        await self.coordinator.async_run_command(self._device.toggle)
        await self.coordinator.async_request_refresh()
