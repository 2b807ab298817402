"""Support for FRITZ!DECT alert binary sensors (smoke, door, window)."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from homeassistant.components.binary_sensor import (
    BinarySensorDeviceClass,
    BinarySensorEntity,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import DOMAIN
from .coordinator import FritzRuntimeData
from .entity import FritzEntity
from .models import UnclassifiedDevice

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up FRITZ!DECT alert sensors from a config entry."""
    data: FritzRuntimeData = hass.data[DOMAIN][config_entry.entry_id]
    coordinator = data.coordinator

    tracked: set[str] = set()

    @callback
    def _async_add_new() -> None:
        new_ids = {
            idx
            for idx, device in (coordinator.data or {}).items()
            if isinstance(device, UnclassifiedDevice)
            and device.alert is not None
        } - tracked
        if new_ids:
            tracked.update(new_ids)
            async_add_entities(
                FritzAlertSensor(coordinator, idx) for idx in new_ids
            )

    _async_add_new()
    config_entry.async_on_unload(
        coordinator.async_add_listener(_async_add_new)
    )


class FritzAlertSensor(FritzEntity, BinarySensorEntity):
    """Alert state of a FRITZ!DECT device."""

    _attr_device_class = BinarySensorDeviceClass.PROBLEM

    @property
    def unique_id(self) -> str:
        return f"{self._idx}_alert"

    @property
    def name(self) -> str:
        return f"{self._current_name} Alert"

    @property
    def is_on(self) -> bool:
        return self._device.is_alerting()

    @property
    def extra_state_attributes(self) -> dict | None:
        device = self._device
        if device is None:
            return None
        changed = device.last_alert_change()
        if not changed:
            return None
        return {
            "last_alert_change": datetime.fromtimestamp(
                changed, tz=timezone.utc
            ).isoformat()
        }
