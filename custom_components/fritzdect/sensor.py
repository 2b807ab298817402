"""Support for FRITZ!DECT plug telemetry sensors."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorEntityDescription,
    SensorStateClass,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import (
    UnitOfElectricPotential,
    UnitOfEnergy,
    UnitOfPower,
    UnitOfTemperature,
)
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import DOMAIN
from .coordinator import FritzDataUpdateCoordinator, FritzRuntimeData
from .entity import FritzEntity
from .models import SwitchablePlug

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class FritzSensorEntityDescription(SensorEntityDescription):
    """Describe a plug measurement."""

    value_fn: Callable[[SwitchablePlug], float | int]


SENSORS: tuple[FritzSensorEntityDescription, ...] = (
    FritzSensorEntityDescription(
        key="power",
        name="Power",
        device_class=SensorDeviceClass.POWER,
        state_class=SensorStateClass.MEASUREMENT,
        native_unit_of_measurement=UnitOfPower.WATT,
        value_fn=lambda plug: round(plug.power, 3),
    ),
    FritzSensorEntityDescription(
        key="voltage",
        name="Voltage",
        device_class=SensorDeviceClass.VOLTAGE,
        state_class=SensorStateClass.MEASUREMENT,
        native_unit_of_measurement=UnitOfElectricPotential.VOLT,
        value_fn=lambda plug: round(plug.voltage, 3),
    ),
    FritzSensorEntityDescription(
        key="energy",
        name="Energy",
        device_class=SensorDeviceClass.ENERGY,
        state_class=SensorStateClass.TOTAL_INCREASING,
        native_unit_of_measurement=UnitOfEnergy.WATT_HOUR,
        value_fn=lambda plug: plug.energy,
    ),
    FritzSensorEntityDescription(
        key="temperature",
        name="Temperature",
        device_class=SensorDeviceClass.TEMPERATURE,
        state_class=SensorStateClass.MEASUREMENT,
        native_unit_of_measurement=UnitOfTemperature.CELSIUS,
        value_fn=lambda plug: round(plug.celsius, 1),
    ),
)


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up FRITZ!DECT sensors from a config entry."""
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
                FritzSensor(coordinator, idx, description)
                for idx in new_ids
                for description in SENSORS
            )

    _async_add_new()
    config_entry.async_on_unload(
        coordinator.async_add_listener(_async_add_new)
    )


class FritzSensor(FritzEntity, SensorEntity):
    """One telemetry value of a FRITZ!DECT plug."""

    entity_description: FritzSensorEntityDescription

    def __init__(
        self,
        coordinator: FritzDataUpdateCoordinator,
        idx: str,
        description: FritzSensorEntityDescription,
    ) -> None:
        super().__init__(coordinator, idx)
        self.entity_description = description

    @property
    def unique_id(self) -> str:
        return f"{self._idx}_{self.entity_description.key}"

    @property
    def name(self) -> str:
        return f"{self._current_name} {self.entity_description.name}"

    @property
    def native_value(self) -> float | int:
        return self.entity_description.value_fn(self._device)
