"""Base entity for the FRITZ!DECT integration."""

from __future__ import annotations

from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import DOMAIN
from .coordinator import FritzDataUpdateCoordinator
from .models import SwitchableDevice


class FritzEntity(CoordinatorEntity[FritzDataUpdateCoordinator]):
    """Base class for all FRITZ!DECT entities.

    Every entity is keyed on the device identifier (AIN) and reads its
    device from the coordinator's latest device list.
    """

    _attr_has_entity_name = False

    def __init__(
        self,
        coordinator: FritzDataUpdateCoordinator,
        idx: str,
    ) -> None:
        """Initialise the entity."""
        super().__init__(coordinator)
        self._idx = idx
        # Kept so a device that drops out of the list still has a name.
        device = coordinator.data[idx]
        self._device_name = device.name
        self._model = device.product_name

    @property
    def _device(self) -> SwitchableDevice | None:
        return self.coordinator.data.get(self._idx)

    @property
    def _current_name(self) -> str:
        device = self._device
        return device.name if device is not None else self._device_name

    # -- common properties ------------------------------------------------

    @property
    def available(self) -> bool:
        """Entity available when coordinator succeeded *and* device listed."""
        if not super().available:
            return False
        return self._device is not None

    @property
    def unique_id(self) -> str:
        return self._idx

    @property
    def name(self) -> str:
        return self._current_name

    @property
    def device_info(self) -> dict:
        return {
            "name": self._current_name,
            "identifiers": {(DOMAIN, self._idx)},
            "manufacturer": "AVM",
            "model": self._model,
        }
