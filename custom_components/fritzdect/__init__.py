"""Support for FRITZ!DECT smart plugs behind a FRITZ!Box."""

from __future__ import annotations

import logging

from homeassistant import config_entries, core
from homeassistant.const import CONF_HOST, CONF_PASSWORD, CONF_USERNAME
from homeassistant.exceptions import ConfigEntryNotReady
from homeassistant.helpers.config_validation import config_entry_only_config_schema

from .const import DOMAIN, PLATFORMS
from .coordinator import FritzDataUpdateCoordinator, FritzRuntimeData
from .exceptions import FritzError, FritzLoginError
from .gateway import FritzGateway

CONFIG_SCHEMA = config_entry_only_config_schema(DOMAIN)

_LOGGER = logging.getLogger(__name__)


async def async_setup(hass: core.HomeAssistant, config: dict) -> bool:
    """Set up the FRITZ!DECT component."""
    return True


async def async_setup_entry(
    hass: core.HomeAssistant, entry: config_entries.ConfigEntry
) -> bool:
    """Set up a FRITZ!Box from a config entry."""
    hass.data.setdefault(DOMAIN, {})

    gateway = FritzGateway(host=entry.data[CONF_HOST])
    coordinator = FritzDataUpdateCoordinator(
        hass,
        entry,
        gateway,
        entry.data[CONF_USERNAME],
        entry.data[CONF_PASSWORD],
    )

    try:
        await coordinator.async_login()
    except FritzLoginError:
        _LOGGER.error(
            "Authentication error: check the username and password "
            "configured for %s.",
            gateway.host,
        )
        await gateway.close()
        return False
    except FritzError as err:
        await gateway.close()
        raise ConfigEntryNotReady(
            f"Connection error: check if {gateway.host} is the FRITZ!Box host"
        ) from err

    await coordinator.async_refresh()

    hass.data[DOMAIN][entry.entry_id] = FritzRuntimeData(
        gateway=gateway, coordinator=coordinator
    )

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)

    return True


async def async_unload_entry(
    hass: core.HomeAssistant,
    config_entry: config_entries.ConfigEntry,
) -> bool:
    """Unload a config entry."""
    unload_ok = await hass.config_entries.async_unload_platforms(
        config_entry, PLATFORMS
    )

    if unload_ok:
        data: FritzRuntimeData | None = hass.data[DOMAIN].pop(
            config_entry.entry_id, None
        )
        if data is not None:
            await data.gateway.close()

    return unload_ok
