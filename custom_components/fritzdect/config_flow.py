"""Config flow to configure the FRITZ!DECT component."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import voluptuous as vol

from homeassistant import config_entries
from homeassistant.const import CONF_HOST, CONF_NAME, CONF_PASSWORD, CONF_USERNAME

from .const import DEFAULT_HOST, DEFAULT_NAME, DOMAIN
from .exceptions import FritzError, FritzLoginError
from .gateway import FritzGateway

_LOGGER = logging.getLogger(__name__)

GATEWAY_SETTINGS = {
    vol.Required(CONF_HOST, default=DEFAULT_HOST): str,
    vol.Required(CONF_USERNAME): str,
    vol.Required(CONF_PASSWORD): str,
    vol.Optional(CONF_NAME, default=DEFAULT_NAME): str,
}


REAUTH_SETTINGS = {
    vol.Required(CONF_USERNAME): str,
    vol.Required(CONF_PASSWORD): str,
}


async def _async_try_login(
    host: str, username: str, password: str
) -> str | None:
    """Log in once and return an error key, or None on success."""
    gateway = FritzGateway(host=host)
    try:
        await gateway.authenticate(username, password)
    except FritzLoginError:
        return "auth_error"
    except FritzError as err:
        _LOGGER.debug("Cannot connect to %s: %s", host, err)
        return "connect_error"
    finally:
        await gateway.close()
    return None


class FritzFlowHandler(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a FRITZ!DECT config flow."""

    VERSION = 1
    CONNECTION_CLASS = config_entries.CONN_CLASS_LOCAL_POLL

    async def async_step_user(
        self, user_input: dict[str, str] | None = None
    ) -> config_entries.ConfigFlowResult:
        """Handle a flow initialized by the user to configure a FRITZ!Box."""
        errors: dict[str, str] = {}

        if user_input is not None:
            host = user_input[CONF_HOST]
            error = await _async_try_login(
                host, user_input[CONF_USERNAME], user_input[CONF_PASSWORD]
            )
            if error is None:
                await self.async_set_unique_id(host)
                self._abort_if_unique_id_configured()
                return self.async_create_entry(
                    title=user_input[CONF_NAME],
                    data={
                        CONF_HOST: host,
                        CONF_USERNAME: user_input[CONF_USERNAME],
                        CONF_PASSWORD: user_input[CONF_PASSWORD],
                    },
                )
            errors["base"] = error

        return self.async_show_form(
            step_id="user",
            data_schema=vol.Schema(GATEWAY_SETTINGS),
            errors=errors,
        )

    async def async_step_reauth(
        self, entry_data: Mapping[str, Any]
    ) -> config_entries.ConfigFlowResult:
        """Handle a rejected login on an existing entry."""
        return await self.async_step_reauth_confirm()

    async def async_step_reauth_confirm(
        self, user_input: dict[str, str] | None = None
    ) -> config_entries.ConfigFlowResult:
        """Ask for new credentials for the same FRITZ!Box."""
        errors: dict[str, str] = {}
        entry = self._get_reauth_entry()

        if user_input is not None:
            error = await _async_try_login(
                entry.data[CONF_HOST],
                user_input[CONF_USERNAME],
                user_input[CONF_PASSWORD],
            )
            if error is None:
                return self.async_update_reload_and_abort(
                    entry,
                    data_updates={
                        CONF_USERNAME: user_input[CONF_USERNAME],
                        CONF_PASSWORD: user_input[CONF_PASSWORD],
                    },
                )
            errors["base"] = error

        return self.async_show_form(
            step_id="reauth_confirm",
            data_schema=vol.Schema(REAUTH_SETTINGS),
            description_placeholders={CONF_HOST: entry.data[CONF_HOST]},
            errors=errors,
        )
