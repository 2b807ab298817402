"""Exceptions for FRITZ!Box home automation communication."""

from __future__ import annotations


class FritzError(Exception):
    """Base FRITZ!Box exception."""


class FritzTransportError(FritzError):
    """FRITZ!Box transport exception (unreachable box or HTTP failure)."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class FritzLoginError(FritzError):
    """FRITZ!Box login exception (session id still the sentinel)."""


class FritzParseError(FritzError):
    """FRITZ!Box parse exception (malformed XML response)."""


class FritzDeviceNotFoundError(FritzError):
    """No device with the requested identifier in the device list."""
