"""Data models for FRITZ!Box home automation devices."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol, Union

from .const import DECI, MILLI, PLUG_PRODUCT_PREFIX

if TYPE_CHECKING:
    from .gateway import FritzGateway


@dataclass(frozen=True, slots=True)
class Session:
    """Authenticated context for one FRITZ!Box."""

    host: str
    session_id: str


@dataclass(frozen=True, slots=True)
class SessionInfo:
    """Contents of a ``login_sid.lua`` response."""

    session_id: str
    challenge: str
    block_time: int = 0


# ── Raw device list records ─────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SwitchRecord:
    """``<switch>`` sub-record."""

    state: bool


@dataclass(frozen=True, slots=True)
class PowerMeterRecord:
    """``<powermeter>`` sub-record, raw units."""

    energy: int  # Wh
    power: int  # mW
    voltage: int  # mV


@dataclass(frozen=True, slots=True)
class TemperatureRecord:
    """``<temperature>`` sub-record; ``celsius`` is in 0.1 °C."""

    celsius: str


@dataclass(frozen=True, slots=True)
class AlertRecord:
    """``<alert>`` sub-record."""

    state: bool
    last_alert_change: int


@dataclass(frozen=True, slots=True)
class DeviceRecord:
    """One ``<device>`` entry of the device list, as sent by the box."""

    identifier: str
    product_name: str
    name: str
    present: bool = True
    manufacturer: str | None = None
    fw_version: str | None = None
    switch: SwitchRecord | None = None
    power_meter: PowerMeterRecord | None = None
    temperature: TemperatureRecord | None = None
    alert: AlertRecord | None = None


# ── Statistics ──────────────────────────────────────────────────────


class StatsKind(Enum):
    """Measurement series returned by ``getbasicdevicestats``."""

    TEMPERATURE = "temperature"
    VOLTAGE = "voltage"
    POWER = "power"
    ENERGY = "energy"


@dataclass(frozen=True, slots=True)
class DeviceStats:
    """One ``<stats>`` series; ``grid`` is the sample spacing in seconds.

    Values are newest first. ``None`` marks a slot without a measurement.
    """

    kind: StatsKind
    grid: int
    values: tuple[float | None, ...]


# ── Classified devices ──────────────────────────────────────────────


class SwitchableDevice(Protocol):
    """Capability surface shared by every device variant."""

    identifier: str
    product_name: str
    name: str

    def is_on(self) -> bool: ...

    def is_alerting(self) -> bool: ...

    def last_alert_change(self) -> int: ...

    def state(self) -> str: ...

    async def fetch_stats(
        self, gateway: FritzGateway, session: Session
    ) -> list[DeviceStats]: ...

    async def turn_on(
        self, gateway: FritzGateway, session: Session
    ) -> None: ...

    async def turn_off(
        self, gateway: FritzGateway, session: Session
    ) -> None: ...

    async def toggle(
        self, gateway: FritzGateway, session: Session
    ) -> None: ...


class _DeviceCommands:
    """Gateway-backed operations keyed on ``identifier``.

    None of these touch local state: after a switch command the object is
    stale until the device list is fetched again.
    """

    __slots__ = ()

    identifier: str

    async def fetch_stats(
        self, gateway: FritzGateway, session: Session
    ) -> list[DeviceStats]:
        """Fetch the measurement history for this device."""
        return await gateway.fetch_device_stats(session, self.identifier)

    async def turn_on(self, gateway: FritzGateway, session: Session) -> None:
        await gateway.turn_on_switch_device(session, self.identifier)

    async def turn_off(self, gateway: FritzGateway, session: Session) -> None:
        await gateway.turn_off_switch_device(session, self.identifier)

    async def toggle(self, gateway: FritzGateway, session: Session) -> None:
        await gateway.toggle_switch_device(session, self.identifier)


@dataclass(frozen=True, slots=True)
class SwitchablePlug(_DeviceCommands):
    """FRITZ!DECT 2xx smart plug with full telemetry."""

    identifier: str
    product_name: str
    name: str
    on: bool
    voltage: float  # V
    power: float  # W
    energy: int  # Wh
    celsius: float

    def is_on(self) -> bool:
        return self.on

    def is_alerting(self) -> bool:
        return False

    def last_alert_change(self) -> int:
        return 0

    def state(self) -> str:
        return "on" if self.on else "off"

    def __str__(self) -> str:
        return (
            f"identifier={self.identifier!r} "
            f"productname={self.product_name!r} name={self.name!r}"
        )


@dataclass(frozen=True, slots=True)
class UnclassifiedDevice(_DeviceCommands):
    """Any device the plug rule does not match."""

    identifier: str
    product_name: str
    name: str
    alert: AlertRecord | None = None

    def is_on(self) -> bool:
        return False

    def is_alerting(self) -> bool:
        return self.alert is not None and self.alert.state

    def last_alert_change(self) -> int:
        if self.alert is None:
            return 0
        return self.alert.last_alert_change

    def state(self) -> str:
        return ""

    def __str__(self) -> str:
        return (
            f"Unsupported device identifier={self.identifier!r} "
            f"productname={self.product_name!r} name={self.name!r}"
        )


Device = Union[SwitchablePlug, UnclassifiedDevice]


def _parse_celsius(raw: str) -> float:
    try:
        return float(raw) * DECI
    except ValueError:
        return 0.0


def classify(record: DeviceRecord) -> Device:
    """Map a raw device record onto exactly one device variant.

    A plug needs the product prefix *and* all four sub-records; a plug
    missing any of them is reported as unclassified.
    """
    if (
        record.product_name.startswith(PLUG_PRODUCT_PREFIX)
        and record.switch is not None
        and record.power_meter is not None
        and record.temperature is not None
        and record.alert is not None
    ):
        meter = record.power_meter
        return SwitchablePlug(
            identifier=record.identifier,
            product_name=record.product_name,
            name=record.name,
            on=record.switch.state,
            voltage=meter.voltage * MILLI,
            power=meter.power * MILLI,
            energy=meter.energy,
            celsius=_parse_celsius(record.temperature.celsius),
        )

    return UnclassifiedDevice(
        identifier=record.identifier,
        product_name=record.product_name,
        name=record.name,
        alert=record.alert,
    )
