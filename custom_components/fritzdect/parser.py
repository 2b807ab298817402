"""XML parsing for FRITZ!Box AHA-HTTP responses."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from .const import CENTI, DECI, MILLI
from .exceptions import FritzParseError
from .models import (
    AlertRecord,
    DeviceRecord,
    DeviceStats,
    PowerMeterRecord,
    SessionInfo,
    StatsKind,
    SwitchRecord,
    TemperatureRecord,
)

_LOGGER = logging.getLogger(__name__)

_STATS_SCALE: dict[StatsKind, float] = {
    StatsKind.TEMPERATURE: DECI,
    StatsKind.VOLTAGE: MILLI,
    StatsKind.POWER: CENTI,
    StatsKind.ENERGY: 1.0,
}


def _root(text: str, tag: str) -> ET.Element:
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise FritzParseError(
            f"Invalid XML in <{tag}> response: {exc}"
        ) from exc
    if root.tag != tag:
        raise FritzParseError(f"Expected <{tag}> root, got <{root.tag}>")
    return root


def _text(parent: ET.Element, tag: str) -> str:
    child = parent.find(tag)
    if child is None:
        raise FritzParseError(f"<{parent.tag}> is missing <{tag}>")
    return (child.text or "").strip()


def _int(parent: ET.Element, tag: str) -> int:
    raw = _text(parent, tag)
    try:
        return int(raw)
    except ValueError as exc:
        raise FritzParseError(
            f"<{parent.tag}><{tag}> is not an integer: {raw!r}"
        ) from exc


def _optional_int(parent: ET.Element, tag: str, default: int = 0) -> int:
    child = parent.find(tag)
    if child is None or not (child.text or "").strip():
        return default
    return _int(parent, tag)


def _bool(parent: ET.Element, tag: str) -> bool:
    child = parent.find(tag)
    return child is not None and (child.text or "").strip() == "1"


def parse_session_info(text: str) -> SessionInfo:
    """Parse a ``<SessionInfo>`` document."""
    root = _root(text, "SessionInfo")
    return SessionInfo(
        session_id=_text(root, "SID"),
        challenge=_text(root, "Challenge"),
        block_time=_optional_int(root, "BlockTime"),
    )


def _parse_device(node: ET.Element) -> DeviceRecord:
    identifier = node.get("identifier")
    if identifier is None:
        raise FritzParseError("<device> without identifier attribute")

    switch = node.find("switch")
    meter = node.find("powermeter")
    temperature = node.find("temperature")
    alert = node.find("alert")

    return DeviceRecord(
        identifier=identifier,
        product_name=node.get("productname", ""),
        name=_text(node, "name"),
        present=_bool(node, "present"),
        manufacturer=node.get("manufacturer"),
        fw_version=node.get("fwversion"),
        switch=(
            SwitchRecord(state=_bool(switch, "state"))
            if switch is not None
            else None
        ),
        power_meter=(
            PowerMeterRecord(
                energy=_int(meter, "energy"),
                power=_int(meter, "power"),
                voltage=_int(meter, "voltage"),
            )
            if meter is not None
            else None
        ),
        temperature=(
            TemperatureRecord(celsius=_text(temperature, "celsius"))
            if temperature is not None
            else None
        ),
        alert=(
            AlertRecord(
                state=_bool(alert, "state"),
                last_alert_change=_optional_int(
                    alert, "lastalertchgtimestamp"
                ),
            )
            if alert is not None
            else None
        ),
    )


def parse_device_list(text: str) -> list[DeviceRecord]:
    """Parse a ``<devicelist>`` document, keeping document order.

    ``<group>`` entries are not devices and are skipped.
    """
    root = _root(text, "devicelist")
    records = [_parse_device(node) for node in root.findall("device")]
    _LOGGER.debug("Parsed %s device records", len(records))
    return records


def _parse_value(raw: str, scale: float) -> float | None:
    raw = raw.strip()
    if raw in ("", "-"):
        return None
    try:
        return int(raw) * scale
    except ValueError as exc:
        raise FritzParseError(f"Invalid stats value {raw!r}") from exc


def parse_device_stats(text: str) -> list[DeviceStats]:
    """Parse a ``<devicestats>`` document into one entry per series."""
    root = _root(text, "devicestats")
    result: list[DeviceStats] = []

    for kind in StatsKind:
        section = root.find(kind.value)
        if section is None:
            continue
        scale = _STATS_SCALE[kind]
        for stats in section.findall("stats"):
            try:
                grid = int(stats.get("grid", "0"))
            except ValueError as exc:
                raise FritzParseError(
                    f"Invalid grid in <{kind.value}> stats"
                ) from exc
            values = tuple(
                _parse_value(raw, scale)
                for raw in (stats.text or "").split(",")
                if raw.strip()
            )
            result.append(DeviceStats(kind=kind, grid=grid, values=values))

    return result
