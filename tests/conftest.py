"""Shared fixtures for FRITZ!DECT tests."""

from __future__ import annotations

from collections.abc import Mapping

import pytest

from custom_components.fritzdect.models import (
    AlertRecord,
    Session,
    SwitchablePlug,
    UnclassifiedDevice,
)
from custom_components.fritzdect.transport import TransportResponse

HOST = "192.168.178.1"
SID = "9f2a6c1e0b8d4e37"

SESSION_INFO_XML = (
    '<?xml version="1.0" encoding="utf-8"?>'
    "<SessionInfo><SID>{sid}</SID><Challenge>{challenge}</Challenge>"
    "<BlockTime>0</BlockTime><Rights></Rights></SessionInfo>"
)

DEVICE_LIST_XML = """<devicelist version="1">
<device identifier="08761 0000434" id="17" functionbitmask="35712"
        fwversion="04.16" manufacturer="AVM" productname="FRITZ!DECT 200">
  <present>1</present>
  <name>Kitchen Plug</name>
  <switch><state>1</state><mode>manuell</mode><lock>0</lock></switch>
  <powermeter><voltage>230051</voltage><power>12340</power><energy>707</energy></powermeter>
  <temperature><celsius>285</celsius><offset>0</offset></temperature>
  <alert><state>0</state><lastalertchgtimestamp>0</lastalertchgtimestamp></alert>
</device>
<device identifier="11657 0240192" id="18" functionbitmask="35712"
        fwversion="04.16" manufacturer="AVM" productname="FRITZ!DECT 210">
  <present>1</present>
  <name>Garden Plug</name>
  <switch><state>0</state></switch>
  <powermeter><voltage>229000</voltage><power>0</power><energy>12</energy></powermeter>
  <temperature><celsius>150</celsius><offset>0</offset></temperature>
</device>
<group identifier="grp123" id="900" functionbitmask="6784" productname="">
  <present>1</present>
  <name>All Plugs</name>
</group>
<device identifier="12345 6789012" id="19" functionbitmask="8208"
        fwversion="05.10" manufacturer="AVM" productname="FRITZ!DECT 440">
  <present>1</present>
  <name>Smoke Detector</name>
  <alert><state>1</state><lastalertchgtimestamp>1700000000</lastalertchgtimestamp></alert>
</device>
</devicelist>
"""

DEVICE_STATS_XML = """<devicestats>
<temperature><stats count="3" grid="900">220,225,-</stats></temperature>
<voltage><stats count="2" grid="10">230051,229000</stats></voltage>
<power><stats count="2" grid="10">1234,0</stats></power>
<energy>
  <stats count="2" grid="2678400">707,650</stats>
  <stats count="2" grid="86400">23,24</stats>
</energy>
</devicestats>
"""


def session_info(
    sid: str = "0000000000000000", challenge: str = "1234567z"
) -> str:
    return SESSION_INFO_XML.format(sid=sid, challenge=challenge)


def ok(body: str) -> TransportResponse:
    return TransportResponse(status=200, reason="OK", body=body)


class FakeTransport:
    """Transport double that replays canned responses and records calls."""

    def __init__(self, *responses: TransportResponse) -> None:
        self.responses = list(responses)
        self.calls: list[tuple[str, dict[str, str]]] = []
        self.closed = False

    async def get(
        self, url: str, params: Mapping[str, str] | None = None
    ) -> TransportResponse:
        self.calls.append((url, dict(params or {})))
        return self.responses.pop(0)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def auto_enable_custom_integrations(enable_custom_integrations):
    """Enable custom integrations for all tests."""
    yield


@pytest.fixture
def session() -> Session:
    """Return an authenticated session."""
    return Session(host=HOST, session_id=SID)


@pytest.fixture
def plug_device() -> SwitchablePlug:
    """Return a sample SwitchablePlug."""
    return SwitchablePlug(
        identifier="08761 0000434",
        product_name="FRITZ!DECT 200",
        name="Kitchen Plug",
        on=True,
        voltage=230.051,
        power=12.34,
        energy=707,
        celsius=28.5,
    )


@pytest.fixture
def alert_device() -> UnclassifiedDevice:
    """Return a sample UnclassifiedDevice carrying an alert."""
    return UnclassifiedDevice(
        identifier="12345 6789012",
        product_name="FRITZ!DECT 440",
        name="Smoke Detector",
        alert=AlertRecord(state=True, last_alert_change=1700000000),
    )
