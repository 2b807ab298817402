"""Constants for the FRITZ!DECT integration and gateway library."""

from __future__ import annotations

from datetime import timedelta

# ── Home Assistant integration ──────────────────────────────────────
DOMAIN = "fritzdect"

DEFAULT_HOST = "fritz.box"
DEFAULT_NAME = "FRITZ!Box"
DEFAULT_REQUEST_TIMEOUT = 10
UPDATE_INTERVAL = timedelta(seconds=30)

PLATFORMS = ["switch", "sensor", "binary_sensor"]

# ── Gateway endpoints ───────────────────────────────────────────────
LOGIN_PATH = "/login_sid.lua"
COMMAND_PATH = "/webservices/homeautoswitch.lua"

# Reserved session id meaning "not authenticated"
SENTINEL_SID = "0000000000000000"

# ── Device classification ───────────────────────────────────────────
PLUG_PRODUCT_PREFIX = "FRITZ!DECT 2"

# Raw unit → SI unit factors
MILLI = 0.001
DECI = 0.1
CENTI = 0.01
