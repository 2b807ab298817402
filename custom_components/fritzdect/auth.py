"""Challenge/response computation for the FRITZ!Box login handshake."""

from __future__ import annotations

import hashlib
import re

_NON_ASCII = re.compile(r"[^\x00-\x7F]")


def solve_challenge(password: str, challenge: str) -> str:
    """Return the login response for a server challenge.

    Characters outside 7-bit ASCII are replaced with ``.`` before hashing.
    The digest is the MD5 of ``"<challenge>-<password>"`` encoded as
    UTF-16LE without a byte-order mark.
    """
    clean_password = _NON_ASCII.sub(".", password)
    hash_input = f"{challenge}-{clean_password}".encode("utf-16-le")
    return f"{challenge}-{hashlib.md5(hash_input).hexdigest()}"
