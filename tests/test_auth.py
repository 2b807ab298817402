"""Tests for the login challenge/response."""

from __future__ import annotations

import hashlib

from custom_components.fritzdect.auth import solve_challenge


class TestSolveChallenge:
    """Test solve_challenge against known FRITZ!Box responses."""

    def test_known_response(self):
        assert (
            solve_challenge("mühe", "foo")
            == "foo-442e12bbceabd35c66964c913a316451"
        )

    def test_deterministic(self):
        assert solve_challenge("secret", "1234567z") == solve_challenge(
            "secret", "1234567z"
        )

    def test_non_ascii_replaced_by_dot(self):
        assert solve_challenge("Ä", "x") == solve_challenge(".", "x")

    def test_digest_is_md5_of_utf16le(self):
        raw = "1234567z-.bc".encode("utf-16-le")
        expected = hashlib.md5(raw).hexdigest()
        assert solve_challenge("äbc", "1234567z") == f"1234567z-{expected}"

    def test_response_prefixed_with_challenge(self):
        challenge, digest = solve_challenge("pw", "abcdef12").split("-", 1)
        assert challenge == "abcdef12"
        assert len(digest) == 32
        assert digest == digest.lower()

    def test_ascii_password_unchanged(self):
        a = solve_challenge("password", "c")
        b = solve_challenge("passwore", "c")
        assert a != b
