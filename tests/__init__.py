"""Tests for the FRITZ!DECT integration."""
