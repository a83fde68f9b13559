"""Test helper utilities for Global Country Explorer tests."""

from .responses import RESPONSES_DIR, StubFetcher, load_response, make_response

__all__ = ["RESPONSES_DIR", "StubFetcher", "load_response", "make_response"]
