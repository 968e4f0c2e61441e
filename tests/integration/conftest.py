"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_STEAM_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_STEAM_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_STEAM_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def api_key():
    key = os.environ.get("STEAM_API_KEY")
    if not key:
        pytest.skip("STEAM_API_KEY is not set")
    return key
