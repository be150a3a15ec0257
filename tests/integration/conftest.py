"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_INSTANTLY_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_INSTANTLY_NETWORK_TESTS") != "1",
    reason="Requires network access and INSTANTLY_API_KEY. Set RUN_INSTANTLY_NETWORK_TESTS=1 to run",
)
