"""Pytest configuration and shared fixtures."""
import os

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless REDIS_STATUS_INTEGRATION=1."""
    if os.environ.get("REDIS_STATUS_INTEGRATION") in ("1", "true", "True"):
        return
    skip = pytest.mark.skip(reason="Set REDIS_STATUS_INTEGRATION=1 to run integration tests")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)
