"""Shared fixtures for Capture Config tests."""

import pytest

from captureconfig.capture import CaptureConfig, ModuleDescriptor
from captureconfig.core.config import set_settings


@pytest.fixture
def module():
    """A capture module descriptor owned by the test."""
    return ModuleDescriptor(name="pcap")


@pytest.fixture
def cfg(module):
    """A fresh configuration bound to the module fixture."""
    return CaptureConfig.create(module)


@pytest.fixture(autouse=True)
def reset_settings():
    """Force settings to reload for every test."""
    set_settings(None)
    yield
    set_settings(None)
