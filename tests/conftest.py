"""Shared fixtures for all tests."""

import pytest

from config import loader as config_loader
from core.action import ActionRegistry
from core.action import registry as registry_module
from core.observation.logger import NO_ACTIVITY, activity_id_var


@pytest.fixture(autouse=True)
def isolated_config_and_registry(monkeypatch):
    """Fresh config cache and process-wide registry for every test."""
    monkeypatch.setattr(registry_module, "_global_registry", None)
    config_loader.load_config.cache_clear()
    yield
    config_loader.load_config.cache_clear()


@pytest.fixture(autouse=True)
def no_activity_id():
    """Each test starts outside any activity."""
    token = activity_id_var.set(NO_ACTIVITY)
    yield
    activity_id_var.reset(token)


@pytest.fixture
def registry():
    """Registry that rejects duplicate keys."""
    return ActionRegistry()
