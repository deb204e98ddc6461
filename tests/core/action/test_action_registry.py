"""Tests for ActionRegistry and the process-wide registry helpers."""

import logging

import pytest

from core.action import (
    ActionNotFoundError,
    ActionRegistry,
    ActionType,
    DuplicateActionError,
    action,
    get_registry,
    lookup_indexer,
    lookup_retriever,
)


async def noop(request):
    return None


@pytest.fixture
def make_action():
    def _make(name="noop"):
        return action(name, dict, None, noop)

    return _make


def test_register_and_lookup(registry, make_action):
    """Test lookup by category and key."""
    retriever = make_action("retrieve")
    registry.register_action(ActionType.RETRIEVER, "memory/simple", retriever)

    assert registry.lookup_action(ActionType.RETRIEVER, "memory/simple") is retriever
    assert registry.lookup_action("retriever", "memory/simple") is retriever
    assert registry.contains_action("retriever", "memory/simple")
    assert not registry.contains_action(ActionType.INDEXER, "memory/simple")


def test_same_key_in_different_categories(registry, make_action):
    """Test the same key can live in both categories."""
    registry.register_action(ActionType.INDEXER, "memory/simple", make_action("index"))
    registry.register_action(ActionType.RETRIEVER, "memory/simple", make_action("retrieve"))

    assert [a.name for a in registry.list_actions()] == ["index", "retrieve"]


def test_duplicate_key_raises(registry, make_action):
    """Test duplicate registration within a category is rejected."""
    first = make_action()
    registry.register_action(ActionType.RETRIEVER, "memory/simple", first)

    with pytest.raises(DuplicateActionError) as exc_info:
        registry.register_action(ActionType.RETRIEVER, "memory/simple", make_action())

    assert exc_info.value.to_dict()["code"] == "DUPLICATE_ACTION"
    assert registry.lookup_action(ActionType.RETRIEVER, "memory/simple") is first


def test_override_logs_warning(make_action, caplog):
    """Test override mode replaces the action and surfaces a warning."""
    registry = ActionRegistry(allow_override=True)
    registry.register_action(ActionType.INDEXER, "a/1", make_action("first"))
    registry.register_action(ActionType.INDEXER, "b/2", make_action("other"))
    replacement = make_action("second")

    with caplog.at_level(logging.WARNING, logger="core.action.registry"):
        registry.register_action(ActionType.INDEXER, "a/1", replacement)

    assert registry.lookup_action(ActionType.INDEXER, "a/1") is replacement
    assert [a.name for a in registry.list_actions(ActionType.INDEXER)] == ["other", "second"]
    assert any("Overriding indexer action 'a/1'" in r.getMessage() for r in caplog.records)


def test_lookup_missing_raises(registry):
    """Test missing actions raise ActionNotFoundError."""
    with pytest.raises(ActionNotFoundError) as exc_info:
        registry.lookup_action(ActionType.RETRIEVER, "nope/none")

    assert exc_info.value.key == "nope/none"
    assert "nope/none" in str(exc_info.value)


def test_invalid_category(registry, make_action):
    """Test an empty category is refused."""
    with pytest.raises(TypeError):
        registry.register_action("", "a/b", make_action())


def test_list_all_actions_info_and_clear(registry, make_action):
    """Test info listing keeps registration order and clear empties it."""
    registry.register_action(ActionType.INDEXER, "memory/simple", make_action("index"))
    registry.register_action(ActionType.RETRIEVER, "memory/simple", make_action("retrieve"))

    assert registry.list_all_actions_info() == [
        {"category": "indexer", "key": "memory/simple", "name": "index"},
        {"category": "retriever", "key": "memory/simple", "name": "retrieve"},
    ]

    registry.clear()

    assert registry.list_actions() == []


def test_global_registry_is_shared(make_action):
    """Test get_registry returns a single instance and the lookup helpers use it."""
    retriever = make_action("retrieve")
    indexer = make_action("index")
    get_registry().register_action(ActionType.RETRIEVER, "memory/simple", retriever)
    get_registry().register_action(ActionType.INDEXER, "memory/simple", indexer)

    assert get_registry() is get_registry()
    assert get_registry().allow_override is False
    assert lookup_retriever("memory/simple") is retriever
    assert lookup_indexer("memory/simple") is indexer


def test_global_registry_override_from_config(monkeypatch):
    """Test ACTION_REGISTRY_ALLOW_OVERRIDE configures the process-wide registry."""
    monkeypatch.setenv("ACTION_REGISTRY_ALLOW_OVERRIDE", "true")

    assert get_registry().allow_override is True
