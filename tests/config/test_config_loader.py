"""Tests for the YAML configuration loader."""

import pytest

from config import load_config, load_yaml, reload_config
from core.constants.exceptions import ConfigurationException


def test_default_app_config():
    """Test shipped defaults."""
    config = load_config("app")

    assert config.registry.allow_override is False
    assert config.actions.trace is True
    assert config.get("actions.trace_level") == "debug"
    assert config.get("actions.missing", "fallback") == "fallback"


def test_env_vars_override_defaults(monkeypatch):
    """Test ${VAR:default} picks up the environment and converts types."""
    load_config("app")
    monkeypatch.setenv("ACTION_REGISTRY_ALLOW_OVERRIDE", "yes")
    monkeypatch.setenv("ACTION_TRACE_LEVEL", "info")

    config = reload_config("app")

    assert config.registry.allow_override is True
    assert config["actions"]["trace_level"] == "info"


def test_numbers_and_unset_vars(tmp_path, monkeypatch):
    """Test numeric conversion and untouched placeholders without defaults."""
    monkeypatch.setenv("RETRIEVAL_TOP_K", "5")
    monkeypatch.delenv("RETRIEVAL_UNSET", raising=False)
    path = tmp_path / "custom.yaml"
    path.write_text(
        "top_k: ${RETRIEVAL_TOP_K}\n"
        "ratio: ${RETRIEVAL_RATIO:0.5}\n"
        "zero: ${RETRIEVAL_ZERO:0}\n"
        "raw: ${RETRIEVAL_UNSET}\n"
        "items:\n  - ${RETRIEVAL_TOP_K}\n",
        encoding="utf-8",
    )

    data = load_yaml(path)

    assert data == {
        "top_k": 5,
        "ratio": 0.5,
        "zero": 0,
        "raw": "${RETRIEVAL_UNSET}",
        "items": [5],
    }


def test_config_dir_override(tmp_path, monkeypatch):
    """Test ACTION_CONFIG_DIR points the loader at another directory."""
    monkeypatch.setenv("ACTION_CONFIG_DIR", str(tmp_path))
    (tmp_path / "app.yaml").write_text("registry:\n  allow_override: true\n", encoding="utf-8")

    config = load_config("app")

    assert "registry" in config
    assert config.to_dict() == {"registry": {"allow_override": True}}


def test_missing_config_raises(tmp_path, monkeypatch):
    """Test a missing config file raises ConfigurationException."""
    monkeypatch.setenv("ACTION_CONFIG_DIR", str(tmp_path))

    with pytest.raises(ConfigurationException) as exc_info:
        load_config("absent")

    assert exc_info.value.config_key == "absent"
    assert len(exc_info.value.details["searched"]) == 3
