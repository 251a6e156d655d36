"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest
import yaml

from menu.errors import ConfigurationError
from menu.load_config import DEFAULT_CONFIG, load_config, render_defaults


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config["max_depth"] == 0
    assert config["list_element"] == "ul"


def test_load_config_returns_copy() -> None:
    """Verify that changing a loaded config leaves the defaults alone."""
    config = load_config()
    config["list_attributes"]["class"] = "nav"
    assert DEFAULT_CONFIG["list_attributes"] == {}


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "menu.yml"
    config_data = {"max_depth": 2, "list_attributes": {"class": "nav"}}
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["max_depth"] == 2
    assert loaded["list_attributes"] == {"class": "nav"}
    assert loaded["item_element"] == "li"  # Default


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing file falls back to the defaults."""
    assert load_config(tmp_path / "absent.yml") == DEFAULT_CONFIG


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    """Verify that a config file must hold a mapping."""
    config_file = tmp_path / "menu.yml"
    config_file.write_text("- a\n- b\n")
    with pytest.raises(ConfigurationError):
        load_config(config_file)


def test_render_defaults() -> None:
    """Verify that only render option keys are extracted."""
    config = {**DEFAULT_CONFIG, "menus": {}, "current_depth": 3}
    defaults = render_defaults(config)
    assert "menus" not in defaults
    assert "current_depth" not in defaults
    assert defaults["max_depth"] == 0
