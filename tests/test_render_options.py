"""Tests for option merging, validation and dotted option keys."""

import pytest

from menu.deep_merge import deep_merge
from menu.errors import ConfigurationError
from menu.render_options import RenderOptions, nest_option, option_path


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_does_not_mutate() -> None:
    """Verify that neither input is modified."""
    base = {"nested": {"x": 1}}
    update = {"nested": {"y": 2}, "new": {"z": 3}}
    merged = deep_merge(base, update)
    merged["new"]["z"] = 4
    assert base == {"nested": {"x": 1}}
    assert update == {"nested": {"y": 2}, "new": {"z": 3}}


def test_resolve_defaults() -> None:
    """Verify the default value of every option."""
    opts = RenderOptions.resolve()
    assert opts.list_element == "ul"
    assert opts.item_element == "li"
    assert opts.list_attributes == {}
    assert opts.max_depth == 0
    assert opts.current_depth is None
    assert opts.indent == "\t"
    assert opts.line_break == "\n"


def test_resolve_layers() -> None:
    """Verify that later layers win and attribute maps merge."""
    opts = RenderOptions.resolve(
        {"list_element": "ol", "list_attributes": {"class": "a", "id": "m"}},
        None,
        {"list_attributes": {"class": "b"}, "max_depth": 3},
    )
    assert opts.list_element == "ol"
    assert opts.list_attributes == {"class": "b", "id": "m"}
    assert opts.max_depth == 3


def test_resolve_rejects_bad_values() -> None:
    """Verify validation of option shapes."""
    with pytest.raises(ConfigurationError):
        RenderOptions.resolve({"max_depth": -1})
    with pytest.raises(ConfigurationError):
        RenderOptions.resolve({"max_depth": 1.5})
    with pytest.raises(ConfigurationError):
        RenderOptions.resolve({"item_element": ""})
    with pytest.raises(ConfigurationError):
        RenderOptions.resolve({"indent": 2})
    with pytest.raises(ConfigurationError):
        RenderOptions.resolve({"wrapElement": "ul"})


def test_option_path() -> None:
    """Verify dotted aliases and nested attribute keys."""
    assert option_path("max_depth") == ["max_depth"]
    assert option_path("item.element") == ["item_element"]
    assert option_path("link.attributes.class") == ["link_attributes", "class"]
    assert option_path("item_attributes.data-id") == ["item_attributes", "data-id"]
    with pytest.raises(ConfigurationError):
        option_path("item.colour")


def test_nest_option() -> None:
    """Verify building a nested dictionary from a path."""
    assert nest_option(["a", "b"], 1) == {"a": {"b": 1}}
    assert nest_option(["a"], 1) == {"a": 1}
