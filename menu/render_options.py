"""Typed render options and their layered resolution."""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from menu.deep_merge import deep_merge
from menu.errors import ConfigurationError
from menu.html_element import is_tag_name

ELEMENT_KEYS = ("list_element", "item_element")
ATTRIBUTE_KEYS = ("list_attributes", "item_attributes", "link_attributes")
DEPTH_KEYS = ("max_depth", "current_depth", "render_depth")
TEXT_KEYS = ("indent", "line_break")

# Dotted spellings accepted by set_option/get_option.
OPTION_ALIASES = {
    "list.element": "list_element",
    "list.attributes": "list_attributes",
    "item.element": "item_element",
    "item.attributes": "item_attributes",
    "link.attributes": "link_attributes",
    "max.depth": "max_depth",
}


@dataclass(frozen=True)
class RenderOptions:
    """Fully resolved options for one list or item render."""

    list_element: str = "ul"
    list_attributes: dict[str, Any] = field(default_factory=dict)
    item_element: str = "li"
    item_attributes: dict[str, Any] = field(default_factory=dict)
    link_attributes: dict[str, Any] = field(default_factory=dict)
    max_depth: int = 0
    current_depth: int | None = None
    render_depth: int | None = None
    indent: str = "\t"
    line_break: str = "\n"

    @classmethod
    def keys(cls) -> tuple[str, ...]:
        """Return the recognized option names."""
        return tuple(f.name for f in fields(cls))

    @classmethod
    def resolve(cls, *layers: Mapping[str, Any] | None) -> "RenderOptions":
        """Deep merge the layers (lowest first) and validate the result."""
        merged: dict[str, Any] = {}
        for layer in layers:
            if layer:
                merged = deep_merge(merged, layer)
        for key, value in merged.items():
            validate_option(key, value)
        return cls(**merged)

    def as_dict(self) -> dict[str, Any]:
        """Return the options as a plain dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


def validate_option(key: str, value: Any) -> None:
    """Raise ConfigurationError unless value fits the option named key."""
    if key in ELEMENT_KEYS:
        if not is_tag_name(value):
            msg = f"Option '{key}' must be an element name, got {value!r}"
            raise ConfigurationError(msg)
    elif key in ATTRIBUTE_KEYS:
        if not isinstance(value, Mapping):
            msg = f"Option '{key}' must be a mapping, got {type(value).__name__}"
            raise ConfigurationError(msg)
    elif key in DEPTH_KEYS:
        if key != "max_depth" and value is None:
            return
        # bool is an int subclass but never a valid depth
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            msg = f"Option '{key}' must be a non-negative integer, got {value!r}"
            raise ConfigurationError(msg)
    elif key in TEXT_KEYS:
        if not isinstance(value, str):
            msg = f"Option '{key}' must be a string, got {value!r}"
            raise ConfigurationError(msg)
    else:
        msg = f"Unknown render option: '{key}'"
        raise ConfigurationError(msg)


def option_path(key: str) -> list[str]:
    """Split a possibly dotted option key into a path of dictionary keys.

    ``item.element`` -> ``["item_element"]``,
    ``list.attributes.class`` -> ``["list_attributes", "class"]``.
    """
    if key in RenderOptions.keys():
        return [key]
    for alias, name in OPTION_ALIASES.items():
        if key == alias:
            return [name]
        if key.startswith(alias + "."):
            return [name, *key[len(alias) + 1 :].split(".")]
    head, _, rest = key.partition(".")
    if head in ATTRIBUTE_KEYS and rest:
        return [head, *rest.split(".")]
    msg = f"Unknown render option: '{key}'"
    raise ConfigurationError(msg)


def nest_option(path: list[str], value: Any) -> dict[str, Any]:
    """Build a nested dictionary holding value at path."""
    nested: Any = value
    for part in reversed(path):
        nested = {part: nested}
    return nested
