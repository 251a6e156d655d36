"""Logic for loading and merging menu configuration files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from menu.deep_merge import deep_merge
from menu.errors import ConfigurationError
from menu.render_options import RenderOptions

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "max_depth": 0,
    "list_element": "ul",
    "list_attributes": {},
    "item_element": "li",
    "item_attributes": {},
    "link_attributes": {},
    "indent": "\t",
    "line_break": "\n",
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = deep_merge({}, DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Config file {p} must contain a mapping"
                raise ConfigurationError(msg)
            config = deep_merge(config, user_config)
        else:
            logger.debug("Config file %s not found, using defaults", p)
    return config


def render_defaults(config: dict[str, Any]) -> dict[str, Any]:
    """Return the render options held in a configuration dictionary."""
    keys = set(RenderOptions.keys()) - {"current_depth", "render_depth"}
    return {key: value for key, value in config.items() if key in keys}
