"""Registry of named item lists and the handler facade over them."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from menu.build_item_list import build_item_list
from menu.errors import InvalidArgumentError
from menu.item_list import ItemList
from menu.load_config import load_config, render_defaults

logger = logging.getLogger(__name__)


class MenuRegistry:
    """Keeps named item lists and the global default render options."""

    def __init__(self, config: dict[str, Any] | None = None) -> None:
        """Initialize with a configuration dict (defaults when omitted)."""
        self.config = config if config is not None else load_config()
        self.item_lists: dict[str, ItemList] = {}

    def handler(self, names: str | Iterable[str] = "main") -> "MenuHandler":
        """Return a handler for the named lists, creating missing ones."""
        handles = _as_names(names)
        for name in handles:
            if name not in self.item_lists:
                logger.debug("Creating item list %r", name)
                self.item_lists[name] = ItemList(name)
        return MenuHandler(self, handles)

    def all_handlers(self) -> "MenuHandler":
        """Return a handler over every registered list."""
        return MenuHandler(self, list(self.item_lists))

    def reset(self) -> None:
        """Forget every registered list."""
        logger.debug("Resetting %d item lists", len(self.item_lists))
        self.item_lists = {}

    def items(
        self,
        name: str | None = None,
        list_attributes: Mapping[str, Any] | None = None,
        list_element: str | None = None,
    ) -> ItemList:
        """Create a new, unregistered item list."""
        return ItemList(name, list_attributes, list_element)

    def set_item_list(self, name: str, item_list: ItemList) -> None:
        """Register item_list under name."""
        if not isinstance(item_list, ItemList):
            msg = f"Expected an ItemList, got {type(item_list).__name__}"
            raise InvalidArgumentError(msg)
        self.item_lists[name] = item_list

    def get_item_list(
        self, name: str | None = None
    ) -> ItemList | dict[str, ItemList] | None:
        """Return the named list, or all lists when no name is given."""
        if name is None:
            return dict(self.item_lists)
        return self.item_lists.get(name)

    def get_option(self, key: str | None = None) -> Any:
        """Return a configuration value, or the whole configuration."""
        if key is None:
            return self.config
        return self.config.get(key)

    def render_defaults(self) -> dict[str, Any]:
        """Return the render options the configuration provides."""
        return render_defaults(self.config)

    def load_definitions(self, definitions: Mapping[str, Any]) -> list[str]:
        """Build and register one list per top-level key of definitions."""
        if not isinstance(definitions, Mapping):
            msg = "Menu definitions must map handler names to menus"
            raise InvalidArgumentError(msg)
        for name, definition in definitions.items():
            self.item_lists[name] = build_item_list(definition, name=name)
            logger.debug("Loaded menu %r", name)
        return list(definitions)


class MenuHandler:
    """Applies builder calls to one or more registered lists and renders them."""

    def __init__(self, registry: MenuRegistry, handles: list[str]) -> None:
        """Initialize the handler over the given list names."""
        self.registry = registry
        self.handles = handles

    def get_handles(self) -> list[str]:
        """Return the names of the handled lists."""
        return list(self.handles)

    def get_item_lists(self) -> list[ItemList]:
        """Return the handled lists that are still registered."""
        lists = self.registry.item_lists
        return [lists[name] for name in self.handles if name in lists]

    def add(
        self,
        url: str,
        title: str,
        children: ItemList | None = None,
        **kwargs: Any,
    ) -> "MenuHandler":
        """Add a link item to every handled list."""
        lists = self._lists_for(children)
        for item_list in lists:
            item_list.add(url, title, children, **kwargs)
        return self

    def raw(
        self, html: str, children: ItemList | None = None, **kwargs: Any
    ) -> "MenuHandler":
        """Add a raw item to every handled list."""
        lists = self._lists_for(children)
        for item_list in lists:
            item_list.raw(html, children, **kwargs)
        return self

    def _lists_for(self, children: ItemList | None) -> list[ItemList]:
        """Return the target lists; a child list can only be given to one of them."""
        lists = self.get_item_lists()
        if children is not None and len(lists) > 1:
            msg = (
                "Cannot add one child list to several menus "
                f"({', '.join(self.handles)}); add it per handler"
            )
            raise InvalidArgumentError(msg)
        return lists

    def attach(self, other: ItemList) -> "MenuHandler":
        """Move the items of other into the first handled list."""
        lists = self.get_item_lists()
        if lists:
            lists[0].attach(other)
        return self

    def set_prefix(self, prefix: str) -> "MenuHandler":
        for item_list in self.get_item_lists():
            item_list.set_prefix(prefix)
        return self

    def prefix_from_parents(self) -> "MenuHandler":
        for item_list in self.get_item_lists():
            item_list.prefix_from_parents()
        return self

    def prefix_from_root(self) -> "MenuHandler":
        for item_list in self.get_item_lists():
            item_list.prefix_from_root()
        return self

    def set_option(self, key: str, value: Any) -> "MenuHandler":
        for item_list in self.get_item_lists():
            item_list.set_option(key, value)
        return self

    def find(self, names: str | Iterable[str]) -> list[ItemList]:
        """Find lists by name in every handled tree."""
        results: list[ItemList] = []
        for item_list in self.get_item_lists():
            results.extend(item_list.find(names))
        return results

    def render(self, options: Mapping[str, Any] | None = None) -> str:
        """Render every handled list over the registry's default options."""
        defaults = self.registry.render_defaults()
        return "".join(
            item_list.render(options, defaults=defaults)
            for item_list in self.get_item_lists()
        )


def _as_names(names: str | Iterable[str]) -> list[str]:
    if isinstance(names, str):
        return [names]
    return list(names)
