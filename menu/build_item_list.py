"""Logic for building item lists from menu definitions (e.g. parsed YAML)."""

from collections.abc import Mapping
from typing import Any

from menu.errors import InvalidArgumentError
from menu.item_list import ItemList

_LIST_KEYS = {"name", "prefix", "prefix_parents", "prefix_root", "options", "items"}
_ITEM_KEYS = {
    "url",
    "title",
    "raw",
    "children",
    "link_attributes",
    "item_attributes",
    "item_element",
}


def build_item_list(definition: Any, name: str | None = None) -> ItemList:
    """Build an ItemList from a definition mapping or a bare list of items.

    Example definition::

        name: main
        prefix: shop
        options: {list_attributes: {class: nav}}
        items:
          - {url: /, title: Home}
          - raw: <hr>
          - url: products
            title: Products
            children: {prefix_parents: true, items: [{url: shoes, title: Shoes}]}
    """
    if isinstance(definition, list):
        definition = {"items": definition}
    if not isinstance(definition, Mapping):
        msg = f"Menu definition must be a mapping or a list, got {definition!r}"
        raise InvalidArgumentError(msg)
    unknown = set(definition) - _LIST_KEYS
    if unknown:
        msg = f"Unknown keys in menu definition: {', '.join(sorted(unknown))}"
        raise InvalidArgumentError(msg)

    item_list = ItemList(definition.get("name", name))
    if definition.get("prefix") is not None:
        item_list.set_prefix(str(definition["prefix"]))
    if definition.get("prefix_parents"):
        item_list.prefix_from_parents()
    if definition.get("prefix_root"):
        item_list.prefix_from_root()
    options = definition.get("options") or {}
    if not isinstance(options, Mapping):
        msg = f"'options' must be a mapping, got {type(options).__name__}"
        raise InvalidArgumentError(msg)
    for key, value in options.items():
        item_list.set_option(key, value)

    entries = definition.get("items") or []
    if not isinstance(entries, list):
        msg = f"'items' must be a list, got {type(entries).__name__}"
        raise InvalidArgumentError(msg)
    for entry in entries:
        _add_entry(item_list, entry)
    return item_list


def _add_entry(item_list: ItemList, entry: Any) -> None:
    """Append one item definition to item_list."""
    if not isinstance(entry, Mapping):
        msg = f"Menu item must be a mapping, got {entry!r}"
        raise InvalidArgumentError(msg)
    unknown = set(entry) - _ITEM_KEYS
    if unknown:
        msg = f"Unknown keys in menu item: {', '.join(sorted(unknown))}"
        raise InvalidArgumentError(msg)

    children = None
    if entry.get("children") is not None:
        children = build_item_list(entry["children"])

    if "raw" in entry:
        if "url" in entry or "title" in entry:
            msg = "A menu item is either raw or a link, not both"
            raise InvalidArgumentError(msg)
        item_list.raw(
            _scalar_text(entry["raw"]),
            children,
            item_attributes=entry.get("item_attributes"),
            item_element=entry.get("item_element"),
        )
        return

    if "url" not in entry or "title" not in entry:
        msg = f"A link item needs both 'url' and 'title': {dict(entry)!r}"
        raise InvalidArgumentError(msg)
    item_list.add(
        _scalar_text(entry["url"]),
        _scalar_text(entry["title"]),
        children,
        link_attributes=entry.get("link_attributes"),
        item_attributes=entry.get("item_attributes"),
        item_element=entry.get("item_element"),
    )


def _scalar_text(value: Any) -> Any:
    """Return YAML scalars such as ``404`` or ``2024`` as text.

    None, mappings and lists pass through so ItemList rejects them.
    """
    if value is None or isinstance(value, (Mapping, list)):
        return value
    return str(value)
