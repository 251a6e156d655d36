"""The item list: an ordered, nestable collection of menu items."""

import logging
import weakref
from collections.abc import Iterable, Mapping
from typing import Any

from menu.deep_merge import deep_merge
from menu.errors import ConfigurationError, InvalidArgumentError, StructuralError
from menu.html_element import html_element, is_tag_name
from menu.item import Item, ItemKind
from menu.render_options import (
    RenderOptions,
    nest_option,
    option_path,
    validate_option,
)

logger = logging.getLogger(__name__)


class ItemList:
    """An ordered list of menu items with its own render options.

    Builder methods return the list itself so calls can be chained:

        ItemList("main").add("/", "Home").add("/about", "About")
    """

    def __init__(
        self,
        name: str | None = None,
        list_attributes: Mapping[str, Any] | None = None,
        list_element: str | None = None,
    ) -> None:
        """Initialize an empty list with optional list-level options."""
        self.name = name
        self.items: list[Item] = []
        self.prefix: str | None = None
        self.prefix_parents = False
        self.prefix_root = False
        self.options: dict[str, Any] = {}
        self._parent_item: weakref.ref[Item] | None = None
        if list_attributes is not None:
            _require_mapping("list_attributes", list_attributes)
            self.set_option("list_attributes", list_attributes)
        if list_element is not None:
            _require_element("list_element", list_element)
            self.set_option("list_element", list_element)

    @property
    def parent_item(self) -> Item | None:
        """Return the item owning this list, if any."""
        if self._parent_item is None:
            return None
        return self._parent_item()

    @parent_item.setter
    def parent_item(self, item: Item | None) -> None:
        self._parent_item = None if item is None else weakref.ref(item)

    # -----------------------------
    # Building
    # -----------------------------

    def add(
        self,
        url: str,
        title: str,
        children: "ItemList | None" = None,
        link_attributes: Mapping[str, Any] | None = None,
        item_attributes: Mapping[str, Any] | None = None,
        item_element: str | None = None,
    ) -> "ItemList":
        """Append a link item.

        Options left as None are inherited from the list when rendering.
        """
        _require_text("url", url)
        _require_text("title", title)
        options = _item_options(item_attributes, item_element)
        if link_attributes is not None:
            _require_mapping("link_attributes", link_attributes)
            options["link_attributes"] = dict(link_attributes)

        item = Item(self, ItemKind.LINK, title, children, options, url)
        self._append(item, children)
        return self

    def raw(
        self,
        html: str,
        children: "ItemList | None" = None,
        item_attributes: Mapping[str, Any] | None = None,
        item_element: str | None = None,
    ) -> "ItemList":
        """Append a raw markup item; the fragment is rendered verbatim."""
        _require_text("html", html)
        options = _item_options(item_attributes, item_element)

        item = Item(self, ItemKind.RAW, html, children, options)
        self._append(item, children)
        return self

    def attach(self, other: "ItemList") -> "ItemList":
        """Move every item of other into this list, leaving other empty."""
        if not isinstance(other, ItemList):
            msg = f"Can only attach an ItemList, got {type(other).__name__}"
            raise InvalidArgumentError(msg)
        if other is self:
            msg = "Cannot attach an item list to itself"
            raise StructuralError(msg)

        ancestors = {id(item) for item in self._ancestor_items()}
        for item in other.items:
            if id(item) in ancestors:
                msg = f"Cannot move item {item.content!r} into its own subtree"
                raise StructuralError(msg)

        moved, other.items = other.items, []
        for item in moved:
            item.owner = self
            self.items.append(item)
        logger.debug("Attached %d items to list %r", len(moved), self.name)
        return self

    def set_prefix(self, prefix: str) -> "ItemList":
        """Prefix the links of this list with a custom string."""
        self.prefix = prefix
        return self

    def prefix_from_parents(self) -> "ItemList":
        """Prefix the links of this list with the URL of the parent item(s)."""
        self.prefix_parents = True
        return self

    def prefix_from_root(self) -> "ItemList":
        """Prefix the links of this list with the name of the root list."""
        self.prefix_root = True
        return self

    def set_name(self, name: str) -> "ItemList":
        """Set the name used by find and the registry."""
        self.name = name
        return self

    def set_option(self, key: str, value: Any) -> "ItemList":
        """Set a list-level render option.

        Dotted keys are accepted, e.g. ``item.element`` or
        ``list.attributes.class``.
        """
        path = option_path(key)
        if path[0] in ("current_depth", "render_depth"):
            msg = f"Option '{path[0]}' is managed by render"
            raise ConfigurationError(msg)
        candidate = deep_merge(self.options, nest_option(path, value))
        validate_option(path[0], candidate[path[0]])
        self.options = candidate
        return self

    def get_option(self, key: str | None = None) -> Any:
        """Return a list-level option with defaults applied (all when no key)."""
        resolved = RenderOptions.resolve(self.options).as_dict()
        if key is None:
            return resolved
        value: Any = resolved
        for part in option_path(key):
            if not isinstance(value, Mapping):
                return None
            value = value.get(part)
        return value

    # -----------------------------
    # Traversal
    # -----------------------------

    def root(self) -> "ItemList":
        """Return the topmost ancestor list (self for a root list)."""
        current = self
        seen = {id(self)}
        while current.parent_item is not None:
            current = current.parent_item.owner
            if id(current) in seen:
                msg = f"Cycle detected above list {self.name!r}"
                raise StructuralError(msg)
            seen.add(id(current))
        return current

    def find(self, names: str | Iterable[str]) -> list["ItemList"]:
        """Find lists by name: this list and any descendant list, depth first."""
        if isinstance(names, str):
            names = [names]
        try:
            return self._find(list(names), frozenset())
        except RecursionError as exc:
            msg = f"List {self.name!r} is nested too deeply to search"
            raise StructuralError(msg) from exc

    def _find(self, names: list[str], seen: frozenset[int]) -> list["ItemList"]:
        seen = self._enter(seen)
        results: list[ItemList] = []
        for name in names:
            if self.name == name:
                results.append(self)
            for item in self.items:
                if item.has_children():
                    results.extend(item.children._find([name], seen))
        return results

    # -----------------------------
    # Rendering
    # -----------------------------

    def render(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        defaults: Mapping[str, Any] | None = None,
    ) -> str:
        """Render the list and its descendants to HTML.

        ``defaults`` is the lowest layer (e.g. global configuration); the
        list's own options go over it and ``options`` goes over everything.
        """
        if options is not None and not isinstance(options, Mapping):
            msg = f"Render options must be a mapping, got {type(options).__name__}"
            raise ConfigurationError(msg)
        try:
            return self._render(options or {}, defaults or {}, frozenset())
        except RecursionError as exc:
            msg = f"List {self.name!r} is nested too deeply to render"
            raise StructuralError(msg) from exc

    def to_string(self) -> str:
        """Render with the list's own configuration only."""
        return self.render()

    def _render(
        self,
        options: Mapping[str, Any],
        inherited: Mapping[str, Any],
        seen: frozenset[int],
    ) -> str:
        seen = self._enter(seen)
        overrides = _advance_depth(options)
        base = deep_merge(inherited, self.options)
        opts = RenderOptions.resolve(base, overrides)

        if opts.max_depth and opts.current_depth > opts.max_depth:
            return ""

        contents = "".join(
            item.render(overrides, base=base, seen=seen) for item in self.items
        )
        indent = opts.indent * (2 * (opts.render_depth - 1))
        return (
            indent
            + html_element(
                opts.list_element,
                opts.line_break + contents + indent,
                opts.list_attributes,
            )
            + opts.line_break
        )

    # -----------------------------
    # Internals
    # -----------------------------

    def _append(self, item: Item, children: "ItemList | None") -> None:
        """Link children to item and append item, keeping both sides consistent."""
        if children is not None:
            if not isinstance(children, ItemList):
                msg = f"children must be an ItemList, got {type(children).__name__}"
                raise InvalidArgumentError(msg)
            if children is self or any(
                children is a.owner for a in self._ancestor_items()
            ):
                msg = f"List {children.name!r} cannot be nested inside itself"
                raise StructuralError(msg)
            if children.parent_item is not None:
                msg = f"List {children.name!r} already belongs to another item"
                raise StructuralError(msg)
            children.parent_item = item
        self.items.append(item)

    def _ancestor_items(self) -> list[Item]:
        """Return the items above this list, nearest first."""
        ancestors: list[Item] = []
        seen: set[int] = set()
        parent = self.parent_item
        while parent is not None:
            if id(parent) in seen:
                msg = f"Cycle detected above list {self.name!r}"
                raise StructuralError(msg)
            seen.add(id(parent))
            ancestors.append(parent)
            parent = parent.owner.parent_item
        return ancestors

    def _enter(self, seen: frozenset[int]) -> frozenset[int]:
        if id(self) in seen:
            msg = f"Cycle detected at list {self.name!r}"
            raise StructuralError(msg)
        return seen | {id(self)}


def _advance_depth(options: Mapping[str, Any]) -> dict[str, Any]:
    """Start the depth counters at 1, or move them one level down."""
    overrides = dict(options)
    current = overrides.get("current_depth")
    if current is None:
        overrides["current_depth"] = overrides["render_depth"] = 1
        return overrides
    validate_option("current_depth", current)
    render_depth = overrides.get("render_depth")
    if render_depth is None:
        render_depth = current
    validate_option("render_depth", render_depth)
    overrides["current_depth"] = current + 1
    overrides["render_depth"] = render_depth + 1
    return overrides


def _require_text(field: str, value: Any) -> None:
    if not isinstance(value, str):
        msg = f"'{field}' must be a string, got {type(value).__name__}"
        raise InvalidArgumentError(msg)


def _require_mapping(field: str, value: Any) -> None:
    if not isinstance(value, Mapping):
        msg = f"'{field}' must be a mapping, got {type(value).__name__}"
        raise InvalidArgumentError(msg)


def _require_element(field: str, value: Any) -> None:
    if not is_tag_name(value):
        msg = f"'{field}' must be an element name, got {value!r}"
        raise InvalidArgumentError(msg)


def _item_options(
    item_attributes: Mapping[str, Any] | None, item_element: str | None
) -> dict[str, Any]:
    """Collect the per-item options that were explicitly given."""
    options: dict[str, Any] = {}
    if item_attributes is not None:
        _require_mapping("item_attributes", item_attributes)
        options["item_attributes"] = dict(item_attributes)
    if item_element is not None:
        _require_element("item_element", item_element)
        options["item_element"] = item_element
    return options
