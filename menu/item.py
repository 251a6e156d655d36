"""A single menu entry: a link or a raw markup fragment."""

import weakref
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from menu.errors import StructuralError
from menu.html_element import html_element, html_link
from menu.join_url import join_url
from menu.render_options import RenderOptions

if TYPE_CHECKING:
    from menu.item_list import ItemList


class ItemKind(str, Enum):
    """The two kinds of menu entries."""

    LINK = "link"
    RAW = "raw"


class Item:
    """A menu entry owned by an ItemList, optionally owning a child list.

    Items are created through ItemList.add and ItemList.raw. The owner is held
    through a weak reference; only ItemList.attach reassigns it.
    """

    def __init__(
        self,
        owner: "ItemList",
        kind: ItemKind,
        content: str,
        children: "ItemList | None" = None,
        options: dict[str, Any] | None = None,
        url: str | None = None,
    ) -> None:
        """Initialize the item; the caller links children back to it."""
        self._owner = weakref.ref(owner)
        self.kind = kind
        self.content = content
        self.children = children
        self.options = options or {}
        self.url = url

    @property
    def owner(self) -> "ItemList":
        """Return the list containing this item."""
        owner = self._owner()
        if owner is None:
            msg = f"Owner of item {self.content!r} no longer exists"
            raise StructuralError(msg)
        return owner

    @owner.setter
    def owner(self, item_list: "ItemList") -> None:
        self._owner = weakref.ref(item_list)

    def is_link(self) -> bool:
        """Return True for link items."""
        return self.kind is ItemKind.LINK

    def has_children(self) -> bool:
        """Return True if a non-empty child list is present."""
        return self.children is not None and bool(self.children.items)

    def get_url(self, _seen: frozenset[int] = frozenset()) -> str | None:
        """Return the URL with the owner's prefixes applied (None for raw items)."""
        if not self.is_link() or self.url is None:
            return None
        if id(self) in _seen:
            msg = f"Cycle detected while resolving the URL of {self.content!r}"
            raise StructuralError(msg)
        seen = _seen | {id(self)}

        owner = self.owner
        parent = owner.parent_item
        segments: list[str] = []
        if owner.prefix_parents and parent is not None and parent.is_link():
            try:
                parent_url = parent.get_url(seen)
            except RecursionError as exc:
                msg = f"Item {self.content!r} is nested too deeply to resolve its URL"
                raise StructuralError(msg) from exc
            if parent_url:
                segments.append(parent_url)
        elif owner.prefix_root:
            root = owner.root()
            if root.name:
                segments.append(root.name)
        if owner.prefix:
            segments.append(owner.prefix)
        segments.append(self.url)
        return join_url(segments)

    def render(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        base: Mapping[str, Any] | None = None,
        seen: frozenset[int] = frozenset(),
    ) -> str:
        """Render the item and its children.

        ``base`` holds the list-level options inherited from the owner and its
        ancestors; per-item options go over it and ``options`` (render-time
        overrides, including the depth counters) go over both.
        """
        overrides = dict(options or {})
        if overrides.get("current_depth") is None:
            overrides["current_depth"] = overrides["render_depth"] = 1
        opts = RenderOptions.resolve(base, self.options, overrides)
        depth = opts.render_depth or 1
        indent = opts.indent * (2 * depth - 1)

        if self.is_link():
            url = self.get_url() or ""
            content = html_link(url, self.content, opts.link_attributes)
        else:
            content = self.content

        if self.has_children():
            children = self.children._render(overrides, base or {}, seen)
            if children:
                content += opts.line_break + children + indent

        return (
            indent
            + html_element(opts.item_element, content, opts.item_attributes)
            + opts.line_break
        )
