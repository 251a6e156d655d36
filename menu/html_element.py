"""Utility for emitting HTML elements."""

import html
import re
from collections.abc import Mapping
from typing import Any

from menu.errors import ConfigurationError

_TAG_NAME = re.compile(r"[A-Za-z][A-Za-z0-9-]*")


def is_tag_name(tag: object) -> bool:
    """Return True if tag is a valid element name."""
    return isinstance(tag, str) and bool(_TAG_NAME.fullmatch(tag))


def html_attributes(attributes: Mapping[str, Any] | None) -> str:
    """Render an attribute mapping as ` key="value"` pairs, in insertion order."""
    if not attributes:
        return ""
    if not isinstance(attributes, Mapping):
        msg = f"Attributes must be a mapping, got {type(attributes).__name__}"
        raise ConfigurationError(msg)
    out: list[str] = []
    for key, value in attributes.items():
        if value is None or value is False:
            continue
        name = html.escape(str(key))
        if value is True:
            out.append(f" {name}")
        else:
            out.append(f' {name}="{html.escape(str(value))}"')
    return "".join(out)


def html_element(
    tag: str, content: str = "", attributes: Mapping[str, Any] | None = None
) -> str:
    """Wrap content in an element. Content is inserted verbatim."""
    if not is_tag_name(tag):
        msg = f"Invalid element name: {tag!r}"
        raise ConfigurationError(msg)
    return f"<{tag}{html_attributes(attributes)}>{content}</{tag}>"


def html_link(
    url: str, title: str, attributes: Mapping[str, Any] | None = None
) -> str:
    """Render an anchor; the title is escaped, href goes first."""
    attrs: dict[str, Any] = {"href": url}
    attrs.update(attributes or {})
    return html_element("a", html.escape(title, quote=False), attrs)
