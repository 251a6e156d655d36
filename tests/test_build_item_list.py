"""Tests for building item lists from definitions."""

import pytest
import yaml

from menu.build_item_list import build_item_list
from menu.errors import ConfigurationError, InvalidArgumentError
from menu.menu_registry import MenuRegistry

COMPACT = {"indent": "", "line_break": ""}

DEFINITION = """
name: main
options:
  list_attributes: {class: nav}
items:
  - url: /
    title: Home
  - raw: <hr>
  - url: /products
    title: Products
    item_attributes: {class: has-children}
    children:
      name: products
      prefix_parents: true
      items:
        - url: shoes
          title: Shoes
          link_attributes: {rel: nofollow}
"""


def test_build_from_yaml() -> None:
    """Verify a full definition renders as expected."""
    item_list = build_item_list(yaml.safe_load(DEFINITION))
    assert item_list.name == "main"
    assert item_list.render({**COMPACT, "list_attributes": {"class": None}}) == (
        '<ul><li><a href="/">Home</a></li><li><hr></li>'
        '<li class="has-children"><a href="/products">Products</a>'
        '<ul><li><a href="/products/shoes" rel="nofollow">Shoes</a></li></ul>'
        "</li></ul>"
    )
    assert [found.name for found in item_list.find("products")] == ["products"]


def test_build_from_bare_list() -> None:
    """Verify that a bare list is taken as the items."""
    item_list = build_item_list([{"url": "#", "title": "foo"}], name="footer")
    assert item_list.name == "footer"
    assert item_list.render(COMPACT) == '<ul><li><a href="#">foo</a></li></ul>'


def test_build_prefix_and_root_flags() -> None:
    """Verify the prefix keys of a definition."""
    item_list = build_item_list(
        {
            "name": "admin",
            "items": [
                {
                    "url": "users",
                    "title": "Users",
                    "children": {
                        "prefix_root": True,
                        "prefix": "v2",
                        "items": [{"url": "new", "title": "New"}],
                    },
                }
            ],
        }
    )
    child = item_list.items[0].children
    assert child is not None
    assert child.items[0].get_url() == "admin/v2/new"


def test_build_coerces_scalars() -> None:
    """Verify that numeric YAML values become text."""
    item_list = build_item_list(
        yaml.safe_load("[{url: 404, title: 2024}, {raw: 3.5}, {url: /, title: true}]")
    )
    assert item_list.render(COMPACT) == (
        '<ul><li><a href="404">2024</a></li><li>3.5</li>'
        '<li><a href="/">True</a></li></ul>'
    )


@pytest.mark.parametrize(
    "definition",
    [
        "main",
        {"items": "nope"},
        {"colour": "red"},
        {"items": [{"title": "no url"}]},
        {"items": [{"url": "#", "title": "t", "raw": "<hr>"}]},
        {"items": [{"url": "#", "title": "t", "extra": 1}]},
        {"items": ["plain"]},
        {"items": [{"url": "#", "title": None}]},
        {"items": [{"url": "#", "title": ["a"]}]},
        {"options": ["list_element"]},
    ],
)
def test_build_rejects_malformed(definition: object) -> None:
    """Verify that malformed definitions raise InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError):
        build_item_list(definition)


def test_build_rejects_bad_options() -> None:
    """Verify that unknown list options raise ConfigurationError."""
    with pytest.raises(ConfigurationError):
        build_item_list({"options": {"colour": "red"}})


def test_registry_load_definitions() -> None:
    """Verify that definitions register one list per name."""
    registry = MenuRegistry()
    names = registry.load_definitions(
        {"main": [{"url": "/", "title": "Home"}], "footer": [{"raw": "(c)"}]}
    )
    assert names == ["main", "footer"]
    assert registry.get_item_list("footer").name == "footer"
    with pytest.raises(InvalidArgumentError):
        registry.load_definitions(["main"])  # type: ignore[arg-type]
