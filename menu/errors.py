"""Error types raised while building and rendering menus."""


class MenuError(Exception):
    """Base class for all menu errors."""


class ConfigurationError(MenuError, ValueError):
    """A render option has the wrong shape."""


class StructuralError(MenuError, RuntimeError):
    """The item/list graph is not a tree (cycle, self-attach, double parent)."""


class InvalidArgumentError(MenuError, ValueError):
    """A required field is missing or has the wrong type."""
