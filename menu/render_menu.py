"""Render menus described in a YAML definitions file to HTML."""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from menu.errors import MenuError
from menu.load_config import load_config
from menu.menu_registry import MenuRegistry

logger = logging.getLogger(__name__)


def render_menus(args: argparse.Namespace) -> str:
    """Load the definitions and config named by args and render the menus."""
    if not args.definitions.exists():
        msg = f"Menu definitions not found: {args.definitions}"
        raise SystemExit(msg)

    config = load_config(args.config)
    if args.max_depth is not None:
        config["max_depth"] = args.max_depth
    if args.compact:
        config["indent"] = ""
        config["line_break"] = ""

    registry = MenuRegistry(config)
    definitions = yaml.safe_load(args.definitions.read_text(encoding="utf-8")) or {}
    loaded = registry.load_definitions(definitions)
    logger.info("Loaded %d menus from %s", len(loaded), args.definitions)

    if args.handler:
        unknown = [name for name in args.handler if name not in loaded]
        if unknown:
            msg = (
                f"Unknown menu(s): {', '.join(unknown)} "
                f"(defined: {', '.join(loaded) or 'none'})"
            )
            raise SystemExit(msg)
        handler = registry.handler(args.handler)
    else:
        handler = registry.all_handlers()
    return handler.render()


def main(argv: list[str] | None = None) -> int:
    """Run the renderer."""
    ap = argparse.ArgumentParser(
        description="Render menu definitions (YAML) to nested HTML lists.",
    )
    ap.add_argument(
        "definitions",
        type=Path,
        help="YAML file mapping handler names to menu definitions",
    )
    ap.add_argument(
        "--handler",
        action="append",
        help="Render only this handler (repeatable; default: all)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file with default render options",
    )
    ap.add_argument(
        "--max-depth",
        type=int,
        help="Deepest level to render (0 means unlimited)",
    )
    ap.add_argument(
        "--compact",
        action="store_true",
        help="Render without indentation or line breaks",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        output = render_menus(args)
    except (MenuError, yaml.YAMLError) as exc:
        msg = f"Error: {exc}"
        raise SystemExit(msg) from exc

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
