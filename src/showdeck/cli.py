"""Command-line entry point: present a deck in the terminal."""

import argparse
import logging
import sys

from .core.deck import load_show
from .core.theme import BUILTIN_THEMES, ShowSettings
from .core.viewer import TerminalViewer

DEFAULT_DECK = "showdeck.demo:build_show"

logger = logging.getLogger("ShowDeck.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="showdeck",
        description="Present a ShowDeck slide deck in the terminal.",
    )
    parser.add_argument(
        "deck", nargs="?", default=DEFAULT_DECK,
        help=f"Deck factory as 'module:function' (default: {DEFAULT_DECK})",
    )
    parser.add_argument("--theme", choices=sorted(BUILTIN_THEMES), default=None)
    parser.add_argument("--width", type=int, default=None, help="Viewport width in cells")
    parser.add_argument("--height", type=int, default=None, help="Viewport height in cells")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    try:
        settings = ShowSettings.from_env(theme=args.theme, width=args.width, height=args.height)
        show = load_show(args.deck)
    except (ImportError, ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    TerminalViewer(show, settings=settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
