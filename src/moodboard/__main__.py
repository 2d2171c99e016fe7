"""Entry point for moodboard CLI."""

import logging
import sys

from moodboard.cli import build_parser
from moodboard.cli._common import setup_logging


def run_tui(api: str | None, verbose: bool = False) -> None:
    from textual.logging import TextualHandler

    from moodboard.config import load_config
    from moodboard.ui import MoodboardApp

    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, handlers=[TextualHandler()])
    app = MoodboardApp(load_config(api))
    app.run()


def main():
    parser = build_parser()
    args = parser.parse_args()

    # No noun = TUI mode
    if args.noun is None:
        run_tui(getattr(args, "api", None), args.verbose)
        return

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    setup_logging(args.verbose)
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
