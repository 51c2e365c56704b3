#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse

from topgames.__version__ import __version__
from topgames.helpers.exceptions import LayoutConfigurationError
from topgames.helpers.logging_helper import configure_logging
from topgames.interfaces.cli.commands.preview import cmd_preview
from topgames.interfaces.cli.commands.simulate import cmd_simulate
from topgames.interfaces.cli.commands.tiers import cmd_tiers
from topgames.interfaces.cli.ui import print_error
from topgames.interfaces.cli.utils import parse_width, parse_widths
from topgames.services.config_svc import ConfigService


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="topgames",
        description="topgames - responsive section layout for the top games overlay",
        epilog="Examples:\n"
        "  topgames tiers                                   # Show breakpoints and slots\n"
        "  topgames preview --width 700                     # Draw the overlay at 700px\n"
        "  topgames preview --width 500 --hide-recently-played --plan\n"
        "  topgames simulate --widths 900,850,700,650,500   # Replay resizes, one per frame\n"
        "  topgames simulate --widths 900,700,500,820 --per-frame 2",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--config", help="extra YAML config file (merged after the standard locations)")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'topgames <command> --help' for command-specific help)",
    )

    def add_catalog_args(s: argparse.ArgumentParser) -> None:
        s.add_argument("--catalog", help="YAML catalog file (default: built-in reference catalog)")
        s.add_argument("--hide-recently-played", action="store_true", help="mark the recently played section hidden")

    # preview: Render one width
    s = sub.add_parser("preview", help="Draw the overlay for one viewport width")
    s.add_argument("--width", type=parse_width, required=True, help="viewport width in px")
    s.add_argument("--plan", action="store_true", help="also print the composition table")
    add_catalog_args(s)
    s.set_defaults(func=cmd_preview)

    # simulate: Replay resizes
    s = sub.add_parser("simulate", help="Replay a sequence of viewport resizes")
    s.add_argument(
        "--widths",
        type=parse_widths,
        required=True,
        help="comma-separated widths; the first is the width at mount",
    )
    s.add_argument("--per-frame", type=int, default=1, help="resize events delivered per frame (default: 1)")
    s.add_argument("--realtime", action="store_true", help="use the asyncio frame clock instead of manual frames")
    add_catalog_args(s)
    s.set_defaults(func=cmd_simulate)

    # tiers: Show configuration
    s = sub.add_parser("tiers", help="Show tier breakpoints and games above the banner")
    s.set_defaults(func=cmd_tiers)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    config_service = ConfigService(config_path=args.config)
    try:
        level = "DEBUG" if args.verbose else config_service.log_level()
    except LayoutConfigurationError as e:
        print_error(f"Configuration error: {e}")
        return 1
    configure_logging(level)

    args.config_service = config_service
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
