"""
Tiers command: show the configured breakpoints and slot table.
"""

from __future__ import annotations

import argparse

from topgames.helpers.exceptions import LayoutConfigurationError
from topgames.interfaces.cli.ui import TableDisplay, print_error


def cmd_tiers(args: argparse.Namespace) -> int:
    """
    Print which viewport widths map to which tier, and games above the banner per tier.
    """
    try:
        layout = args.config_service.make_layout_config()
    except LayoutConfigurationError as e:
        print_error(f"Layout configuration error: {e}")
        return 1

    TableDisplay.show_tiers(layout.breakpoints, layout.slots_above_banner)
    return 0
