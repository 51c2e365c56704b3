"""
Preview command: render the overlay for a single viewport width.
"""

from __future__ import annotations

import argparse

from topgames.components.layout.viewport_comp import SimulatedViewport
from topgames.components.scheduling.frame_scheduler_comp import ManualFrameClock
from topgames.helpers.exceptions import LayoutConfigurationError
from topgames.interfaces.cli.ui import InfoPanel, TableDisplay, placeholder_renderers, print_error, show_section_group
from topgames.interfaces.cli.utils import load_catalog
from topgames.services.overlay_svc import OverlayService


def cmd_preview(args: argparse.Namespace) -> int:
    """
    Compose and draw the overlay as it would appear at --width.
    """
    try:
        catalog = load_catalog(args)
        overlay = OverlayService.from_config(
            args.config_service,
            environment=SimulatedViewport(args.width),
            clock=ManualFrameClock(),
            renderers=placeholder_renderers(),
            catalog=catalog,
        )
        overlay.start()
        tier = overlay.last_tier
        plan = overlay.last_plan or ()
        output = overlay.last_output or []
        overlay.stop()
    except LayoutConfigurationError as e:
        print_error(f"Layout configuration error: {e}")
        return 1

    if tier is None:
        print_error("Layout tier was not determined")
        return 1

    content = f"""[bold]Width:[/bold] {args.width}px
[bold]Tier:[/bold] {tier.wire_name}
[bold]Games above banner:[/bold] {overlay.slots[tier]}
[bold]Sections:[/bold] {len(plan)}"""
    InfoPanel.show("Top Games Overlay", content)

    if args.plan:
        TableDisplay.show_plan(plan)
    show_section_group(output)
    return 0
