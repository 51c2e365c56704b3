"""
Simulate command: replay a sequence of resizes against a live overlay.

Resize events are delivered --per-frame at a time; each frame coalesces its
burst into one reclassification, and the overlay only re-renders when the
tier actually changes.
"""

from __future__ import annotations

import argparse
import asyncio
from typing import Any

from topgames.components.layout.viewport_comp import SimulatedViewport
from topgames.components.scheduling.frame_scheduler_comp import AsyncioFrameClock, ManualFrameClock
from topgames.helpers.dto.layout_dto import LayoutTier
from topgames.helpers.exceptions import LayoutConfigurationError
from topgames.interfaces.cli.ui import InfoPanel, placeholder_renderers, print_error, print_info, print_success
from topgames.interfaces.cli.utils import chunked, load_catalog
from topgames.services.overlay_svc import OverlayService


def _describe(tier: LayoutTier, output: list[Any]) -> str:
    order = ", ".join(f"{getattr(item, 'position', '?')}:{getattr(item, 'label', item)}" for item in output)
    return f"{tier.wire_name} -> {order}"


def cmd_simulate(args: argparse.Namespace) -> int:
    """
    Drive a simulated viewport through --widths and report each re-render.
    """
    widths: list[float] = args.widths
    if args.per_frame < 1:
        print_error("--per-frame must be at least 1")
        return 1

    try:
        catalog = load_catalog(args)
        if args.realtime:
            stats = asyncio.run(_simulate_realtime(args, catalog, widths))
        else:
            stats = _simulate_manual(args, catalog, widths)
    except LayoutConfigurationError as e:
        print_error(f"Layout configuration error: {e}")
        return 1

    content = f"""[bold]Resize events:[/bold] {stats['events']}
[bold]Frames:[/bold] {stats['frames']}
[bold]Renders:[/bold] {stats['renders']}
[bold]Final tier:[/bold] {stats['tier']}"""
    InfoPanel.show("Simulation Complete", content, "green")
    return 0


def _on_render(tier: LayoutTier, output: list[Any]) -> None:
    print_success(f"Render {_describe(tier, output)}")


def _simulate_manual(args: argparse.Namespace, catalog: Any, widths: list[float]) -> dict[str, Any]:
    viewport = SimulatedViewport(widths[0])
    clock = ManualFrameClock()
    overlay = OverlayService.from_config(
        args.config_service,
        environment=viewport,
        clock=clock,
        renderers=placeholder_renderers(),
        catalog=catalog,
        on_render=_on_render,
    )
    overlay.start()
    try:
        for frame_widths in chunked(widths[1:], args.per_frame):
            for width in frame_widths:
                viewport.resize(width)
            clock.advance()
            print_info(
                f"Frame {clock.frames_run}: {len(frame_widths)} resize event(s), "
                f"width {viewport.get_width()} -> {overlay.controller.tier.name if overlay.controller.tier else '-'}"
            )
        final_tier = overlay.controller.tier
    finally:
        overlay.stop()

    return {
        "events": len(widths) - 1,
        "frames": clock.frames_run,
        "renders": overlay.render_count,
        "tier": final_tier.wire_name if final_tier else "-",
    }


async def _simulate_realtime(args: argparse.Namespace, catalog: Any, widths: list[float]) -> dict[str, Any]:
    viewport = SimulatedViewport(widths[0])
    frame_interval_s = args.config_service.frame_interval_s()
    clock = AsyncioFrameClock(frame_interval_s=frame_interval_s)
    overlay = OverlayService.from_config(
        args.config_service,
        environment=viewport,
        clock=clock,
        renderers=placeholder_renderers(),
        catalog=catalog,
        on_render=_on_render,
    )
    frames = 0
    overlay.start()
    try:
        for frame_widths in chunked(widths[1:], args.per_frame):
            for width in frame_widths:
                viewport.resize(width)
            # Let the pending frame fire before the next burst
            await asyncio.sleep(frame_interval_s * 2)
            frames += 1
        final_tier = overlay.controller.tier
    finally:
        overlay.stop()

    return {
        "events": len(widths) - 1,
        "frames": frames,
        "renders": overlay.render_count,
        "tier": final_tier.wire_name if final_tier else "-",
    }
