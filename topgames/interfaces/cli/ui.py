#!/usr/bin/env python3
"""
Rich UI components for CLI - placeholder section boxes, tables, status lines.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from rich import box
from rich.columns import Columns
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from topgames.helpers.dto.layout_dto import LayoutTier, TierBreakpoints
from topgames.helpers.dto.section_dto import PositionedSection, Section, SectionType
from topgames.workflows.render_section_group_wf import SectionRenderer

console = Console()

# Color scheme constants
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_WARNING = "yellow"
COLOR_INFO = "cyan"
COLOR_PLACEHOLDER = "#ff6347"  # tomato


@dataclass(frozen=True)
class PlaceholderBox:
    """Stand-in rendering of one section: label, position, optional notes.

    Full-width boxes take a row of their own; the rest share rows.
    """

    label: str
    position: int
    full_width: bool = False
    notes: str = ""

    @property
    def markup(self) -> str:
        text = f"<{self.label} position={{{self.position}}} />"
        return f"{text} {self.notes}" if self.notes else text

    def __rich__(self) -> Panel:
        return Panel(
            self.markup,
            border_style=COLOR_PLACEHOLDER,
            style=COLOR_PLACEHOLDER,
            box=box.SQUARE,
            expand=True,
        )


def _placeholder(label: str, full_width: bool = False, notes: str = "") -> SectionRenderer:
    def render(data: Section, position: int) -> PlaceholderBox:
        return PlaceholderBox(label=label, position=position, full_width=full_width, notes=notes)

    return render


def placeholder_renderers() -> dict[SectionType, SectionRenderer]:
    """Renderer table drawing every section type as a labelled box."""
    return {
        SectionType.RECENTLY_PLAYED: _placeholder(
            "RecentlyPlayedSection", notes="(Try hiding me with --hide-recently-played!)"
        ),
        SectionType.GAMES: _placeholder("GamesSection"),
        SectionType.BANNER: _placeholder("BannersSection", full_width=True),
        SectionType.JACKPOT: _placeholder("JackpotSection", full_width=True),
        SectionType.APPS: _placeholder("AppsSection", full_width=True),
    }


def show_section_group(renderables: Iterable[Any], columns: int = 3) -> None:
    """Print rendered sections as wrapped rows (up to ``columns`` narrow boxes per row)."""
    row: list[Any] = []

    def flush() -> None:
        if row:
            console.print(Columns(list(row), equal=True, expand=True))
            row.clear()

    for item in renderables:
        if getattr(item, "full_width", False):
            flush()
            console.print(item)
            continue
        row.append(item)
        if len(row) == columns:
            flush()
    flush()


class TableDisplay:
    """
    Formatted tables for tiers and composition plans.
    """

    @staticmethod
    def show_tiers(breakpoints: TierBreakpoints, slots: Mapping[LayoutTier, int]) -> None:
        table = Table(title="Layout tiers", box=box.ROUNDED)
        table.add_column("Tier", style=COLOR_INFO)
        table.add_column("Viewport width")
        table.add_column("Games above banner", justify="right")

        ranges = {
            LayoutTier.LARGE: f">= {breakpoints.large_min_width}px",
            LayoutTier.MEDIUM: f"{breakpoints.medium_min_width}-{breakpoints.large_min_width - 1}px",
            LayoutTier.SMALL: f"< {breakpoints.medium_min_width}px",
        }
        for tier in sorted(LayoutTier, reverse=True):
            table.add_row(tier.wire_name, ranges[tier], str(slots[tier]))
        console.print(table)

    @staticmethod
    def show_plan(plan: Iterable[PositionedSection], title: str = "Composition") -> None:
        table = Table(title=title, box=box.ROUNDED)
        table.add_column("#", justify="right", style=COLOR_INFO)
        table.add_column("Section")
        table.add_column("Data")
        for entry in plan:
            data = entry.section.data
            table.add_row(str(entry.position), entry.section.type.name, "" if data is None else escape(str(dict(data))))
        console.print(table)


class InfoPanel:
    """
    Simple panel for displaying status/info.
    """

    @staticmethod
    def show(title: str, content: str, border_style: str = COLOR_INFO) -> None:
        panel = Panel(content, title=f"[bold]{title}[/bold]", border_style=border_style, box=box.ROUNDED)
        console.print(panel)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold {COLOR_SUCCESS}]✓[/bold {COLOR_SUCCESS}] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[bold {COLOR_WARNING}]⚠[/bold {COLOR_WARNING}] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[bold {COLOR_INFO}]ℹ[/bold {COLOR_INFO}] {escape(message)}")
