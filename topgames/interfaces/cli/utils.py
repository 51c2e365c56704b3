"""
Shared utility functions for CLI commands.
"""

from __future__ import annotations

import argparse
from dataclasses import replace

from topgames.helpers.dto.section_dto import REFERENCE_CATALOG, Section, SectionType
from topgames.interfaces.types.catalog_types import load_catalog_file

__all__ = [
    "chunked",
    "load_catalog",
    "parse_width",
    "parse_widths",
]


def load_catalog(args: argparse.Namespace) -> tuple[Section, ...]:
    """Catalog from --catalog (or the reference catalog), with --hide-recently-played applied."""
    catalog_path = getattr(args, "catalog", None)
    catalog = load_catalog_file(catalog_path) if catalog_path else REFERENCE_CATALOG

    if getattr(args, "hide_recently_played", False):
        catalog = tuple(
            replace(section, hidden=True) if section.type is SectionType.RECENTLY_PLAYED else section
            for section in catalog
        )
    return catalog


def parse_width(text: str) -> float:
    """Parse one viewport width ("640" or "640.5"). Raises argparse.ArgumentTypeError on bad input."""
    text = text.strip()
    try:
        width = float(text) if "." in text else int(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid width: {text!r}") from e
    if width < 0:
        raise argparse.ArgumentTypeError(f"width must not be negative: {text!r}")
    return width


def parse_widths(text: str) -> list[float]:
    """Parse "500,650,900.5" into widths. Raises argparse.ArgumentTypeError on bad input."""
    widths = [parse_width(part) for part in text.split(",") if part.strip()]
    if not widths:
        raise argparse.ArgumentTypeError("at least one width is required")
    return widths


def chunked(items: list[float], size: int) -> list[list[float]]:
    """Split items into consecutive groups of at most size."""
    return [items[i : i + size] for i in range(0, len(items), size)]
