"""Section composition: catalog + tier -> ordered, positioned render plan.

Render order:
1. Recently played (unless hidden)
2. The first ``n + 1`` games sections, where ``n`` is the tier's slots above
   the banner minus one when recently played is shown
3. Banner
4. All jackpot sections
5. Remaining games sections
6. Apps

The ``n + 1`` bound keeps one extra games row above the banner on every tier.
Positions are assigned 1..K over whatever was emitted; absent or hidden
sections never consume a position.

compose() is pure: the same (catalog, tier, slots) always yields the same plan.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from topgames.components.layout.tier_classifier_comp import parse_tier
from topgames.helpers.dto.layout_dto import SLOTS_ABOVE_BANNER, LayoutTier
from topgames.helpers.dto.section_dto import (
    SINGULAR_SECTION_TYPES,
    PositionedSection,
    Section,
    SectionPartition,
    SectionType,
)
from topgames.helpers.exceptions import LayoutConfigurationError

logger = logging.getLogger(__name__)


def slots_above_banner(tier: Any, slots: Mapping[LayoutTier, int] = SLOTS_ABOVE_BANNER) -> int:
    """Look up how many games sections a tier places above the banner.

    Raises:
        LayoutConfigurationError: If tier is unknown or missing from the slot table
    """
    layout_tier = parse_tier(tier)
    count = slots.get(layout_tier)
    if count is None:
        raise LayoutConfigurationError(f"No slots_above_banner configured for layout type {layout_tier.wire_name}")
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise LayoutConfigurationError(
            f"slots_above_banner for {layout_tier.wire_name} must be a non-negative integer, got {count!r}"
        )
    return count


def validate_slot_table(slots: Mapping[LayoutTier, int]) -> Mapping[LayoutTier, int]:
    """Check the slot table covers every tier with a usable count."""
    for tier in LayoutTier:
        slots_above_banner(tier, slots)
    return slots


def partition_catalog(catalog: Iterable[Section]) -> SectionPartition:
    """Split a catalog by section type, keeping catalog order.

    RECENTLY_PLAYED, BANNER and APPS keep their first occurrence; later
    duplicates are ignored.

    Raises:
        LayoutConfigurationError: If an entry is not a Section or has an unknown type
    """
    first: dict[SectionType, Section] = {}
    games: list[Section] = []
    jackpots: list[Section] = []

    for index, entry in enumerate(catalog):
        if not isinstance(entry, Section):
            raise LayoutConfigurationError(f"Catalog entry {index} is not a Section: {entry!r}")
        if not isinstance(entry.type, SectionType):
            raise LayoutConfigurationError(f"Catalog entry {index} has unknown section type: {entry.type!r}")

        if entry.type in SINGULAR_SECTION_TYPES:
            if entry.type in first:
                logger.debug("Ignoring duplicate %s section at catalog index %d", entry.type.name, index)
            else:
                first[entry.type] = entry
        elif entry.type is SectionType.GAMES:
            games.append(entry)
        elif entry.type is SectionType.JACKPOT:
            jackpots.append(entry)

    return SectionPartition(
        recently_played=first.get(SectionType.RECENTLY_PLAYED),
        games=tuple(games),
        banner=first.get(SectionType.BANNER),
        jackpots=tuple(jackpots),
        apps=first.get(SectionType.APPS),
    )


def compose(
    catalog: Iterable[Section],
    tier: Any,
    slots: Mapping[LayoutTier, int] = SLOTS_ABOVE_BANNER,
) -> tuple[PositionedSection, ...]:
    """Derive the ordered, positioned render plan for a catalog on a tier.

    Args:
        catalog: Sections in catalog order (read only)
        tier: LayoutTier, or a tier name accepted by parse_tier
        slots: Games sections above the banner, per tier

    Returns:
        PositionedSection tuple with positions 1..K

    Raises:
        LayoutConfigurationError: On an unknown tier or malformed catalog entry
    """
    games_above = slots_above_banner(tier, slots)
    parts = partition_catalog(catalog)

    recently_played = parts.recently_played
    show_recently_played = recently_played is not None and not recently_played.hidden
    if show_recently_played:
        # Recently played takes one of the tier's slots above the banner
        games_above -= 1

    cut = max(games_above + 1, 0)

    ordered: list[Section] = []
    if show_recently_played:
        ordered.append(recently_played)  # type: ignore[arg-type]
    ordered.extend(parts.games[:cut])
    if parts.banner is not None:
        ordered.append(parts.banner)
    ordered.extend(parts.jackpots)
    ordered.extend(parts.games[cut:])
    if parts.apps is not None:
        ordered.append(parts.apps)

    plan = tuple(PositionedSection(section=section, position=index) for index, section in enumerate(ordered, start=1))
    logger.debug(
        "Composed %d sections for %s (%d games above banner)",
        len(plan),
        parse_tier(tier).name,
        min(cut, len(parts.games)),
    )
    return plan
