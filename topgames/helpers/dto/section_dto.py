"""
Section domain DTOs.

Catalog entries handed to the composer and the positioned entries it returns.

Rules:
- Import only stdlib and typing (no topgames.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class SectionType(str, Enum):
    """Kinds of content block an overlay catalog can hold."""

    RECENTLY_PLAYED = "SECTION_TYPE_RECENTLY_PLAYED"
    GAMES = "SECTION_TYPE_GAMES"
    BANNER = "SECTION_TYPE_BANNER"
    JACKPOT = "SECTION_TYPE_JACKPOT"
    APPS = "SECTION_TYPE_APPS"


# At most one of each of these is rendered; the first catalog entry wins.
SINGULAR_SECTION_TYPES: frozenset[SectionType] = frozenset(
    {SectionType.RECENTLY_PLAYED, SectionType.BANNER, SectionType.APPS}
)


@dataclass(frozen=True)
class Section:
    """One catalog entry.

    Attributes:
        type: Section kind
        hidden: Only honoured for RECENTLY_PLAYED; ignored for other types
        data: Opaque payload passed through to renderers
    """

    type: SectionType
    hidden: bool = False
    data: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class PositionedSection:
    """A section with its 1-based position in one composition pass."""

    section: Section
    position: int


@dataclass(frozen=True)
class SectionPartition:
    """Catalog split by section type (first match for singular types)."""

    recently_played: Section | None
    games: tuple[Section, ...]
    banner: Section | None
    jackpots: tuple[Section, ...]
    apps: Section | None


# Demo catalog shipped with the overlay.
REFERENCE_CATALOG: tuple[Section, ...] = (
    Section(SectionType.RECENTLY_PLAYED),
    Section(SectionType.GAMES),
    Section(SectionType.GAMES),
    Section(SectionType.GAMES),
    Section(SectionType.GAMES),
    Section(SectionType.GAMES),
    Section(SectionType.BANNER),
    Section(SectionType.JACKPOT),
    Section(SectionType.JACKPOT),
    Section(SectionType.APPS),
)
