"""
Layout domain DTOs.

Layout tiers, breakpoints and the slot table that drive section composition.

Rules:
- Import only stdlib and typing (no topgames.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import Literal


# Lifecycle of a LayoutTierController
ControllerState = Literal["uninitialized", "ready", "unmounted"]


class LayoutTier(IntEnum):
    """Responsive layout tiers (higher = wider viewport).

    Ordering is meaningful: LARGE > MEDIUM > SMALL.
    """

    SMALL = 0
    MEDIUM = 1
    LARGE = 2

    @property
    def wire_name(self) -> str:
        """Name used by catalog files and the overlay markup (``LAYOUT_TYPE_LARGE``)."""
        return f"LAYOUT_TYPE_{self.name}"


# Number of GAMES sections placed before the BANNER section, per tier.
SLOTS_ABOVE_BANNER: Mapping[LayoutTier, int] = MappingProxyType(
    {
        LayoutTier.LARGE: 2,
        LayoutTier.MEDIUM: 1,
        LayoutTier.SMALL: 0,
    }
)


@dataclass(frozen=True)
class TierBreakpoints:
    """Minimum viewport widths (inclusive, in px) for the upper tiers.

    Anything narrower than ``medium_min_width`` is SMALL.
    """

    large_min_width: int = 800
    medium_min_width: int = 600


DEFAULT_BREAKPOINTS = TierBreakpoints()


@dataclass(frozen=True)
class LayoutConfig:
    """Validated layout settings built by ConfigService.make_layout_config()."""

    breakpoints: TierBreakpoints = DEFAULT_BREAKPOINTS
    slots_above_banner: Mapping[LayoutTier, int] = field(default_factory=lambda: SLOTS_ABOVE_BANNER)
