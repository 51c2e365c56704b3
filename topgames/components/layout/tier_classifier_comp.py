"""Viewport tier classification.

Maps a viewport width onto one of three layout tiers, checked widest first:
- width >= large_min_width  -> LARGE
- width >= medium_min_width -> MEDIUM
- otherwise                 -> SMALL

Classification is pure: no caching, no side effects. The controller owns the
only piece of remembered state (the current tier).
"""

from __future__ import annotations

import logging
from typing import Any

from topgames.helpers.dto.layout_dto import DEFAULT_BREAKPOINTS, LayoutTier, TierBreakpoints
from topgames.helpers.exceptions import LayoutConfigurationError

logger = logging.getLogger(__name__)


def validate_breakpoints(breakpoints: TierBreakpoints) -> TierBreakpoints:
    """Check that breakpoints describe three non-empty tiers.

    Raises:
        LayoutConfigurationError: If widths are not positive integers or not strictly increasing
    """
    for name in ("medium_min_width", "large_min_width"):
        value = getattr(breakpoints, name)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise LayoutConfigurationError(f"Breakpoint {name} must be a positive integer, got {value!r}")
    if breakpoints.medium_min_width >= breakpoints.large_min_width:
        raise LayoutConfigurationError(
            "Breakpoint medium_min_width must be below large_min_width "
            f"({breakpoints.medium_min_width} >= {breakpoints.large_min_width})"
        )
    return breakpoints


def classify(viewport_width: float, breakpoints: TierBreakpoints = DEFAULT_BREAKPOINTS) -> LayoutTier:
    """Classify a viewport width into a layout tier.

    Args:
        viewport_width: Current viewport width in px (fractional widths allowed)
        breakpoints: Tier thresholds, inclusive lower bounds

    Returns:
        The matching LayoutTier

    Raises:
        TypeError: If viewport_width is not a number
    """
    if isinstance(viewport_width, bool) or not isinstance(viewport_width, (int, float)):
        raise TypeError(f"viewport_width must be a number, got {type(viewport_width).__name__}")

    if viewport_width >= breakpoints.large_min_width:
        return LayoutTier.LARGE
    if viewport_width >= breakpoints.medium_min_width:
        return LayoutTier.MEDIUM
    return LayoutTier.SMALL


def parse_tier(value: Any) -> LayoutTier:
    """Coerce user/config input into a LayoutTier.

    Accepts a LayoutTier, its name (``"large"``), or its wire name
    (``"LAYOUT_TYPE_LARGE"``). Integers are not accepted: tier values are an
    ordering, not an external identifier.

    Raises:
        LayoutConfigurationError: If value does not name a tier
    """
    if isinstance(value, LayoutTier):
        return value
    if isinstance(value, str):
        name = value.strip().upper()
        if name.startswith("LAYOUT_TYPE_"):
            name = name[len("LAYOUT_TYPE_") :]
        if name in LayoutTier.__members__:
            return LayoutTier[name]
    raise LayoutConfigurationError(f"Incorrect layout type specified: {value!r}")
