"""
Domain DTOs (Data Transfer Objects) used across multiple layers.

Rules for DTO modules:
- Import only stdlib and typing (no topgames.* imports)
- Contain ONLY dataclass/type definitions and simple type aliases
- No I/O, no business logic
"""

from .layout_dto import (
    DEFAULT_BREAKPOINTS,
    SLOTS_ABOVE_BANNER,
    ControllerState,
    LayoutConfig,
    LayoutTier,
    TierBreakpoints,
)
from .section_dto import (
    REFERENCE_CATALOG,
    SINGULAR_SECTION_TYPES,
    PositionedSection,
    Section,
    SectionPartition,
    SectionType,
)

__all__ = [
    "DEFAULT_BREAKPOINTS",
    "REFERENCE_CATALOG",
    "SINGULAR_SECTION_TYPES",
    "SLOTS_ABOVE_BANNER",
    "ControllerState",
    "LayoutConfig",
    "LayoutTier",
    "PositionedSection",
    "Section",
    "SectionPartition",
    "SectionType",
    "TierBreakpoints",
]
