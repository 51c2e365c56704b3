"""
Layout package.
"""

from .section_composer_comp import compose, partition_catalog, slots_above_banner, validate_slot_table
from .tier_classifier_comp import classify, parse_tier, validate_breakpoints
from .viewport_comp import SimulatedViewport, ViewportEnvironment

__all__ = [
    "SimulatedViewport",
    "ViewportEnvironment",
    "classify",
    "compose",
    "parse_tier",
    "partition_catalog",
    "slots_above_banner",
    "validate_breakpoints",
    "validate_slot_table",
]
