"""
Services package.
"""

from .config_svc import ConfigService
from .layout_tier_svc import LayoutTierController, TierListener
from .overlay_svc import OverlayService, RenderCallback

__all__ = [
    "ConfigService",
    "LayoutTierController",
    "OverlayService",
    "RenderCallback",
    "TierListener",
]
