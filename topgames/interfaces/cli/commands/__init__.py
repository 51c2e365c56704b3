"""
CLI commands package.
"""

from .preview import cmd_preview
from .simulate import cmd_simulate
from .tiers import cmd_tiers

__all__ = [
    "cmd_preview",
    "cmd_simulate",
    "cmd_tiers",
]
