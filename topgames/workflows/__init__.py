"""
Workflows package.
"""

from .render_section_group_wf import SectionRenderer, render_section_group_workflow

__all__ = [
    "SectionRenderer",
    "render_section_group_workflow",
]
