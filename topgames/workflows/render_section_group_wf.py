"""
Workflow for rendering a composed section plan.

This is the second phase of the overlay pipeline:
- Phase 1 (compose) produces an ordered, positioned plan as plain data
- Phase 2 (this workflow) hands each entry to the renderer registered for
  its section type and collects the renderables in plan order

ARCHITECTURE:
- This is a PURE WORKFLOW that takes all dependencies as parameters
- Renderers are opaque: the workflow never inspects what they return

EXPECTED RENDERER INTERFACE:
Each renderer is called as ``renderer(data=section, position=position)`` and
returns a renderable unit of any type.

USAGE:
    from topgames.workflows.render_section_group_wf import render_section_group_workflow

    output = render_section_group_workflow(
        plan=compose(catalog, LayoutTier.LARGE),
        renderers={SectionType.GAMES: render_games, ...},
    )
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from topgames.helpers.dto.section_dto import PositionedSection, Section, SectionType
from topgames.helpers.exceptions import SectionGroupError

logger = logging.getLogger(__name__)

SectionRenderer = Callable[..., Any]


def render_section_group_workflow(
    plan: Iterable[PositionedSection],
    renderers: Mapping[SectionType, SectionRenderer],
) -> list[Any]:
    """
    Render every entry of a composed plan with its type-specific renderer.

    The whole plan is validated before the first renderer runs, so a
    malformed plan never produces partial output.

    Args:
        plan: Output of compose() (positions 1..K, in order)
        renderers: Renderer per section type

    Returns:
        Renderables in plan order

    Raises:
        SectionGroupError: If an entry is not a PositionedSection, positions are
            not exactly 1..K in order, or a section type has no callable renderer
    """
    entries = list(plan)

    for index, entry in enumerate(entries):
        if not isinstance(entry, PositionedSection):
            raise SectionGroupError(
                f"Section group can only consist of composed sections; entry {index} is {type(entry).__name__}"
            )
        if not isinstance(entry.section, Section):
            raise SectionGroupError(f"Section group entry {index} does not wrap a Section: {entry.section!r}")
        expected = index + 1
        if entry.position != expected:
            raise SectionGroupError(
                f"Section group entry {index} has position {entry.position!r}, expected {expected}"
            )
        renderer = renderers.get(entry.section.type)
        if renderer is None or not callable(renderer):
            raise SectionGroupError(f"Render function must be supplied for {entry.section.type!r}")

    rendered = [renderers[entry.section.type](data=entry.section, position=entry.position) for entry in entries]
    logger.debug("Rendered section group of %d sections", len(rendered))
    return rendered
