"""Overlay service: tier controller -> composition -> section group rendering.

Wires one LayoutTierController to a fixed catalog and a renderer table.
Each tier change recomposes the catalog and re-renders the section group;
redundant resizes never reach this service because the controller suppresses
notifications for an unchanged tier.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any

from topgames.components.layout.section_composer_comp import compose, validate_slot_table
from topgames.helpers.dto.layout_dto import SLOTS_ABOVE_BANNER, LayoutTier
from topgames.helpers.dto.section_dto import REFERENCE_CATALOG, PositionedSection, Section, SectionType
from topgames.helpers.exceptions import ControllerLifecycleError
from topgames.helpers.logging_helper import set_log_context
from topgames.services.layout_tier_svc import LayoutTierController
from topgames.workflows.render_section_group_wf import SectionRenderer, render_section_group_workflow

if TYPE_CHECKING:
    from topgames.components.layout.viewport_comp import ViewportEnvironment
    from topgames.components.scheduling.frame_scheduler_comp import FrameClock
    from topgames.services.config_svc import ConfigService

logger = logging.getLogger(__name__)

RenderCallback = Callable[[LayoutTier, list[Any]], None]


class OverlayService:
    """Keeps a rendered section group in step with the viewport tier."""

    def __init__(
        self,
        controller: LayoutTierController,
        renderers: Mapping[SectionType, SectionRenderer],
        catalog: Iterable[Section] = REFERENCE_CATALOG,
        slots: Mapping[LayoutTier, int] = SLOTS_ABOVE_BANNER,
        on_render: RenderCallback | None = None,
    ) -> None:
        self.controller = controller
        self.renderers = dict(renderers)
        # Catalog is read only for the lifetime of the overlay
        self.catalog: tuple[Section, ...] = tuple(catalog)
        self.slots = validate_slot_table(slots)
        self._on_render = on_render
        self._unsubscribe: Callable[[], None] | None = None

        self.last_tier: LayoutTier | None = None
        self.last_plan: tuple[PositionedSection, ...] | None = None
        self.last_output: list[Any] | None = None
        self.render_count = 0

    @classmethod
    def from_config(
        cls,
        config_service: ConfigService,
        environment: ViewportEnvironment,
        clock: FrameClock,
        renderers: Mapping[SectionType, SectionRenderer],
        catalog: Iterable[Section] = REFERENCE_CATALOG,
        on_render: RenderCallback | None = None,
    ) -> OverlayService:
        """Build the controller and service from configured breakpoints and slots."""
        layout = config_service.make_layout_config()
        controller = LayoutTierController(environment, clock, breakpoints=layout.breakpoints)
        return cls(
            controller=controller,
            renderers=renderers,
            catalog=catalog,
            slots=layout.slots_above_banner,
            on_render=on_render,
        )

    def start(self) -> None:
        """Subscribe to tier changes and mount the controller (renders once).

        If the first render fails the controller is torn down before the error
        propagates.

        Raises:
            ControllerLifecycleError: If the controller was already mounted or unmounted
        """
        if self.controller.state != "uninitialized":
            raise ControllerLifecycleError(f"Cannot start overlay: controller is {self.controller.state}")
        self._unsubscribe = self.controller.subscribe(self._on_tier_change)
        try:
            self.controller.mount()
        except Exception:
            self.stop()
            raise

    def stop(self) -> None:
        """Stop reacting to resizes and tear the controller down."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self.controller.unmount()

    def plan_for(self, tier: LayoutTier) -> tuple[PositionedSection, ...]:
        return compose(self.catalog, tier, self.slots)

    def render_tier(self, tier: LayoutTier) -> list[Any]:
        """Compose and render the catalog for a tier (no state change)."""
        return render_section_group_workflow(self.plan_for(tier), self.renderers)

    def render_current(self) -> list[Any] | None:
        """Rendered output for the current tier, or None before the first tier is known."""
        return self.controller.render(self.render_tier, placeholder=None)

    def _on_tier_change(self, tier: LayoutTier) -> None:
        # Later log lines from this context carry the tier being rendered
        set_log_context(tier=tier.name)
        plan = self.plan_for(tier)
        output = render_section_group_workflow(plan, self.renderers)

        self.last_tier = tier
        self.last_plan = plan
        self.last_output = output
        self.render_count += 1
        logger.info("Rendered %d sections for tier %s", len(output), tier.name)

        if self._on_render is not None:
            self._on_render(tier, output)
