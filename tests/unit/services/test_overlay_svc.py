"""
Unit tests for OverlayService.

Tests verify:
- start() renders once for the initial tier
- Tier changes recompose and re-render; redundant resizes do not
- from_config() applies configured breakpoints and slot table
- stop() tears down the controller
"""

from __future__ import annotations

import logging

import pytest

from topgames.components.layout.viewport_comp import SimulatedViewport
from topgames.helpers.dto.layout_dto import LayoutTier
from topgames.helpers.dto.section_dto import SectionType
from topgames.helpers.exceptions import ControllerLifecycleError, SectionGroupError
from topgames.helpers.logging_helper import TopgamesLogFilter
from topgames.services.config_svc import ConfigService
from topgames.services.layout_tier_svc import LayoutTierController
from topgames.services.overlay_svc import OverlayService


def _renderers() -> dict:
    """Renderers that return (label, position) tuples."""

    def render(data, position):
        return (data.data["label"], position)

    return {section_type: render for section_type in SectionType}


@pytest.fixture
def overlay(viewport, clock, labelled_catalog) -> OverlayService:
    controller = LayoutTierController(viewport, clock)
    return OverlayService(controller, _renderers(), catalog=labelled_catalog)


class TestOverlayLifecycle:
    """Tests for start/stop."""

    @pytest.mark.unit
    def test_start_renders_initial_tier(self, overlay) -> None:
        overlay.start()

        assert overlay.last_tier is LayoutTier.LARGE
        assert overlay.render_count == 1
        assert overlay.last_output[:4] == [("rp", 1), ("g1", 2), ("g2", 3), ("banner", 4)]
        assert [entry.position for entry in overlay.last_plan] == list(range(1, 11))

    @pytest.mark.unit
    def test_tier_change_rerenders(self, overlay, viewport, clock) -> None:
        overlay.start()
        viewport.resize(500)
        clock.advance()

        assert overlay.last_tier is LayoutTier.SMALL
        assert overlay.render_count == 2
        assert overlay.last_output[:2] == [("rp", 1), ("banner", 2)]

    @pytest.mark.unit
    def test_same_tier_does_not_rerender(self, overlay, viewport, clock) -> None:
        overlay.start()
        for width in (1200, 900, 850):
            viewport.resize(width)
            clock.advance()

        assert overlay.render_count == 1

    @pytest.mark.unit
    def test_stop_unmounts(self, overlay, viewport, clock) -> None:
        overlay.start()
        overlay.stop()
        viewport.resize(500)
        clock.advance()

        assert overlay.controller.state == "unmounted"
        assert overlay.render_count == 1
        assert viewport.listener_count == 0

    @pytest.mark.unit
    def test_on_render_callback(self, viewport, clock, labelled_catalog) -> None:
        seen = []
        overlay = OverlayService(
            LayoutTierController(viewport, clock),
            _renderers(),
            catalog=labelled_catalog,
            on_render=lambda tier, output: seen.append((tier, len(output))),
        )
        overlay.start()
        viewport.resize(650)
        clock.advance()

        assert seen == [(LayoutTier.LARGE, 10), (LayoutTier.MEDIUM, 10)]

    @pytest.mark.unit
    def test_missing_renderer_fails_start(self, viewport, clock, labelled_catalog) -> None:
        renderers = _renderers()
        del renderers[SectionType.JACKPOT]
        overlay = OverlayService(LayoutTierController(viewport, clock), renderers, catalog=labelled_catalog)

        with pytest.raises(SectionGroupError, match="Render function must be supplied"):
            overlay.start()
        assert overlay.render_count == 0

    @pytest.mark.unit
    def test_failed_start_tears_down_controller(self, viewport, clock, labelled_catalog) -> None:
        renderers = _renderers()
        del renderers[SectionType.BANNER]
        overlay = OverlayService(LayoutTierController(viewport, clock), renderers, catalog=labelled_catalog)

        with pytest.raises(SectionGroupError):
            overlay.start()

        assert overlay.controller.state == "unmounted"
        assert viewport.listener_count == 0
        viewport.resize(500)
        assert clock.pending == 0

    @pytest.mark.unit
    def test_second_start_keeps_running_overlay(self, overlay, viewport, clock) -> None:
        overlay.start()

        with pytest.raises(ControllerLifecycleError):
            overlay.start()

        assert overlay.controller.state == "ready"
        viewport.resize(500)
        clock.advance()
        assert overlay.last_tier is LayoutTier.SMALL
        assert overlay.render_count == 2

    @pytest.mark.unit
    def test_render_sets_tier_log_context(self, overlay, viewport, clock) -> None:
        overlay.start()
        record = logging.LogRecord("topgames.services.overlay_svc", logging.INFO, "", 0, "msg", (), None)
        TopgamesLogFilter().filter(record)
        assert record.context_str == "[tier=LARGE] "

        viewport.resize(650)
        clock.advance()
        TopgamesLogFilter().filter(record)
        assert record.context_str == "[tier=MEDIUM] "


class TestOverlayRendering:
    """Tests for on-demand rendering."""

    @pytest.mark.unit
    def test_render_current_before_start(self, overlay) -> None:
        assert overlay.render_current() is None

    @pytest.mark.unit
    def test_render_current_after_start(self, overlay) -> None:
        overlay.start()
        assert overlay.render_current() == overlay.last_output

    @pytest.mark.unit
    def test_render_tier_does_not_change_state(self, overlay) -> None:
        output = overlay.render_tier(LayoutTier.SMALL)

        assert output[0] == ("rp", 1)
        assert overlay.render_count == 0
        assert overlay.last_tier is None

    @pytest.mark.unit
    def test_catalog_is_copied(self, viewport, clock, labelled_catalog) -> None:
        catalog = list(labelled_catalog)
        overlay = OverlayService(LayoutTierController(viewport, clock), _renderers(), catalog=catalog)
        catalog.clear()

        assert len(overlay.plan_for(LayoutTier.LARGE)) == 10


class TestOverlayFromConfig:
    """Tests for OverlayService.from_config()."""

    @pytest.mark.unit
    def test_uses_configured_breakpoints_and_slots(self, isolated_config_env, clock, labelled_catalog) -> None:
        config = ConfigService(
            overrides={
                "layout": {
                    "large_min_width": 1200,
                    "medium_min_width": 900,
                    "slots_above_banner": {"large": 3, "medium": 2, "small": 1},
                }
            }
        )
        overlay = OverlayService.from_config(
            config,
            environment=SimulatedViewport(1000),
            clock=clock,
            renderers=_renderers(),
            catalog=labelled_catalog,
        )
        overlay.start()

        assert overlay.last_tier is LayoutTier.MEDIUM
        assert [label for label, _ in overlay.last_output[:4]] == ["rp", "g1", "g2", "banner"]
