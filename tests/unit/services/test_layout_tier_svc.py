"""
Unit tests for LayoutTierController.

Tests verify:
- Lifecycle (uninitialized -> ready -> unmounted)
- Mount classifies synchronously and notifies subscribers once
- Resize bursts coalesce to one reclassification per frame
- Unchanged tiers never notify
- Unmount detaches the listener and cancels pending work
"""

import pytest

from topgames.components.layout.viewport_comp import SimulatedViewport
from topgames.helpers.dto.layout_dto import LayoutTier, TierBreakpoints
from topgames.helpers.exceptions import ControllerLifecycleError, LayoutConfigurationError
from topgames.services.layout_tier_svc import LayoutTierController


@pytest.fixture
def controller(viewport, clock) -> LayoutTierController:
    return LayoutTierController(viewport, clock)


@pytest.fixture
def changes(controller) -> list[LayoutTier]:
    """Tiers seen by one subscriber."""
    seen: list[LayoutTier] = []
    controller.subscribe(seen.append)
    return seen


class TestLifecycle:
    """Tests for mount/unmount transitions."""

    @pytest.mark.unit
    def test_initial_state(self, controller) -> None:
        assert controller.state == "uninitialized"
        assert controller.tier is None
        assert controller.is_ready is False

    @pytest.mark.unit
    def test_mount_classifies_and_notifies(self, controller, viewport, changes) -> None:
        tier = controller.mount()

        assert tier is LayoutTier.LARGE
        assert controller.tier is LayoutTier.LARGE
        assert controller.state == "ready"
        assert changes == [LayoutTier.LARGE]
        assert viewport.listener_count == 1

    @pytest.mark.unit
    def test_double_mount_raises(self, controller) -> None:
        controller.mount()
        with pytest.raises(ControllerLifecycleError, match="state 'ready'"):
            controller.mount()

    @pytest.mark.unit
    def test_mount_after_unmount_raises(self, controller) -> None:
        controller.mount()
        controller.unmount()
        with pytest.raises(ControllerLifecycleError, match="state 'unmounted'"):
            controller.mount()

    @pytest.mark.unit
    def test_unmount_detaches_listener(self, controller, viewport, clock, changes) -> None:
        controller.mount()
        controller.unmount()

        viewport.resize(500)
        clock.advance()

        assert controller.state == "unmounted"
        assert viewport.listener_count == 0
        assert changes == [LayoutTier.LARGE]

    @pytest.mark.unit
    def test_unmount_cancels_pending_recompute(self, controller, viewport, clock, changes) -> None:
        controller.mount()
        viewport.resize(500)
        assert controller.recompute_pending is True

        controller.unmount()

        assert controller.recompute_pending is False
        assert clock.pending == 0
        clock.advance()
        assert changes == [LayoutTier.LARGE]
        assert controller.tier is LayoutTier.LARGE

    @pytest.mark.unit
    def test_unmount_during_notification_stops_remaining_listeners(self, controller, viewport, clock) -> None:
        """A subscriber that unmounts mid-notification silences the ones after it."""
        seen: list[tuple[str, LayoutTier]] = []

        def teardown(tier: LayoutTier) -> None:
            if tier is LayoutTier.SMALL:
                controller.unmount()

        controller.subscribe(teardown)
        controller.subscribe(lambda tier: seen.append((controller.state, tier)))
        controller.mount()

        viewport.resize(500)
        clock.advance()

        assert seen == [("ready", LayoutTier.LARGE)]
        assert controller.state == "unmounted"

    @pytest.mark.unit
    def test_unmount_is_idempotent(self, controller, viewport) -> None:
        controller.mount()
        controller.unmount()
        controller.unmount()
        assert viewport.listener_count == 0

    @pytest.mark.unit
    def test_unmount_before_mount(self, controller, viewport) -> None:
        controller.unmount()
        assert controller.state == "unmounted"
        assert viewport.listener_count == 0

    @pytest.mark.unit
    def test_subscribe_after_unmount_raises(self, controller) -> None:
        controller.unmount()
        with pytest.raises(ControllerLifecycleError):
            controller.subscribe(lambda tier: None)

    @pytest.mark.unit
    def test_invalid_breakpoints_rejected(self, viewport, clock) -> None:
        with pytest.raises(LayoutConfigurationError):
            LayoutTierController(viewport, clock, TierBreakpoints(large_min_width=500, medium_min_width=600))


class TestResizeHandling:
    """Tests for frame-aligned reclassification."""

    @pytest.mark.unit
    def test_no_work_before_frame(self, controller, viewport, changes) -> None:
        controller.mount()
        viewport.resize(500)

        assert controller.tier is LayoutTier.LARGE
        assert changes == [LayoutTier.LARGE]

    @pytest.mark.unit
    def test_tier_change_notifies_once(self, controller, viewport, clock, changes) -> None:
        controller.mount()
        viewport.resize(700)
        clock.advance()

        assert controller.tier is LayoutTier.MEDIUM
        assert changes == [LayoutTier.LARGE, LayoutTier.MEDIUM]

    @pytest.mark.unit
    def test_burst_uses_width_at_frame_time(self, controller, viewport, clock, changes) -> None:
        controller.mount()
        for width in (700, 650, 500, 610, 450):
            viewport.resize(width)

        assert clock.pending == 1
        clock.advance()

        assert changes == [LayoutTier.LARGE, LayoutTier.SMALL]

    @pytest.mark.unit
    def test_burst_returning_to_same_tier_is_silent(self, controller, viewport, clock, changes) -> None:
        controller.mount()
        viewport.resize(500)
        viewport.resize(1000)
        clock.advance()

        assert changes == [LayoutTier.LARGE]

    @pytest.mark.unit
    def test_resize_within_tier_is_silent(self, controller, viewport, clock, changes) -> None:
        controller.mount()
        for width in (1000, 900, 800):
            viewport.resize(width)
            clock.advance()

        assert changes == [LayoutTier.LARGE]

    @pytest.mark.unit
    def test_sequence_of_frames(self, controller, viewport, clock, changes) -> None:
        controller.mount()
        for width in (799, 600, 599, 800):
            viewport.resize(width)
            clock.advance()

        assert changes == [LayoutTier.LARGE, LayoutTier.MEDIUM, LayoutTier.SMALL, LayoutTier.LARGE]

    @pytest.mark.unit
    def test_late_subscriber_not_called_retroactively(self, controller, viewport, clock) -> None:
        controller.mount()
        seen: list[LayoutTier] = []
        controller.subscribe(seen.append)

        assert seen == []
        viewport.resize(500)
        clock.advance()
        assert seen == [LayoutTier.SMALL]

    @pytest.mark.unit
    def test_unsubscribe(self, controller, viewport, clock) -> None:
        seen: list[LayoutTier] = []
        unsubscribe = controller.subscribe(seen.append)
        controller.mount()
        unsubscribe()
        unsubscribe()

        viewport.resize(500)
        clock.advance()

        assert seen == [LayoutTier.LARGE]

    @pytest.mark.unit
    def test_subscriber_error_propagates(self, controller, viewport, clock) -> None:
        controller.mount()

        def broken(tier: LayoutTier) -> None:
            raise RuntimeError("cannot draw")

        controller.subscribe(broken)
        viewport.resize(500)

        with pytest.raises(RuntimeError, match="cannot draw"):
            clock.advance()
        assert controller.tier is LayoutTier.SMALL

    @pytest.mark.unit
    def test_custom_breakpoints(self, clock) -> None:
        viewport = SimulatedViewport(900)
        controller = LayoutTierController(viewport, clock, TierBreakpoints(large_min_width=1024, medium_min_width=768))

        assert controller.mount() is LayoutTier.MEDIUM


class TestRender:
    """Tests for render()."""

    @pytest.mark.unit
    def test_placeholder_before_mount(self, controller) -> None:
        assert controller.render(lambda tier: tier.wire_name, placeholder="loading") == "loading"

    @pytest.mark.unit
    def test_renders_current_tier(self, controller, viewport, clock) -> None:
        controller.mount()
        assert controller.render(lambda tier: tier.wire_name) == "LAYOUT_TYPE_LARGE"

        viewport.resize(650)
        clock.advance()
        assert controller.render(lambda tier: tier.wire_name) == "LAYOUT_TYPE_MEDIUM"

    @pytest.mark.unit
    def test_placeholder_after_unmount(self, controller) -> None:
        controller.mount()
        controller.unmount()
        assert controller.render(lambda tier: tier.wire_name) is None
