"""Layout tier controller.

Owns the current layout tier of one overlay instance and tells subscribers
when it changes.

Lifecycle:
- uninitialized: constructed, no tier yet; render() returns the placeholder
- ready: mount() classified the viewport and attached one resize listener;
  every frame after a resize burst reclassifies, and subscribers hear about
  the new tier only if it differs from the current one
- unmounted: listener detached, pending recomputation cancelled, subscribers
  dropped; terminal

Raw resize signals go through a FrameThrottle, so a burst of resizes inside
one frame costs a single classification using the width at frame time.
Subscriber exceptions are not caught here: a subscriber that cannot render the
new tier fails loudly to whoever drove the frame.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from topgames.components.layout.tier_classifier_comp import classify, validate_breakpoints
from topgames.components.scheduling.frame_scheduler_comp import schedule
from topgames.helpers.dto.layout_dto import DEFAULT_BREAKPOINTS, ControllerState, LayoutTier, TierBreakpoints
from topgames.helpers.exceptions import ControllerLifecycleError

if TYPE_CHECKING:
    from topgames.components.layout.viewport_comp import ViewportEnvironment
    from topgames.components.scheduling.frame_scheduler_comp import FrameClock

logger = logging.getLogger(__name__)

TierListener = Callable[[LayoutTier], None]
T = TypeVar("T")


class LayoutTierController:
    """Reactive holder of the current layout tier."""

    def __init__(
        self,
        environment: ViewportEnvironment,
        clock: FrameClock,
        breakpoints: TierBreakpoints = DEFAULT_BREAKPOINTS,
    ) -> None:
        self._environment = environment
        self._breakpoints = validate_breakpoints(breakpoints)
        self._throttle = schedule(self._recompute, clock)
        self._state: ControllerState = "uninitialized"
        self._tier: LayoutTier | None = None
        self._listeners: list[TierListener] = []
        self._resize_listener: Callable[[], None] | None = None

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def tier(self) -> LayoutTier | None:
        """Current tier, or None until mounted."""
        return self._tier

    @property
    def is_ready(self) -> bool:
        return self._state == "ready"

    @property
    def recompute_pending(self) -> bool:
        """True while a resize burst is waiting for its frame."""
        return self._throttle.pending

    def subscribe(self, listener: TierListener) -> Callable[[], None]:
        """
        Register a listener for tier changes.

        The listener is called with the new tier on mount and on every
        subsequent change. It is not called retroactively for a tier that was
        set before subscribing.

        Returns:
            Function that removes the listener (safe to call more than once)

        Raises:
            ControllerLifecycleError: If the controller is unmounted
        """
        if self._state == "unmounted":
            raise ControllerLifecycleError("Cannot subscribe to an unmounted layout tier controller")
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def mount(self) -> LayoutTier:
        """
        Classify the viewport, enter ready state and start listening for resizes.

        Returns:
            The initial tier

        Raises:
            ControllerLifecycleError: If already mounted or unmounted
        """
        if self._state != "uninitialized":
            raise ControllerLifecycleError(f"Cannot mount layout tier controller in state '{self._state}'")

        width = self._environment.get_width()
        tier = classify(width, self._breakpoints)
        self._tier = tier
        self._state = "ready"

        self._resize_listener = self._on_resize
        self._environment.add_resize_listener(self._resize_listener)
        logger.info("Mounted at width %s: tier %s", width, tier.name)

        self._notify(tier)
        return tier

    def unmount(self) -> None:
        """Detach from the environment and cancel pending work. Idempotent."""
        if self._state == "unmounted":
            return
        if self._resize_listener is not None:
            self._environment.remove_resize_listener(self._resize_listener)
            self._resize_listener = None
        self._throttle.cancel()
        self._listeners.clear()
        self._state = "unmounted"
        logger.info("Unmounted layout tier controller")

    def render(self, render_fn: Callable[[LayoutTier], T], placeholder: Any = None) -> T | Any:
        """Return render_fn(tier) while ready, otherwise the placeholder."""
        if self._state != "ready" or self._tier is None:
            return placeholder
        return render_fn(self._tier)

    def _on_resize(self) -> None:
        self._throttle()

    def _recompute(self) -> None:
        if self._state != "ready":
            return

        tier = classify(self._environment.get_width(), self._breakpoints)
        if tier == self._tier:
            logger.debug("Tier unchanged (%s), skipping notification", tier.name)
            return

        previous = self._tier
        self._tier = tier
        logger.info("Tier changed: %s -> %s", previous.name if previous else None, tier.name)
        self._notify(tier)

    def _notify(self, tier: LayoutTier) -> None:
        for listener in list(self._listeners):
            # A listener may unmount the controller mid-notification
            if self._state != "ready":
                return
            listener(tier)
