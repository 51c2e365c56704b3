"""Frame-aligned coalescing of high-frequency signals.

schedule(callback, clock) returns a FrameThrottle. Calling the throttle
cancels whatever invocation is still pending and requests a new one on the
clock's next frame, so a burst of N calls inside one frame runs ``callback``
once, with the arguments of the last call.

The scheduling primitive is injected as a FrameClock:
- ManualFrameClock: frames advance only when told to (tests, simulations)
- AsyncioFrameClock: frames are ``loop.call_later(frame_interval_s)`` ticks

Nothing here blocks. If no frame ever comes, the pending callback stays
pending; a throttle holds at most one outstanding handle.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

DEFAULT_FRAME_INTERVAL_S = 1 / 60


@runtime_checkable
class FrameClock(Protocol):
    """Scheduling primitive that runs callbacks on the next frame boundary."""

    def request_frame(self, callback: Callable[[], None]) -> Any:
        """Schedule callback for the next frame and return a cancellation handle."""
        ...

    def cancel_frame(self, handle: Any) -> None:
        """Cancel a callback previously returned by request_frame (no-op if already run)."""
        ...


class ManualFrameClock:
    """Frame clock driven explicitly by advance().

    Callbacks requested while a frame is running land in the following frame.
    """

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._callbacks: dict[int, Callable[[], None]] = {}
        self.frames_run = 0

    def request_frame(self, callback: Callable[[], None]) -> int:
        handle = next(self._ids)
        self._callbacks[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._callbacks.pop(handle, None)

    @property
    def pending(self) -> int:
        """Number of callbacks waiting for the next frame."""
        return len(self._callbacks)

    def advance(self) -> int:
        """Run one frame. Returns how many callbacks ran."""
        due = list(self._callbacks.items())
        self._callbacks.clear()
        self.frames_run += 1
        for _handle, callback in due:
            callback()
        return len(due)


class AsyncioFrameClock:
    """Frame clock backed by an asyncio event loop timer."""

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop | None = None,
        frame_interval_s: float = DEFAULT_FRAME_INTERVAL_S,
    ) -> None:
        if frame_interval_s <= 0:
            raise ValueError(f"frame_interval_s must be positive, got {frame_interval_s}")
        self._loop = loop
        self.frame_interval_s = frame_interval_s

    def request_frame(self, callback: Callable[[], None]) -> asyncio.TimerHandle:
        # Resolve lazily so the clock can be built before the loop starts
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(self.frame_interval_s, callback)

    def cancel_frame(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()


class FrameThrottle:
    """Callable trigger that coalesces calls into one callback per frame."""

    def __init__(self, callback: Callable[..., None], clock: FrameClock) -> None:
        self._callback = callback
        self._clock = clock
        self._handle: Any = None
        self._args: tuple[Any, ...] = ()
        self._kwargs: dict[str, Any] = {}

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        if self._handle is not None:
            self._clock.cancel_frame(self._handle)
            logger.debug("Superseding pending frame callback")
        self._args = args
        self._kwargs = kwargs
        self._handle = self._clock.request_frame(self._run)

    @property
    def pending(self) -> bool:
        """True while a callback is waiting for its frame."""
        return self._handle is not None

    def cancel(self) -> None:
        """Drop the pending callback, if any."""
        if self._handle is not None:
            self._clock.cancel_frame(self._handle)
            self._handle = None
        self._args = ()
        self._kwargs = {}

    def _run(self) -> None:
        args, kwargs = self._args, self._kwargs
        self._handle = None
        self._args = ()
        self._kwargs = {}
        self._callback(*args, **kwargs)


def schedule(callback: Callable[..., None], clock: FrameClock) -> FrameThrottle:
    """Wrap callback so that bursts of triggers run it once per frame of clock."""
    return FrameThrottle(callback, clock)
