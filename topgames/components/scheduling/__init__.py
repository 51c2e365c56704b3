"""
Scheduling package.
"""

from .frame_scheduler_comp import (
    DEFAULT_FRAME_INTERVAL_S,
    AsyncioFrameClock,
    FrameClock,
    FrameThrottle,
    ManualFrameClock,
    schedule,
)

__all__ = [
    "DEFAULT_FRAME_INTERVAL_S",
    "AsyncioFrameClock",
    "FrameClock",
    "FrameThrottle",
    "ManualFrameClock",
    "schedule",
]
