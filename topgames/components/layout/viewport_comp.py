"""Viewport environment contract and an in-memory implementation.

The tier controller never touches a real display surface. It receives an
object satisfying ViewportEnvironment, which exposes the current width and
lets it attach/detach one resize listener.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

ResizeListener = Callable[[], None]


@runtime_checkable
class ViewportEnvironment(Protocol):
    """Source of viewport width and resize notifications."""

    def get_width(self) -> float:
        """Current viewport width in px, read synchronously."""
        ...

    def add_resize_listener(self, listener: ResizeListener) -> None:
        """Register listener to be called on every raw resize signal."""
        ...

    def remove_resize_listener(self, listener: ResizeListener) -> None:
        """Unregister a listener added with add_resize_listener."""
        ...


class SimulatedViewport:
    """Viewport whose width changes only through resize().

    Used by the CLI simulation and by tests in place of a window.
    """

    def __init__(self, width: float) -> None:
        self._width = width
        self._listeners: list[ResizeListener] = []

    def get_width(self) -> float:
        return self._width

    def add_resize_listener(self, listener: ResizeListener) -> None:
        self._listeners.append(listener)

    def remove_resize_listener(self, listener: ResizeListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            logger.debug("Resize listener %r was not registered", listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def resize(self, width: float) -> None:
        """Change the width and emit one raw resize signal."""
        self._width = width
        for listener in list(self._listeners):
            listener()
