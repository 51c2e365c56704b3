"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class LayoutConfigurationError(ValueError):
    """Raised when layout inputs are misconfigured (unknown tier, bad slot table, bad catalog entry)."""


class SectionGroupError(LayoutConfigurationError):
    """Raised when a section group is asked to render something composition did not produce."""


class ControllerLifecycleError(RuntimeError):
    """Raised on an illegal layout tier controller transition (double mount, mount after unmount)."""
