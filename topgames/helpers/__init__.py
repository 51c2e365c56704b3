"""
Helpers package.
"""

from .exceptions import ControllerLifecycleError, LayoutConfigurationError, SectionGroupError
from .logging_helper import TopgamesLogFilter, clear_log_context, configure_logging, set_log_context

__all__ = [
    "ControllerLifecycleError",
    "LayoutConfigurationError",
    "SectionGroupError",
    "TopgamesLogFilter",
    "clear_log_context",
    "configure_logging",
    "set_log_context",
]
