"""
Cli package.
"""

from .ui import (
    COLOR_ERROR,
    COLOR_INFO,
    COLOR_SUCCESS,
    COLOR_WARNING,
    InfoPanel,
    PlaceholderBox,
    TableDisplay,
    placeholder_renderers,
    print_error,
    print_info,
    print_success,
    print_warning,
    show_section_group,
)

__all__ = [
    "COLOR_ERROR",
    "COLOR_INFO",
    "COLOR_SUCCESS",
    "COLOR_WARNING",
    "InfoPanel",
    "PlaceholderBox",
    "TableDisplay",
    "placeholder_renderers",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "show_section_group",
]
