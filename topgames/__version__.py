"""Version information for topgames."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to composition order or public DTOs
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.1.0 - Initial release
#         - Viewport tier classification with configurable breakpoints
#         - Frame-aligned resize coalescing (manual and asyncio clocks)
#         - Layout tier controller with mount/unmount lifecycle
#         - Section composition and section group rendering
#         - Rich CLI preview and resize simulation
