"""
topgames - responsive section layout for the top games overlay.
"""

from topgames.__version__ import __version__

__all__ = ["__version__"]
