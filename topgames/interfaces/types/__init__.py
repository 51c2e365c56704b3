"""
Interface types package.
"""

from .catalog_types import CatalogEntryModel, CatalogFileModel, load_catalog_file

__all__ = [
    "CatalogEntryModel",
    "CatalogFileModel",
    "load_catalog_file",
]
