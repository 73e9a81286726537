"""
Catalog operations: loading the API catalog and looking up APIs.
"""

from .service import CatalogService, FIRST, ANY

__all__ = [
    "CatalogService",
    "FIRST",
    "ANY",
]
