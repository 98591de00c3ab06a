"""ArchMC stats API adapter package.

This package contains the stats API client adapter for the report renderer.
"""

from .client import ArchAPIClient, ERROR_SNIPPET_LENGTH

__all__ = [
    "ArchAPIClient",
    "ERROR_SNIPPET_LENGTH",
]
