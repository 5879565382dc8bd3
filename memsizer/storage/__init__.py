"""
Indexing service access.
"""

from .typesense_client import TypesenseClient

__all__ = [
    "TypesenseClient",
]
