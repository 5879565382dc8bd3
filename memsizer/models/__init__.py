"""
Data models for the memory calculator.
"""

from .schema import FieldType, IndexedField, Collection
from .stats import CollectionMemoryStats, CollectionReport

__all__ = [
    "FieldType",
    "IndexedField",
    "Collection",
    "CollectionMemoryStats",
    "CollectionReport",
]
