"""
Collection Memory Calculator

Estimates the in-memory footprint of the collections stored in a Typesense
indexing service and recommends how much RAM to provision for them.
"""

__version__ = "1.0.0"

from .config import settings
from .models import Collection, CollectionMemoryStats, CollectionReport, FieldType, IndexedField
from .services import MemoryCalculator, resolve_collection
from .services.estimation import MemoryEstimator

__all__ = [
    "settings",
    "Collection",
    "CollectionMemoryStats",
    "CollectionReport",
    "FieldType",
    "IndexedField",
    "MemoryCalculator",
    "MemoryEstimator",
    "resolve_collection",
]
