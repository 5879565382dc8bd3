"""
Estimation services.
"""

from .schema_resolver import resolve_collection, resolve_collections
from .calculator import MemoryCalculator, create_memory_calculator, rank_reports

__all__ = [
    "resolve_collection",
    "resolve_collections",
    "MemoryCalculator",
    "create_memory_calculator",
    "rank_reports",
]
