"""
Memory estimation: sizing rules, per-document aggregation and statistics.
"""

from .sizing import CATALOG, build_catalog, field_cost, is_present, serialized_length
from .statistics import summarize
from .estimator import MemoryEstimator

__all__ = [
    "CATALOG",
    "build_catalog",
    "field_cost",
    "is_present",
    "serialized_length",
    "summarize",
    "MemoryEstimator",
]
