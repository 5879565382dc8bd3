"""
Distribution statistics over per-document memory estimates.
"""

from typing import Sequence, Union
import numpy as np

from ...exceptions import EmptyCollectionError
from ...models.stats import CollectionMemoryStats

Number = Union[int, float]


def summarize(per_document: Sequence[Number], collection_name: str = "") -> CollectionMemoryStats:
    """
    Compute collection statistics from per-document estimates.

    The standard deviation is the population one (divides by N). The median
    is the element at index N // 2 of the sorted estimates, so even counts
    yield the upper-middle value rather than the mean of the middle pair.

    Args:
        per_document: Estimate of every document, in export order
        collection_name: Collection name, for error context

    Returns:
        Immutable statistics record

    Raises:
        EmptyCollectionError: If there are no estimates
    """
    count = len(per_document)
    if count == 0:
        raise EmptyCollectionError(
            f"Collection '{collection_name}' has no documents to estimate",
            details={"collection": collection_name},
        )

    total: Number = 0
    lowest = per_document[0]
    highest = per_document[0]
    for estimate in per_document:
        total += estimate
        if estimate < lowest:
            lowest = estimate
        if estimate > highest:
            highest = estimate

    average = total / count
    deviations = np.asarray(per_document, dtype=np.float64) - average
    standard_deviation = float(np.sqrt(np.mean(deviations ** 2)))
    median = sorted(per_document)[count // 2]

    return CollectionMemoryStats(
        average=average,
        standard_deviation=standard_deviation,
        lowest=lowest,
        highest=highest,
        median=median,
        total=total,
        per_document=tuple(per_document),
    )
