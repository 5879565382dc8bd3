"""
Statistics and report models produced by the estimator.
"""

from typing import Any, Dict, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field

from .schema import Collection

Number = Union[int, float]

BYTES_PER_MEGABYTE = 1024 ** 2
BYTES_PER_GIGABYTE = 1024 ** 3


class CollectionMemoryStats(BaseModel):
    """Memory statistics for one collection, in bytes."""

    model_config = ConfigDict(frozen=True)

    average: float = Field(..., description="Mean estimate per document")
    standard_deviation: float = Field(..., description="Population standard deviation")
    lowest: Number = Field(..., description="Smallest document estimate")
    highest: Number = Field(..., description="Largest document estimate")
    median: Number = Field(..., description="Upper-middle sorted estimate")
    total: Number = Field(..., description="Sum of all document estimates")
    per_document: Tuple[Number, ...] = Field(..., description="Estimate per document, in export order")

    @property
    def document_count(self) -> int:
        return len(self.per_document)


class CollectionReport(BaseModel):
    """Outcome of estimating one collection."""

    model_config = ConfigDict(frozen=True)

    collection: Collection
    stats: Optional[CollectionMemoryStats] = None
    error: Optional[Dict[str, Any]] = Field(default=None, description="Serialized failure, if any")

    @property
    def succeeded(self) -> bool:
        return self.stats is not None

    @property
    def total_megabytes(self) -> float:
        return self.stats.total / BYTES_PER_MEGABYTE if self.stats else 0.0

    @property
    def total_gigabytes(self) -> float:
        return self.stats.total / BYTES_PER_GIGABYTE if self.stats else 0.0

    def recommended_megabytes(self, multiplier: float) -> float:
        """Provisioning figure: total scaled by the safety multiplier, in MB."""
        if not self.stats:
            return 0.0
        return self.stats.total * multiplier / BYTES_PER_MEGABYTE

    def to_dict(self, multiplier: float) -> Dict[str, Any]:
        data: Dict[str, Any] = {"collection": self.collection.name}
        if self.stats:
            data.update({
                "documents": self.stats.document_count,
                "total_bytes": self.stats.total,
                "total_mb": round(self.total_megabytes, 2),
                "total_gb": round(self.total_gigabytes, 2),
                "recommended_mb": round(self.recommended_megabytes(multiplier), 2),
                "average_bytes": round(self.stats.average, 2),
                "median_bytes": self.stats.median,
                "standard_deviation_bytes": round(self.stats.standard_deviation, 2),
                "lowest_bytes": self.stats.lowest,
                "highest_bytes": self.stats.highest,
            })
        else:
            data["error"] = self.error
        return data
