"""
Memory estimator: per-document estimates and collection statistics.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from ...exceptions import MalformedDocumentError
from ...models.schema import Collection
from ...models.stats import CollectionMemoryStats
from ...utils.logging import LoggerMixin
from ...utils.metrics import metrics_collector, monitor_function
from .sizing import CostRule, field_cost, get_catalog
from .statistics import summarize

Number = Union[int, float]


class MemoryEstimator(LoggerMixin):
    """Prices documents against a collection's indexed fields.

    Holds no state besides the immutable cost catalog, so one instance can
    serve any number of collections concurrently.
    """

    def __init__(self, legacy_array_widths: bool = False,
                 catalog: Optional[Mapping[Any, CostRule]] = None):
        self.catalog = catalog or get_catalog(legacy_array_widths)

    def estimate_document(self, collection: Collection, document: Dict[str, Any]) -> Number:
        """
        Sum the costs of the collection's indexed fields in one document.

        Raises:
            MalformedDocumentError: If a field value cannot be priced
        """
        estimate: Number = 0
        for field in collection.indexed_fields:
            try:
                estimate += field_cost(field, document.get(field.name), self.catalog)
            except MalformedDocumentError as e:
                e.details.setdefault("collection", collection.name)
                e.details.setdefault("document_id", document.get("id"))
                raise
        return estimate

    @monitor_function("estimate_collection")
    def estimate_collection(self, collection: Collection,
                            documents: Iterable[Dict[str, Any]]) -> CollectionMemoryStats:
        """
        Estimate every document and summarize the collection.

        Args:
            collection: Collection whose indexed fields are priced
            documents: Exported documents

        Returns:
            Collection statistics

        Raises:
            MalformedDocumentError: If any document cannot be priced
            EmptyCollectionError: If there are no documents
        """
        per_document: List[Number] = [
            self.estimate_document(collection, document) for document in documents
        ]
        stats = summarize(per_document, collection.name)
        metrics_collector.record_documents(collection.name, stats.document_count)

        self.logger.debug("Collection estimated",
                          collection=collection.name,
                          documents=stats.document_count,
                          total_bytes=stats.total)
        return stats
