"""
Memory Calculator

Runs the estimator over every collection of the indexing service. Each
collection is estimated in its own task; blocking service calls run in
worker threads and a semaphore bounds how many exports are in flight.
A failing collection is recorded in its report and does not stop the
others unless fail-fast is requested.
"""

import asyncio
from typing import Any, Dict, List, Optional

from ..config import settings
from ..exceptions import MemoryCalculatorError
from ..models.schema import Collection
from ..models.stats import CollectionMemoryStats, CollectionReport
from ..utils.logging import get_logger
from ..utils.metrics import monitor_coroutine
from .estimation.estimator import MemoryEstimator
from .schema_resolver import resolve_collection

logger = get_logger(__name__)


class MemoryCalculator:
    """
    Estimates the memory footprint of every collection of an indexing service.

    The client must provide ``retrieve_schemas()`` and
    ``export_documents(collection_name, field_names)``, both blocking.
    """

    def __init__(self,
                 client: Any,
                 estimator: Optional[MemoryEstimator] = None,
                 max_concurrency: int = 4,
                 fail_fast: bool = False):
        self.client = client
        self.estimator = estimator or MemoryEstimator()
        self.max_concurrency = max_concurrency
        self.fail_fast = fail_fast

        logger.info("Memory calculator initialized",
                    max_concurrency=max_concurrency,
                    fail_fast=fail_fast)

    async def fetch_collections(self) -> List[Dict[str, Any]]:
        """Retrieve raw schemas from the service."""
        return await asyncio.to_thread(self.client.retrieve_schemas)

    @monitor_coroutine("estimate_collection_from_service")
    async def estimate_collection(self, collection: Collection) -> CollectionMemoryStats:
        """
        Export a collection's indexed fields and compute its statistics.

        Raises:
            IndexServiceError: If the export fails
            MalformedDocumentError: If a document cannot be priced
            EmptyCollectionError: If the collection has no documents
        """
        documents = await asyncio.to_thread(
            self.client.export_documents, collection.name, collection.field_names
        )
        return self.estimator.estimate_collection(collection, documents)

    async def _report_for(self, raw_schema: Dict[str, Any],
                          semaphore: asyncio.Semaphore) -> CollectionReport:
        name = str(raw_schema.get("name") or "<unnamed>")
        collection = Collection(name=name)
        try:
            collection = resolve_collection(raw_schema)
            async with semaphore:
                logger.info("Estimating collection",
                            collection=collection.name,
                            indexed_fields=len(collection.indexed_fields))
                stats = await self.estimate_collection(collection)
        except MemoryCalculatorError as e:
            logger.error("Collection estimation failed",
                         collection=name,
                         error_type=e.kind,
                         error_message=e.message)
            if self.fail_fast:
                raise
            return CollectionReport(collection=collection, error=e.to_dict())

        logger.info("Collection estimated",
                    collection=collection.name,
                    documents=stats.document_count,
                    total_bytes=stats.total)
        return CollectionReport(collection=collection, stats=stats)

    async def run(self) -> List[CollectionReport]:
        """
        Estimate every collection concurrently and rank the results.

        Returns:
            Reports ranked by total memory, failures last

        Raises:
            IndexServiceError: If schemas cannot be retrieved
            MemoryCalculatorError: On the first failure when fail-fast is set
        """
        raw_schemas = await self.fetch_collections()
        semaphore = asyncio.Semaphore(self.max_concurrency)

        tasks = [
            asyncio.create_task(self._report_for(raw_schema, semaphore))
            for raw_schema in raw_schemas
        ]
        try:
            reports = await asyncio.gather(*tasks)
        except Exception:
            for task in tasks:
                task.cancel()
            raise

        ranked = rank_reports(reports)
        logger.info("Estimation finished",
                    collections=len(ranked),
                    failed=sum(1 for report in ranked if not report.succeeded))
        return ranked


def rank_reports(reports: List[CollectionReport]) -> List[CollectionReport]:
    """Order successful reports by total descending, then failures in input order."""
    succeeded = sorted(
        (report for report in reports if report.succeeded),
        key=lambda report: report.stats.total,
        reverse=True,
    )
    failed = [report for report in reports if not report.succeeded]
    return succeeded + failed


def create_memory_calculator(client: Any,
                             legacy_array_widths: Optional[bool] = None,
                             max_concurrency: Optional[int] = None,
                             fail_fast: Optional[bool] = None) -> MemoryCalculator:
    """Create a memory calculator, filling unset options from settings."""
    if legacy_array_widths is None:
        legacy_array_widths = settings.estimator.legacy_array_widths
    if max_concurrency is None:
        max_concurrency = settings.estimator.max_concurrency
    if fail_fast is None:
        fail_fast = settings.estimator.fail_fast

    return MemoryCalculator(
        client=client,
        estimator=MemoryEstimator(legacy_array_widths=legacy_array_widths),
        max_concurrency=max_concurrency,
        fail_fast=fail_fast,
    )
