"""
Typesense client for schema retrieval and document export.
"""

from typing import Any, Dict, List, Optional, Sequence
import typesense

from ..config import TypesenseSettings, settings
from ..exceptions import ConfigurationError, IndexServiceError
from ..utils.logging import LoggerMixin
from ..utils.metrics import monitor_service_call
from ..utils.validation import parse_export


class TypesenseClient(LoggerMixin):
    """Read-only access to a Typesense cluster.

    The underlying client retries and times out requests itself and is safe to
    share between worker threads. Whatever it finally raises, API errors or
    transport errors such as a refused connection, surfaces as
    ``IndexServiceError``.
    """

    def __init__(self, config: Optional[TypesenseSettings] = None, client: Any = None):
        """
        Initialize Typesense client.

        Args:
            config: Connection settings, defaults to the global settings
            client: Pre-built ``typesense.Client``, mainly for tests
        """
        self.config = config or settings.typesense

        if client is None:
            if not self.config.api_key:
                raise ConfigurationError(
                    "TYPESENSE_API_KEY is not set",
                    details={"host": self.config.host, "port": self.config.port},
                )
            client = typesense.Client({
                "nodes": [{
                    "host": self.config.host,
                    "port": str(self.config.port),
                    "protocol": self.config.protocol,
                }],
                "api_key": self.config.api_key,
                "connection_timeout_seconds": self.config.connection_timeout,
                "num_retries": self.config.num_retries,
                "retry_interval_seconds": self.config.retry_interval,
            })
        self.client = client

        self.logger.info("Typesense client initialized",
                         host=self.config.host,
                         port=self.config.port,
                         protocol=self.config.protocol)

    @monitor_service_call("retrieve_schemas")
    def retrieve_schemas(self) -> List[Dict[str, Any]]:
        """
        Retrieve the schema of every collection.

        Returns:
            Raw schemas, ``{"name": ..., "fields": [...]}`` each

        Raises:
            IndexServiceError: If the service call fails
        """
        try:
            schemas = self.client.collections.retrieve()
        except Exception as e:
            raise IndexServiceError(
                f"Failed to retrieve collection schemas: {e}",
                details={"operation": "retrieve_schemas"},
                original=e,
            ) from e

        self.logger.info("Schemas retrieved", collections=len(schemas))
        return schemas

    @monitor_service_call("export_documents")
    def export_documents(self, collection_name: str,
                         field_names: Sequence[str]) -> List[Dict[str, Any]]:
        """
        Export a collection's documents restricted to the given fields.

        Args:
            collection_name: Collection to export
            field_names: Fields to include in each document

        Returns:
            Parsed documents

        Raises:
            IndexServiceError: If the export fails
            MalformedDocumentError: If an exported line is not a JSON object
        """
        params = {"include_fields": ",".join(field_names)}
        try:
            raw = self.client.collections[collection_name].documents.export(params)
        except Exception as e:
            raise IndexServiceError(
                f"Failed to export documents of '{collection_name}': {e}",
                details={"operation": "export_documents", "collection": collection_name},
                original=e,
            ) from e

        documents = parse_export(raw, collection_name)
        self.logger.info("Documents exported",
                         collection=collection_name,
                         documents=len(documents))
        return documents
