"""
Shared fixtures: logging setup and an in-memory indexing service.
"""

from typing import Any, Dict, List, Optional

import pytest

from memsizer.utils.logging import setup_logging


@pytest.fixture(scope="session", autouse=True)
def configure_logging() -> None:
    """Route structured logs through stdlib logging before any logger is used."""

    setup_logging(log_level="DEBUG", log_format="text")


class FakeIndexClient:
    """Stands in for TypesenseClient with canned schemas and exports."""

    def __init__(self,
                 schemas: List[Dict[str, Any]],
                 documents: Optional[Dict[str, List[Dict[str, Any]]]] = None,
                 failures: Optional[Dict[str, Exception]] = None):
        self.schemas = schemas
        self.documents = documents or {}
        self.failures = failures or {}
        self.export_calls: List[tuple] = []

    def retrieve_schemas(self) -> List[Dict[str, Any]]:
        return self.schemas

    def export_documents(self, collection_name: str, field_names) -> List[Dict[str, Any]]:
        self.export_calls.append((collection_name, tuple(field_names)))
        if collection_name in self.failures:
            raise self.failures[collection_name]
        return self.documents.get(collection_name, [])


@pytest.fixture
def products_schema() -> Dict[str, Any]:
    return {
        "name": "products",
        "fields": [
            {"name": "title", "type": "string"},
            {"name": "price", "type": "float", "index": True},
            {"name": "stock", "type": "int32"},
            {"name": "description", "type": "string", "index": False},
            {"name": "tags", "type": "string[]"},
        ],
    }


@pytest.fixture
def products_documents() -> List[Dict[str, Any]]:
    return [
        {"id": "1", "title": "lamp", "price": 19.5, "stock": 3, "tags": ["home", "light"]},
        {"id": "2", "title": "desk", "price": 120.0, "stock": 0, "tags": []},
        {"id": "3", "title": "chair", "price": 45.0, "stock": 12, "tags": ["home"]},
    ]


@pytest.fixture
def make_client():
    """Factory for in-memory indexing service clients."""

    return FakeIndexClient
