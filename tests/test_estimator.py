"""
Tests for per-document and per-collection estimation.
"""

import pytest
from prometheus_client import REGISTRY

from memsizer.exceptions import EmptyCollectionError, MalformedDocumentError
from memsizer.models.schema import Collection, FieldType, IndexedField
from memsizer.services.estimation.estimator import MemoryEstimator
from memsizer.services.schema_resolver import resolve_collection


def _collection(name: str, *fields) -> Collection:
    return Collection(
        name=name,
        indexed_fields=tuple(IndexedField(name=n, type=FieldType(t)) for n, t in fields),
    )


def test_string_and_int32_document() -> None:
    """'hello' costs five bytes and a present int32 four."""

    collection = _collection("greetings", ("text", "string"), ("count", "int32"))

    estimate = MemoryEstimator().estimate_document(collection, {"text": "hello", "count": 7})

    assert estimate == 9


def test_object_field_uses_serialized_length() -> None:
    collection = _collection("things", ("meta", "object"))

    assert MemoryEstimator().estimate_document(collection, {"meta": {"ab": 12345}}) == 12


def test_unindexed_and_missing_fields_are_ignored() -> None:
    collection = _collection("notes", ("title", "string"))

    estimate = MemoryEstimator().estimate_document(
        collection, {"title": "abc", "body": "x" * 500}
    )

    assert estimate == 3


def test_collection_statistics(products_schema, products_documents) -> None:
    collection = resolve_collection(products_schema)

    stats = MemoryEstimator().estimate_collection(collection, products_documents)

    assert stats.per_document == (21, 8, 17)
    assert stats.total == 46
    assert stats.average == pytest.approx(46 / 3)
    assert stats.lowest == 8
    assert stats.highest == 21
    assert stats.median == 17


def test_legacy_array_widths() -> None:
    collection = _collection("series", ("points", "int64[]"))
    document = {"points": [1, 2, 3]}

    assert MemoryEstimator().estimate_document(collection, document) == 24
    assert MemoryEstimator(legacy_array_widths=True).estimate_document(collection, document) == 3


def test_empty_collection_raises() -> None:
    collection = _collection("empty", ("title", "string"))

    with pytest.raises(EmptyCollectionError):
        MemoryEstimator().estimate_collection(collection, [])


def test_malformed_document_reports_context() -> None:
    collection = _collection("broken", ("title", "string"))
    documents = [{"id": "ok", "title": "fine"}, {"id": "bad", "title": 12}]

    with pytest.raises(MalformedDocumentError) as exc_info:
        MemoryEstimator().estimate_collection(collection, documents)

    details = exc_info.value.details
    assert details["collection"] == "broken"
    assert details["document_id"] == "bad"
    assert details["field"] == "title"


def test_documents_are_counted_in_metrics() -> None:
    collection = _collection("metered", ("flag", "bool"))
    labels = {"collection": "metered"}
    before = REGISTRY.get_sample_value("memsizer_documents_estimated_total", labels) or 0

    MemoryEstimator().estimate_collection(collection, [{"flag": True}, {"flag": False}])

    after = REGISTRY.get_sample_value("memsizer_documents_estimated_total", labels)
    assert after - before == 2
