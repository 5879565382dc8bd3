"""
Schema resolver: turns raw collection schemas into indexed-field lists.
"""

from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from ..exceptions import SchemaError
from ..models.schema import Collection, FieldType, IndexedField
from ..utils.logging import get_logger

logger = get_logger(__name__)


def is_indexed(raw_field: Dict[str, Any]) -> bool:
    """The service indexes a field unless its index flag is explicitly false."""
    index = raw_field.get("index")
    return index is None or bool(index)


def resolve_field_type(raw_type: Optional[str], collection_name: str, field_name: str) -> FieldType:
    """
    Map a declared type onto the sizing catalog.

    Raises:
        SchemaError: If the type is missing or unknown
    """
    if not raw_type:
        raise SchemaError(
            f"Field '{field_name}' of '{collection_name}' has no declared type",
            details={"collection": collection_name, "field": field_name},
        )
    try:
        return FieldType(raw_type)
    except ValueError as e:
        raise SchemaError(
            f"Field '{field_name}' of '{collection_name}' has unsupported type '{raw_type}'",
            details={
                "collection": collection_name,
                "field": field_name,
                "type": raw_type,
                "supported": list(FieldType.values()),
            },
            original=e,
        ) from e


def resolve_collection(raw_schema: Dict[str, Any]) -> Collection:
    """
    Build a Collection from a raw schema, keeping indexed fields only.

    Args:
        raw_schema: ``{"name": ..., "fields": [{"name", "type", "index"?}, ...]}``

    Returns:
        Collection with indexed fields in declaration order

    Raises:
        SchemaError: If the schema has no name or an indexed field has a bad type
    """
    name = raw_schema.get("name")
    if not isinstance(name, str) or not name.strip():
        raise SchemaError("Collection schema has no name", details={"schema": raw_schema})

    indexed_fields = []
    for raw_field in raw_schema.get("fields") or []:
        if not is_indexed(raw_field):
            continue
        field_name = raw_field.get("name")
        if not isinstance(field_name, str) or not field_name.strip():
            raise SchemaError(
                f"Collection '{name}' declares a field without a valid name",
                details={"collection": name, "field": raw_field},
            )
        field_type = resolve_field_type(raw_field.get("type"), name, field_name)
        try:
            indexed_fields.append(IndexedField(name=field_name, type=field_type))
        except ValidationError as e:
            raise SchemaError(
                f"Field '{field_name}' of '{name}' is invalid: {e}",
                details={"collection": name, "field": raw_field},
                original=e,
            ) from e

    logger.debug("Schema resolved", collection=name, indexed_fields=len(indexed_fields))
    return Collection(name=name, indexed_fields=tuple(indexed_fields))


def resolve_collections(raw_schemas: Iterable[Dict[str, Any]]) -> List[Collection]:
    """Resolve every schema, failing on the first invalid one."""
    return [resolve_collection(raw_schema) for raw_schema in raw_schemas]
