"""
Byte-cost model for indexed field values.

Each catalog type maps to one cost rule. Fixed-width scalars use their wire
width; strings scale with their length; objects, auto fields and their
array forms are priced by the length of their compact JSON text, a proxy
that does not model the engine's real layout.

Values of ``0``, ``NaN``, ``False``, ``""`` or ``None`` count as absent and
cost nothing. This undercounts present zero/false/empty values.
"""

import json
import math
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Union

from ...exceptions import MalformedDocumentError
from ...models.schema import FieldType, IndexedField
from ...utils.validation import ensure_valid_cost

Number = Union[int, float]
CostRule = Callable[[Any, str], Number]

INT32_WIDTH = 4
INT64_WIDTH = 8
FLOAT_WIDTH = 4
BOOL_WIDTH = 1
CHAR_WIDTH = 1
# Fallback per-element cost for types without a dedicated rule
GENERIC_ELEMENT_WIDTH = 1


def is_present(value: Any) -> bool:
    """Return False for values treated as absent."""
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, float) and math.isnan(value):
        return False
    if isinstance(value, (int, float)):
        return value != 0
    return True


def serialized_length(value: Any, field_name: str) -> int:
    """Length of the compact JSON text of a value."""
    try:
        text = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise MalformedDocumentError(
            f"Field '{field_name}' cannot be serialized",
            details={"field": field_name},
            original=e,
        ) from e
    return len(text) * CHAR_WIDTH


def _require_list(value: Any, field_name: str) -> list:
    if not isinstance(value, list):
        raise MalformedDocumentError(
            f"Field '{field_name}' should be an array, got {type(value).__name__}",
            details={"field": field_name},
        )
    return value


def _string_cost(value: Any, field_name: str) -> Number:
    if not isinstance(value, str):
        raise MalformedDocumentError(
            f"Field '{field_name}' should be a string, got {type(value).__name__}",
            details={"field": field_name},
        )
    return len(value) * CHAR_WIDTH


def _fixed(width: int) -> CostRule:
    def rule(value: Any, field_name: str) -> Number:
        return width
    return rule


def _string_array_cost(value: Any, field_name: str) -> Number:
    return sum(_string_cost(element, field_name) for element in _require_list(value, field_name))


def _fixed_array(width: int) -> CostRule:
    def rule(value: Any, field_name: str) -> Number:
        return len(_require_list(value, field_name)) * width
    return rule


def _serialized_array_cost(value: Any, field_name: str) -> Number:
    return sum(serialized_length(element, field_name) for element in _require_list(value, field_name))


def build_catalog(legacy_array_widths: bool = False) -> Mapping[FieldType, CostRule]:
    """
    Build the immutable type-to-rule mapping.

    Args:
        legacy_array_widths: Price int32[], int64[] and float[] at one byte
            per element, as historical reports did

    Raises:
        RuntimeError: If a FieldType has no rule
    """
    int32_element = GENERIC_ELEMENT_WIDTH if legacy_array_widths else INT32_WIDTH
    int64_element = GENERIC_ELEMENT_WIDTH if legacy_array_widths else INT64_WIDTH
    float_element = GENERIC_ELEMENT_WIDTH if legacy_array_widths else FLOAT_WIDTH

    rules: Dict[FieldType, CostRule] = {
        FieldType.STRING: _string_cost,
        FieldType.INT32: _fixed(INT32_WIDTH),
        FieldType.INT64: _fixed(INT64_WIDTH),
        FieldType.FLOAT: _fixed(FLOAT_WIDTH),
        FieldType.BOOL: _fixed(BOOL_WIDTH),
        FieldType.OBJECT: serialized_length,
        FieldType.AUTO: serialized_length,
        FieldType.STRING_ARRAY: _string_array_cost,
        FieldType.INT32_ARRAY: _fixed_array(int32_element),
        FieldType.INT64_ARRAY: _fixed_array(int64_element),
        FieldType.FLOAT_ARRAY: _fixed_array(float_element),
        FieldType.BOOL_ARRAY: _fixed_array(BOOL_WIDTH),
        FieldType.OBJECT_ARRAY: _serialized_array_cost,
        FieldType.AUTO_ARRAY: _serialized_array_cost,
        # Approximate: element count only
        FieldType.GEOPOINT: _fixed_array(GENERIC_ELEMENT_WIDTH),
        FieldType.GEOPOINT_ARRAY: _fixed_array(GENERIC_ELEMENT_WIDTH),
    }

    missing = set(FieldType) - set(rules)
    if missing:
        raise RuntimeError(f"No cost rule for field types: {sorted(t.value for t in missing)}")

    return MappingProxyType(rules)


CATALOG = build_catalog()
LEGACY_CATALOG = build_catalog(legacy_array_widths=True)


def get_catalog(legacy_array_widths: bool = False) -> Mapping[FieldType, CostRule]:
    return LEGACY_CATALOG if legacy_array_widths else CATALOG


def field_cost(field: IndexedField, value: Any,
               catalog: Mapping[FieldType, CostRule] = CATALOG) -> Number:
    """
    Estimate the bytes one field value occupies.

    Args:
        field: Indexed field being priced
        value: The document's value for the field (None when absent)
        catalog: Cost rules to apply

    Returns:
        Validated, non-negative byte cost

    Raises:
        MalformedDocumentError: If the value does not fit its rule
    """
    if not is_present(value):
        return 0
    cost = catalog[field.type](value, field.name)
    return ensure_valid_cost(cost, field.name)
