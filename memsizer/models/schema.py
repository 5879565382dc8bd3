"""
Schema models: field types, indexed fields and collections.
"""

from enum import Enum
from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator


class FieldType(str, Enum):
    """Field types the sizing catalog knows how to price."""
    STRING = "string"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT = "float"
    BOOL = "bool"
    OBJECT = "object"
    AUTO = "auto"
    GEOPOINT = "geopoint"
    STRING_ARRAY = "string[]"
    INT32_ARRAY = "int32[]"
    INT64_ARRAY = "int64[]"
    FLOAT_ARRAY = "float[]"
    BOOL_ARRAY = "bool[]"
    OBJECT_ARRAY = "object[]"
    AUTO_ARRAY = "auto[]"
    GEOPOINT_ARRAY = "geopoint[]"

    @classmethod
    def values(cls) -> Tuple[str, ...]:
        return tuple(member.value for member in cls)


class IndexedField(BaseModel):
    """A schema field that contributes to the service's indexed memory."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Field name")
    type: FieldType = Field(..., description="Declared field type")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v or len(v.strip()) == 0:
            raise ValueError("Field name cannot be empty")
        return v


class Collection(BaseModel):
    """A collection and its indexed fields, in schema declaration order."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Collection name")
    indexed_fields: Tuple[IndexedField, ...] = Field(default=(), description="Indexed fields")

    @property
    def field_names(self) -> Tuple[str, ...]:
        """Indexed field names, used as the export filter."""
        return tuple(field.name for field in self.indexed_fields)
