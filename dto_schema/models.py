"""Schema data model.

FieldConfig nodes form a tree (no back-references). Every model is frozen:
builders return new nodes instead of rewriting returned ones.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FieldType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    EMAIL = "email"
    UUID = "uuid"
    PHONE = "phone"
    URL = "url"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    FULL_NAME = "fullName"
    ADDRESS = "address"
    CITY = "city"
    COUNTRY = "country"
    ZIP_CODE = "zipCode"
    COMPANY = "company"
    LOREM = "lorem"
    ENUM = "enum"
    ARRAY = "array"
    OBJECT = "object"


class InputMode(str, Enum):
    JSON = "json"
    TYPESCRIPT = "typescript"
    AUTO = "auto"


class ExportFormat(str, Enum):
    JSON = "json"
    CSV = "csv"
    SQL = "sql"
    XML = "xml"


class _WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class FieldConfig(_WireModel):
    name: str
    type: FieldType
    required: bool = True
    nullable: bool = False
    nullable_percent: Optional[float] = Field(default=None, ge=0, le=100)
    hint: Optional[str] = None

    # string
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[str] = None

    # number
    min: Optional[Union[int, float]] = None
    max: Optional[Union[int, float]] = None
    precision: Optional[int] = None

    # enum
    enum_values: Optional[List[str]] = None

    # array
    array_min_length: Optional[int] = None
    array_max_length: Optional[int] = None
    array_item_config: Optional[FieldConfig] = None

    # object
    nested_fields: Optional[List[FieldConfig]] = None

    faker_template: Optional[str] = None


class ParsedSchema(_WireModel):
    fields: List[FieldConfig]
    original_input: str
    parse_errors: Optional[List[str]] = None

    @property
    def has_errors(self) -> bool:
        return bool(self.parse_errors)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> ParsedSchema:
        return cls.model_validate(payload)


class ExportResult(_WireModel):
    content: str
    mime_type: str
    file_extension: str
