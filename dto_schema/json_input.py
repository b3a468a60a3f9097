from __future__ import annotations

import json
import logging
from typing import Any, Dict, List

from .inference import infer_field_type
from .io_utils import reject_constant
from .models import FieldConfig, FieldType, ParsedSchema

logger = logging.getLogger(__name__)

NOT_AN_OBJECT_ERROR = "Input must be a JSON object or array of objects"
TOO_DEEP_ERROR = "Input is nested too deeply"


def _is_integral(number) -> bool:
    return isinstance(number, int) or float(number).is_integer()


def build_nested_fields(obj: Dict[str, Any]) -> List[FieldConfig]:
    return [build_field(str(key), value) for key, value in obj.items()]


def build_field(name: str, value: Any) -> FieldConfig:
    """Build a FieldConfig for one key/value pair of an example payload.

    Recurses into objects and into the first element of arrays, so the
    resulting tree is as deep as the example itself.
    """
    field_type = infer_field_type(value)
    attrs: Dict[str, Any] = {}

    if field_type is FieldType.STRING:
        text = "null" if value is None else str(value)
        attrs["min_length"] = 1
        attrs["max_length"] = max(len(text) * 2, 50)

    elif field_type is FieldType.NUMBER:
        attrs["min"] = 0
        attrs["max"] = max(value * 10, 1000)
        attrs["precision"] = 0 if _is_integral(value) else 2

    elif field_type is FieldType.ARRAY:
        attrs["array_min_length"] = 1
        attrs["array_max_length"] = max(len(value), 5)
        if value:
            first_item = value[0]
            item_config = build_field("item", first_item)
            # Arrays of objects always expose the full nested structure.
            if isinstance(first_item, dict):
                item_config = item_config.model_copy(update={
                    "type": FieldType.OBJECT,
                    "nested_fields": build_nested_fields(first_item),
                })
            attrs["array_item_config"] = item_config

    elif field_type is FieldType.OBJECT:
        attrs["nested_fields"] = build_nested_fields(value)

    return FieldConfig(name=name, type=field_type, **attrs)


def parse_json_input(input_text: str) -> ParsedSchema:
    """Infer a schema from example JSON.

    A top-level array contributes only its first element as the template;
    later elements are ignored. Never raises: failures come back as
    ``parse_errors`` on an empty schema.
    """
    try:
        parsed = json.loads(input_text, parse_constant=reject_constant)
    except (ValueError, TypeError, RecursionError) as e:
        logger.debug("JSON input rejected: %s", e)
        return ParsedSchema(
            fields=[],
            original_input=input_text,
            parse_errors=[f"Invalid JSON: {e}"],
        )

    if isinstance(parsed, list):
        template = parsed[0] if parsed else None
    else:
        template = parsed

    if not isinstance(template, dict):
        return ParsedSchema(
            fields=[],
            original_input=input_text,
            parse_errors=[NOT_AN_OBJECT_ERROR],
        )

    try:
        fields = build_nested_fields(template)
    except RecursionError:
        logger.debug("JSON input too deep to build a schema")
        return ParsedSchema(
            fields=[],
            original_input=input_text,
            parse_errors=[TOO_DEEP_ERROR],
        )
    logger.debug("Inferred %d top-level fields from JSON", len(fields))
    return ParsedSchema(fields=fields, original_input=input_text)
