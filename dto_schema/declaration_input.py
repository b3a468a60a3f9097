"""Heuristic extraction of fields from TypeScript-like type declarations.

This is a pattern matcher, not a parser. Only one level of properties is
read: the body ends at the first closing brace, and array item types are
mapped but never decomposed further.

Rules, applied in order:

    1. strip ``// ...`` line comments
    2. strip ``/* ... */`` block comments
    3. strip the ``export`` keyword
    4. body = first ``interface X { ... }`` / ``type X = { ... }``,
       else the first bare ``{ ... }``
    5. each ``name[?]: typeText`` (typeText ends at ``;``, ``,`` or newline)
       becomes a field; ``?`` makes it optional, a ``null`` substring in
       typeText makes it nullable
    6. typeText ending in ``[]`` or starting with ``Array<`` becomes an
       array of the unwrapped item type
"""
from __future__ import annotations

import logging
import re

from .models import FieldConfig, FieldType, ParsedSchema

logger = logging.getLogger(__name__)

LINE_COMMENT_RE = re.compile(r"//.*$", re.MULTILINE)
BLOCK_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/")
EXPORT_RE = re.compile(r"export\s+")
DECLARATION_BODY_RE = re.compile(r"(?:interface|type)\s+\w+\s*(?:=\s*)?\{([^}]+)\}", re.ASCII)
BARE_BODY_RE = re.compile(r"\{([^}]+)\}")
PROPERTY_RE = re.compile(r"(\w+)(\?)?:\s*([^;,\n]+)", re.ASCII)
ARRAY_WRAPPER_RE = re.compile(r"Array<(.+)>")
WHITESPACE_RE = re.compile(r"\s")

UNPARSEABLE_ERROR = "Could not parse TypeScript input. Expected interface, type, or object type."
NO_FIELDS_ERROR = "No fields found in TypeScript input"

PRIMITIVE_TYPES = {
    "string": FieldType.STRING,
    "number": FieldType.NUMBER,
    "boolean": FieldType.BOOLEAN,
    "date": FieldType.DATE,
}

ARRAY_MIN_LENGTH = 1
ARRAY_MAX_LENGTH = 5


def map_declared_type(type_text: str) -> FieldType:
    normalized = WHITESPACE_RE.sub("", type_text.lower())
    if normalized in PRIMITIVE_TYPES:
        return PRIMITIVE_TYPES[normalized]
    # unions are treated as enums
    if "|" in normalized:
        return FieldType.ENUM
    return FieldType.STRING


def strip_noise(input_text: str) -> str:
    text = LINE_COMMENT_RE.sub("", input_text)
    text = BLOCK_COMMENT_RE.sub("", text)
    return EXPORT_RE.sub("", text)


def is_array_type(type_text: str) -> bool:
    return type_text.endswith("[]") or type_text.startswith("Array<")


def unwrap_array_type(type_text: str) -> str:
    inner = type_text.replace("[]", "", 1)
    return ARRAY_WRAPPER_RE.sub(r"\1", inner, count=1).strip()


def build_declared_field(name: str, optional: bool, type_text: str) -> FieldConfig:
    required = not optional
    nullable = "null" in type_text

    if is_array_type(type_text):
        item = FieldConfig(name="item", type=map_declared_type(unwrap_array_type(type_text)))
        return FieldConfig(
            name=name,
            type=FieldType.ARRAY,
            required=required,
            nullable=nullable,
            array_min_length=ARRAY_MIN_LENGTH,
            array_max_length=ARRAY_MAX_LENGTH,
            array_item_config=item,
        )

    return FieldConfig(
        name=name,
        type=map_declared_type(type_text),
        required=required,
        nullable=nullable,
    )


def parse_declaration_input(input_text: str) -> ParsedSchema:
    clean = strip_noise(input_text)

    body_match = DECLARATION_BODY_RE.search(clean) or BARE_BODY_RE.search(clean)
    if body_match is None:
        logger.debug("No declaration body found")
        return ParsedSchema(
            fields=[],
            original_input=input_text,
            parse_errors=[UNPARSEABLE_ERROR],
        )

    fields = [
        build_declared_field(name, bool(optional), type_text.strip())
        for name, optional, type_text in PROPERTY_RE.findall(body_match.group(1))
    ]

    if not fields:
        return ParsedSchema(
            fields=[],
            original_input=input_text,
            parse_errors=[NO_FIELDS_ERROR],
        )

    logger.debug("Extracted %d declared fields", len(fields))
    return ParsedSchema(fields=fields, original_input=input_text)
