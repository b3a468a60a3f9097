from __future__ import annotations

import re
from typing import Any

from .models import FieldType

# Checked in order; the first match wins.
UUID_RE = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE | re.ASCII)
EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
URL_RE = re.compile(r"https?://")
ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
US_DATE_RE = re.compile(r"\d{2}/\d{2}/\d{4}", re.ASCII)
PHONE_RE = re.compile(r"[\d\s\-+()]{10,}", re.ASCII)


def infer_field_type(value: Any) -> FieldType:
    """Classify a single example value into a field type tag."""
    if value is None:
        return FieldType.STRING
    # bool before numbers: bool is an int subclass
    if isinstance(value, bool):
        return FieldType.BOOLEAN
    if isinstance(value, (int, float)):
        return FieldType.NUMBER
    if isinstance(value, list):
        return FieldType.ARRAY
    if isinstance(value, dict):
        return FieldType.OBJECT

    text = str(value)

    if UUID_RE.fullmatch(text):
        return FieldType.UUID
    if EMAIL_RE.fullmatch(text):
        return FieldType.EMAIL
    if URL_RE.match(text):
        return FieldType.URL
    if ISO_DATE_RE.match(text) or US_DATE_RE.match(text):
        return FieldType.DATE
    if PHONE_RE.fullmatch(text):
        return FieldType.PHONE

    return FieldType.STRING
