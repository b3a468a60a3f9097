"""Static listings of supported field types and export formats."""
from __future__ import annotations

from typing import Dict, List

from .models import ExportFormat, FieldType

FORMAT_LABELS = {
    ExportFormat.JSON: "JSON",
    ExportFormat.CSV: "CSV",
    ExportFormat.SQL: "SQL INSERT",
    ExportFormat.XML: "XML",
}

FIELD_TYPE_INFO = {
    FieldType.STRING: ("String", "Free-form text"),
    FieldType.NUMBER: ("Number", "Integer or decimal within a range"),
    FieldType.BOOLEAN: ("Boolean", "true or false"),
    FieldType.DATE: ("Date", "Calendar date or timestamp"),
    FieldType.EMAIL: ("Email", "Email address"),
    FieldType.UUID: ("UUID", "Random UUID v4"),
    FieldType.PHONE: ("Phone", "Phone number"),
    FieldType.URL: ("URL", "Web address"),
    FieldType.FIRST_NAME: ("First Name", "Person's given name"),
    FieldType.LAST_NAME: ("Last Name", "Person's family name"),
    FieldType.FULL_NAME: ("Full Name", "Given and family name"),
    FieldType.ADDRESS: ("Address", "Street address"),
    FieldType.CITY: ("City", "City name"),
    FieldType.COUNTRY: ("Country", "Country name"),
    FieldType.ZIP_CODE: ("Zip Code", "Postal code"),
    FieldType.COMPANY: ("Company", "Company name"),
    FieldType.LOREM: ("Lorem", "Placeholder paragraph text"),
    FieldType.ENUM: ("Enum", "One of a fixed list of values"),
    FieldType.ARRAY: ("Array", "List of items sharing one item config"),
    FieldType.OBJECT: ("Object", "Nested group of fields"),
}


def get_available_formats() -> List[Dict[str, str]]:
    return [{"format": fmt.value, "label": FORMAT_LABELS[fmt]} for fmt in ExportFormat]


def get_field_types() -> List[Dict[str, str]]:
    return [
        {"type": field_type.value, "label": label, "description": description}
        for field_type, (label, description) in FIELD_TYPE_INFO.items()
    ]
