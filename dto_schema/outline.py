from __future__ import annotations

from typing import List, Optional

from .models import FieldConfig, FieldType


def escape_path_segment(segment: str) -> str:
    """Escape a field name for dot-path display.

    Dots become '\\.' so a key like 'gpt-3.5' stays one segment; backslashes
    are doubled.
    """
    return segment.replace('\\', '\\\\').replace('.', '\\.')


def _join(parent: str, name: str) -> str:
    name = escape_path_segment(name)
    return f"{parent}.{name}" if parent else name


def field_rows(fields: Optional[List[FieldConfig]], parent: str = '') -> List[list]:
    """Flatten a FieldConfig tree into [path, type, required, nullable] rows.

    Array items are addressed with '[]' (e.g. 'orders[].id').
    """
    rows: List[list] = []
    for field in fields or []:
        path = _join(parent, field.name)
        rows.append([path, field.type.value, field.required, field.nullable])

        if field.type is FieldType.OBJECT:
            rows.extend(field_rows(field.nested_fields, path))
        elif field.type is FieldType.ARRAY and field.array_item_config is not None:
            item = field.array_item_config
            item_path = f"{path}[]"
            rows.append([item_path, item.type.value, item.required, item.nullable])
            if item.type is FieldType.OBJECT:
                rows.extend(field_rows(item.nested_fields, item_path))
    return rows
