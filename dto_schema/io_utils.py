from __future__ import annotations

import json
from typing import Any, Dict, List


def read_text_content(file_obj) -> str:
    """Read text from an uploaded file object or a file path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8')
        return content

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def reject_constant(name: str):
    """parse_constant hook: NaN and Infinity are not JSON."""
    raise ValueError(f"Unexpected token {name}")


def load_records(text: str) -> List[Dict[str, Any]]:
    """Parse records for export: a JSON list of objects, or a single object."""
    if text is None or not text.strip():
        raise ValueError("No records provided.")

    try:
        data = json.loads(text, parse_constant=reject_constant)
    except (ValueError, RecursionError) as e:
        raise ValueError(f"Error parsing JSON: {e}") from e

    if isinstance(data, dict):
        return [data]
    if isinstance(data, list) and all(isinstance(item, dict) for item in data):
        return data
    raise ValueError("Records must be a JSON object or an array of objects.")
