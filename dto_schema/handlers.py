from __future__ import annotations

import logging
import os
import tempfile

import gradio as gr

from .config import get_settings
from .exporters import export_data
from .io_utils import load_records, read_text_content
from .outline import field_rows
from .router import parse_input

logger = logging.getLogger(__name__)

EXAMPLE_JSON = """{
  "id": "550e8400-e29b-41d4-a716-446655440000",
  "name": "John Doe",
  "email": "john@example.com",
  "age": 30,
  "isActive": true,
  "createdAt": "2024-01-15T10:30:00Z"
}"""

EXAMPLE_TYPESCRIPT = """interface User {
  id: string;
  name: string;
  email: string;
  age: number;
  isActive: boolean;
  createdAt: string;
}"""

EXAMPLES = {"json": EXAMPLE_JSON, "typescript": EXAMPLE_TYPESCRIPT}


def load_example_handler(kind: str):
    return EXAMPLES[kind], gr.update(value=kind)


def load_input_file_handler(file_obj):
    try:
        text = read_text_content(file_obj)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        return gr.update(), f"Error reading file: {e}"
    return text, "File loaded. Press Parse to infer the schema."


def parse_schema_handler(input_text: str, mode: str):
    if not input_text or not input_text.strip():
        return None, "No input provided.", []

    try:
        schema = parse_input(input_text, mode or get_settings().default_mode)
    except ValueError as e:
        return None, f"Error: {e}", []

    rows = field_rows(schema.fields)
    if schema.has_errors:
        message = "; ".join(schema.parse_errors)
        if not schema.fields:
            return None, message, []
        return schema.to_payload(), f"Found {len(schema.fields)} fields with warnings: {message}", rows

    return schema.to_payload(), f"Found {len(schema.fields)} fields.", rows


def _output_path(file_name: str, extension: str) -> str:
    if not file_name or not file_name.strip():
        file_name = get_settings().output_name
    file_name = file_name.strip()

    ext = f".{extension}"
    if not file_name.lower().endswith(ext):
        file_name += ext
    return os.path.join(tempfile.gettempdir(), file_name)


def export_records_handler(records_text, file_obj, export_format, file_name=None, preview=False):
    settings = get_settings()

    try:
        if file_obj is not None:
            records_text = read_text_content(file_obj)
        records = load_records(records_text)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        return None, str(e), None

    if len(records) > settings.max_records:
        return None, f"Too many records: {len(records)} (maximum {settings.max_records}).", None

    total = len(records)
    if preview:
        records = records[:settings.preview_limit]

    try:
        result = export_data(records, export_format)
    except ValueError as e:
        logger.warning("Export failed: %s", e)
        return None, str(e), None

    if preview:
        return None, f"Previewing {len(records)} of {total} records.", result.content

    path = _output_path(file_name, result.file_extension)
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(result.content)
    except OSError as e:
        logger.warning("Could not write %s: %s", path, e)
        return None, f"Error during export: {e}", result.content

    return path, f"Export successful! {total} records saved to {path}", result.content
