"""Core logic for the DTO schema inference and record exporter.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- infer a field schema from example JSON
- extract fields from TypeScript-like declarations
- choose between the two (auto-detect)
- serialize records to JSON, CSV, SQL inserts or XML
"""
from .exporters import UnsupportedFormatError, export_data
from .models import ExportFormat, ExportResult, FieldConfig, FieldType, InputMode, ParsedSchema
from .router import parse_input

__all__ = [
    "ExportFormat",
    "ExportResult",
    "FieldConfig",
    "FieldType",
    "InputMode",
    "ParsedSchema",
    "UnsupportedFormatError",
    "export_data",
    "parse_input",
]
