from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List, NamedTuple, Union
from xml.sax.saxutils import escape

from .models import ExportFormat, ExportResult

logger = logging.getLogger(__name__)

Record = Dict[str, Any]

SQL_TABLE_NAME = "generated_data"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
XML_ENTITIES = {'"': "&quot;", "'": "&apos;"}


class UnsupportedFormatError(ValueError):
    def __init__(self, export_format):
        self.export_format = export_format
        super().__init__(f"Unsupported export format: {export_format}")


class Exporter(NamedTuple):
    render: Callable[[List[Record]], str]
    mime_type: str
    file_extension: str


def _compact_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def format_text_value(value: Any) -> str:
    """Plain-text form of a value, shared by CSV and XML."""
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return _compact_json(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_sql_value(value: Any) -> str:
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (dict, list)):
        text = _compact_json(value)
    else:
        text = str(value)
    return "'" + text.replace("'", "''") + "'"


def quote_csv_value(text: str) -> str:
    if "," in text or '"' in text or "\n" in text:
        return '"' + text.replace('"', '""') + '"'
    return text


def render_json(records: List[Record]) -> str:
    return json.dumps(records, indent=2, ensure_ascii=False)


def render_csv(records: List[Record]) -> str:
    if not records:
        return ""

    # header comes from the first record only
    headers = [str(key) for key in records[0].keys()]
    lines = [",".join(headers)]
    for record in records:
        lines.append(",".join(
            quote_csv_value(format_text_value(record.get(header)))
            for header in headers
        ))
    return "\n".join(lines)


def render_sql(records: List[Record]) -> str:
    statements = []
    for record in records:
        columns = ", ".join(str(key) for key in record.keys())
        values = ", ".join(format_sql_value(value) for value in record.values())
        statements.append(f"INSERT INTO {SQL_TABLE_NAME} ({columns}) VALUES ({values});")
    return "\n".join(statements)


def render_xml(records: List[Record]) -> str:
    items = []
    for record in records:
        fields = "\n".join(
            f"    <{key}>{escape(format_text_value(value), XML_ENTITIES)}</{key}>"
            for key, value in record.items()
        )
        items.append(f"  <item>\n{fields}\n  </item>")
    return XML_DECLARATION + "\n<data>\n" + "\n".join(items) + "\n</data>"


EXPORTERS: Dict[ExportFormat, Exporter] = {
    ExportFormat.JSON: Exporter(render_json, "application/json", "json"),
    ExportFormat.CSV: Exporter(render_csv, "text/csv", "csv"),
    ExportFormat.SQL: Exporter(render_sql, "text/plain", "sql"),
    ExportFormat.XML: Exporter(render_xml, "application/xml", "xml"),
}


def resolve_format(export_format: Union[ExportFormat, str]) -> ExportFormat:
    try:
        return ExportFormat(export_format)
    except ValueError:
        raise UnsupportedFormatError(export_format) from None


def export_data(records: List[Record], export_format: Union[ExportFormat, str]) -> ExportResult:
    """Serialize records into the requested format.

    Raises UnsupportedFormatError for anything outside the four registered
    formats; nothing is rendered in that case.
    """
    fmt = resolve_format(export_format)
    exporter = EXPORTERS[fmt]
    logger.info("Exporting %d records as %s", len(records), fmt.value)
    return ExportResult(
        content=exporter.render(records),
        mime_type=exporter.mime_type,
        file_extension=exporter.file_extension,
    )
