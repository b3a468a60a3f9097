"""Tests for the UI handlers in handlers.py."""

import json
import os

import pytest

from dto_schema.handlers import (
    EXAMPLE_JSON,
    EXAMPLE_TYPESCRIPT,
    export_records_handler,
    load_example_handler,
    load_input_file_handler,
    parse_schema_handler,
)


@pytest.fixture(autouse=True)
def isolated_tmp(tmp_path, monkeypatch):
    monkeypatch.setenv("TMPDIR", str(tmp_path))
    monkeypatch.setattr("tempfile.tempdir", None)
    monkeypatch.delenv("DTO_SCHEMA_PREVIEW_LIMIT", raising=False)
    monkeypatch.delenv("DTO_SCHEMA_MAX_RECORDS", raising=False)
    monkeypatch.delenv("DTO_SCHEMA_OUTPUT_NAME", raising=False)
    return tmp_path


def test_load_examples():
    text, mode = load_example_handler("json")
    assert text == EXAMPLE_JSON
    assert mode["value"] == "json"
    text, mode = load_example_handler("typescript")
    assert text == EXAMPLE_TYPESCRIPT
    assert mode["value"] == "typescript"


def test_examples_parse_to_the_same_field_names():
    json_payload, _, _ = parse_schema_handler(EXAMPLE_JSON, "auto")
    ts_payload, _, _ = parse_schema_handler(EXAMPLE_TYPESCRIPT, "auto")
    assert [f["name"] for f in json_payload["fields"]] == [f["name"] for f in ts_payload["fields"]]


def test_parse_handler_success(user_example_text):
    payload, status, rows = parse_schema_handler(user_example_text, "json")
    assert status == "Found 10 fields."
    assert payload["fields"][0]["type"] == "uuid"
    assert ["orders[].orderId", "number", True, False] in rows


def test_parse_handler_empty_input():
    assert parse_schema_handler("   ", "auto") == (None, "No input provided.", [])


def test_parse_handler_error():
    payload, status, rows = parse_schema_handler("{broken", "json")
    assert payload is None
    assert status.startswith("Invalid JSON: ")
    assert rows == []


def test_parse_handler_unknown_mode_uses_auto():
    payload, status, _ = parse_schema_handler("interface A { x: number }", "xml")
    assert status == "Found 1 fields."
    assert payload["fields"][0]["type"] == "number"


def test_load_input_file(tmp_path):
    path = tmp_path / "dto.ts"
    path.write_text(EXAMPLE_TYPESCRIPT, encoding="utf-8")
    text, status = load_input_file_handler(str(path))
    assert text == EXAMPLE_TYPESCRIPT
    assert status.startswith("File loaded")


def test_load_input_file_missing():
    _, status = load_input_file_handler(None)
    assert status == "Error reading file: No file uploaded."


def test_export_writes_file(isolated_tmp):
    records = json.dumps([{"name": "O'Brien"}, {"name": "Ann"}])
    path, status, content = export_records_handler(records, None, "sql", "people")
    assert path == os.path.join(str(isolated_tmp), "people.sql")
    assert status.startswith("Export successful! 2 records")
    with open(path, encoding="utf-8") as f:
        assert f.read() == content
    assert content.startswith("INSERT INTO generated_data (name) VALUES ('O''Brien');")


def test_export_default_file_name(isolated_tmp):
    path, _, _ = export_records_handler('{"a": 1}', None, "csv")
    assert os.path.basename(path) == "test-data.csv"


def test_export_from_uploaded_file(tmp_path):
    source = tmp_path / "records.json"
    source.write_text(json.dumps([{"a": 1}]), encoding="utf-8")
    path, _, content = export_records_handler("", str(source), "json", "out.json")
    assert os.path.basename(path) == "out.json"
    assert json.loads(content) == [{"a": 1}]


def test_export_preview_limits_records(monkeypatch):
    monkeypatch.setenv("DTO_SCHEMA_PREVIEW_LIMIT", "2")
    records = json.dumps([{"i": i} for i in range(5)])
    path, status, content = export_records_handler(records, None, "csv", preview=True)
    assert path is None
    assert status == "Previewing 2 of 5 records."
    assert content == "i\n0\n1"


def test_export_record_limit(monkeypatch):
    monkeypatch.setenv("DTO_SCHEMA_MAX_RECORDS", "1")
    path, status, content = export_records_handler('[{"a": 1}, {"a": 2}]', None, "json")
    assert path is None
    assert status.startswith("Too many records")
    assert content is None


def test_export_unsupported_format():
    path, status, content = export_records_handler('[{"a": 1}]', None, "yaml")
    assert (path, content) == (None, None)
    assert status == "Unsupported export format: yaml"


@pytest.mark.parametrize("text,message", [
    ("", "No records provided."),
    ("[1, 2]", "Records must be a JSON object or an array of objects."),
])
def test_export_bad_records(text, message):
    assert export_records_handler(text, None, "json") == (None, message, None)


def test_export_rejects_nan_records():
    path, status, content = export_records_handler('[{"a": NaN}]', None, "json")
    assert (path, content) == (None, None)
    assert status == "Error parsing JSON: Unexpected token NaN"
