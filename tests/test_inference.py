"""Tests for inference.py."""

import pytest

from dto_schema.inference import infer_field_type
from dto_schema.models import FieldType


@pytest.mark.parametrize("value,expected", [
    ("123e4567-e89b-12d3-a456-426614174000", FieldType.UUID),
    ("123E4567-E89B-12D3-A456-426614174000", FieldType.UUID),
    ("a@b.com", FieldType.EMAIL),
    ("https://x.io", FieldType.URL),
    ("http://example.com/path", FieldType.URL),
    ("2024-01-01", FieldType.DATE),
    ("2024-01-15T10:30:00Z", FieldType.DATE),
    ("01/15/2024", FieldType.DATE),
    ("555-123-4567", FieldType.PHONE),
    ("+1 (555) 123-4567", FieldType.PHONE),
    ("hello", FieldType.STRING),
    ("", FieldType.STRING),
])
def test_string_cascade(value, expected):
    assert infer_field_type(value) is expected


@pytest.mark.parametrize("value,expected", [
    (None, FieldType.STRING),
    (True, FieldType.BOOLEAN),
    (False, FieldType.BOOLEAN),
    (0, FieldType.NUMBER),
    (3.14, FieldType.NUMBER),
    ([], FieldType.ARRAY),
    ([1, 2], FieldType.ARRAY),
    ({}, FieldType.OBJECT),
    ({"a": 1}, FieldType.OBJECT),
])
def test_structural_types(value, expected):
    assert infer_field_type(value) is expected


def test_bool_is_not_number():
    assert infer_field_type(True) is FieldType.BOOLEAN
    assert infer_field_type(1) is FieldType.NUMBER


def test_earlier_rule_wins():
    # also phone-shaped, but date is checked first
    assert infer_field_type("2024-01-01 12345") is FieldType.DATE
    # also URL-shaped, but email is checked first
    assert infer_field_type("https://user@host.io") is FieldType.EMAIL


def test_short_digit_string_is_not_phone():
    assert infer_field_type("12345") is FieldType.STRING


def test_uuid_must_match_whole_string():
    assert infer_field_type("123e4567-e89b-12d3-a456-426614174000-extra") is FieldType.STRING


def test_non_json_values_are_coerced_to_string():
    assert infer_field_type(b"x") is FieldType.STRING
