"""Shared fixtures for the test suite."""

import json

import pytest


@pytest.fixture
def user_example():
    return {
        "id": "550e8400-e29b-41d4-a716-446655440000",
        "name": "John Doe",
        "email": "john@example.com",
        "age": 30,
        "score": 4.5,
        "isActive": True,
        "createdAt": "2024-01-15T10:30:00Z",
        "address": {"city": "Springfield", "zip": "12345"},
        "tags": ["a", "b"],
        "orders": [{"orderId": 1, "total": 9.99}],
    }


@pytest.fixture
def user_example_text(user_example):
    return json.dumps(user_example, indent=2)


@pytest.fixture
def user_interface_text():
    return """
export interface User {
  // primary key
  id: string;
  age?: number;
  tags: string[];
  /* optional
     metadata */
  nickname: string | null;
  roles: Array<'admin' | 'user'>;
  status: 'active' | 'inactive';
  birthday: Date;
}
"""
