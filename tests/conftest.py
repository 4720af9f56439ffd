"""Shared fixtures for schema tests."""

from __future__ import annotations

import pytest
from pydantic import BaseModel

from cqrs_ddd_schemas import ObjectSchema, z


class Person(BaseModel):
    name: str | None = None
    age: int | None = None
    email: str | None = None


@pytest.fixture
def person_schema() -> ObjectSchema[Person]:
    """Person schema with a string, a number and an email field."""
    return (
        z.object(Person)
        .property("name", z.string().not_empty().min(2).max(50))
        .property("age", z.number().positive().min(1).max(120))
        .property("email", z.string().email())
    )


@pytest.fixture
def valid_person() -> Person:
    return Person(name="John Doe", age=30, email="john@example.com")


@pytest.fixture
def invalid_person() -> Person:
    return Person(name="J", age=-5, email="invalid-email")
