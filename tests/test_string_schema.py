"""Tests for StringSchema."""

from __future__ import annotations

import pytest

from cqrs_ddd_schemas import StringSchema, z


@pytest.fixture
def name_schema() -> StringSchema:
    return z.string().min(2).max(50)


def test_too_short_fails_min(name_schema: StringSchema):
    assert name_schema.parse("J").error == "String must be at least 2 characters"


def test_within_bounds(name_schema: StringSchema):
    assert name_schema.parse("John Doe").is_valid is True
    assert name_schema.parse("x" * 50).is_valid is True


def test_too_long_fails_max(name_schema: StringSchema):
    assert name_schema.parse("x" * 51).error == "String must be at most 50 characters"


def test_absent_fails_min(name_schema: StringSchema):
    assert name_schema.parse(None).error == "String must be at least 2 characters"


def test_rules_evaluated_in_call_order():
    schema = z.string().max(3).min(5)
    assert schema.parse("ab").error == "String must be at least 5 characters"
    assert schema.parse("abcdef").error == "String must be at most 3 characters"
    # both rules fail, the first registered one is reported
    assert schema.parse("abcd").error == "String must be at most 3 characters"


def test_email():
    schema = z.string().email()
    assert schema.parse("john@example.com").is_valid is True
    assert schema.parse("invalid-email").error == "Invalid email format"
    assert schema.parse("").error == "Invalid email format"


def test_empty_string_fails_not_empty_independently():
    assert z.string().not_empty().parse("").error == "String cannot be empty"
    assert z.string().not_empty().parse(None).error == "String cannot be empty"


def test_email_then_not_empty():
    schema = z.string().email().not_empty()
    assert schema.parse("test@example.com").is_valid is True
    assert schema.parse("").error == "Invalid email format"


def test_not_empty_before_min():
    schema = z.string().not_empty().min(2)
    assert schema.parse("").error == "String cannot be empty"
    assert schema.parse("J").error == "String must be at least 2 characters"


def test_wrong_type_fails_without_raising():
    assert z.string().min(1).parse(123).error == "Expected string, received int"
