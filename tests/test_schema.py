"""Tests for rule ordering and evaluation on the base Schema."""

from __future__ import annotations

import logging

import pytest

from cqrs_ddd_schemas import PredicateRule, Schema, ValidationResult, z
from cqrs_ddd_schemas.rules import PositiveRule


class RecordingRule(PredicateRule):
    """Predicate rule that records every value it is asked to check."""

    def __init__(self, passes: bool, message: str) -> None:
        self.seen: list[object] = []
        super().__init__(self._record, message)
        self._passes = passes

    def _record(self, value: object) -> bool:
        self.seen.append(value)
        return self._passes


# -- Vacuous success ---------------------------------------------------------


@pytest.mark.parametrize("value", [None, "", 0, -1, "anything", {"a": 1}])
def test_schema_without_rules_accepts_anything(value):
    assert Schema().parse(value) == ValidationResult.success()
    assert z.string().parse(value).is_valid is True
    assert z.object().parse(value).is_valid is True


# -- Ordering and short-circuit ----------------------------------------------


def test_first_failing_rule_wins_and_later_rules_do_not_run():
    first = RecordingRule(True, "first")
    second = RecordingRule(False, "second")
    third = RecordingRule(False, "third")
    schema = Schema().add_rule(first).add_rule(second).add_rule(third)

    result = schema.parse("value")

    assert result.error == "second"
    assert first.seen == ["value"]
    assert second.seen == ["value"]
    assert third.seen == []


def test_all_rules_run_when_passing():
    rules = [RecordingRule(True, f"rule {i}") for i in range(3)]
    schema = Schema()
    for rule in rules:
        schema.add_rule(rule)

    assert schema.parse(7).is_valid is True
    assert [rule.seen for rule in rules] == [[7], [7], [7]]


def test_refine_appends_predicate_rule():
    schema = z.number().positive().refine(lambda v: v % 2 == 0, "Number must be even")
    assert schema.parse(4).is_valid is True
    assert schema.parse(3).error == "Number must be even"
    assert schema.parse(-2).error == "Number must be positive"


def test_refine_predicate_errors_propagate():
    schema = z.number().refine(lambda v: v % 2 == 0, "Number must be even")
    with pytest.raises(TypeError):
        schema.parse(None)


def test_refine_predicate_handling_absent_value():
    schema = z.number().refine(
        lambda v: v is not None and v % 2 == 0, "Number must be even"
    )
    assert schema.parse(None).error == "Number must be even"
    assert schema.parse(2).is_valid is True


def test_add_rule_rejects_non_rules():
    with pytest.raises(TypeError):
        Schema().add_rule(lambda v: True)  # type: ignore[arg-type]


def test_chaining_returns_same_instance():
    schema = z.string()
    assert schema.min(1) is schema
    assert schema.refine(bool, "truthy") is schema


def test_rules_snapshot_is_read_only():
    schema = z.number().positive()
    snapshot = schema.rules
    assert isinstance(snapshot, tuple)
    assert len(snapshot) == 1
    assert isinstance(snapshot[0], PositiveRule)
    schema.max(10)
    assert len(snapshot) == 1
    assert len(schema.rules) == 2


# -- Determinism -------------------------------------------------------------


@pytest.mark.parametrize("value", ["J", "John Doe", "x" * 51, "", None])
def test_parse_is_deterministic(value):
    schema = z.string().not_empty().min(2).max(50)
    before = schema.rules
    assert schema.parse(value) == schema.parse(value)
    assert schema.rules == before


# -- try_parse ---------------------------------------------------------------


def test_try_parse_reports_validity_with_result():
    schema = z.string().email()

    ok, result = schema.try_parse("john@example.com")
    assert ok is True
    assert result == ValidationResult.success()

    ok, result = schema.try_parse("invalid-email")
    assert ok is False
    assert result.error == "Invalid email format"


def test_try_parse_delegates_to_parse(person_schema, invalid_person):
    ok, result = person_schema.try_parse(invalid_person)
    assert ok is False
    assert result == person_schema.parse(invalid_person)


# -- Logging -----------------------------------------------------------------


def test_rejection_is_logged_at_debug(caplog):
    schema = z.number().positive()
    with caplog.at_level(logging.DEBUG, logger="cqrs_ddd.schemas"):
        schema.parse(-1)
    assert "NumberSchema rejected value by positive" in caplog.text


def test_repr_lists_rules():
    assert repr(z.number().min(1).max(2)) == (
        "NumberSchema(MinRule(minimum=1), MaxRule(maximum=2))"
    )
