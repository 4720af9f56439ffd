from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .result import ValidationResult
from .rule import PredicateRule, Rule

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("cqrs_ddd.schemas")

T = TypeVar("T")
S = TypeVar("S", bound="Schema[Any]")


class Schema(Generic[T]):
    """
    Ordered list of rules over a value of type ``T``.

    Rules run in insertion order and evaluation stops at the first
    failure. Rule-adding methods return the schema itself so calls can
    be chained; ``parse`` never mutates the schema, so a finished schema
    can be reused for any number of values.
    """

    def __init__(self) -> None:
        self._rules: list[Rule] = []

    # -- rule registration ---------------------------------------------------

    def add_rule(self: S, rule: Rule) -> S:
        """Append an already-constructed rule."""
        if not isinstance(rule, Rule):
            raise TypeError(f"Expected a Rule, got {type(rule).__name__}")
        self._rules.append(rule)
        return self

    def refine(self: S, predicate: Callable[[Any], bool], message: str) -> S:
        """
        Append a custom predicate rule that fails with *message*.

        The predicate receives the raw value, including ``None``, and must
        handle it itself; anything it raises propagates out of ``parse``.
        """
        return self.add_rule(PredicateRule(predicate, message))

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    # -- evaluation ----------------------------------------------------------

    def parse(self, value: T) -> ValidationResult:
        return self._run_rules(value)

    def try_parse(self, value: T) -> tuple[bool, ValidationResult]:
        """Parse *value* and report its validity alongside the result."""
        result = self.parse(value)
        return result.is_valid, result

    def _run_rules(self, value: T) -> ValidationResult:
        for rule in self._rules:
            result = rule.check(value)
            if not result.is_valid:
                logger.debug(
                    "%s rejected value by %s: %s",
                    type(self).__name__,
                    rule.kind.value,
                    result.error,
                )
                return result
        return ValidationResult.success()

    def __repr__(self) -> str:
        rules = ", ".join(repr(rule) for rule in self._rules)
        return f"{type(self).__name__}({rules})"
