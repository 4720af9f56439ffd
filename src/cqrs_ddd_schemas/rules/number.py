"""Number rules: min, max, positive."""

from __future__ import annotations

from numbers import Integral
from typing import Any

from ..exceptions import InvalidRuleArgumentError
from ..kinds import RuleKind
from ..result import ValidationResult
from ..rule import Rule


def _is_integer(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _require_bound(rule: RuleKind, bound: Any) -> int:
    if not _is_integer(bound):
        raise InvalidRuleArgumentError(rule.value, bound, "an int")
    return int(bound)


class NumberRule(Rule):
    """
    Base for rules over integers.

    ``None`` fails with the rule's own message; booleans and
    non-integral values fail with a type message.
    """

    def check(self, value: Any) -> ValidationResult:
        if value is None:
            return ValidationResult.failure(self.message)
        if not _is_integer(value):
            return ValidationResult.failure(
                f"Expected number, received {type(value).__name__}"
            )
        return super().check(value)


class MinRule(NumberRule):
    def __init__(self, minimum: int) -> None:
        self.minimum = _require_bound(RuleKind.MIN, minimum)

    @property
    def kind(self) -> RuleKind:
        return RuleKind.MIN

    @property
    def message(self) -> str:
        return f"Number must be at least {self.minimum}"

    def is_satisfied_by(self, value: int) -> bool:
        return value >= self.minimum

    def params(self) -> dict[str, Any]:
        return {"minimum": self.minimum}


class MaxRule(NumberRule):
    def __init__(self, maximum: int) -> None:
        self.maximum = _require_bound(RuleKind.MAX, maximum)

    @property
    def kind(self) -> RuleKind:
        return RuleKind.MAX

    @property
    def message(self) -> str:
        return f"Number must be at most {self.maximum}"

    def is_satisfied_by(self, value: int) -> bool:
        return value <= self.maximum

    def params(self) -> dict[str, Any]:
        return {"maximum": self.maximum}


class PositiveRule(NumberRule):
    @property
    def kind(self) -> RuleKind:
        return RuleKind.POSITIVE

    @property
    def message(self) -> str:
        return "Number must be positive"

    def is_satisfied_by(self, value: int) -> bool:
        return value > 0
