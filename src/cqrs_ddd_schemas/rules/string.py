"""String rules: min_length, max_length, email, not_empty."""

from __future__ import annotations

from typing import Any

from ..exceptions import InvalidRuleArgumentError
from ..kinds import RuleKind
from ..result import ValidationResult
from ..rule import Rule


def _require_length(rule: RuleKind, length: Any) -> int:
    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise InvalidRuleArgumentError(rule.value, length, "a non-negative int")
    return length


class StringRule(Rule):
    """
    Base for rules over text.

    ``None`` is passed through to the subclass as an absent value; any
    other non-string fails with a type message.
    """

    def check(self, value: Any) -> ValidationResult:
        if value is not None and not isinstance(value, str):
            return ValidationResult.failure(
                f"Expected string, received {type(value).__name__}"
            )
        return super().check(value)


class MinLengthRule(StringRule):
    def __init__(self, length: int) -> None:
        self.length = _require_length(RuleKind.MIN_LENGTH, length)

    @property
    def kind(self) -> RuleKind:
        return RuleKind.MIN_LENGTH

    @property
    def message(self) -> str:
        return f"String must be at least {self.length} characters"

    def is_satisfied_by(self, value: str | None) -> bool:
        return len(value or "") >= self.length

    def params(self) -> dict[str, Any]:
        return {"length": self.length}


class MaxLengthRule(StringRule):
    def __init__(self, length: int) -> None:
        self.length = _require_length(RuleKind.MAX_LENGTH, length)

    @property
    def kind(self) -> RuleKind:
        return RuleKind.MAX_LENGTH

    @property
    def message(self) -> str:
        return f"String must be at most {self.length} characters"

    def is_satisfied_by(self, value: str | None) -> bool:
        return len(value or "") <= self.length

    def params(self) -> dict[str, Any]:
        return {"length": self.length}


class EmailRule(StringRule):
    """Permissive shape check: non-empty, contains ``@`` and ``.``."""

    @property
    def kind(self) -> RuleKind:
        return RuleKind.EMAIL

    @property
    def message(self) -> str:
        return "Invalid email format"

    def is_satisfied_by(self, value: str | None) -> bool:
        return value is not None and value != "" and "@" in value and "." in value


class NotEmptyRule(StringRule):
    @property
    def kind(self) -> RuleKind:
        return RuleKind.NOT_EMPTY

    @property
    def message(self) -> str:
        return "String cannot be empty"

    def is_satisfied_by(self, value: str | None) -> bool:
        return bool(value)
