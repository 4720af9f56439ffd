"""
Rule strategy interface.

A rule is a single check over a value producing a
:class:`~cqrs_ddd_schemas.result.ValidationResult`. Every rule is tagged
with a :class:`~cqrs_ddd_schemas.kinds.RuleKind` so it can be described
for diagnostics.

New rules are added by subclassing :class:`Rule`, or by wrapping a plain
predicate in :class:`PredicateRule`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .kinds import RuleKind
from .result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Callable


class Rule(ABC):
    """
    Strategy interface for a single validation check.

    Built-in rules never raise from ``check`` for absent or wrongly typed
    input; such values fail through an ordinary result. A
    :class:`PredicateRule` is only as safe as the predicate it wraps.
    """

    @property
    @abstractmethod
    def kind(self) -> RuleKind:
        """The tag identifying this rule."""
        ...

    @property
    @abstractmethod
    def message(self) -> str:
        """Error message reported when the rule fails."""
        ...

    @abstractmethod
    def is_satisfied_by(self, value: Any) -> bool:
        """Return True if *value* passes this rule."""
        ...

    def check(self, value: Any) -> ValidationResult:
        if self.is_satisfied_by(value):
            return ValidationResult.success()
        return ValidationResult.failure(self.message)

    def params(self) -> dict[str, Any]:
        """Rule parameters, used by :meth:`to_dict`."""
        return {}

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "message": self.message, **self.params()}

    def __call__(self, value: Any) -> ValidationResult:
        return self.check(value)

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self.params().items())
        return f"{type(self).__name__}({params})"


class PredicateRule(Rule):
    """A caller-supplied predicate plus the message reported on failure."""

    def __init__(self, predicate: Callable[[Any], bool], message: str) -> None:
        if not callable(predicate):
            raise TypeError(
                f"predicate must be callable, got {type(predicate).__name__}"
            )
        if not message:
            raise ValueError("PredicateRule requires a non-empty message")
        self.predicate = predicate
        self._message = message

    @property
    def kind(self) -> RuleKind:
        return RuleKind.REFINE

    @property
    def message(self) -> str:
        return self._message

    def is_satisfied_by(self, value: Any) -> bool:
        return bool(self.predicate(value))

    def params(self) -> dict[str, Any]:
        return {
            "predicate": getattr(self.predicate, "__name__", repr(self.predicate))
        }
