"""
Schema exception hierarchy with fuzzy-match suggestions.

These exceptions signal *misuse of the builder API* (construction time).
Data that fails validation is never raised; it is returned as a
:class:`~cqrs_ddd_schemas.result.ValidationResult`.

All exceptions inherit from ``SchemaError`` and provide ``to_dict()``
for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class SchemaError(Exception):
    """Base exception for all schema errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class SchemaDefinitionError(SchemaError, ValueError):
    """A schema was built with invalid arguments."""


class InvalidFieldError(SchemaDefinitionError):
    """
    Field accessor is not a simple member read.

    Raised for dotted paths (``address.city``), indexed paths
    (``items[0]``), empty names, or a non-callable ``getter``.
    """

    def __init__(self, field: Any, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid field accessor {field!r}: {reason}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_FIELD",
            "field": self.field if isinstance(self.field, str) else repr(self.field),
            "reason": self.reason,
        }


class FieldNotFoundError(SchemaDefinitionError):
    """
    Field does not exist on the model declared for an object schema.

    Uses fuzzy matching to suggest similar valid field names.

    Example error message::

        Invalid field 'emial' on 'Person'.
        Did you mean one of these?
          • email

        Available fields: age, email, name
    """

    def __init__(
        self,
        invalid_field: str,
        model_name: str,
        available_fields: list[str],
        cutoff: float = 0.6,
    ) -> None:
        self.invalid_field = invalid_field
        self.model_name = model_name
        self.available_fields = available_fields

        self.suggestions = get_close_matches(
            invalid_field, available_fields, n=5, cutoff=cutoff
        )

        message = self._build_message()
        super().__init__(message)

    def _build_message(self) -> str:
        lines = [f"Invalid field '{self.invalid_field}' on '{self.model_name}'."]
        if self.suggestions:
            lines.append("Did you mean one of these?")
            for s in self.suggestions:
                lines.append(f"  • {s}")

        sorted_fields = sorted(self.available_fields)
        preview = ", ".join(sorted_fields[:15])
        if len(sorted_fields) > 15:
            preview += ", ..."
        lines.append(f"Available fields: {preview}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_NOT_FOUND",
            "field": self.invalid_field,
            "model": self.model_name,
            "suggestions": self.suggestions,
            "available_fields": sorted(self.available_fields),
        }


class InvalidRuleArgumentError(SchemaDefinitionError):
    """A rule was configured with an unusable bound."""

    def __init__(self, rule: str, argument: Any, expected: str) -> None:
        self.rule = rule
        self.argument = argument
        self.expected = expected
        super().__init__(
            f"Invalid argument {argument!r} for rule '{rule}': expected {expected}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_RULE_ARGUMENT",
            "rule": self.rule,
            "argument": repr(self.argument),
            "expected": self.expected,
        }


class SchemaValidationError(SchemaError):
    """
    A value failed validation and the caller asked for an exception.

    Only raised by :meth:`ValidationResult.raise_if_invalid`; ``parse``
    itself always returns a result.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "message": self.message,
        }
