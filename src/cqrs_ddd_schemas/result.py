"""ValidationResult: single-error, fail-fast validation outcome."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .exceptions import SchemaValidationError


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a rule or schema evaluation.

    Either valid with no error, or invalid with exactly one non-empty
    error message.

    Usage::

        result = ValidationResult.success()
        result = ValidationResult.failure("String cannot be empty")
    """

    is_valid: bool
    error: str | None = None

    def __post_init__(self) -> None:
        if self.is_valid and self.error is not None:
            raise ValueError("A successful result cannot carry an error")
        if not self.is_valid and not self.error:
            raise ValueError("A failed result requires a non-empty error message")

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls) -> ValidationResult:
        return cls(is_valid=True)

    @classmethod
    def failure(cls, message: str) -> ValidationResult:
        return cls(is_valid=False, error=message)

    # ── Derivation ───────────────────────────────────────────────

    def with_prefix(self, prefix: str) -> ValidationResult:
        """Return a failure whose message is located under *prefix*."""
        if self.is_valid:
            return self
        return ValidationResult.failure(f"{prefix}: {self.error}")

    def raise_if_invalid(self) -> None:
        """Raise :class:`SchemaValidationError` when this result is a failure."""
        if not self.is_valid:
            raise SchemaValidationError(self.error or "")

    def to_dict(self) -> dict[str, Any]:
        return {"is_valid": self.is_valid, "error": self.error}

    def __bool__(self) -> bool:
        return self.is_valid
