from __future__ import annotations

from .base import Schema
from .rules import EmailRule, MaxLengthRule, MinLengthRule, NotEmptyRule


class StringSchema(Schema[str | None]):
    """
    Schema for text values.

    Example::

        name = StringSchema().not_empty().min(2).max(50)
        name.parse("J").error  # "String must be at least 2 characters"
    """

    def min(self, length: int) -> StringSchema:
        return self.add_rule(MinLengthRule(length))

    def max(self, length: int) -> StringSchema:
        return self.add_rule(MaxLengthRule(length))

    def email(self) -> StringSchema:
        return self.add_rule(EmailRule())

    def not_empty(self) -> StringSchema:
        return self.add_rule(NotEmptyRule())
