from __future__ import annotations

from .base import Schema
from .rules import MaxRule, MinRule, PositiveRule


class NumberSchema(Schema[int | None]):
    """Schema for integer values."""

    def min(self, minimum: int) -> NumberSchema:
        return self.add_rule(MinRule(minimum))

    def max(self, maximum: int) -> NumberSchema:
        return self.add_rule(MaxRule(maximum))

    def positive(self) -> NumberSchema:
        return self.add_rule(PositiveRule())
