"""
Built-in rule implementations.

Usage::

    from cqrs_ddd_schemas.rules import MinLengthRule

    rule = MinLengthRule(2)
    result = rule.check("J")
"""

from __future__ import annotations

from cqrs_ddd_schemas.rules.number import MaxRule, MinRule, NumberRule, PositiveRule
from cqrs_ddd_schemas.rules.string import (
    EmailRule,
    MaxLengthRule,
    MinLengthRule,
    NotEmptyRule,
    StringRule,
)

__all__ = [
    # String
    "StringRule",
    "MinLengthRule",
    "MaxLengthRule",
    "EmailRule",
    "NotEmptyRule",
    # Number
    "NumberRule",
    "MinRule",
    "MaxRule",
    "PositiveRule",
]
