from enum import Enum


class RuleKind(str, Enum):
    """Tags identifying each kind of validation rule."""

    # String rules
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    EMAIL = "email"
    NOT_EMPTY = "not_empty"

    # Number rules
    MIN = "min"
    MAX = "max"
    POSITIVE = "positive"

    # Caller-supplied predicate
    REFINE = "refine"
