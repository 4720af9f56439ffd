from .base import Schema
from .exceptions import (
    FieldNotFoundError,
    InvalidFieldError,
    InvalidRuleArgumentError,
    SchemaDefinitionError,
    SchemaError,
    SchemaValidationError,
)
from .factory import SchemaFactory, z
from .kinds import RuleKind
from .number import NumberSchema
from .object import FieldValidator, ObjectSchema
from .result import ValidationResult
from .rule import PredicateRule, Rule
from .string import StringSchema

__all__ = [
    # Results
    "ValidationResult",
    # Rules
    "RuleKind",
    "Rule",
    "PredicateRule",
    # Schemas
    "Schema",
    "StringSchema",
    "NumberSchema",
    "ObjectSchema",
    "FieldValidator",
    # Factory
    "SchemaFactory",
    "z",
    # Exceptions
    "SchemaError",
    "SchemaDefinitionError",
    "InvalidFieldError",
    "FieldNotFoundError",
    "InvalidRuleArgumentError",
    "SchemaValidationError",
]
