"""
Object schemas: per-field sub-schemas with field-path prefixed errors.

Example::

    person = (
        ObjectSchema(Person)
        .property("name", StringSchema().not_empty().min(2).max(50))
        .property("age", NumberSchema().positive().min(1).max(120))
        .property("email", StringSchema().email())
    )
    person.parse(Person(name="J", age=-5, email="x")).error
    # → "name: String must be at least 2 characters"
"""

from __future__ import annotations

import dataclasses
import keyword
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel

from .base import Schema
from .exceptions import FieldNotFoundError, InvalidFieldError
from .result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("cqrs_ddd.schemas")

T = TypeVar("T")


def resolve_field(obj: Any, name: str) -> Any:
    """
    Read a single member off *obj*.

    Mappings are read by key, everything else by attribute. A missing
    member (or a ``None`` candidate) resolves to ``None``.
    """
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def model_field_names(model: type) -> list[str]:
    """Return the declared field names of a pydantic model, dataclass, or class."""
    if isinstance(model, type) and issubclass(model, BaseModel):
        return [*model.model_fields, *model.model_computed_fields]
    if dataclasses.is_dataclass(model):
        return [f.name for f in dataclasses.fields(model)]
    names: list[str] = []
    for klass in reversed(model.__mro__):
        for name in getattr(klass, "__annotations__", {}):
            if name not in names:
                names.append(name)
    return names


def _check_field_name(name: Any) -> str:
    if not isinstance(name, str) or not name:
        raise InvalidFieldError(name, "field name must be a non-empty string")
    if "." in name or "[" in name:
        raise InvalidFieldError(
            name, "nested or indexed paths are not supported, use a nested schema"
        )
    if not name.isidentifier() or keyword.iskeyword(name):
        raise InvalidFieldError(name, "field name must be a simple member name")
    return name


@dataclass(frozen=True)
class FieldValidator:
    """Reads one field off a candidate and validates it with a sub-schema."""

    name: str
    schema: Schema[Any]
    getter: Callable[[Any], Any]

    def __call__(self, candidate: Any) -> ValidationResult:
        value = self.getter(candidate)
        return self.schema.parse(value).with_prefix(self.name)


class ObjectSchema(Schema[T], Generic[T]):
    """
    Schema for records.

    Rules registered directly on the object schema (``refine`` /
    ``add_rule``) run first, then each field validator in registration
    order. The first failure wins.

    When *model* is given, field names are checked against it at
    construction time.
    """

    def __init__(self, model: type[T] | None = None) -> None:
        super().__init__()
        self.model = model
        self._fields: dict[str, FieldValidator] = {}

    # must precede `property` below, which shadows the builtin
    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self._fields)

    def property(
        self,
        name: str,
        schema: Schema[Any],
        getter: Callable[[Any], Any] | None = None,
    ) -> ObjectSchema[T]:
        """
        Register *schema* for the field called *name*.

        By default the field value is read by key or attribute; pass
        *getter* to read it some other way. Re-registering a name replaces
        the earlier validator but keeps its position.

        With a declared *model*, *name* must be one of its fields unless a
        *getter* is given, which allows derived fields.
        """
        name = _check_field_name(name)
        if not isinstance(schema, Schema):
            raise TypeError(
                f"Field '{name}' expects a Schema, got {type(schema).__name__}"
            )
        if getter is not None and not callable(getter):
            raise InvalidFieldError(name, "getter must be callable")
        if self.model is not None and getter is None:
            available = model_field_names(self.model)
            if name not in available:
                raise FieldNotFoundError(name, self.model.__name__, available)

        if name in self._fields:
            logger.debug("Replacing validator for field '%s'", name)
        self._fields[name] = FieldValidator(
            name=name,
            schema=schema,
            getter=getter if getter is not None else _attribute_getter(name),
        )
        return self

    def parse(self, value: T) -> ValidationResult:
        result = self._run_rules(value)
        if not result.is_valid:
            return result

        for validator in self._fields.values():
            result = validator(value)
            if not result.is_valid:
                logger.debug(
                    "%s rejected field '%s': %s",
                    type(self).__name__,
                    validator.name,
                    result.error,
                )
                return result
        return ValidationResult.success()


def _attribute_getter(name: str) -> Callable[[Any], Any]:
    def getter(candidate: Any) -> Any:
        return resolve_field(candidate, name)

    getter.__name__ = f"get_{name}"
    return getter
