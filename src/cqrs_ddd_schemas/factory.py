from __future__ import annotations

from typing import TypeVar

from .number import NumberSchema
from .object import ObjectSchema
from .string import StringSchema

T = TypeVar("T")


class SchemaFactory:
    """
    Stateless constructors for empty schemas.

    Example::

        from cqrs_ddd_schemas import z

        person = (
            z.object(Person)
            .property("name", z.string().not_empty().min(2).max(50))
            .property("age", z.number().positive().min(1).max(120))
        )
    """

    @staticmethod
    def string() -> StringSchema:
        return StringSchema()

    @staticmethod
    def number() -> NumberSchema:
        return NumberSchema()

    @staticmethod
    def object(model: type[T] | None = None) -> ObjectSchema[T]:
        return ObjectSchema(model)


z = SchemaFactory
