"""Validators for the wire form of each model.

Each validator takes a candidate value (usually a mapping decoded from JSON),
returns the corresponding frozen model, and raises a ``SchemaError``
subclass otherwise. Model instances are returned as they are.
"""

from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from kgmodel.component import Component
from kgmodel.entity import Entity
from kgmodel.errors import from_validation_error
from kgmodel.logging import get_logger
from kgmodel.relationship import EmbeddedRelationship, Relationship
from kgmodel.serialized import SerializedEntity

ModelT = TypeVar("ModelT", bound=BaseModel)

logger = get_logger(__name__)


def validate_as(model_cls: Type[ModelT], value: Any, *, what: str) -> ModelT:
    """Validate ``value`` as ``model_cls``, translating pydantic errors."""
    if isinstance(value, model_cls):
        return value
    try:
        return model_cls.model_validate(value)
    except ValidationError as e:
        err = from_validation_error(e, what=what)
        logger.debug("rejected %s: %s", what, err)
        raise err from e


def validate_entity(value: Any) -> Entity:
    return validate_as(Entity, value, what="entity")


def validate_component(value: Any) -> Component:
    return validate_as(Component, value, what="component")


def validate_relationship(value: Any) -> Relationship:
    return validate_as(Relationship, value, what="relationship")


def validate_embedded_relationship(value: Any) -> EmbeddedRelationship:
    return validate_as(EmbeddedRelationship, value, what="embedded relationship")


def validate_serialized_entity(value: Any) -> SerializedEntity:
    return validate_as(SerializedEntity, value, what="serialized entity")
