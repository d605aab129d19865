"""JSON text encoding of the wire form.

``dumps`` writes a model's wire dict (absent optional fields omitted, sequences
as arrays). ``loads`` parses JSON text and runs the validator for the requested
model, so decoded documents obey exactly the same rules as in-memory mappings.
"""

import json
from typing import Any, Type, TypeVar, Union

from kgmodel.component import Component
from kgmodel.entity import Entity
from kgmodel.errors import FieldTypeError, ShapeError
from kgmodel.relationship import EmbeddedRelationship, Relationship
from kgmodel.serialized import SerializedEntity
from kgmodel.validate import (
    validate_component,
    validate_embedded_relationship,
    validate_entity,
    validate_relationship,
    validate_serialized_entity,
)

WireModel = Union[Entity, Component, Relationship, EmbeddedRelationship, SerializedEntity]
M = TypeVar("M", Entity, Component, Relationship, EmbeddedRelationship, SerializedEntity)

_VALIDATORS = {
    Entity: validate_entity,
    Component: validate_component,
    Relationship: validate_relationship,
    EmbeddedRelationship: validate_embedded_relationship,
    SerializedEntity: validate_serialized_entity,
}


def dumps(model: WireModel, **json_kwargs: Any) -> str:
    """Encode ``model`` as JSON text. Extra keyword arguments go to ``json.dumps``."""
    return json.dumps(model.to_wire(), **json_kwargs)


def loads(text: Union[str, bytes, bytearray], kind: Type[M]) -> M:
    """Decode JSON text into a validated ``kind`` instance.

    Raises:
        ShapeError: If the text is not valid UTF-8 JSON.
        FieldTypeError: If ``text`` is not a str, bytes or bytearray.
        SchemaError: If the decoded value does not satisfy ``kind``.
    """
    try:
        validator = _VALIDATORS[kind]
    except KeyError as e:
        raise TypeError(f"Cannot decode into {kind!r}") from e
    if not isinstance(text, (str, bytes, bytearray)):
        raise FieldTypeError(
            f"JSON document must be str or bytes, not {type(text).__name__}",
            errors=[{"type": "string_type", "loc": (), "msg": "Input should be a valid string"}],
        )
    try:
        value = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ShapeError(f"invalid JSON document: {e}", errors=[{"type": "json_invalid", "loc": (), "msg": str(e)}]) from e
    return validator(value)
