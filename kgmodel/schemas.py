"""JSON Schema literals mirroring the models.

The literals are generated from the pydantic models, so they can never drift
from what the validators enforce. They are meant for consumers in other
languages or tools that validate documents with a JSON Schema engine.
"""

import copy
from typing import Any, Type

from pydantic import BaseModel

from kgmodel.component import Component
from kgmodel.entity import Entity
from kgmodel.relationship import EmbeddedRelationship, Relationship
from kgmodel.serialized import SerializedEntity


def json_schema_for(model_cls: Type[BaseModel]) -> dict[str, Any]:
    """Return a fresh JSON Schema dict describing ``model_cls``."""
    return model_cls.model_json_schema()


ENTITY_SCHEMA = json_schema_for(Entity)
COMPONENT_SCHEMA = json_schema_for(Component)
RELATIONSHIP_SCHEMA = json_schema_for(Relationship)
EMBEDDED_RELATIONSHIP_SCHEMA = json_schema_for(EmbeddedRelationship)
SERIALIZED_ENTITY_SCHEMA = json_schema_for(SerializedEntity)

ALL_SCHEMAS = {
    "Entity": ENTITY_SCHEMA,
    "Component": COMPONENT_SCHEMA,
    "Relationship": RELATIONSHIP_SCHEMA,
    "SerializedEntity": SERIALIZED_ENTITY_SCHEMA,
}


def get_schema(name: str) -> dict[str, Any]:
    """Return a deep copy of the named schema literal (e.g. ``"Entity"``)."""
    try:
        return copy.deepcopy(ALL_SCHEMAS[name])
    except KeyError as e:
        raise KeyError(f"Unknown schema {name!r}; expected one of {sorted(ALL_SCHEMAS)}") from e
