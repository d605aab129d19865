"""
Entity / Component / Relationship data model

Frozen Pydantic models describing things as graphs of typed, URI-addressed
data, plus the serialized-entity envelope that packages one entity with its
components and outbound relationships.

This package has minimal dependencies (only pydantic) and contains no
storage, query or transport code. It is meant to be imported by the systems
that produce and consume conforming documents.

Example:
    from kgmodel import Component, Relationship, project, reproject

    envelope = project(
        "did:example:alice",
        [Component(type="https://schema.example/person", properties={"name": "Alice"})],
        [Relationship(subject="did:example:alice", predicate="knows", object="did:example:bob")],
    )
    entity, components, relationships = reproject(envelope.to_wire())
"""

from kgmodel.component import Component
from kgmodel.entity import Entity
from kgmodel.errors import (
    ConsistencyError,
    FieldTypeError,
    FormatError,
    SchemaError,
    ShapeError,
)
from kgmodel.projection import project, reproject
from kgmodel.relationship import EmbeddedRelationship, Relationship
from kgmodel.serialized import SerializedEntity
from kgmodel.uri import NonEmptyStr, Uri, is_uri
from kgmodel.validate import (
    validate_component,
    validate_embedded_relationship,
    validate_entity,
    validate_relationship,
    validate_serialized_entity,
)

__all__ = [
    "Component",
    "ConsistencyError",
    "EmbeddedRelationship",
    "Entity",
    "FieldTypeError",
    "FormatError",
    "NonEmptyStr",
    "Relationship",
    "SchemaError",
    "SerializedEntity",
    "ShapeError",
    "Uri",
    "is_uri",
    "project",
    "reproject",
    "validate_component",
    "validate_embedded_relationship",
    "validate_entity",
    "validate_relationship",
    "validate_serialized_entity",
]

__version__ = "0.1.0"
