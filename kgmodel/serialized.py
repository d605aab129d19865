"""Serialized entity: one entity packaged with its components and edges.

The envelope is a transient packaging format, not a stored identity. Its
relationships are ``{predicate, object}`` pairs whose subject is the
envelope's own ``id``; see ``kgmodel.projection`` for the two-way transform
between this form and full relationships.
"""

from pydantic import BaseModel, ConfigDict, Field

from kgmodel.component import Component
from kgmodel.relationship import EmbeddedRelationship
from kgmodel.uri import Uri


class SerializedEntity(BaseModel):
    """An entity along with its components and relationships.

    Both sequences keep the order they were given in and may contain
    duplicates.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        title="Serialized Entity Schema",
        json_schema_extra={"description": "An entity along with its components and relationships."},
    )

    id: Uri = Field(description="A URI to the entity.")
    components: tuple[Component, ...] = Field(
        description="An array of components associated with the entity.",
    )
    relationships: tuple[EmbeddedRelationship, ...] = Field(
        description="An array of relationships associated with the entity.",
    )

    def to_wire(self) -> dict:
        return {
            "id": self.id,
            "components": [c.to_wire() for c in self.components],
            "relationships": [r.to_wire() for r in self.relationships],
        }
