"""Entity: the identity primitive of the model.

An entity is nothing more than a URI naming a thing. It carries no
properties of its own; everything known about it is expressed through
components attached to it and relationships pointing from or to it.

Entities are never contained by other entities, only referenced by id.
Deleting one is a consumer policy and has no representation here.
"""

from pydantic import BaseModel, ConfigDict, Field

from kgmodel.uri import Uri


class Entity(BaseModel):
    """A pointer to some thing as a URI.

    Entities are frozen (immutable) Pydantic models: once an identity has
    been assigned it is never reassigned.

    Example:
        ```python
        alice = Entity(id="did:example:alice")
        alice.to_wire()  # {"id": "did:example:alice"}
        ```
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        title="Entity Schema",
        json_schema_extra={"description": "Represents a pointer to some thing as a URI."},
    )

    id: Uri = Field(description="A URI to a particular thing.")

    def to_wire(self) -> dict:
        return {"id": self.id}

    def __str__(self) -> str:
        return self.id
