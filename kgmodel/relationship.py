"""Relationships: directed, typed edges between entity URIs.

Each relationship is a triple ``(subject, predicate, object)``:

- **Subject**: URI of the entity the edge starts from
- **Predicate**: what the edge means; a URI is recommended but a
  descriptive string such as ``"knows"`` is permitted
- **Object**: URI of the entity the edge points to

Self-relationships are allowed and identical triples are kept as separate
edges; a sequence of relationships is ordered, not a set.

Inside a serialized entity the subject is implicit (it is the envelope's
id), so edges are carried as ``EmbeddedRelationship`` pairs. ``embed()``
and ``with_subject()`` convert between the two forms.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from kgmodel.errors import from_validation_error
from kgmodel.uri import NonEmptyStr, Uri

_PREDICATE_DESCRIPTION = "The type of relationship. Can be a URI or a descriptive string."


class Relationship(BaseModel):
    """A schema to represent a relationship between two entities.

    Example:
        ```python
        rel = Relationship(
            subject="did:example:alice",
            predicate="https://schema.example/knows",
            object="did:example:bob",
        )
        ```
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        title="Relationship Schema",
        json_schema_extra={"description": "A schema to represent a relationship between two entities."},
    )

    subject: Uri = Field(description="The subject entity of the relationship. Must be a URI.")
    predicate: NonEmptyStr = Field(description=_PREDICATE_DESCRIPTION)
    object: Uri = Field(description="The object entity of the relationship. Must be a URI.")

    def embed(self) -> "EmbeddedRelationship":
        """Drop the subject, giving the form stored inside a serialized entity."""
        return EmbeddedRelationship(predicate=self.predicate, object=self.object)

    def to_wire(self) -> dict:
        return {"subject": self.subject, "predicate": self.predicate, "object": self.object}


class EmbeddedRelationship(BaseModel):
    """An outbound relationship whose subject is the enclosing entity."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    predicate: NonEmptyStr = Field(description=_PREDICATE_DESCRIPTION)
    object: Uri = Field(description="A URI to the object entity.")

    def with_subject(self, subject: str) -> Relationship:
        """Restore the full relationship, using ``subject`` as its source."""
        try:
            return Relationship(subject=subject, predicate=self.predicate, object=self.object)
        except ValidationError as e:
            raise from_validation_error(e, what="relationship") from e

    def to_wire(self) -> dict:
        return {"predicate": self.predicate, "object": self.object}
