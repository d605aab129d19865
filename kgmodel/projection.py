"""Projection between full relationships and serialized entities.

``project`` packages an entity id, its components and its outbound
relationships into a ``SerializedEntity``. Because the embedded edge form
has no subject field, every relationship handed to ``project`` must already
have the entity as its subject; a mismatch would otherwise be silently lost.

``reproject`` is the inverse: it hands back the entity, the components and
full relationships rebuilt with the envelope id as their subject. For any
input that ``project`` accepts,

    reproject(project(entity_id, components, relationships))
        == (Entity(id=entity_id), tuple(components), tuple(relationships))

with every sequence in its original order.
"""

from typing import Any, Iterable, Union

from kgmodel.component import Component
from kgmodel.entity import Entity
from kgmodel.errors import ConsistencyError
from kgmodel.logging import get_logger
from kgmodel.relationship import Relationship
from kgmodel.serialized import SerializedEntity
from kgmodel.validate import (
    validate_component,
    validate_entity,
    validate_relationship,
    validate_serialized_entity,
)

logger = get_logger(__name__)


def project(
    entity_id: Union[str, Entity],
    components: Iterable[Any],
    relationships: Iterable[Any],
) -> SerializedEntity:
    """Build a serialized entity from an id, its components and its relationships.

    Args:
        entity_id: The entity's URI, or the Entity itself.
        components: Component models or component mappings, in order.
        relationships: Relationship models or mappings whose subject is the entity.

    Returns:
        The envelope, with components unchanged and relationships reduced to
        ``{predicate, object}`` pairs.

    Raises:
        ConsistencyError: If any relationship's subject differs from the
            entity id. Every mismatching position is reported.
        SchemaError: If the id, a component or a relationship is malformed.
    """
    entity = entity_id if isinstance(entity_id, Entity) else validate_entity({"id": entity_id})
    comps = tuple(validate_component(c) for c in components)
    rels = tuple(validate_relationship(r) for r in relationships)

    mismatched = [(i, r.subject) for i, r in enumerate(rels) if r.subject != entity.id]
    if mismatched:
        errors = [
            {
                "type": "subject_mismatch",
                "loc": ("relationships", i, "subject"),
                "msg": f"subject {subject!r} does not match entity id {entity.id!r}",
                "input": subject,
            }
            for i, subject in mismatched
        ]
        logger.warning("cannot project %s: %d relationship(s) with a foreign subject", entity.id, len(mismatched))
        first_index, first_subject = mismatched[0]
        raise ConsistencyError(
            f"relationship {first_index} has subject {first_subject!r}, expected {entity.id!r}",
            location=("relationships", first_index, "subject"),
            errors=errors,
        )

    serialized = SerializedEntity(
        id=entity.id,
        components=comps,
        relationships=tuple(r.embed() for r in rels),
    )
    logger.debug("projected %s: %d component(s), %d relationship(s)", entity.id, len(comps), len(rels))
    return serialized


def reproject(
    serialized: Union[SerializedEntity, Any],
) -> tuple[Entity, tuple[Component, ...], tuple[Relationship, ...]]:
    """Split a serialized entity back into the entity, its components and full relationships."""
    envelope = validate_serialized_entity(serialized)
    entity = Entity(id=envelope.id)
    relationships = tuple(r.with_subject(envelope.id) for r in envelope.relationships)
    return entity, envelope.components, relationships
