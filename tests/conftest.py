"""Shared factories and fixtures for the data model tests.

The test world has two people, Alice and Bob, identified by DID URIs, a
profile component carrying a nested payload, and a marker component with no
payload at all.
"""

from typing import Any, Optional

import pytest

from kgmodel import Component, Relationship

ALICE = "did:example:alice"
BOB = "did:example:bob"
CAROL = "did:example:carol"
PERSON_TYPE = "https://schema.example/person"
ADMIN_TYPE = "https://schema.example/admin"
KNOWS = "https://schema.example/knows"


def make_test_component(
    component_type: str = PERSON_TYPE,
    properties: Optional[dict[str, Any]] = None,
    label: Optional[str] = None,
    description: Optional[str] = None,
) -> Component:
    """Create a Component, leaving out the optional fields that are not given."""
    optional = {"properties": properties, "label": label, "description": description}
    return Component(type=component_type, **{k: v for k, v in optional.items() if v is not None})


def make_test_relationship(
    subject: str = ALICE,
    object_id: str = BOB,
    predicate: str = KNOWS,
) -> Relationship:
    """Create a Relationship with sensible defaults."""
    return Relationship(subject=subject, predicate=predicate, object=object_id)


@pytest.fixture
def profile_component() -> Component:
    return make_test_component(
        properties={"name": "Alice", "nested": {"arbitrary": ["structure", 1, True]}},
        label="Profile",
        description="Basic profile of a person",
    )


@pytest.fixture
def marker_component() -> Component:
    return make_test_component(ADMIN_TYPE)


@pytest.fixture
def alice_relationships() -> list[Relationship]:
    return [
        make_test_relationship(ALICE, BOB),
        make_test_relationship(ALICE, CAROL, "works with"),
        make_test_relationship(ALICE, ALICE, "https://schema.example/is"),
    ]
