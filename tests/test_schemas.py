"""Tests for the JSON Schema literals generated from the models."""

import pytest

from kgmodel.schemas import (
    COMPONENT_SCHEMA,
    ENTITY_SCHEMA,
    RELATIONSHIP_SCHEMA,
    SERIALIZED_ENTITY_SCHEMA,
    get_schema,
)


class TestSchemaLiterals:
    """Each literal mirrors its model's title, required fields and URI formats."""

    def test_entity_schema(self) -> None:
        assert ENTITY_SCHEMA["title"] == "Entity Schema"
        assert ENTITY_SCHEMA["description"] == "Represents a pointer to some thing as a URI."
        assert ENTITY_SCHEMA["type"] == "object"
        assert ENTITY_SCHEMA["required"] == ["id"]
        assert ENTITY_SCHEMA["properties"]["id"]["type"] == "string"
        assert ENTITY_SCHEMA["properties"]["id"]["format"] == "uri"
        assert ENTITY_SCHEMA["properties"]["id"]["description"] == "A URI to a particular thing."

    def test_component_schema(self) -> None:
        assert COMPONENT_SCHEMA["title"] == "Component Schema"
        assert COMPONENT_SCHEMA["required"] == ["type"]
        assert COMPONENT_SCHEMA["properties"]["type"]["format"] == "uri"
        assert set(COMPONENT_SCHEMA["properties"]) == {"type", "description", "label", "properties"}

    def test_component_optional_fields_are_not_nullable(self) -> None:
        props = COMPONENT_SCHEMA["properties"]

        assert props["description"]["type"] == "string"
        assert props["label"]["type"] == "string"
        assert props["properties"]["type"] == "object"
        for field in ("description", "label", "properties"):
            assert "anyOf" not in props[field]

    def test_relationship_schema(self) -> None:
        props = RELATIONSHIP_SCHEMA["properties"]

        assert RELATIONSHIP_SCHEMA["title"] == "Relationship Schema"
        assert set(RELATIONSHIP_SCHEMA["required"]) == {"subject", "predicate", "object"}
        assert props["subject"]["format"] == "uri"
        assert props["object"]["format"] == "uri"
        assert "format" not in props["predicate"]
        assert props["predicate"]["minLength"] == 1

    def test_serialized_entity_schema(self) -> None:
        props = SERIALIZED_ENTITY_SCHEMA["properties"]

        assert SERIALIZED_ENTITY_SCHEMA["title"] == "Serialized Entity Schema"
        assert SERIALIZED_ENTITY_SCHEMA["required"] == ["id", "components", "relationships"]
        assert props["id"]["format"] == "uri"
        assert props["components"]["type"] == "array"
        assert props["relationships"]["type"] == "array"
        assert SERIALIZED_ENTITY_SCHEMA["$defs"]["Component"]["title"] == "Component Schema"

    def test_shapes_are_closed(self) -> None:
        for schema in (ENTITY_SCHEMA, COMPONENT_SCHEMA, RELATIONSHIP_SCHEMA, SERIALIZED_ENTITY_SCHEMA):
            assert schema["additionalProperties"] is False


class TestGetSchema:
    """get_schema hands out independent copies."""

    def test_returns_copy(self) -> None:
        schema = get_schema("Entity")
        schema["title"] = "changed"

        assert ENTITY_SCHEMA["title"] == "Entity Schema"

    def test_unknown_name(self) -> None:
        with pytest.raises(KeyError):
            get_schema("Widget")
