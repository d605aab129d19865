"""Component: a typed bundle of properties describing one concern of an entity.

A component is identified by its ``type`` URI, which is the sole key for
interpreting its ``properties`` payload. The payload's shape belongs to
whatever external schema the type URI names; this model only requires it to
be a mapping with string keys and keeps every nested value exactly as given.

A component with no payload is a marker (a flag attached to an entity).

Components carry no back-reference to their entity. Attachment is positional:
a component belongs to the entity whose ``components`` sequence holds it.
Several components of the same type may sit side by side; nothing here
de-duplicates them.
"""

from typing import Any, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from kgmodel.errors import from_validation_error
from kgmodel.uri import Uri

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class Component(BaseModel):
    """A schema to represent some quality or property of an entity.

    Example:
        ```python
        profile = Component(
            type="https://schema.example/person",
            label="Profile",
            properties={"name": "Alice", "tags": ["admin", 1, True]},
        )
        admin = Component(type="https://schema.example/admin")  # marker
        ```

    When the payload schema is known, ``properties_as`` gives a typed view:

        ```python
        class Person(BaseModel):
            name: str

        profile.properties_as(Person).name  # "Alice"
        ```
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        title="Component Schema",
        json_schema_extra={"description": "A schema to represent some quality or property of an entity."},
    )

    type: Uri = Field(description="The type of the component. Must be a URI.")
    # Optional but not nullable: an explicit null fails as a wrong-kind value.
    description: StrictStr = Field(default=None, description="A description of the component.")
    label: StrictStr = Field(default=None, description="A label to display as a name for the component.")
    properties: dict[str, Any] = Field(
        default=None,
        description="The component's payload, shaped by the schema its type refers to.",
    )

    @property
    def is_marker(self) -> bool:
        """True if the component carries no payload."""
        return self.properties is None

    def properties_as(self, model_cls: Type[PayloadT]) -> PayloadT:
        """Validate the payload against ``model_cls`` and return the typed instance.

        An absent payload is validated as an empty mapping. Violations are
        raised as SchemaError subclasses located under ``properties``.
        """
        try:
            return model_cls.model_validate(self.properties or {})
        except ValidationError as e:
            err = from_validation_error(e, what=f"properties of component {self.type}")
            err.location = ("properties",) + err.location
            raise err from e

    def to_wire(self) -> dict:
        """Return the JSON-ready form, omitting optional fields that are absent."""
        data: dict[str, Any] = {"type": self.type}
        if self.description is not None:
            data["description"] = self.description
        if self.label is not None:
            data["label"] = self.label
        if self.properties is not None:
            data["properties"] = dict(self.properties)
        return data
