"""Error hierarchy for schema validation and projection.

Validation is all-or-nothing: pydantic collects every violation of a value,
and :func:`from_validation_error` turns them into a single exception of the
most fundamental kind present. The precedence is

    ShapeError > FieldTypeError > FormatError

and within one kind the first violation in field order wins. The complete
list of violations is always available on ``SchemaError.errors``, so callers
that want every problem at once can read it from there.

Example:
    ```python
    try:
        validate_relationship({"subject": "a", "object": "b"})
    except ShapeError as exc:
        exc.location  # ("predicate",)
        exc.errors    # includes the URI format failures for "a" and "b"
    ```
"""

from typing import Any, Sequence

from pydantic import ValidationError

_SHAPE_ERROR_TYPES = frozenset(
    {
        "missing",
        "extra_forbidden",
        "model_type",
        "model_attributes_type",
        "dict_type",
        "list_type",
        "tuple_type",
        "json_invalid",
    }
)
_FORMAT_ERROR_TYPES = frozenset({"uri_format", "string_too_short"})


class SchemaError(ValueError):
    """Base class for every error raised by this package.

    Attributes:
        location: Path to the offending field, e.g. ``("components", 0, "type")``.
        errors: Every underlying violation as pydantic-style error dicts.
    """

    def __init__(
        self,
        message: str,
        *,
        location: tuple[Any, ...] = (),
        errors: Sequence[dict[str, Any]] = (),
    ):
        super().__init__(message)
        self.location = location
        self.errors = tuple(errors)


class ShapeError(SchemaError):
    """A required field is absent, an unexpected field is present, or the
    value has the wrong container shape (e.g. an array instead of an object)."""


class FormatError(SchemaError):
    """A field has the right primitive kind but fails a format constraint."""


class FieldTypeError(SchemaError, TypeError):
    """A field's value has the wrong primitive kind."""


class ConsistencyError(SchemaError):
    """A cross-field invariant was violated while projecting an entity."""


def classify(error_type: str) -> type[SchemaError]:
    """Map a pydantic error type to the matching SchemaError subclass."""
    if error_type in _SHAPE_ERROR_TYPES:
        return ShapeError
    if error_type in _FORMAT_ERROR_TYPES:
        return FormatError
    if error_type.endswith("_type"):
        return FieldTypeError
    return FormatError


_PRECEDENCE = (ShapeError, FieldTypeError, FormatError)


def _format_location(location: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in location) or "<root>"


def from_validation_error(exc: ValidationError, *, what: str) -> SchemaError:
    """Translate a pydantic ValidationError into the most fundamental SchemaError.

    Args:
        exc: The error raised by pydantic.
        what: Human-readable name of the thing being validated, used in the message.
    """
    errors = exc.errors(include_url=False)
    for kind in _PRECEDENCE:
        for err in errors:
            if classify(err["type"]) is kind:
                location = tuple(err["loc"])
                message = f"invalid {what} at {_format_location(location)}: {err['msg']}"
                return kind(message, location=location, errors=errors)
    # pydantic never raises an empty ValidationError, but keep the result total
    return ShapeError(f"invalid {what}", errors=errors)
