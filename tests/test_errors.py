"""Tests for the error hierarchy and pydantic error translation."""

import pytest
from pydantic import BaseModel, StrictStr, ValidationError

from kgmodel.errors import (
    ConsistencyError,
    FieldTypeError,
    FormatError,
    SchemaError,
    ShapeError,
    classify,
    from_validation_error,
)


class _Sample(BaseModel):
    name: StrictStr
    tags: list[StrictStr]


def _validation_error(value: object) -> ValidationError:
    with pytest.raises(ValidationError) as exc_info:
        _Sample.model_validate(value)
    return exc_info.value


class TestHierarchy:
    """Every error kind is a SchemaError (and so a ValueError)."""

    @pytest.mark.parametrize("kind", [ShapeError, FormatError, FieldTypeError, ConsistencyError])
    def test_subclasses(self, kind: type) -> None:
        assert issubclass(kind, SchemaError)
        assert issubclass(kind, ValueError)

    def test_field_type_error_is_type_error(self) -> None:
        assert issubclass(FieldTypeError, TypeError)

    def test_attributes(self) -> None:
        err = ShapeError("boom", location=("a", 0), errors=[{"type": "missing"}])

        assert str(err) == "boom"
        assert err.location == ("a", 0)
        assert err.errors == ({"type": "missing"},)


class TestClassify:
    """pydantic error types map onto the three validation kinds."""

    @pytest.mark.parametrize(
        ("error_type", "expected"),
        [
            ("missing", ShapeError),
            ("extra_forbidden", ShapeError),
            ("model_type", ShapeError),
            ("list_type", ShapeError),
            ("string_type", FieldTypeError),
            ("int_type", FieldTypeError),
            ("uri_format", FormatError),
            ("string_too_short", FormatError),
            ("value_error", FormatError),
        ],
    )
    def test_classify(self, error_type: str, expected: type) -> None:
        assert classify(error_type) is expected


class TestFromValidationError:
    """The most fundamental violation decides the raised kind."""

    def test_shape_outranks_type(self) -> None:
        err = from_validation_error(_validation_error({"name": 1}), what="sample")

        assert isinstance(err, ShapeError)
        assert err.location == ("tags",)
        assert len(err.errors) == 2
        assert "invalid sample at tags" in str(err)

    def test_type_error_location(self) -> None:
        err = from_validation_error(_validation_error({"name": "x", "tags": ["a", 2]}), what="sample")

        assert isinstance(err, FieldTypeError)
        assert err.location == ("tags", 1)
