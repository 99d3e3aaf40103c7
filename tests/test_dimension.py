"""Tests for dimensions and dimension objects."""

import pytest

from siewriter.domain import (
    DIMENSION_COST_CENTRE,
    DIMENSION_INVOICE,
    DIMENSION_PROJECT,
    Dimension,
    DimensionObject,
)
from siewriter.domain.errors import ConflictError, InvalidArgumentError


@pytest.mark.parametrize("dimension_id", [1, 2, 6, 7, 8, 9, 10, 20, 99])
def test_allowed_dimension_ids(dimension_id):
    """Reserved ids and custom ids from 20 are accepted."""
    assert Dimension(dimension_id).id == dimension_id


@pytest.mark.parametrize("dimension_id", [0, 3, 5, 11, 19, -1, None, "6"])
def test_rejected_dimension_ids(dimension_id):
    """Other ids are invalid construction arguments."""
    with pytest.raises(InvalidArgumentError):
        Dimension(dimension_id)


@pytest.mark.parametrize("object_id", [None, "", "   "])
def test_object_requires_id(object_id):
    """Test that an object without id is rejected."""
    with pytest.raises(InvalidArgumentError):
        DimensionObject(object_id)


def test_add_object_sets_back_reference():
    """Adding an object attaches it to the dimension."""
    dimension = Dimension(DIMENSION_PROJECT)
    obj = dimension.add_object(DimensionObject("42", name="Projekt 42"))

    assert obj.dimension is dimension
    assert dimension.get_object("42") is obj
    assert dimension.get_object(42) is obj
    assert dimension.get_object("43") is None


def test_add_duplicate_object():
    """A second object with the same id is rejected and the first kept."""
    dimension = Dimension(DIMENSION_COST_CENTRE)
    first = dimension.add_object(DimensionObject("10", name="Sälj"))

    with pytest.raises(ConflictError):
        dimension.add_object(DimensionObject("10", name="Other"))

    assert dimension.get_object("10") is first
    assert dimension.get_object("10").name == "Sälj"


def test_list_objects_ascending():
    """Objects are listed in ascending id order regardless of insertion order."""
    dimension = Dimension(DIMENSION_INVOICE)
    for object_id in ["10", "9", "B", "100", "A"]:
        dimension.add_object(DimensionObject(object_id))

    assert [o.id for o in dimension.list_objects()] == ["9", "10", "100", "A", "B"]


def test_list_objects_does_not_reorder_storage():
    """Listing returns a new list and leaves the dimension untouched."""
    dimension = Dimension(DIMENSION_PROJECT)
    dimension.add_object(DimensionObject("2"))
    dimension.add_object(DimensionObject("1"))

    listed = dimension.list_objects()
    listed.clear()

    assert [o.id for o in dimension.list_objects()] == ["1", "2"]


def test_list_objects_with_superscript_digits():
    """Digit-like characters that are not decimal digits sort as text."""
    dimension = Dimension(DIMENSION_PROJECT)
    for object_id in ["²", "10", "1"]:
        dimension.add_object(DimensionObject(object_id))

    assert [o.id for o in dimension.list_objects()] == ["1", "10", "²"]
