"""Dimensions and dimension objects (#OBJEKT)."""

from dataclasses import dataclass, field
from typing import Optional

from siewriter.domain.errors import (
    ConflictError,
    InvalidArgumentError,
    object_already_defined,
)
from siewriter.utils.identifiers import identifier_sort_key

DIMENSION_COST_CENTRE = 1
DIMENSION_COST_BEARER = 2
DIMENSION_PROJECT = 6
DIMENSION_EMPLOYEE = 7
DIMENSION_CUSTOMER = 8
DIMENSION_SUPPLIER = 9
DIMENSION_INVOICE = 10

RESERVED_DIMENSIONS = frozenset(
    {
        DIMENSION_COST_CENTRE,
        DIMENSION_COST_BEARER,
        DIMENSION_PROJECT,
        DIMENSION_EMPLOYEE,
        DIMENSION_CUSTOMER,
        DIMENSION_SUPPLIER,
        DIMENSION_INVOICE,
    }
)

# Dimension ids from here on are free for custom use.
FIRST_CUSTOM_DIMENSION = 20


@dataclass
class DimensionObject:
    """A single value along a dimension, e.g. project "42"."""

    id: str
    name: Optional[str] = None
    dimension: Optional["Dimension"] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.id is None or str(self.id).strip() == "":
            raise InvalidArgumentError("Mandatory parameter: object id")
        self.id = str(self.id)


@dataclass(eq=False)
class Dimension:
    """Classification axis for transactions, owning its objects.

    Only the reserved SIE dimension ids and custom ids from 20 upwards
    are accepted.
    """

    id: int
    _objects: dict[str, DimensionObject] = field(
        default_factory=dict, init=False, repr=False
    )

    def __post_init__(self) -> None:
        if self.id is None or isinstance(self.id, bool) or not isinstance(self.id, int):
            raise InvalidArgumentError(f"Dimension id must be a number, got {self.id!r}")
        if self.id not in RESERVED_DIMENSIONS and self.id < FIRST_CUSTOM_DIMENSION:
            raise InvalidArgumentError(
                f"Dimension id {self.id} is neither reserved nor a custom id "
                f"(>= {FIRST_CUSTOM_DIMENSION})"
            )

    def add_object(self, obj: DimensionObject) -> DimensionObject:
        """Add an object to this dimension and attach its back-reference.

        Args:
            obj: Object to add

        Returns:
            The added object

        Raises:
            ConflictError: If an object with the same id already exists
        """
        if obj.id in self._objects:
            raise ConflictError(object_already_defined(obj.id, self.id))
        obj.dimension = self
        self._objects[obj.id] = obj
        return obj

    def get_object(self, object_id: str) -> Optional[DimensionObject]:
        """Get object by id, or None if not found."""
        return self._objects.get(str(object_id))

    def list_objects(self) -> list[DimensionObject]:
        """List objects in ascending id order."""
        return sorted(self._objects.values(), key=lambda o: identifier_sort_key(o.id))
