"""Verifications (#VER), their transactions (#TRANS) and verification series.

A verification is a dated journal entry whose transactions must balance:
the sum of all amounts, rounded to two decimals, is zero. A series keeps
numbered verifications apart from unnumbered ones. The latter come from
pre-processing systems that leave numbering to the receiving system, so
they are never checked for uniqueness or validated here.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional, Union

from siewriter.domain.account import Account, Amount
from siewriter.domain.dimension import DimensionObject
from siewriter.domain.errors import (
    ConflictError,
    InvalidArgumentError,
    ValidationError,
    dimension_already_on_transaction,
    mandatory_field,
    verification_already_defined,
)
from siewriter.utils.amount_parser import to_decimal
from siewriter.utils.identifiers import identifier_sort_key

DEFAULT_SERIES = "A"

CENT = Decimal("0.01")

DateLike = Union[date, str]


def round_to_cents(value: Decimal) -> Decimal:
    """Round half up to two decimals, whatever the magnitude."""
    with localcontext() as ctx:
        # room for every integer digit plus the cents
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(eq=False)
class Transaction:
    """One debit or credit line of a verification."""

    account: Optional[Account] = None
    amount: Optional[Amount] = None
    date: Optional[DateLike] = None
    text: Optional[str] = None
    quantity: Optional[Amount] = None
    registration_sign: Optional[str] = None
    _objects: dict[int, DimensionObject] = field(
        default_factory=dict, init=False, repr=False
    )

    def add_object(self, obj: DimensionObject) -> DimensionObject:
        """Tag the transaction with a dimension object.

        Raises:
            ValidationError: If the object is not attached to a dimension
            ConflictError: If the transaction already has an object for
                that dimension
        """
        if obj.dimension is None:
            raise ValidationError(f'Object "{obj.id}" is not attached to a dimension')
        dimension_id = obj.dimension.id
        if dimension_id in self._objects:
            raise ConflictError(dimension_already_on_transaction(dimension_id))
        self._objects[dimension_id] = obj
        return obj

    def get_object(self, dimension_id: int) -> Optional[DimensionObject]:
        return self._objects.get(dimension_id)

    def list_objects(self) -> list[DimensionObject]:
        return list(self._objects.values())

    def object_pairs(self) -> list[Union[int, str]]:
        """Flatten the objects to ``[dimension_id, object_id, ...]``."""
        pairs: list[Union[int, str]] = []
        for dimension_id, obj in self._objects.items():
            pairs.append(dimension_id)
            pairs.append(obj.id)
        return pairs

    def validate(self) -> None:
        if self.account is None:
            raise ValidationError(mandatory_field("account"))
        if self.amount is None:
            raise ValidationError(mandatory_field("amount"))


@dataclass(eq=False)
class Verification:
    """Journal entry with a date and balanced transactions.

    An empty id marks a verification from a pre-processing system that
    leaves numbering to the receiver.
    """

    id: str
    date: Optional[DateLike] = None
    text: Optional[str] = None
    registration_date: Optional[DateLike] = None
    registration_sign: Optional[str] = None
    transactions: list[Transaction] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.id is None:
            raise InvalidArgumentError("Verification id cannot be None.")
        self.id = str(self.id)

    @property
    def is_numbered(self) -> bool:
        return self.id != ""

    def add_transaction(self, transaction: Transaction) -> Transaction:
        self.transactions.append(transaction)
        return transaction

    def list_transactions(self) -> list[Transaction]:
        return list(self.transactions)

    def total(self) -> Decimal:
        """Exact sum of all transaction amounts that are set."""
        amounts = [to_decimal(t.amount) for t in self.transactions if t.amount is not None]
        finite = [a for a in amounts if a.is_finite()]
        with localcontext() as ctx:
            if finite:
                span = max(a.adjusted() for a in finite) - min(a.as_tuple().exponent for a in finite)
                ctx.prec = max(ctx.prec, span + len(finite) + 1)
            return sum(amounts, Decimal(0))

    def validate(self) -> None:
        """Check mandatory fields and the double-entry balance.

        Raises:
            ValidationError: If the date is missing, there are no
                transactions, a transaction is incomplete or the amounts
                do not sum to zero
        """
        if not self.date:
            raise ValidationError(mandatory_field("date", f'verification "{self.id}"'))
        if not self.transactions:
            raise ValidationError(f'No transactions for verification id "{self.id}".')

        for transaction in self.transactions:
            transaction.validate()

        total = self.total()
        if not total.is_finite() or round_to_cents(total) != 0:
            raise ValidationError(
                f'The verification id "{self.id}" have a non-zero sum: {total}'
            )


@dataclass(eq=False)
class VerificationSeries:
    """Number series holding numbered and pre-processing verifications."""

    id: str = DEFAULT_SERIES
    _numbered: dict[str, Verification] = field(
        default_factory=dict, init=False, repr=False
    )
    _preprocessing: list[Verification] = field(
        default_factory=list, init=False, repr=False
    )

    def __post_init__(self) -> None:
        if self.id is None:
            raise InvalidArgumentError("Verification series id cannot be None.")
        self.id = str(self.id)

    def add_verification(self, verification: Verification) -> Verification:
        """Add a verification to the series.

        Numbered verifications must be unique within the series.
        Unnumbered ones are appended as they come.

        Raises:
            ConflictError: If a numbered verification id already exists
        """
        if not verification.is_numbered:
            self._preprocessing.append(verification)
            return verification

        if verification.id in self._numbered:
            raise ConflictError(verification_already_defined(verification.id, self.id))
        self._numbered[verification.id] = verification
        return verification

    def get_verification(self, verification_id: Union[str, int]) -> Optional[Verification]:
        return self._numbered.get(str(verification_id))

    def list_numbered(self) -> list[Verification]:
        """Numbered verifications in ascending id order."""
        return sorted(self._numbered.values(), key=lambda v: identifier_sort_key(v.id))

    def list_preprocessing(self) -> list[Verification]:
        """Unnumbered verifications in insertion order."""
        return list(self._preprocessing)

    def list_verifications(self) -> list[Verification]:
        """Numbered verifications (ascending) followed by unnumbered ones."""
        return self.list_numbered() + self.list_preprocessing()

    def validate(self) -> None:
        """Validate the numbered verifications of this series.

        Pre-processing verifications are left for the receiving system.
        """
        for verification in self.list_numbered():
            verification.validate()
