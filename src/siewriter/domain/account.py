"""Account entities."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from siewriter.domain.errors import InvalidArgumentError, ValidationError, mandatory_field

Amount = Union[Decimal, int, float]


def coerce_account_id(value) -> int:
    """Return an account number as int.

    Accepts ints and all-digit strings, since import files carry account
    numbers as text.

    Raises:
        InvalidArgumentError: If the value is missing or not an account number
    """
    if value is None or isinstance(value, bool):
        raise InvalidArgumentError("Mandatory parameter: account id")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    raise InvalidArgumentError(f"Account id must be a number, got {value!r}")


@dataclass
class Account:
    """Account in the chart of accounts (#KONTO)."""

    id: int
    name: Optional[str] = None

    def __post_init__(self) -> None:
        self.id = coerce_account_id(self.id)

    def validate(self) -> None:
        """Check that the account is exportable.

        Raises:
            ValidationError: If the account name is not set
        """
        if self.name is None:
            raise ValidationError(mandatory_field("name", f"account {self.id}"))


@dataclass(eq=False)
class AccountBalance:
    """Incoming (#IB) and outgoing (#UB) balance of one account for a fiscal year."""

    account: Account
    incoming_balance: Optional[Amount] = None
    outgoing_balance: Optional[Amount] = None

    def __post_init__(self) -> None:
        if not isinstance(self.account, Account):
            raise InvalidArgumentError("Mandatory parameter: account")

    @property
    def account_id(self) -> int:
        return self.account.id
