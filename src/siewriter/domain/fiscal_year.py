"""Fiscal years (#RAR) and their account balances."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from siewriter.domain.account import AccountBalance
from siewriter.domain.errors import ConflictError, ValidationError, balance_already_defined
from siewriter.utils.date_parser import calendar_year, shift_years


def _this_year_start() -> date:
    return calendar_year(date.today().year)[0]


def _this_year_end() -> date:
    return calendar_year(date.today().year)[1]


@dataclass(eq=False)
class FiscalYear:
    """Accounting period with incoming and outgoing balances per account.

    Defaults to the current calendar year.
    """

    start: date = field(default_factory=_this_year_start)
    end: date = field(default_factory=_this_year_end)
    _balances: dict[int, AccountBalance] = field(
        default_factory=dict, init=False, repr=False
    )

    def previous(self) -> "FiscalYear":
        """Create the fiscal year before this one.

        The new year covers the same span shifted back one year. Balances
        are not copied.
        """
        return FiscalYear(start=shift_years(self.start, -1), end=shift_years(self.end, -1))

    def add_account_balance(self, balance: AccountBalance) -> AccountBalance:
        """Add the balances for one account.

        Raises:
            ConflictError: If balances for the account are already defined
        """
        account_id = balance.account_id
        if account_id in self._balances:
            raise ConflictError(balance_already_defined(account_id))
        self._balances[account_id] = balance
        return balance

    def get_account_balance(self, account_id: int) -> Optional[AccountBalance]:
        return self._balances.get(account_id)

    def list_account_balances(self) -> list[AccountBalance]:
        """List balances in ascending account id order."""
        return [self._balances[key] for key in sorted(self._balances)]

    def validate(self) -> None:
        """Check that the period is well formed.

        Raises:
            ValidationError: If the year ends before it starts
        """
        if self.end < self.start:
            raise ValidationError(
                f"Fiscal year ends ({self.end.isoformat()}) before it starts "
                f"({self.start.isoformat()})"
            )
