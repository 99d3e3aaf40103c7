"""Company, the root of the exportable bookkeeping data."""

from dataclasses import dataclass, field
from typing import Optional

from siewriter.domain.account import Account
from siewriter.domain.dimension import Dimension
from siewriter.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    account_already_defined,
    account_not_in_company,
    dimension_already_defined,
    mandatory_field,
    series_already_defined,
)
from siewriter.domain.fiscal_year import FiscalYear
from siewriter.domain.verification import VerificationSeries
from siewriter.logging import get_logger

logger = get_logger(__name__)


@dataclass(eq=False)
class Company:
    """Company with the data that goes into one SIE file.

    Attributes:
        name: Company name (#FNAMN), mandatory for validation
        number: Organisation number (#ORGNR), like 555555-5555
        chart_of_accounts_type: Type of chart of accounts (#KPTYP); the
            receiver assumes BAS95 when it is missing
    """

    name: Optional[str] = None
    number: Optional[str] = None
    chart_of_accounts_type: Optional[str] = None
    _accounts: dict[int, Account] = field(default_factory=dict, init=False, repr=False)
    _dimensions: dict[int, Dimension] = field(default_factory=dict, init=False, repr=False)
    _series: list[VerificationSeries] = field(default_factory=list, init=False, repr=False)
    _fiscal_years: list[FiscalYear] = field(default_factory=list, init=False, repr=False)

    def add_account(self, account: Account) -> Account:
        """Add an account.

        Raises:
            ConflictError: If the account id is already defined
        """
        if account.id in self._accounts:
            raise ConflictError(account_already_defined(account.id))
        self._accounts[account.id] = account
        return account

    def get_account(self, account_id: int) -> Optional[Account]:
        return self._accounts.get(account_id)

    def list_accounts(self) -> list[Account]:
        """List accounts in ascending account number order."""
        return [self._accounts[key] for key in sorted(self._accounts)]

    def add_dimension(self, dimension: Dimension) -> Dimension:
        """Add a dimension.

        Raises:
            ConflictError: If the dimension id is already defined
        """
        if dimension.id in self._dimensions:
            raise ConflictError(dimension_already_defined(dimension.id))
        self._dimensions[dimension.id] = dimension
        return dimension

    def get_dimension(self, dimension_id: int) -> Optional[Dimension]:
        return self._dimensions.get(dimension_id)

    def list_dimensions(self) -> list[Dimension]:
        """List dimensions in the order they were added."""
        return list(self._dimensions.values())

    def add_verification_series(self, series: VerificationSeries) -> VerificationSeries:
        """Add a verification series.

        Raises:
            ConflictError: If a series with the same id already exists
        """
        if self.get_verification_series(series.id) is not None:
            raise ConflictError(series_already_defined(series.id))
        self._series.append(series)
        return series

    def get_verification_series(self, series_id: str) -> Optional[VerificationSeries]:
        for series in self._series:
            if series.id == series_id:
                return series
        return None

    def list_verification_series(self) -> list[VerificationSeries]:
        return list(self._series)

    def add_fiscal_year(self, fiscal_year: FiscalYear) -> FiscalYear:
        """Add a fiscal year.

        Years are exported in the order they are added, the first one
        getting index 0, the next -1 and so on.
        """
        self._fiscal_years.append(fiscal_year)
        return fiscal_year

    def list_fiscal_years(self) -> list[FiscalYear]:
        return list(self._fiscal_years)

    def validate(self) -> None:
        """Validate the data; valid data is exportable to SIE.

        Stops at the first violation found.

        Raises:
            ValidationError: If a mandatory field is missing or a
                verification does not balance
            NotFoundError: If a transaction or balance refers to an account
                the company does not hold
        """
        if not self.name:
            raise ValidationError(mandatory_field("companyName"))

        for account in self.list_accounts():
            account.validate()

        for fiscal_year in self._fiscal_years:
            fiscal_year.validate()
            for balance in fiscal_year.list_account_balances():
                self._check_account_reference(balance.account)

        for series in self._series:
            for verification in series.list_numbered():
                verification.validate()
                for transaction in verification.transactions:
                    self._check_account_reference(transaction.account)

        logger.debug(
            "Validated company %r: %d accounts, %d series",
            self.name,
            len(self._accounts),
            len(self._series),
        )

    def _check_account_reference(self, account: Account) -> None:
        if self._accounts.get(account.id) is not account:
            raise NotFoundError(account_not_in_company(account.id))
