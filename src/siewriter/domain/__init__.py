"""Domain layer: the bookkeeping data exported to SIE."""

from siewriter.domain.account import Account, AccountBalance
from siewriter.domain.company import Company
from siewriter.domain.dimension import (
    DIMENSION_COST_BEARER,
    DIMENSION_COST_CENTRE,
    DIMENSION_CUSTOMER,
    DIMENSION_EMPLOYEE,
    DIMENSION_INVOICE,
    DIMENSION_PROJECT,
    DIMENSION_SUPPLIER,
    Dimension,
    DimensionObject,
)
from siewriter.domain.fiscal_year import FiscalYear
from siewriter.domain.tsv_import import TSVImporter
from siewriter.domain.verification import Transaction, Verification, VerificationSeries

__all__ = [
    "Account",
    "AccountBalance",
    "Company",
    "Dimension",
    "DimensionObject",
    "FiscalYear",
    "TSVImporter",
    "Transaction",
    "Verification",
    "VerificationSeries",
    "DIMENSION_COST_CENTRE",
    "DIMENSION_COST_BEARER",
    "DIMENSION_PROJECT",
    "DIMENSION_EMPLOYEE",
    "DIMENSION_CUSTOMER",
    "DIMENSION_SUPPLIER",
    "DIMENSION_INVOICE",
]
