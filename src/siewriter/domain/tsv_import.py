"""TSV import domain service."""

from pathlib import Path
from typing import Any, Union

from siewriter.domain.account import Account
from siewriter.domain.company import Company
from siewriter.domain.dimension import (
    DIMENSION_COST_CENTRE,
    DIMENSION_PROJECT,
    Dimension,
    DimensionObject,
)
from siewriter.domain.errors import ValidationError
from siewriter.domain.verification import Transaction, Verification, VerificationSeries
from siewriter.logging import get_logger
from siewriter.utils.amount_parser import parse_amount
from siewriter.utils.date_parser import parse_date
from siewriter.utils.identifiers import identifier_sort_key

logger = get_logger(__name__)

DEFAULT_COMPANY_NAME = "Imported company"

# Column positions in the verification list export
COL_VER_NO = 0
COL_DATE = 1
COL_ACCOUNT_NO = 3
COL_ACCOUNT_NAME = 4
COL_RESULT_UNIT = 5
COL_PROJECT = 6
COL_VER_NAME = 13
COL_VER_ROW = 14
COL_TRANS_TEXT = 15
COL_TRANS_AMOUNT = 18

MIN_COLUMNS = COL_TRANS_AMOUNT + 1

# Object names are not part of the export, so they are made up from the id
OBJECT_NAME_PREFIXES = {
    DIMENSION_COST_CENTRE: "Resultatenhet",
    DIMENSION_PROJECT: "Projekt",
}


class TSVImporter:
    """Builds a Company from a tab-separated verification list."""

    def __init__(
        self,
        company_name: str = DEFAULT_COMPANY_NAME,
        skip_header_lines: int = 1,
        delimiter: str = "\t",
    ):
        """Initialize the importer.

        Args:
            company_name: Name of the imported company
            skip_header_lines: Number of leading lines to drop
            delimiter: Field delimiter
        """
        self.company_name = company_name
        self.skip_header_lines = skip_header_lines
        self.delimiter = delimiter

    def parse_file(self, tsv_file_path: Union[str, Path]) -> Company:
        """Import a company from a TSV file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValidationError: If a row is malformed or the result is invalid
        """
        tsv_path = Path(tsv_file_path)
        if not tsv_path.exists():
            raise FileNotFoundError(f"TSV file not found: {tsv_file_path}")

        with open(tsv_path, "r", encoding="utf-8-sig") as f:
            return self.parse(f.read())

    def parse(self, text: str) -> Company:
        """Import a company from TSV text.

        Rows are grouped into verifications by verification number, in
        ascending verification and row order. Accounts and dimension
        objects are created the first time they are seen.

        Args:
            text: TSV contents

        Returns:
            A validated Company

        Raises:
            ValidationError: If a row is malformed or the result is invalid
        """
        rows = self._tabular_data(text)[self.skip_header_lines:]
        records = [self._read_row(row_num, row) for row_num, row in rows]
        records.sort(
            key=lambda r: (identifier_sort_key(r["ver_no"]), identifier_sort_key(r["ver_row"]))
        )

        series = VerificationSeries()
        company = Company(name=self.company_name)
        company.add_verification_series(series)
        company.add_dimension(Dimension(DIMENSION_COST_CENTRE))
        company.add_dimension(Dimension(DIMENSION_PROJECT))

        verification = None
        for data in records:
            if verification is None or verification.id != data["ver_no"]:
                verification = series.add_verification(
                    Verification(data["ver_no"], date=data["date"], text=data["ver_name"])
                )

            account = company.get_account(data["account_no"])
            if account is None:
                account = company.add_account(
                    Account(data["account_no"], name=data["account_name"])
                )

            transaction = verification.add_transaction(
                Transaction(account=account, amount=data["amount"], text=data["trans_text"])
            )

            if data["result_unit"]:
                transaction.add_object(
                    self._find_or_create_object(company, DIMENSION_COST_CENTRE, data["result_unit"])
                )
            if data["project"]:
                transaction.add_object(
                    self._find_or_create_object(company, DIMENSION_PROJECT, data["project"])
                )

        company.validate()
        logger.info(
            "Imported %d rows: %d accounts, %d verifications",
            len(records),
            len(company.list_accounts()),
            len(series.list_verifications()),
        )
        return company

    def _tabular_data(self, text: str) -> list[tuple[int, list[str]]]:
        """Split text into numbered rows of fields, dropping blank lines."""
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        rows = []
        for line_num, line in enumerate(text.split("\n"), start=1):
            if line == "":
                continue
            rows.append((line_num, line.split(self.delimiter)))
        return rows

    def _read_row(self, row_num: int, row: list[str]) -> dict[str, Any]:
        if len(row) < MIN_COLUMNS:
            raise ValidationError(
                f"Row {row_num}: Expected at least {MIN_COLUMNS} columns, got {len(row)}"
            )

        ver_no = row[COL_VER_NO].strip()
        if not ver_no:
            raise ValidationError(f"Row {row_num}: Missing verification number")

        try:
            txn_date = parse_date(row[COL_DATE])
        except ValueError as e:
            raise ValidationError(f"Row {row_num}: {e}")

        try:
            amount = parse_amount(row[COL_TRANS_AMOUNT], decimal_comma=True)
        except ValueError as e:
            raise ValidationError(f"Row {row_num}: {e}")

        account_no = row[COL_ACCOUNT_NO].strip()
        if not account_no.isdecimal():
            raise ValidationError(f"Row {row_num}: Invalid account number '{account_no}'")

        return {
            "ver_no": ver_no,
            "date": txn_date,
            "account_no": int(account_no),
            "account_name": row[COL_ACCOUNT_NAME].strip(),
            "result_unit": row[COL_RESULT_UNIT].strip(),
            "project": row[COL_PROJECT].strip(),
            "ver_name": row[COL_VER_NAME].strip() or None,
            "ver_row": row[COL_VER_ROW].strip(),
            "trans_text": row[COL_TRANS_TEXT].strip() or None,
            "amount": amount,
        }

    def _find_or_create_object(
        self, company: Company, dimension_id: int, object_id: str
    ) -> DimensionObject:
        dimension = company.get_dimension(dimension_id)
        obj = dimension.get_object(object_id)
        if obj is None:
            obj = dimension.add_object(
                DimensionObject(
                    object_id, name=f"{OBJECT_NAME_PREFIXES[dimension_id]} {object_id}"
                )
            )
        return obj
