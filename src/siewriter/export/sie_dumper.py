"""SIE 4 document assembly.

Turns a validated Company into the text of a SIE type 4 file. The dumper
walks the company read-only and does not validate; call
``Company.validate()`` first.
"""

from pathlib import Path
from typing import Optional, Sequence, Union

from siewriter.config import DumpOptions
from siewriter.domain.company import Company
from siewriter.domain.verification import Transaction, Verification, VerificationSeries
from siewriter.domain.errors import ValidationError, mandatory_field
from siewriter.export.encoding import Scalar, encode_document, escape_field
from siewriter.logging import get_logger

logger = get_logger(__name__)

NEWLINE = "\r\n"
FIELD_DELIMITER = " "
TRANS_INDENT = "    "

Field = Union[Scalar, Sequence[Scalar], None]


def build_line(label: str, parameters: Sequence[Field]) -> str:
    """Build one escaped SIE record.

    Lists and tuples render as ``{item1 item2 ...}``. Trailing ``None``
    parameters are left out; a ``None`` followed by a value renders as an
    empty quoted field.

    Args:
        label: Record label without the leading "#"
        parameters: Record fields in order

    Returns:
        The record terminated by CRLF

    Raises:
        UnsupportedFieldTypeError: If a parameter has an unsupported type
    """
    # built from the end so trailing None parameters can be skipped
    fields: list[str] = []
    for param in reversed(parameters):
        if param is None:
            if not fields:
                continue
            fields.append(escape_field(""))
        elif isinstance(param, (list, tuple)):
            items = [escape_field(item) for item in param]
            fields.append("{" + FIELD_DELIMITER.join(items) + "}")
        else:
            fields.append(escape_field(param))

    line = "#" + label
    for rendered in reversed(fields):
        line += FIELD_DELIMITER + rendered
    return line + NEWLINE


class SIEDumper:
    """Generates SIE 4 documents."""

    def __init__(self, options: Optional[DumpOptions] = None):
        """Initialize the dumper.

        Args:
            options: Default options for #PROGRAM and #GEN; a fresh
                ``DumpOptions()`` (today's date) when omitted
        """
        self.options = options

    def dump(self, company: Company, options: Optional[DumpOptions] = None) -> str:
        """Dump the company to SIE format.

        Every character in the result is representable in the SIE code
        page; use ``dump_bytes`` for the encoded file contents.

        Args:
            company: Validated company
            options: Options for this dump, overriding the dumper's defaults

        Returns:
            The SIE document as text
        """
        options = options or self.options or DumpOptions()

        # mandatory header
        data = build_line("FLAGGA", ["0"])
        data += build_line("FORMAT", ["PC8"])
        data += build_line("SIETYP", ["4"])
        data += build_line("PROGRAM", [options.generator, options.generator_version])
        data += build_line("GEN", [options.generated_date, options.generated_sign])
        data += build_line("FNAMN", [company.name])

        # optional
        if company.number is not None:
            data += build_line("ORGNR", [company.number])
        if company.chart_of_accounts_type is not None:
            data += build_line("KPTYP", [company.chart_of_accounts_type])

        accounts = company.list_accounts()
        for account in accounts:
            data += build_line("KONTO", [account.id, account.name])

        for dimension in company.list_dimensions():
            for obj in dimension.list_objects():
                data += build_line("OBJEKT", [dimension.id, obj.id, obj.name])

        fiscal_years = company.list_fiscal_years()
        for index, fiscal_year in enumerate(fiscal_years):
            data += build_line("RAR", [-index, fiscal_year.start, fiscal_year.end])
        for index, fiscal_year in enumerate(fiscal_years):
            for balance in fiscal_year.list_account_balances():
                data += build_line("IB", [-index, balance.account_id, balance.incoming_balance])
                data += build_line("UB", [-index, balance.account_id, balance.outgoing_balance])

        # end of head
        data += NEWLINE

        verification_count = 0
        for series in company.list_verification_series():
            for verification in series.list_verifications():
                data += self._dump_verification(series, verification)
                verification_count += 1

        logger.debug(
            "Dumped company %r: %d accounts, %d fiscal years, %d verifications",
            company.name,
            len(accounts),
            len(fiscal_years),
            verification_count,
        )
        return data

    def _dump_verification(self, series: VerificationSeries, verification: Verification) -> str:
        data = build_line(
            "VER",
            [
                series.id,
                verification.id,
                verification.date,
                verification.text,
                verification.registration_date,
                verification.registration_sign,
            ],
        )
        data += "{" + NEWLINE
        for transaction in verification.transactions:
            data += TRANS_INDENT + self._trans_line(transaction, verification)
        data += "}" + NEWLINE
        data += NEWLINE
        return data

    def _trans_line(self, transaction: Transaction, verification: Verification) -> str:
        if transaction.account is None:
            raise ValidationError(mandatory_field("account", f'verification "{verification.id}"'))
        return build_line(
            "TRANS",
            [
                transaction.account.id,
                transaction.object_pairs(),
                transaction.amount,
                # the date is optional but the verification date reads better than none
                transaction.date or verification.date,
                transaction.text,
                transaction.quantity,
                transaction.registration_sign,
            ],
        )

    def dump_bytes(self, company: Company, options: Optional[DumpOptions] = None) -> bytes:
        """Dump the company and encode it in the SIE code page."""
        return encode_document(self.dump(company, options))

    def write(
        self,
        company: Company,
        path: Union[str, Path],
        options: Optional[DumpOptions] = None,
    ) -> Path:
        """Write the company as a SIE file.

        Args:
            company: Validated company
            path: Destination file
            options: Options for this dump

        Returns:
            Path of the written file
        """
        file_path = Path(path)
        payload = self.dump_bytes(company, options)
        file_path.write_bytes(payload)
        logger.info("Wrote SIE file %s (%d bytes)", file_path, len(payload))
        return file_path

