"""Shared pytest fixtures for siewriter tests."""

import logging
from datetime import date
from pathlib import Path
import pytest

from siewriter.config import DumpOptions
from siewriter.domain import (
    Account,
    Company,
    Transaction,
    Verification,
    VerificationSeries,
)
from siewriter.export.sie_dumper import SIEDumper


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo root logger changes made by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level

    yield

    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
    logging.getLogger("siewriter").setLevel(logging.NOTSET)


@pytest.fixture
def dump_options():
    """Fixed options so #PROGRAM and #GEN are stable."""
    return DumpOptions(
        generator="SIE-PHP exporter",
        generator_version="1.0",
        generated_date=date(2015, 9, 21),
    )


@pytest.fixture
def dumper(dump_options):
    """Create a SIEDumper with fixed options."""
    return SIEDumper(dump_options)


@pytest.fixture
def simple_company():
    """Company with two accounts and one balanced verification."""
    company = Company(name="My company")
    series = company.add_verification_series(VerificationSeries())
    company.add_account(Account(1511, name="Kundfordringar"))
    company.add_account(Account(3741, name="Öresutjämning"))

    verification = Verification("591000490", date="20150105")
    verification.add_transaction(Transaction(account=company.get_account(1511), amount=-0.24))
    verification.add_transaction(Transaction(account=company.get_account(3741), amount=0.24))
    series.add_verification(verification)

    return company


@pytest.fixture
def balanced_verification():
    """Create a factory for balanced verifications against given accounts."""

    def _make(verification_id, debit_account, credit_account, amount="100.00", ver_date="20150105"):
        verification = Verification(verification_id, date=ver_date)
        verification.add_transaction(Transaction(account=debit_account, amount=amount))
        verification.add_transaction(Transaction(account=credit_account, amount="-" + amount))
        return verification

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
