"""Tests for account entities."""

import pytest
from decimal import Decimal

from siewriter.domain import Account, AccountBalance
from siewriter.domain.errors import InvalidArgumentError, ValidationError


def test_create_account():
    """Test creating an account with a name."""
    account = Account(1511, name="Kundfordringar")
    assert account.id == 1511
    assert account.name == "Kundfordringar"


def test_account_id_from_digit_string():
    """Account numbers read from files are converted to int."""
    account = Account(" 1930 ")
    assert account.id == 1930


@pytest.mark.parametrize("bad_id", [None, "", "19x0", "19²", 1.5, True])
def test_account_invalid_id(bad_id):
    """Test that a missing or non-numeric id is rejected."""
    with pytest.raises(InvalidArgumentError):
        Account(bad_id)


def test_account_name_set_later():
    """An account may be created without a name and completed later."""
    account = Account(3741)
    assert account.name is None

    account.name = "Öresutjämning"
    account.validate()


def test_account_validate_requires_name():
    """Validation names the missing field and the account."""
    with pytest.raises(ValidationError) as excinfo:
        Account(2440).validate()

    assert "name" in str(excinfo.value)
    assert "2440" in str(excinfo.value)


def test_account_balance_references_account():
    """Test that a balance keeps a reference to its account."""
    account = Account(1930, name="Företagskonto")
    balance = AccountBalance(account, incoming_balance=Decimal("100.00"), outgoing_balance=Decimal("250.50"))

    assert balance.account is account
    assert balance.account_id == 1930
    assert balance.incoming_balance == Decimal("100.00")
    assert balance.outgoing_balance == Decimal("250.50")


def test_account_balance_requires_account():
    """Test that a balance cannot be created without an account."""
    with pytest.raises(InvalidArgumentError):
        AccountBalance(None)
