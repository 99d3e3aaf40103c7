"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Mandatory data missing or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Referenced domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class UnsupportedFieldTypeError(DomainError):
    """A value of a type the SIE encoder cannot render."""


class InvalidArgumentError(ValueError):
    """An entity was constructed with a missing or illegal identifier."""


def account_already_defined(account_id: int) -> str:
    """Return message for duplicate account."""
    return f'The account id "{account_id}" is already defined.'


def dimension_already_defined(dimension_id: int) -> str:
    """Return message for duplicate dimension."""
    return f'The dimension id "{dimension_id}" is already defined.'


def object_already_defined(object_id: str, dimension_id: int) -> str:
    """Return message for duplicate object within a dimension."""
    return f'The object id "{object_id}" is already defined in dimension {dimension_id}.'


def series_already_defined(series_id: str) -> str:
    """Return message for duplicate verification series."""
    return f'The verification series id "{series_id}" is already defined.'


def verification_already_defined(verification_id: str, series_id: str) -> str:
    """Return message for duplicate verification within a series."""
    return (
        f'The verification id "{verification_id}" in the series "{series_id}" '
        "does already exist."
    )


def balance_already_defined(account_id: int) -> str:
    """Return message for duplicate account balance within a fiscal year."""
    return f'The balances for account id "{account_id}" is already defined.'


def dimension_already_on_transaction(dimension_id: int) -> str:
    """Return message when a transaction already carries an object for a dimension."""
    return f"Dimension {dimension_id} is already defined on this transaction"


def mandatory_field(field_name: str, owner: str | None = None) -> str:
    """Return message for a missing mandatory field."""
    if owner:
        return f"Mandatory field {field_name} ({owner})"
    return f"Mandatory field {field_name}"


def account_not_in_company(account_id: int) -> str:
    """Return message for a reference to an account the company does not own."""
    return f"Account {account_id} is not defined in the company"
