"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class DataSourceError(DomainError):
    """Customers or transactions could not be loaded."""


class NetworkError(DataSourceError):
    """Transport failure while talking to the backend."""


class DecodeError(DataSourceError):
    """Backend payload could not be decoded into domain entities."""


class OrphanTransactionError(DomainError):
    """A transaction references a customer that is not in the roster."""

    def __init__(self, transaction):
        super().__init__(orphan_transaction(transaction.customer_id, transaction.date))
        self.transaction = transaction


def customer_not_found(customer_id: int) -> str:
    """Return message for missing customer."""
    return f"Customer {customer_id} not found"


def orphan_transaction(customer_id: int, date: str) -> str:
    """Return message for a transaction without a known customer."""
    return f"Transaction on {date} references unknown customer {customer_id}"


def duplicate_customer_id(customer_id: int, kept_name: str, dropped_name: str) -> str:
    """Return message when two roster entries share an ID."""
    return (
        f"Duplicate customer id {customer_id}: keeping '{kept_name}', "
        f"ignoring '{dropped_name}'"
    )


def invalid_record(kind: str, index: int, reason: str) -> str:
    """Return message for a record that cannot be decoded."""
    return f"Invalid {kind} record at position {index}: {reason}"


def request_failed(url: str, reason: str) -> str:
    """Return message for a failed backend request."""
    return f"Request to {url} failed: {reason}"


def not_loaded() -> str:
    """Return message when data is needed before the snapshot is loaded."""
    return "Dashboard data has not been loaded"
