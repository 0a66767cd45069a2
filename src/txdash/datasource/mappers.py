"""Mapper functions to convert backend records into domain entities.

Two sources are covered: JSON objects returned by the REST backend and
SQLAlchemy rows of the local snapshot database. Both end up as the same
frozen domain entities.
"""

import re
from typing import Any

from txdash.datasource.models import (
    Customer as ORMCustomer,
    Transaction as ORMTransaction,
)
from txdash.domain import entities as domain
from txdash.domain.errors import DecodeError, invalid_record
from txdash.utils.amount_format import parse_amount

_INTEGER_TEXT = re.compile(r"-?[0-9]+")


def _require_int(record: dict, key: str, kind: str, index: int) -> int:
    value = record.get(key)
    if isinstance(value, bool):
        raise DecodeError(invalid_record(kind, index, f"'{key}' must be an integer"))
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _INTEGER_TEXT.fullmatch(value.strip()):
        return int(value.strip())
    raise DecodeError(invalid_record(kind, index, f"'{key}' must be an integer"))


def _require_str(record: dict, key: str, kind: str, index: int) -> str:
    value = record.get(key)
    if not isinstance(value, str):
        raise DecodeError(invalid_record(kind, index, f"'{key}' must be a string"))
    return value


def _require_amount(record: dict, index: int) -> float:
    value = record.get("amount")
    if isinstance(value, bool) or value is None:
        raise DecodeError(invalid_record("transaction", index, "'amount' must be a number"))
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(parse_amount(value))
        except ValueError as e:
            raise DecodeError(invalid_record("transaction", index, str(e))) from e
    raise DecodeError(invalid_record("transaction", index, "'amount' must be a number"))


def customer_from_json(record: Any, index: int = 0) -> domain.Customer:
    """Convert a JSON customer object to a domain Customer.

    Raises:
        DecodeError: If the record is not an object with ``id`` and ``name``
    """
    if not isinstance(record, dict):
        raise DecodeError(invalid_record("customer", index, "expected an object"))
    return domain.Customer(
        id=_require_int(record, "id", "customer", index),
        name=_require_str(record, "name", "customer", index),
    )


def transaction_from_json(record: Any, index: int = 0) -> domain.Transaction:
    """Convert a JSON transaction object to a domain Transaction.

    Raises:
        DecodeError: If a field is missing or has the wrong type
    """
    if not isinstance(record, dict):
        raise DecodeError(invalid_record("transaction", index, "expected an object"))
    return domain.Transaction(
        customer_id=_require_int(record, "customer_id", "transaction", index),
        date=_require_str(record, "date", "transaction", index),
        amount=_require_amount(record, index),
    )


def customers_from_json(payload: Any) -> list[domain.Customer]:
    """Convert a JSON customer list."""
    if not isinstance(payload, list):
        raise DecodeError("Expected a JSON list of customers")
    return [customer_from_json(record, i) for i, record in enumerate(payload)]


def transactions_from_json(payload: Any) -> list[domain.Transaction]:
    """Convert a JSON transaction list."""
    if not isinstance(payload, list):
        raise DecodeError("Expected a JSON list of transactions")
    return [transaction_from_json(record, i) for i, record in enumerate(payload)]


def customer_to_domain(orm_customer: ORMCustomer) -> domain.Customer:
    """Convert SQLAlchemy Customer model to domain Customer entity."""
    return domain.Customer(id=orm_customer.id, name=orm_customer.name)


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        customer_id=orm_transaction.customer_id,
        date=orm_transaction.date,
        amount=float(orm_transaction.amount),
    )
