"""Text-predicate filtering of transactions."""

from typing import Mapping, Optional, Sequence

from txdash.domain.entities import Customer, TableRow, Transaction
from txdash.domain.errors import OrphanTransactionError
from txdash.logging_setup import get_logger
from txdash.utils.amount_format import format_amount

logger = get_logger(__name__)


def resolve_owner(
    txn: Transaction, customer_index: Mapping[int, Customer]
) -> Customer:
    """Return the customer a transaction belongs to.

    Raises:
        OrphanTransactionError: If the customer ID is not in the roster
    """
    customer = customer_index.get(txn.customer_id)
    if customer is None:
        raise OrphanTransactionError(txn)
    return customer


def find_orphans(
    transactions: Sequence[Transaction], customer_index: Mapping[int, Customer]
) -> list[OrphanTransactionError]:
    """Collect an error for every transaction without a known customer."""
    return [
        OrphanTransactionError(txn)
        for txn in transactions
        if txn.customer_id not in customer_index
    ]


def name_matches(customer: Customer, name_query: str) -> bool:
    """Case-insensitive substring match on the customer name."""
    return name_query.casefold() in customer.name.casefold()


def amount_matches(txn: Transaction, amount_query: str) -> bool:
    """Literal substring match on the amount's decimal string."""
    return amount_query.strip() in format_amount(txn.amount)


def filter_transactions(
    transactions: Sequence[Transaction],
    customers: Sequence[Customer],
    name_query: str,
    amount_query: str,
    customer_index: Optional[Mapping[int, Customer]] = None,
) -> list[Transaction]:
    """Keep transactions matching both the name and the amount predicate.

    Args:
        transactions: Transactions to filter, in display order
        customers: Customer roster used to resolve names
        name_query: Substring of the customer name (empty matches all)
        amount_query: Substring of the amount string (empty matches all)
        customer_index: Prebuilt ID index; built from ``customers`` if omitted

    Returns:
        Matching transactions in input order. Transactions whose customer is
        unknown are skipped and logged.
    """
    if customer_index is None:
        from txdash.domain.snapshot import build_customer_index

        customer_index = build_customer_index(customers)

    filtered: list[Transaction] = []
    for txn in transactions:
        try:
            customer = resolve_owner(txn, customer_index)
        except OrphanTransactionError as e:
            logger.warning("Skipping transaction: %s", e)
            continue
        if name_matches(customer, name_query) and amount_matches(txn, amount_query):
            filtered.append(txn)
    return filtered


def resolve_chart_target(
    customers: Sequence[Customer], name_query: str
) -> Optional[Customer]:
    """Return the first customer whose name contains the query.

    Returns None when the query is empty or nothing matches.
    """
    if not name_query:
        return None
    for customer in customers:
        if name_matches(customer, name_query):
            return customer
    return None


def table_rows(
    transactions: Sequence[Transaction], customer_index: Mapping[int, Customer]
) -> list[TableRow]:
    """Project transactions to (customer name, date, amount) rows."""
    rows: list[TableRow] = []
    for txn in transactions:
        try:
            customer = resolve_owner(txn, customer_index)
        except OrphanTransactionError:
            continue
        rows.append(TableRow(customer_name=customer.name, date=txn.date, amount=txn.amount))
    return rows
