"""Session snapshot construction."""

from typing import Iterable, Sequence

from txdash.domain.entities import Customer, Snapshot, Transaction
from txdash.domain.errors import duplicate_customer_id
from txdash.domain.filtering import find_orphans
from txdash.logging_setup import get_logger

logger = get_logger(__name__)


def build_customer_index(customers: Iterable[Customer]) -> dict[int, Customer]:
    """Build a mapping of customer ID to customer.

    When two roster entries share an ID the first one wins, the same result a
    first-match scan over the roster would give.
    """
    index: dict[int, Customer] = {}
    for customer in customers:
        existing = index.get(customer.id)
        if existing is not None:
            logger.warning(
                duplicate_customer_id(customer.id, existing.name, customer.name)
            )
            continue
        index[customer.id] = customer
    return index


def build_snapshot(
    customers: Sequence[Customer], transactions: Sequence[Transaction]
) -> Snapshot:
    """Freeze loaded records into a snapshot and report orphan transactions.

    Orphans stay in ``transactions`` so the loaded data is kept as received;
    every derived view skips them.
    """
    customer_index = build_customer_index(customers)
    orphans = find_orphans(transactions, customer_index)
    for error in orphans:
        logger.warning("Data quality: %s", error)

    logger.debug(
        "Snapshot built with %d customers, %d transactions (%d orphans)",
        len(customers),
        len(transactions),
        len(orphans),
    )
    return Snapshot(
        customers=tuple(customers),
        transactions=tuple(transactions),
        customer_index=customer_index,
        orphans=tuple(error.transaction for error in orphans),
    )
