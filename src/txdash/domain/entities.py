"""Domain model entities for txdash.

These are pure data classes representing the dashboard's business concepts,
independent of where the records come from (REST backend or local database)
and of how they are rendered.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Customer:
    """Customer domain entity."""

    id: int
    name: str


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    ``date`` is kept as the lexical string the backend sent (ISO-8601 dates in
    practice) so grouping by day never depends on timezone conversion.
    """

    customer_id: int
    date: str
    amount: float


@dataclass(frozen=True)
class DailyTotal:
    """Sum of one customer's transaction amounts on one date."""

    date: str
    total: float


@dataclass(frozen=True)
class CustomerTotal:
    """Sum of all transaction amounts of one customer."""

    customer_name: str
    total: float


@dataclass(frozen=True)
class FilterState:
    """Current text predicates entered by the user."""

    name_query: str = ""
    amount_query: str = ""

    @property
    def is_empty(self) -> bool:
        """True when neither predicate is set."""
        return not self.name_query and not self.amount_query.strip()


@dataclass(frozen=True)
class TableRow:
    """One row of the transaction table."""

    customer_name: str
    date: str
    amount: float


@dataclass(frozen=True)
class ChartSeries:
    """Labelled series ready for a chart renderer."""

    title: str
    labels: tuple[str, ...] = ()
    values: tuple[float, ...] = ()

    def __len__(self) -> int:
        return len(self.labels)


class ViewState(Enum):
    """States of the dashboard view controller."""

    UNLOADED = "unloaded"
    IDLE = "idle"
    FILTERED = "filtered"
    NO_MATCH = "no_match"
    LOAD_FAILED = "load_failed"


@dataclass(frozen=True)
class Snapshot:
    """Customers and transactions as loaded once for the session.

    Built with :func:`txdash.domain.snapshot.build_snapshot`, which also fills
    the id index and the orphan report.
    """

    customers: tuple[Customer, ...]
    transactions: tuple[Transaction, ...]
    customer_index: dict[int, Customer] = field(default_factory=dict, compare=False)
    orphans: tuple[Transaction, ...] = ()

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        """Look up a customer by ID."""
        return self.customer_index.get(customer_id)
