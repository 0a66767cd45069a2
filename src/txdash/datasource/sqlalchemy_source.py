"""SQLAlchemy-backed data source for offline viewing."""

from typing import Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from txdash.datasource.base import DataSource
from txdash.datasource.mappers import customer_to_domain, transaction_to_domain
from txdash.datasource.models import (
    Customer,
    Transaction,
    create_session_factory,
)
from txdash.domain.entities import (
    Customer as DomainCustomer,
    Transaction as DomainTransaction,
)
from txdash.domain.errors import DataSourceError
from txdash.logging_setup import get_logger

logger = get_logger(__name__)


class SQLAlchemyDataSource(DataSource):
    """Reads a stored snapshot from any SQLAlchemy database."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy data source.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def disconnect(self) -> None:
        """Close the current session."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def fetch_customers(self) -> list[DomainCustomer]:
        """Fetch the customer roster in stored order."""
        session = self._get_session()
        try:
            rows = session.query(Customer).order_by(Customer.position, Customer.id).all()
        except SQLAlchemyError as e:
            raise DataSourceError(f"Reading customers from {self.database_url} failed: {e}") from e
        return [customer_to_domain(row) for row in rows]

    def fetch_transactions(self) -> list[DomainTransaction]:
        """Fetch all transactions in stored order."""
        session = self._get_session()
        try:
            rows = session.query(Transaction).order_by(Transaction.id).all()
        except SQLAlchemyError as e:
            raise DataSourceError(
                f"Reading transactions from {self.database_url} failed: {e}"
            ) from e
        return [transaction_to_domain(row) for row in rows]

    def store_snapshot(
        self,
        customers: Sequence[DomainCustomer],
        transactions: Sequence[DomainTransaction],
    ) -> None:
        """Replace the stored snapshot with the given records.

        Customers keep their roster order; for duplicate IDs the first one is
        stored.

        Raises:
            DataSourceError: If the database rejects the write; nothing is changed
        """
        session = self._get_session()
        try:
            session.query(Transaction).delete()
            session.query(Customer).delete()

            seen: set[int] = set()
            for position, customer in enumerate(customers):
                if customer.id in seen:
                    continue
                seen.add(customer.id)
                session.add(Customer(id=customer.id, name=customer.name, position=position))

            for txn in transactions:
                session.add(
                    Transaction(customer_id=txn.customer_id, date=txn.date, amount=txn.amount)
                )
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise DataSourceError(
                f"Storing snapshot in {self.database_url} failed: {e}"
            ) from e
        logger.info(
            "Stored snapshot of %d customers and %d transactions",
            len(seen),
            len(transactions),
        )
