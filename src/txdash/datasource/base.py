"""Abstract data source interface."""

from abc import ABC, abstractmethod

# Import entities directly to avoid circular import through domain/__init__.py
from txdash.domain.entities import Customer, Transaction


class DataSource(ABC):
    """Where the customer roster and the transactions are loaded from."""

    @abstractmethod
    def fetch_customers(self) -> list[Customer]:
        """Fetch the customer roster.

        Raises:
            NetworkError: On transport failure
            DecodeError: If the payload is not a valid customer list
        """
        pass

    @abstractmethod
    def fetch_transactions(self) -> list[Transaction]:
        """Fetch all transactions.

        Raises:
            NetworkError: On transport failure
            DecodeError: If the payload is not a valid transaction list
        """
        pass

    def disconnect(self) -> None:
        """Release held resources. Sources without any keep the default."""
        pass
