"""REST backend data source."""

from typing import Any, Optional

import requests

from txdash.datasource.base import DataSource
from txdash.datasource.mappers import customers_from_json, transactions_from_json
from txdash.domain.entities import Customer, Transaction
from txdash.domain.errors import DecodeError, NetworkError, request_failed
from txdash.logging_setup import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 10.0


class HttpDataSource(DataSource):
    """Loads customers and transactions from ``{base_url}/customers`` and
    ``{base_url}/transactions``."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """Initialize HTTP data source.

        Args:
            base_url: API root, e.g. 'http://localhost:3000/api'
            timeout: Per-request timeout in seconds
            session: Optional requests session (a new one is created if omitted)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get_json(self, resource: str) -> Any:
        url = f"{self.base_url}/{resource}"
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise NetworkError(request_failed(url, str(e))) from e

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"Response from {url} is not valid JSON: {e}") from e

    def fetch_customers(self) -> list[Customer]:
        """Fetch the customer roster."""
        customers = customers_from_json(self._get_json("customers"))
        logger.info("Fetched %d customers", len(customers))
        return customers

    def fetch_transactions(self) -> list[Transaction]:
        """Fetch all transactions."""
        transactions = transactions_from_json(self._get_json("transactions"))
        logger.info("Fetched %d transactions", len(transactions))
        return transactions

    def disconnect(self) -> None:
        """Close the underlying requests session."""
        self.session.close()
