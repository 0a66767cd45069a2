"""Shared pytest fixtures for txdash tests."""

import logging
import os
import tempfile

import pytest

from txdash import logging_setup
from txdash.datasource.base import DataSource
from txdash.datasource.factories import create_sqlite_data_source
from txdash.domain.dashboard import DashboardController
from txdash.domain.entities import Customer, Transaction
from txdash.domain.errors import NetworkError
from txdash.render.frame import FrameRenderer


class InMemoryDataSource(DataSource):
    """Data source serving fixed lists and counting fetches."""

    def __init__(self, customers, transactions, error=None):
        self.customers = list(customers)
        self.transactions = list(transactions)
        self.error = error
        self.fetch_count = 0

    def fetch_customers(self):
        self.fetch_count += 1
        if self.error is not None:
            raise self.error
        return list(self.customers)

    def fetch_transactions(self):
        if self.error is not None:
            raise self.error
        return list(self.transactions)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo CLI logging configuration so caplog sees package records."""
    yield
    logger = logging.getLogger("txdash")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    logging_setup._CONFIGURED = False


@pytest.fixture
def alice():
    return Customer(id=1, name="Alice")


@pytest.fixture
def bob():
    return Customer(id=2, name="Bob")


@pytest.fixture
def customers(alice, bob):
    """Two-customer roster."""
    return [alice, bob]


@pytest.fixture
def alice_transactions():
    """Two transactions of Alice on the same day."""
    return [
        Transaction(customer_id=1, date="2024-01-01", amount=50.0),
        Transaction(customer_id=1, date="2024-01-01", amount=25.0),
    ]


@pytest.fixture
def transactions(alice_transactions):
    """Alice's transactions plus one of Bob."""
    return alice_transactions + [Transaction(customer_id=2, date="2024-01-02", amount=10.0)]


@pytest.fixture
def make_source():
    """Factory for in-memory data sources."""
    return InMemoryDataSource


@pytest.fixture
def data_source(customers, transactions):
    return InMemoryDataSource(customers, transactions)


@pytest.fixture
def failing_source():
    return InMemoryDataSource([], [], error=NetworkError("connection refused"))


@pytest.fixture
def frame():
    """Renderer that records the latest table and charts."""
    return FrameRenderer()


@pytest.fixture
def controller(data_source, frame):
    """Controller with data loaded."""
    controller = DashboardController(data_source, frame)
    controller.load()
    return controller


@pytest.fixture
def temp_db_path():
    """Path to a temporary SQLite file, removed afterwards."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    yield db_path
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def sqlite_source(temp_db_path, customers, transactions):
    """SQLite data source holding the two-customer snapshot."""
    source = create_sqlite_data_source(database_path=temp_db_path)
    source.store_snapshot(customers, transactions)
    yield source
    source.disconnect()


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
