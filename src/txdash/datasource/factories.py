"""Data source factory functions."""

import os
from pathlib import Path
from typing import Optional

from txdash.datasource.http import DEFAULT_TIMEOUT, HttpDataSource
from txdash.datasource.sqlalchemy_source import SQLAlchemyDataSource

DEFAULT_API_URL = "http://localhost:3000/api"


def create_http_data_source(
    base_url: Optional[str] = None, timeout: Optional[float] = None
) -> HttpDataSource:
    """Create a REST backend data source.

    Args:
        base_url: API root. If None, checks TXDASH_API_URL environment
            variable, then defaults to http://localhost:3000/api
        timeout: Request timeout in seconds. If None, checks
            TXDASH_HTTP_TIMEOUT, then defaults to 10

    Returns:
        HttpDataSource instance
    """
    if base_url is None:
        base_url = os.environ.get("TXDASH_API_URL", DEFAULT_API_URL)

    if timeout is None:
        env_timeout = os.environ.get("TXDASH_HTTP_TIMEOUT")
        timeout = float(env_timeout) if env_timeout else DEFAULT_TIMEOUT

    return HttpDataSource(base_url, timeout=timeout)


def create_sqlite_data_source(
    database_path: Optional[str] = None,
) -> SQLAlchemyDataSource:
    """Create a SQLite-backed data source.

    Args:
        database_path: Path to SQLite database file. If None, checks
            TXDASH_DB_PATH environment variable, then defaults to
            ~/.txdash/txdash.db

    Returns:
        SQLAlchemyDataSource instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get("TXDASH_DB_PATH")

    if database_path is None:
        db_dir = Path.home() / ".txdash"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "txdash.db")

    return SQLAlchemyDataSource(f"sqlite:///{database_path}")
