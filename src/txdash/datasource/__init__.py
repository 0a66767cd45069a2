"""Data source layer for txdash application."""

from txdash.datasource.base import DataSource
from txdash.datasource.factories import create_http_data_source, create_sqlite_data_source

__all__ = ["DataSource", "create_http_data_source", "create_sqlite_data_source"]
