"""Domain layer for txdash application."""

from txdash.domain.aggregation import customer_totals, daily_totals
from txdash.domain.dashboard import DashboardController
from txdash.domain.filtering import filter_transactions, resolve_chart_target
from txdash.domain.snapshot import build_snapshot

__all__ = [
    "DashboardController",
    "build_snapshot",
    "customer_totals",
    "daily_totals",
    "filter_transactions",
    "resolve_chart_target",
]
