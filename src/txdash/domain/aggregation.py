"""Aggregation of transactions into chart-ready totals."""

from typing import Sequence

from txdash.domain.entities import (
    ChartSeries,
    Customer,
    CustomerTotal,
    DailyTotal,
    Transaction,
)

DAILY_CHART_TITLE = "Daily Transaction Amount"
TOTAL_CHART_TITLE = "Total Transaction Amount"


def daily_totals(
    transactions: Sequence[Transaction], customer_id: int
) -> list[DailyTotal]:
    """Sum one customer's transaction amounts per date.

    Args:
        transactions: Transactions to aggregate
        customer_id: Customer whose transactions are summed

    Returns:
        One DailyTotal per date, in the order each date is first seen
    """
    totals: dict[str, float] = {}
    for txn in transactions:
        if txn.customer_id != customer_id:
            continue
        totals[txn.date] = totals.get(txn.date, 0.0) + txn.amount

    return [DailyTotal(date=day, total=total) for day, total in totals.items()]


def customer_totals(
    customers: Sequence[Customer], transactions: Sequence[Transaction]
) -> list[CustomerTotal]:
    """Sum transaction amounts per customer.

    Every customer of the roster gets an entry, in roster order, with 0.0 when
    it has no transactions. Transactions of unknown customers are ignored.
    """
    sums: dict[int, float] = {}
    for txn in transactions:
        sums[txn.customer_id] = sums.get(txn.customer_id, 0.0) + txn.amount

    return [
        CustomerTotal(customer_name=customer.name, total=sums.get(customer.id, 0.0))
        for customer in customers
    ]


def daily_chart(totals: Sequence[DailyTotal]) -> ChartSeries:
    """Build the single-customer chart series."""
    return ChartSeries(
        title=DAILY_CHART_TITLE,
        labels=tuple(item.date for item in totals),
        values=tuple(item.total for item in totals),
    )


def total_chart(totals: Sequence[CustomerTotal]) -> ChartSeries:
    """Build the aggregate per-customer chart series."""
    return ChartSeries(
        title=TOTAL_CHART_TITLE,
        labels=tuple(item.customer_name for item in totals),
        values=tuple(item.total for item in totals),
    )
