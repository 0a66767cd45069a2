"""Dashboard view state controller."""

from dataclasses import replace
from typing import TYPE_CHECKING, Optional

from txdash.domain.aggregation import (
    customer_totals,
    daily_chart,
    daily_totals,
    total_chart,
)
from txdash.domain.entities import (
    Customer,
    FilterState,
    Snapshot,
    Transaction,
    ViewState,
)
from txdash.domain.errors import DataSourceError, ValidationError, not_loaded
from txdash.domain.filtering import (
    filter_transactions,
    resolve_chart_target,
    table_rows,
)
from txdash.domain.snapshot import build_snapshot
from txdash.logging_setup import get_logger

if TYPE_CHECKING:
    from txdash.datasource.base import DataSource
    from txdash.render.base import Renderer

logger = get_logger(__name__)


class DashboardController:
    """Owns the loaded snapshot and the filter inputs.

    Every input event recomputes the filtered table and the chart data from the
    snapshot and pushes the result to the renderer. Nothing derived is kept
    between events except what the read accessors expose.
    """

    def __init__(self, data_source: "DataSource", renderer: "Renderer"):
        """Initialize controller.

        Args:
            data_source: Source of customers and transactions
            renderer: Output surface for table and charts
        """
        self.data_source = data_source
        self.renderer = renderer
        self._state = ViewState.UNLOADED
        self._filters = FilterState()
        self._snapshot: Optional[Snapshot] = None
        self._visible: list[Transaction] = []
        self._chart_target: Optional[Customer] = None

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def filters(self) -> FilterState:
        return self._filters

    @property
    def snapshot(self) -> Optional[Snapshot]:
        return self._snapshot

    @property
    def visible_transactions(self) -> list[Transaction]:
        """Transactions currently shown in the table."""
        return list(self._visible)

    @property
    def chart_target(self) -> Optional[Customer]:
        """Customer whose daily chart is shown, if any."""
        return self._chart_target

    @property
    def is_ready(self) -> bool:
        """True when a snapshot is loaded and input is accepted."""
        return self._snapshot is not None and self._state != ViewState.LOAD_FAILED

    def require_snapshot(self) -> Snapshot:
        """Return the loaded snapshot.

        Raises:
            ValidationError: If nothing has been loaded
        """
        if self._snapshot is None:
            raise ValidationError(not_loaded())
        return self._snapshot

    def load(self) -> ViewState:
        """Fetch customers and transactions and show the unfiltered dashboard.

        Returns:
            IDLE on success, LOAD_FAILED if the data source failed
        """
        if self._state == ViewState.LOAD_FAILED:
            logger.debug("Ignoring load in failed state; use reload()")
            return self._state

        try:
            customers = self.data_source.fetch_customers()
            transactions = self.data_source.fetch_transactions()
        except DataSourceError as e:
            logger.warning("Loading dashboard data failed: %s", e)
            self._snapshot = None
            self._visible = []
            self._chart_target = None
            self._transition(ViewState.LOAD_FAILED)
            self.renderer.show_error(f"Error fetching data: {e}")
            return self._state

        self._snapshot = build_snapshot(customers, transactions)
        self._show_unfiltered()
        return self._state

    def reload(self) -> ViewState:
        """Discard the snapshot and load again, leaving any failed state."""
        self._snapshot = None
        self._state = ViewState.UNLOADED
        return self.load()

    def set_name_query(self, name_query: str) -> ViewState:
        """Handle a change of the customer name predicate."""
        return self.set_filters(name_query, self._filters.amount_query)

    def set_amount_query(self, amount_query: str) -> ViewState:
        """Handle a change of the amount predicate."""
        return self.set_filters(self._filters.name_query, amount_query)

    def select_customer(self, name: str) -> ViewState:
        """Handle a click on a customer name in the table."""
        return self.set_name_query(name)

    def set_filters(self, name_query: str, amount_query: str) -> ViewState:
        """Apply both predicates and re-render table and daily chart."""
        if not self.is_ready:
            logger.debug("Ignoring filter input in state %s", self._state.value)
            return self._state

        self._filters = replace(
            self._filters, name_query=name_query, amount_query=amount_query
        )
        snapshot = self.require_snapshot()

        self._visible = filter_transactions(
            snapshot.transactions,
            snapshot.customers,
            self._filters.name_query,
            self._filters.amount_query,
            customer_index=snapshot.customer_index,
        )
        self.renderer.render_table(table_rows(self._visible, snapshot.customer_index))

        if self._filters.is_empty:
            self._chart_target = None
            self.renderer.clear_chart()
            self._transition(ViewState.IDLE)
            return self._state

        self._chart_target = resolve_chart_target(
            snapshot.customers, self._filters.name_query
        )
        if self._chart_target is None:
            self.renderer.clear_chart()
            self._transition(ViewState.NO_MATCH)
        else:
            totals = daily_totals(snapshot.transactions, self._chart_target.id)
            self.renderer.render_chart(daily_chart(totals))
            self._transition(ViewState.FILTERED)
        return self._state

    def reset(self) -> ViewState:
        """Clear both predicates and show the full dataset."""
        if not self.is_ready:
            logger.debug("Ignoring reset in state %s", self._state.value)
            return self._state
        self._show_unfiltered()
        return self._state

    def _show_unfiltered(self) -> None:
        snapshot = self.require_snapshot()
        self._filters = FilterState()
        self._visible = [
            txn for txn in snapshot.transactions if txn.customer_id in snapshot.customer_index
        ]
        self._chart_target = None

        self.renderer.render_table(table_rows(self._visible, snapshot.customer_index))
        self.renderer.clear_chart()
        totals = customer_totals(snapshot.customers, snapshot.transactions)
        self.renderer.render_total_chart(total_chart(totals))
        self._transition(ViewState.IDLE)

    def _transition(self, new_state: ViewState) -> None:
        if new_state != self._state:
            logger.debug("View state %s -> %s", self._state.value, new_state.value)
        self._state = new_state
