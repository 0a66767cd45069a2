"""Tests for the dashboard view state controller."""

import pytest

from txdash.domain.aggregation import DAILY_CHART_TITLE, TOTAL_CHART_TITLE
from txdash.domain.dashboard import DashboardController
from txdash.domain.entities import Transaction, ViewState
from txdash.domain.errors import DecodeError, ValidationError
from txdash.render.frame import FrameRenderer


def _names(frame):
    return [row.customer_name for row in frame.rows]


class TestLoad:
    """Tests for the initial load."""

    def test_starts_unloaded(self, data_source, frame):
        controller = DashboardController(data_source, frame)

        assert controller.state == ViewState.UNLOADED
        assert controller.snapshot is None

    def test_load_shows_full_table_and_totals(self, controller, frame, transactions):
        assert controller.state == ViewState.IDLE
        assert controller.visible_transactions == transactions
        assert _names(frame) == ["Alice", "Alice", "Bob"]
        assert frame.chart is None
        assert frame.total_chart.title == TOTAL_CHART_TITLE
        assert frame.total_chart.values == (75.0, 10.0)

    def test_load_failure(self, failing_source, frame):
        controller = DashboardController(failing_source, frame)

        assert controller.load() == ViewState.LOAD_FAILED
        assert controller.snapshot is None
        assert frame.rows is None
        assert frame.total_chart is None
        assert frame.errors == ["Error fetching data: connection refused"]

    def test_decode_error_also_fails_load(self, frame, make_source):
        source = make_source([], [], error=DecodeError("bad payload"))
        controller = DashboardController(source, frame)

        assert controller.load() == ViewState.LOAD_FAILED

    def test_failed_state_ignores_input(self, failing_source, frame):
        controller = DashboardController(failing_source, frame)
        controller.load()

        assert controller.set_name_query("ali") == ViewState.LOAD_FAILED
        assert controller.reset() == ViewState.LOAD_FAILED
        assert controller.load() == ViewState.LOAD_FAILED
        assert failing_source.fetch_count == 1
        assert controller.filters.name_query == ""

    def test_reload_recovers_from_failure(self, customers, transactions, frame, make_source):
        source = make_source(customers, transactions, error=DecodeError("bad"))
        controller = DashboardController(source, frame)
        controller.load()

        source.error = None
        assert controller.reload() == ViewState.IDLE
        assert controller.visible_transactions == transactions

    def test_input_before_load_is_ignored(self, data_source, frame):
        controller = DashboardController(data_source, frame)

        assert controller.set_filters("ali", "5") == ViewState.UNLOADED
        assert controller.reset() == ViewState.UNLOADED
        assert frame.rows is None

    def test_require_snapshot_before_load(self, data_source, frame):
        with pytest.raises(ValidationError):
            DashboardController(data_source, frame).require_snapshot()


class TestFilters:
    """Tests for filter input events."""

    def test_name_match_shows_daily_chart(self, controller, frame, alice):
        assert controller.set_name_query("ali") == ViewState.FILTERED
        assert controller.chart_target == alice
        assert _names(frame) == ["Alice", "Alice"]
        assert frame.chart.title == DAILY_CHART_TITLE
        assert frame.chart.labels == ("2024-01-01",)
        assert frame.chart.values == (75.0,)

    def test_unknown_name_goes_to_no_match(self, controller, frame):
        """A name nobody has hides the chart without raising."""
        controller.set_name_query("ali")

        assert controller.set_name_query("zz") == ViewState.NO_MATCH
        assert controller.chart_target is None
        assert frame.chart is None
        assert frame.rows == []

    def test_amount_only_filter_has_no_chart_target(self, controller, frame):
        assert controller.set_amount_query("10") == ViewState.NO_MATCH
        assert _names(frame) == ["Bob"]
        assert frame.chart is None

    def test_clearing_filters_returns_to_idle(self, controller, frame, transactions):
        controller.set_filters("bob", "1")

        assert controller.set_filters("", "") == ViewState.IDLE
        assert controller.visible_transactions == transactions
        assert frame.chart is None

    def test_daily_chart_uses_all_target_transactions(self, controller, frame):
        """The chart covers the customer, not just the amount-filtered rows."""
        controller.set_filters("alice", "25")

        assert controller.visible_transactions == [
            Transaction(customer_id=1, date="2024-01-01", amount=25.0)
        ]
        assert frame.chart.values == (75.0,)

    def test_last_input_wins(self, controller, bob):
        controller.set_name_query("ali")
        controller.set_name_query("bo")

        assert controller.chart_target == bob
        assert controller.filters.name_query == "bo"

    def test_name_and_amount_are_tracked_separately(self, controller):
        controller.set_name_query("ali")
        controller.set_amount_query("5")

        assert controller.filters.name_query == "ali"
        assert controller.filters.amount_query == "5"

    def test_select_customer(self, controller, frame, bob):
        assert controller.select_customer("Bob") == ViewState.FILTERED
        assert controller.filters.name_query == "Bob"
        assert controller.chart_target == bob
        assert _names(frame) == ["Bob"]

    def test_total_chart_ignores_filters(self, controller, frame):
        controller.set_name_query("ali")
        assert frame.total_chart.values == (75.0, 10.0)

    def test_orphans_never_shown(self, customers, transactions, frame, make_source):
        orphan = Transaction(customer_id=99, date="2024-01-09", amount=5.0)
        controller = DashboardController(
            make_source(customers, transactions + [orphan]), frame
        )
        controller.load()

        assert orphan not in controller.visible_transactions
        controller.set_amount_query("5")
        assert orphan not in controller.visible_transactions
        assert controller.snapshot.orphans == (orphan,)


class TestReset:
    """Tests for reset."""

    def test_reset_restores_everything(self, controller, frame, transactions):
        controller.set_filters("zz", "9")

        assert controller.reset() == ViewState.IDLE
        assert controller.filters.name_query == ""
        assert controller.filters.amount_query == ""
        assert controller.visible_transactions == transactions
        assert frame.chart is None
        assert frame.total_chart.labels == ("Alice", "Bob")

    def test_reset_re_renders_total_chart(self, data_source):
        frame = FrameRenderer()
        controller = DashboardController(data_source, frame)
        controller.load()
        frame.total_chart = None

        controller.reset()

        assert frame.total_chart is not None
