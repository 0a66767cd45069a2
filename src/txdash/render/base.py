"""Abstract rendering interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from txdash.domain.entities import ChartSeries, TableRow


class Renderer(ABC):
    """Abstract output surface for the dashboard."""

    @abstractmethod
    def render_table(self, rows: Sequence[TableRow]) -> None:
        """Replace the transaction table with the given rows."""
        pass

    @abstractmethod
    def render_chart(self, series: ChartSeries) -> None:
        """Show the single-customer daily chart."""
        pass

    @abstractmethod
    def clear_chart(self) -> None:
        """Hide the single-customer daily chart."""
        pass

    @abstractmethod
    def render_total_chart(self, series: ChartSeries) -> None:
        """Show the aggregate per-customer chart."""
        pass

    @abstractmethod
    def show_error(self, message: str) -> None:
        """Report an error to the user."""
        pass
