"""Renderer that keeps only the latest frame until flushed."""

from typing import Optional, Sequence

from txdash.domain.entities import ChartSeries, TableRow
from txdash.render.base import Renderer


class FrameRenderer(Renderer):
    """Collects render calls and forwards the latest state on ``flush()``.

    A terminal cannot redraw in place, so the CLI lets one command run through
    several controller events and prints only what is on screen at the end.
    """

    def __init__(self, target: Optional[Renderer] = None):
        self.target = target
        self.rows: Optional[list[TableRow]] = None
        self.chart: Optional[ChartSeries] = None
        self.total_chart: Optional[ChartSeries] = None
        self.errors: list[str] = []
        self._dirty: set[str] = set()

    def render_table(self, rows: Sequence[TableRow]) -> None:
        self.rows = list(rows)
        self._dirty.add("table")

    def render_chart(self, series: ChartSeries) -> None:
        self.chart = series
        self._dirty.add("chart")

    def clear_chart(self) -> None:
        self.chart = None
        self._dirty.add("chart")

    def render_total_chart(self, series: ChartSeries) -> None:
        self.total_chart = series
        self._dirty.add("total")

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def flush(self) -> None:
        """Forward errors and every part that changed since the last flush."""
        if self.target is not None:
            for message in self.errors:
                self.target.show_error(message)
            if "table" in self._dirty and self.rows is not None:
                self.target.render_table(self.rows)
            if "chart" in self._dirty:
                if self.chart is None:
                    self.target.clear_chart()
                else:
                    self.target.render_chart(self.chart)
            if "total" in self._dirty and self.total_chart is not None:
                self.target.render_total_chart(self.total_chart)
        self.errors = []
        self._dirty.clear()
