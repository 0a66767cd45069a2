"""Terminal renderer built on click."""

from typing import Sequence

import click

from txdash.domain.entities import ChartSeries, TableRow
from txdash.render.base import Renderer

BAR_WIDTH = 40


def format_money(value: float) -> str:
    """Format an amount for display."""
    return f"${value:,.2f}"


def bar_lines(series: ChartSeries, width: int = BAR_WIDTH) -> list[str]:
    """Lay out a series as horizontal text bars.

    Bars are scaled to the largest absolute value; negative values are drawn
    with '-' instead of '#'.
    """
    if not series.labels:
        return []
    label_width = max(len(label) for label in series.labels)
    peak = max(abs(value) for value in series.values) or 1.0

    lines = []
    for label, value in zip(series.labels, series.values):
        length = round(abs(value) / peak * width)
        if value != 0 and length == 0:
            length = 1
        bar = ("-" if value < 0 else "#") * length
        lines.append(f"{label:<{label_width}} | {bar:<{width}} {format_money(value):>14}")
    return lines


class ConsoleRenderer(Renderer):
    """Prints the dashboard to the terminal."""

    def __init__(self, width: int = BAR_WIDTH, show_total_chart: bool = True):
        self.width = width
        self.show_total_chart = show_total_chart

    def render_table(self, rows: Sequence[TableRow]) -> None:
        if not rows:
            click.echo("No transactions found.")
            return

        click.echo(f"\nFound {len(rows)} transaction(s):")
        click.echo("-" * 60)
        click.echo(f"{'Customer':<30} {'Date':<12} {'Amount':>16}")
        click.echo("-" * 60)
        for row in rows:
            click.echo(
                f"{row.customer_name[:30]:<30} {row.date:<12} {format_money(row.amount):>16}"
            )

    def render_chart(self, series: ChartSeries) -> None:
        self._echo_chart(series)

    def clear_chart(self) -> None:
        # Nothing printed yet can be taken back in a terminal.
        pass

    def render_total_chart(self, series: ChartSeries) -> None:
        if self.show_total_chart:
            self._echo_chart(series)

    def show_error(self, message: str) -> None:
        click.echo(message, err=True)

    def _echo_chart(self, series: ChartSeries) -> None:
        click.echo(f"\n{series.title}:")
        click.echo("=" * (self.width + 30))
        lines = bar_lines(series, self.width)
        if not lines:
            click.echo("(no data)")
        for line in lines:
            click.echo(line)
