"""Transaction table and chart commands."""

import click

from txdash.cli.context import load_dashboard
from txdash.cli.error_handling import handle_domain_error
from txdash.domain.aggregation import daily_chart, daily_totals
from txdash.domain.entities import ViewState
from txdash.domain.errors import NotFoundError, customer_not_found
from txdash.render.console import ConsoleRenderer
from txdash.render.frame import FrameRenderer


@click.command("view")
@click.option("--name", default="", help="Show customers whose name contains this text")
@click.option("--amount", default="", help="Show amounts whose digits contain this text")
@click.option("--customer", help="Select a customer by name, as if clicked in the table")
@click.option("--no-totals", is_flag=True, help="Hide the per-customer total chart")
@click.pass_context
def view(ctx, name: str, amount: str, customer: str | None, no_totals: bool):
    """View transactions with optional name and amount filters.

    When the name filter matches a customer, that customer's daily totals are
    charted below the table.
    """
    frame = FrameRenderer(ConsoleRenderer(show_total_chart=not no_totals))
    controller = load_dashboard(ctx, frame)

    name_query = customer if customer is not None else name
    state = controller.set_filters(name_query, amount)
    frame.flush()

    if state == ViewState.NO_MATCH and name_query:
        click.echo(f"\nNo customer matches '{name_query}'.")


@click.command("totals")
@click.pass_context
def totals(ctx):
    """Show total transaction amount per customer."""
    frame = FrameRenderer(ConsoleRenderer())
    load_dashboard(ctx, frame)
    ConsoleRenderer().render_total_chart(frame.total_chart)


@click.command("daily")
@click.argument("customer_id", type=int)
@click.pass_context
def daily(ctx, customer_id: int):
    """Show daily transaction totals for one customer."""
    frame = FrameRenderer(ConsoleRenderer())
    controller = load_dashboard(ctx, frame)
    snapshot = controller.require_snapshot()

    customer = snapshot.get_customer(customer_id)
    if customer is None:
        handle_domain_error(ctx, NotFoundError(customer_not_found(customer_id)))

    click.echo(f"Customer: {customer.name} (ID: {customer.id})")
    series = daily_chart(daily_totals(snapshot.transactions, customer_id))
    ConsoleRenderer().render_chart(series)


def register_commands(cli):
    """Register view commands with main CLI."""
    cli.add_command(view)
    cli.add_command(totals)
    cli.add_command(daily)
