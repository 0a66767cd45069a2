"""Interactive dashboard session."""

import click

from txdash.cli.context import get_data_source
from txdash.domain.dashboard import DashboardController
from txdash.domain.entities import ViewState
from txdash.render.console import ConsoleRenderer
from txdash.render.frame import FrameRenderer

HELP_TEXT = """Commands:
  name <text>      filter by customer name (empty clears)
  amount <text>    filter by amount digits (empty clears)
  select <name>    select a customer as if clicked in the table
  reset            clear both filters
  reload           fetch the data again
  state            show the current view state and filters
  help             show this help
  quit             leave the session"""


def run_command(controller: DashboardController, line: str) -> bool:
    """Dispatch one input line to the controller.

    Returns:
        False when the session should end
    """
    command, _, argument = line.strip().partition(" ")
    argument = argument.strip()
    command = command.lower()

    if command in ("quit", "exit", "q"):
        return False
    if command == "help":
        click.echo(HELP_TEXT)
    elif command == "state":
        filters = controller.filters
        click.echo(
            f"State: {controller.state.value} "
            f"(name='{filters.name_query}', amount='{filters.amount_query}')"
        )
    elif controller.state == ViewState.LOAD_FAILED and command != "reload":
        click.echo("Data is not loaded; use 'reload' to try again.", err=True)
    elif command == "name":
        controller.set_name_query(argument)
    elif command == "amount":
        controller.set_amount_query(argument)
    elif command == "select":
        controller.select_customer(argument)
    elif command == "reset":
        controller.reset()
    elif command == "reload":
        controller.reload()
    elif command:
        click.echo(f"Unknown command '{command}'. Type 'help' for a list.", err=True)
    return True


@click.command("shell")
@click.pass_context
def shell(ctx):
    """Start an interactive session with live filters."""
    frame = FrameRenderer(ConsoleRenderer())
    controller = DashboardController(get_data_source(ctx), frame)
    controller.load()
    frame.flush()
    click.echo("Type 'help' for commands.")

    while True:
        try:
            line = click.prompt("txdash", default="", show_default=False, prompt_suffix="> ")
        except click.exceptions.Abort:
            click.echo()
            break
        if not run_command(controller, line):
            break
        frame.flush()
        if controller.state == ViewState.NO_MATCH and controller.filters.name_query:
            click.echo(f"\nNo customer matches '{controller.filters.name_query}'.")


def register_commands(cli):
    """Register shell command with main CLI."""
    cli.add_command(shell)
