"""Main CLI entry point."""

import click

from txdash.logging_setup import configure_logging

# Import and register all commands at module level
from txdash.cli.commands import (
    shell,
    sync,
    view,
)


@click.group()
@click.option(
    "--api-url",
    help="Backend API root (overrides TXDASH_API_URL environment variable)",
    envvar="TXDASH_API_URL",
)
@click.option(
    "--db-path",
    type=click.Path(),
    help="Read from this local database instead of the backend (overrides TXDASH_DB_PATH)",
    envvar="TXDASH_DB_PATH",
)
@click.option(
    "--log-level",
    help="Logging level, e.g. DEBUG or INFO (overrides TXDASH_LOG_LEVEL)",
    envvar="TXDASH_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, api_url: str | None, db_path: str | None, log_level: str | None):
    """Txdash - Customer transaction dashboard.

    Shows the transactions served by the backend as a filterable table with
    per-customer daily charts and a total per customer.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)
    ctx.obj["api_url"] = api_url
    ctx.obj["db_path"] = db_path


# Register all commands
view.register_commands(cli)
shell.register_commands(cli)
sync.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
