"""Snapshot synchronisation command."""

import click

from txdash.cli.error_handling import handle_domain_error
from txdash.datasource.factories import create_http_data_source, create_sqlite_data_source
from txdash.domain.errors import DataSourceError
from txdash.logging_setup import get_logger

logger = get_logger(__name__)


@click.command("sync")
@click.pass_context
def sync(ctx):
    """Copy customers and transactions from the backend into the local database.

    Later commands read the stored copy when --db-path (or TXDASH_DB_PATH) is
    set.
    """
    source = create_http_data_source(base_url=ctx.obj.get("api_url"))
    ctx.call_on_close(source.disconnect)
    target = create_sqlite_data_source(database_path=ctx.obj.get("db_path"))

    try:
        customers = source.fetch_customers()
        transactions = source.fetch_transactions()
    except DataSourceError as e:
        logger.warning("Sync failed: %s", e)
        handle_domain_error(ctx, e)

    try:
        target.store_snapshot(customers, transactions)
    except DataSourceError as e:
        logger.warning("Sync failed: %s", e)
        handle_domain_error(ctx, e)
    finally:
        target.disconnect()
    click.echo(
        f"Stored {len(customers)} customer(s) and {len(transactions)} transaction(s) "
        f"in {target.database_url}"
    )


def register_commands(cli):
    """Register sync command with main CLI."""
    cli.add_command(sync)
