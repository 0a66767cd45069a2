"""Helpers for building collaborators from the CLI context."""

import click

from txdash.datasource.base import DataSource
from txdash.datasource.factories import create_http_data_source, create_sqlite_data_source
from txdash.domain.dashboard import DashboardController
from txdash.domain.entities import ViewState
from txdash.render.frame import FrameRenderer


def get_data_source(ctx: click.Context) -> DataSource:
    """Return the database source when --db-path is set, else the REST backend.

    The source is disconnected when the command context closes.
    """
    db_path = ctx.obj.get("db_path")
    if db_path:
        source = create_sqlite_data_source(database_path=db_path)
    else:
        source = create_http_data_source(base_url=ctx.obj.get("api_url"))
    ctx.call_on_close(source.disconnect)
    return source


def load_dashboard(ctx: click.Context, frame: FrameRenderer) -> DashboardController:
    """Create a controller and load data, exiting with failure if loading fails."""
    controller = DashboardController(get_data_source(ctx), frame)
    if controller.load() == ViewState.LOAD_FAILED:
        frame.flush()
        ctx.exit(1)
    return controller
