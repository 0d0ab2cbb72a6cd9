# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from tazita.model.result import Failure
from tazita.terminal.custom_typer import AliasedTyperGroup
from tazita.terminal.session import get_session, require_store
from tazita.view.views import sync as sync_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("push, ps")
def push(ctx: typer.Context) -> None:
    """Save the active user's data now."""
    require_store(ctx)
    session = get_session(ctx)

    result = session.sync_now()
    if isinstance(result, Failure):
        typer.echo(f"Saved on this device only: {result.reason}")
        raise typer.Exit(1)
    typer.echo(f"Synced {session.username}")


@app.command("pull, pl")
def pull(ctx: typer.Context) -> None:
    """Reload the active user's data, discarding unsaved changes."""
    require_store(ctx)
    session = get_session(ctx)

    source = session.pull()
    typer.echo(f"Loaded {len(session.store)} entries from {source}")


@app.command("migrate, m")
def migrate(
    ctx: typer.Context,
    usernames: Annotated[
        Optional[list[str]],
        typer.Argument(help="Users to migrate, defaults to every local user"),
    ] = None,
) -> None:
    """Upload data saved on this device to the remote store."""
    session = get_session(ctx)

    if not session.remote.is_configured:
        typer.echo("Remote store not configured, see `tazita config set --help`")
        raise typer.Exit(1)

    outcomes = session.sync.migrate_local(usernames)
    sync_report.migrate_view(session.username, outcomes)
    if any(isinstance(outcome, Failure) for outcome in outcomes.values()):
        raise typer.Exit(1)
