# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from tazita.terminal.custom_typer import AliasedTyperGroup
from tazita.terminal.session import get_session, require_store
from tazita.view.views import entry as entry_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("set, s", no_args_is_help=True)
def set_user(
    ctx: typer.Context,
    username: str,
    load_existing: Annotated[
        bool,
        typer.Option(
            "--load-existing/--no-load-existing",
            help="Open the existing data when the name is already taken",
        ),
    ] = False,
) -> None:
    """Choose a username. Names are case-insensitive."""
    session = get_session(ctx)
    lookup = session.set_user(username)

    if not lookup.exists:
        typer.echo(f"Welcome, {session.username}!")
        return

    entry_count = len(lookup.collection["entries"]) if lookup.collection else 0
    typer.echo(f"Username already exists! ({entry_count} coffees logged)")
    if load_existing or typer.confirm("Is this you? Load the existing data?"):
        session.switch_user(username)
        typer.echo(f"Loaded {session.username}")
        return

    typer.echo("Pick a different username")
    raise typer.Exit(1)


@app.command("switch, sw", no_args_is_help=True)
def switch(ctx: typer.Context, username: str) -> None:
    """Switch to a username without checking if it is taken."""
    session = get_session(ctx)
    session.switch_user(username)
    typer.echo(f"Switched to {session.username} ({session.source})")


@app.command("show, sh")
def show(ctx: typer.Context) -> None:
    """Show the active user and where their data came from."""
    store = require_store(ctx)
    session = get_session(ctx)
    typer.echo(f"user: {session.username}")
    typer.echo(f"entries: {len(store)}")
    typer.echo(f"loaded from: {session.source}")
    created = store.collection["created_at"].in_tz("local")
    typer.echo(f"created: {created.to_datetime_string()}")


@app.command("list, ls")
def list_users(ctx: typer.Context) -> None:
    """List users with a local copy on this device."""
    session = get_session(ctx)
    for username in session.local.list_usernames():
        marker = "*" if username == session.username else " "
        typer.echo(f"{marker} {username}")


@app.command("entries, e")
def entries(ctx: typer.Context) -> None:
    """List every coffee logged by the active user."""
    store = require_store(ctx)
    session = get_session(ctx)
    entry_report.entries_view(session.username, "entries", store.entries)
