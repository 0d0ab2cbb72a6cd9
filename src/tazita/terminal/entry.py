# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from tazita.model.coffee_type import COFFEE_TYPE_IDS
from tazita.repository.entry import EntryValidationError
from tazita.service.stats import entries_for_date
from tazita.terminal.parse import parse_date, parse_day
from tazita.terminal.session import get_session, require_store
from tazita.view.views import entry as entry_report


def add(
    ctx: typer.Context,
    coffee_type: Annotated[
        str,
        typer.Argument(help=", ".join(COFFEE_TYPE_IDS), metavar="TYPE"),
    ] = "instantaneo",
    date: Annotated[
        Optional[str],
        typer.Option(
            "--date",
            "-d",
            help="Day the coffee counts toward: YYYY-MM-DD, today, yesterday, -N",
        ),
    ] = None,
    notes: Annotated[Optional[str], typer.Option("--notes", "-n")] = None,
) -> None:
    """Log a coffee."""
    store = require_store(ctx)
    session = get_session(ctx)

    try:
        entry = store.append(coffee_type, parse_date(date), notes)
    except EntryValidationError as e:
        typer.echo(str(e))
        raise typer.Exit(1)

    entry_report.single_entry_view(session.username, entry)


def remove(
    ctx: typer.Context,
    id: Annotated[str, typer.Argument(help="Entry id or a unique prefix of it")],
) -> None:
    """Remove a logged coffee."""
    store = require_store(ctx)

    matches = store.find_by_prefix(id)
    if len(matches) == 0:
        typer.echo(f"No entry with id {id}")
        raise typer.Exit(1)
    if len(matches) > 1:
        typer.echo(f"Id prefix {id} matches {len(matches)} entries, be more specific")
        raise typer.Exit(1)

    store.remove(matches[0]["id"])
    typer.echo(f"Removed {matches[0]['id']}")


def day(
    ctx: typer.Context,
    date: Annotated[
        Optional[str],
        typer.Argument(help="YYYY-MM-DD, today, yesterday, -N"),
    ] = None,
) -> None:
    """Show the coffees logged on a day."""
    store = require_store(ctx)
    session = get_session(ctx)

    selected_day = parse_day(date)
    entry_report.entries_view(
        session.username,
        selected_day.format("YYYY-MM-DD ddd"),
        entries_for_date(store.entries, selected_day),
    )
