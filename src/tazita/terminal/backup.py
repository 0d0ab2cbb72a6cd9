# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from tazita.service.backup import BackupError, export_collection, import_entries
from tazita.terminal.custom_typer import AliasedTyperGroup
from tazita.terminal.session import require_store

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("export, e")
def export(
    ctx: typer.Context,
    path: Annotated[
        Optional[Path],
        typer.Argument(help="File to write, prints to stdout when omitted"),
    ] = None,
) -> None:
    """Export the active user's coffees as JSON."""
    store = require_store(ctx)

    text = export_collection(store.collection)
    if path is None:
        typer.echo(text)
        return
    path.write_text(text + "\n", encoding="utf-8")
    typer.echo(f"Exported {len(store)} entries to {path}")


@app.command("import, i", no_args_is_help=True)
def import_(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False)],
) -> None:
    """Add the coffees from a JSON backup; entries already present are skipped."""
    store = require_store(ctx)

    try:
        entries = import_entries(path.read_text(encoding="utf-8"))
    except BackupError as e:
        typer.echo(f"Invalid backup: {e}")
        raise typer.Exit(1)

    added = store.extend(entries)
    typer.echo(f"Imported {added} of {len(entries)} entries")
