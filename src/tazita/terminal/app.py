# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from tazita.logs import configure_logging
from tazita.terminal import backup, configuration, entry, report, sync, user
from tazita.terminal.custom_typer import UserAwareTyperGroup
from tazita.terminal.session import build_session
from tazita.terminal.theme import theme
from tazita.view import state as view_state

app = typer.Typer(
    cls=UserAwareTyperGroup,
    help="Tazita - your coffee log in the CLI",
    no_args_is_help=True,
)
app.command(name="add, a")(entry.add)
app.command(name="remove, rm", no_args_is_help=True)(entry.remove)
app.command(name="day, d")(entry.day)
app.command(name="stats, s")(report.stats)
app.command(name="habits, h")(report.habits)
app.command(name="calendar, cal")(report.calendar)
app.add_typer(user.app, name="user, u")
app.command(name="theme, th")(theme)
app.add_typer(sync.app, name="sync, sy")
app.add_typer(backup.app, name="backup, b")
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    ctx: typer.Context,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Show debug logging"),
    ] = False,
) -> None:
    """
    Tazita - your coffee log in the CLI

    Global options that apply to all commands.
    """
    configure_logging(verbose)

    session = build_session()
    ctx.obj = session
    # Pending debounced saves are written before the process exits
    ctx.call_on_close(session.close)

    view_state.set_show_header(session.config["show_header"] and not no_header)


def run() -> None:
    app()
