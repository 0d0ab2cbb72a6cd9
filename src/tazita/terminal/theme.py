# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from tazita.model.result import Failure
from tazita.model.theme import THEME_IDS, is_theme
from tazita.terminal.session import get_session
from tazita.view import state as view_state
from tazita.view.views import theme as theme_report


def theme(
    ctx: typer.Context,
    name: Annotated[
        Optional[str],
        typer.Argument(help=", ".join(THEME_IDS)),
    ] = None,
) -> None:
    """Show the themes, or pick one."""
    session = get_session(ctx)

    if name is not None:
        if not is_theme(name):
            typer.echo(f"Invalid theme: {name}. Valid options: {', '.join(THEME_IDS)}")
            raise typer.Exit(1)
        result = session.set_theme(name)
        if isinstance(result, Failure):
            typer.echo(f"Theme saved on this device only ({result.reason})")

    view_state.set_theme(session.theme)
    theme_report.themes_view(session.username, session.theme)
