# SPDX-License-Identifier: MIT

import typer

from tazita.repository.configuration import ConfigurationRepository
from tazita.repository.entry import EntryStore
from tazita.session import NoActiveUserError, Session
from tazita.view import state as view_state


def build_session() -> Session:
    config = ConfigurationRepository().get_config()
    return Session(config)


def get_session(ctx: typer.Context) -> Session:
    session = ctx.find_object(Session)
    if session is None:
        session = build_session()
        ctx.find_root().obj = session
        ctx.find_root().call_on_close(session.close)
    return session


def require_store(ctx: typer.Context) -> EntryStore:
    """The active user's store, or exit with a hint when no user is set."""
    session = get_session(ctx)
    try:
        store = session.store
    except NoActiveUserError as e:
        typer.echo(str(e))
        raise typer.Exit(1)
    view_state.set_theme(session.theme)
    return store
