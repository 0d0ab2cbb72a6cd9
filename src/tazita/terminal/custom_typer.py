# SPDX-License-Identifier: MIT

from typing import Optional

import click
import typer
import typer.core
from rich.console import Console
from rich.padding import Padding

from tazita.repository.local import LocalStore

console = Console()

COMMAND_ORDER = [
    "add, a",
    "remove, rm",
    "day, d",
    "stats, s",
    "habits, h",
    "calendar, cal",
    "user, u",
    "theme, th",
    "sync, sy",
    "backup, b",
    "config, c",
]


def command_aliases(name: str) -> list[str]:
    """'remove, rm' -> ['remove', 'rm']"""
    return [alias.strip() for alias in name.split(",") if alias.strip()]


def _show_active_user(ctx: click.Context) -> None:
    """Print the active user once per help invocation, however deep the group."""
    root = ctx.find_root()
    if root.meta.get("tazita.user_shown"):
        return
    root.meta["tazita.user_shown"] = True

    username = LocalStore().get_current_username()
    console.print()
    console.print(
        Padding(
            f"[bold plum1]Active user: {username or '-'}[/bold plum1]",
            (0, 0, 0, 1),
        )
    )


class AliasedTyperGroup(typer.core.TyperGroup):
    """
    Group whose commands are registered as "name, alias, ..." and can be
    invoked by any of those names.
    """

    def resolve_alias(self, cmd_name: str) -> str:
        for registered in self.commands:
            if cmd_name in command_aliases(registered):
                return registered
        return cmd_name

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.resolve_alias(cmd_name))

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        name = name or cmd.name or ""
        registered = self.resolve_alias(name)
        # Typer may register the same command again under one of its aliases
        if registered != name and registered in self.commands:
            return
        super().add_command(cmd, name)


class UserAwareTyperGroup(AliasedTyperGroup):
    """Root group: fixed command order and the active user above the help."""

    def list_commands(self, ctx: click.Context) -> list[str]:
        ordered = [name for name in COMMAND_ORDER if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]

    def format_help(
        self, ctx: click.Context, formatter: click.formatting.HelpFormatter
    ) -> None:
        _show_active_user(ctx)
        super().format_help(ctx, formatter)
