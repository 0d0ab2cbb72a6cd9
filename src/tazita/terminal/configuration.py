# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from tazita import configuration
from tazita.repository.configuration import ConfigurationRepository
from tazita.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _configuration_table(
    config: configuration.Configuration, title: Optional[str] = None
) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("supabase_url", config["supabase_url"] or "None")
    table.add_row("supabase_key", "********" if config["supabase_key"] else "None")
    table.add_row("supabase_table", config["supabase_table"])
    table.add_row("request_timeout", f"{config['request_timeout']}s")
    table.add_row("sync_debounce_seconds", f"{config['sync_debounce_seconds']}s")
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("default_time_range", config["default_time_range"])
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = ConfigurationRepository().get_config()

    console = Console()
    console.print(_configuration_table(config))


@app.command("set, s")
def set(
    supabase_url: Annotated[
        Optional[str],
        typer.Option("--supabase-url", help="Project URL of the remote store"),
    ] = None,
    supabase_key: Annotated[
        Optional[str],
        typer.Option("--supabase-key", help="API key of the remote store"),
    ] = None,
    supabase_table: Annotated[
        Optional[str],
        typer.Option("--supabase-table", help="Table holding one row per user"),
    ] = None,
    request_timeout: Annotated[
        Optional[float],
        typer.Option("--request-timeout", help="Seconds before a request gives up"),
    ] = None,
    sync_debounce_seconds: Annotated[
        Optional[float],
        typer.Option(
            "--sync-debounce-seconds",
            help="Quiet time after a change before it is saved",
        ),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory path for storing local copies"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to the platform default",
        ),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above reports",
        ),
    ] = None,
    default_time_range: Annotated[
        Optional[str],
        typer.Option("--default-time-range", help="all, 30days"),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    if default_time_range is not None and default_time_range not in ("all", "30days"):
        typer.echo(f"Invalid range: {default_time_range}. Valid options: all, 30days")
        raise typer.Exit(1)

    repository = ConfigurationRepository()
    repository.update_config(
        supabase_url=supabase_url,
        supabase_key=supabase_key,
        supabase_table=supabase_table,
        request_timeout=request_timeout,
        sync_debounce_seconds=sync_debounce_seconds,
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        default_time_range=default_time_range,
    )
    repository.flush()

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_configuration_table(repository.get_config(), "Updated Configuration"))
