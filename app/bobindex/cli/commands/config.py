"""Config commands.

Show the effective settings or write a config file with the defaults.
"""

from typing import Annotated

import typer
from rich.table import Table

from bobindex.cli.types import get_settings
from bobindex.core.config import ConfigError, Settings, save_settings
from bobindex.core.paths import get_config_path
from bobindex.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize the configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective settings after config file and options."""
    settings = get_settings(ctx)

    table = Table(title="bobindex settings", show_lines=False)
    table.add_column("Setting", style="bold")
    table.add_column("Value")

    for key, value in settings.model_dump().items():
        table.add_row(key, str(value))
    table.add_row("site_root", str(settings.site_root), style="muted")
    table.add_row("database_file", str(settings.database_file), style="muted")

    console.print(table)


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file containing the default settings."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    config_path = obj.get("config_path") or get_config_path()

    if config_path.exists() and not force:
        print_info(f"Config already exists at {config_path} (use --force to overwrite).")
        raise typer.Exit(code=0)

    try:
        saved = save_settings(Settings(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
