"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from bobindex import __version__
from bobindex.cli.commands import clean, config, entry, predir, scan, search
from bobindex.core.config import ConfigError, load_settings
from bobindex.utils.formatting import configure_logging, print_error

# Create main Typer app
app = typer.Typer(
    name="bobindex",
    help="Searchable index of release directories on a glftpd site.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"bobindex version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Config file (default: ~/.config/bobindex/config.toml).",
        ),
    ] = None,
    gl_root: Annotated[
        Path | None,
        typer.Option(
            "--gl-root",
            "-G",
            help="glftpd root path.",
        ),
    ] = None,
    db_path: Annotated[
        str | None,
        typer.Option(
            "--db-path",
            "-D",
            help="Location of the database inside the glftpd root.",
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            help="Log every index insert and delete.",
        ),
    ] = False,
) -> None:
    """bobindex - index, search and clean release directories.

    Settings come from the config file and are overridden by the
    options given here.
    """
    try:
        settings = load_settings(config_path).with_overrides(
            gl_root=gl_root,
            db_path=db_path,
            debug=debug or None,
        )
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    configure_logging(settings.debug)

    # Store settings in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["config_path"] = config_path


# Register commands
app.add_typer(scan.app, name="scan")
app.add_typer(clean.app, name="clean")
app.add_typer(search.app, name="search")
app.add_typer(predir.app, name="predir")
app.add_typer(entry.add_app, name="add")
app.add_typer(entry.delete_app, name="delete")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
