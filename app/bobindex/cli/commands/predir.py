"""Predir command implementation.

Admission check for site hooks: exits with status 2 when a release
with the given name is already indexed, 0 otherwise. Prints nothing.
"""

from typing import Annotated

import typer

from bobindex.cli.types import get_settings, open_index
from bobindex.index.gate import EXIT_FOUND, AdmissionGate

app = typer.Typer(
    help="Exit 2 if a release name is already indexed, 0 otherwise.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def check_release(
    ctx: typer.Context,
    search_string: Annotated[
        str,
        typer.Option(
            "--search-string",
            "-s",
            help="Release name to check.",
        ),
    ],
    case_sensitive: Annotated[
        bool,
        typer.Option(
            "--case-sensitive",
            "-c",
            help="Match the stored casing exactly.",
        ),
    ] = False,
) -> None:
    """Check whether a release name is already present in the index."""
    settings = get_settings(ctx)

    with open_index(settings) as store:
        found = AdmissionGate(store).exists(search_string, case_sensitive=case_sensitive)

    if found:
        raise typer.Exit(code=EXIT_FOUND)
