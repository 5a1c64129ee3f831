"""Single-entry add and delete commands.

Called from site hooks when a release directory is created or removed.
Both are silent unless --debug is given.
"""

from typing import Annotated

import typer

from bobindex.cli.types import get_settings, open_index
from bobindex.index.entries import add_one, delete_one

add_app = typer.Typer(
    help="Add a single release to the index.",
    invoke_without_command=True,
)

delete_app = typer.Typer(
    help="Delete a single release from the index.",
    invoke_without_command=True,
)

PathOption = Annotated[
    str,
    typer.Option(
        "--path",
        "-p",
        help="Parent directory of the release (e.g. /site/mp3/0101).",
    ),
]

NameOption = Annotated[
    str,
    typer.Option(
        "--name",
        "-n",
        help="Release directory name.",
    ),
]


@add_app.callback(invoke_without_command=True)
def add_release(
    ctx: typer.Context,
    name: NameOption,
    path: PathOption = "/private/",
) -> None:
    """Index one release unless it is a sample, subs, disc or other noise folder."""
    settings = get_settings(ctx)
    with open_index(settings) as store:
        add_one(store, path, name, settings.site_root)


@delete_app.callback(invoke_without_command=True)
def delete_release(
    ctx: typer.Context,
    name: NameOption,
    path: PathOption = "/private/",
) -> None:
    """Remove one release from the index."""
    settings = get_settings(ctx)
    with open_index(settings) as store:
        delete_one(store, path, name, settings.site_root)
