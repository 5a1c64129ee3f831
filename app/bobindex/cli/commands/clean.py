"""Clean command implementation.

Removes index entries whose release directory no longer exists.
"""

from typing import Annotated

import typer
from rich.markup import escape

from bobindex.cli.types import get_settings, open_index
from bobindex.index.reconciler import Reconciler
from bobindex.utils.formatting import console, print_info, print_success, print_warning

app = typer.Typer(
    help="Remove index entries for releases that no longer exist.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def clean_index(
    ctx: typer.Context,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be removed."),
    ] = False,
) -> None:
    """Check every indexed release on disk and drop the missing ones."""
    settings = get_settings(ctx)
    print_info(f"Cleaning up database at {settings.database_file}")

    with open_index(settings) as store:
        result = Reconciler(store, settings.site_root).reconcile(dry_run=dry_run)
        remaining = store.count()

    for path in result.removed:
        label = "would delete" if result.dry_run else "deleted"
        console.print(f"[muted]{label}[/] [path]{escape(path)}[/]")

    if result.unconfirmed:
        print_warning(
            f"{len(result.unconfirmed)} entries kept because their directory could not be checked."
        )

    if result.dry_run:
        print_info(f"Dry-run: {len(result.removed)} of {result.checked} entries would be removed.")
    else:
        print_success(
            f"Removed {len(result.removed)} of {result.checked} entries, {remaining} left."
        )
