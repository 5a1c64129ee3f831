"""Scan command implementation.

Walks a subtree of the site and indexes every release directory.
"""

from typing import Annotated

import typer

from bobindex.cli.types import get_settings, open_index
from bobindex.index.scanner import ReleaseScanner, ScanStartError
from bobindex.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(
    help="Scan a site subtree and index its releases.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def scan_releases(
    ctx: typer.Context,
    scan_path: Annotated[
        str | None,
        typer.Option(
            "--scan-path",
            "-P",
            help="Scan path inside the site root (default: /mp3).",
        ),
    ] = None,
) -> None:
    """Scan the site and add new release directories to the index."""
    settings = get_settings(ctx)
    sub_path = scan_path if scan_path is not None else settings.scan_path

    with open_index(settings) as store:
        scanner = ReleaseScanner(store, settings.site_root)
        try:
            result = scanner.scan(sub_path)
        except ScanStartError as e:
            # Not fatal: nothing was indexed, the index is still consistent
            print_error(f"error walking: {e}")
            return
        total = store.count()

    for error in result.errors:
        print_warning(f"Could not read {error.path}: {error.message}")

    print_success(
        f"Scanned {result.visited} directories under {result.root}: "
        f"{result.created} new, {result.pruned} skipped, {total} indexed."
    )
    if result.errors:
        console.print(f"[muted]{len(result.errors)} directories could not be read.[/]")
