"""Search command implementation.

Prints indexed release paths whose name contains the search string.
"""

import json
from typing import Annotated

import typer

from bobindex.cli.types import OutputFormat, get_settings, open_index
from bobindex.index.models import SearchResult
from bobindex.index.search import SearchEngine

app = typer.Typer(
    help="Search the index for releases by name.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def search_releases(
    ctx: typer.Context,
    search_string: Annotated[
        str,
        typer.Option(
            "--search-string",
            "-s",
            help="Substring to look for in release names (any casing).",
        ),
    ],
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-L",
            min=0,
            help="Limit number of search results (default: 50).",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TEXT,
) -> None:
    """Search indexed release names for a substring."""
    settings = get_settings(ctx)
    effective_limit = limit if limit is not None else settings.search_limit

    with open_index(settings) as store:
        result = SearchEngine(store).search(search_string, effective_limit)

    if output_format == OutputFormat.JSON:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return

    _print_text(result)


def _print_text(result: SearchResult) -> None:
    """Print one path per line followed by the match count.

    Paths are written without markup so the output can be piped.
    """
    typer.echo(f"Searching for {result.query}...\n")
    for path in result.paths:
        typer.echo(path)
    typer.echo(f"\n{result.total} result(s) found with a limit of {result.limit}.")
