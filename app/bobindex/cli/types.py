"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum

import typer

from bobindex.core.config import Settings
from bobindex.index.store import IndexStore, IndexStoreError
from bobindex.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options."""

    TEXT = "text"
    JSON = "json"


def get_settings(ctx: typer.Context) -> Settings:
    """Get the settings built by the main callback.

    Falls back to defaults when a command runs without the main app,
    e.g. when a sub-app is invoked directly in tests.
    """
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    settings = obj.get("settings")
    if isinstance(settings, Settings):
        return settings
    return Settings()


@contextmanager
def open_index(settings: Settings) -> Iterator[IndexStore]:
    """Open the index store for the duration of a command.

    Store failures are fatal: the cause is printed and the command
    exits with status 1. The connection is always released.

    Args:
        settings: Settings naming the database file.

    Yields:
        Open IndexStore.
    """
    try:
        with IndexStore(settings.database_file) as store:
            yield store
    except IndexStoreError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
