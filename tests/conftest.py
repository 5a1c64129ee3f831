"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from bobindex.index.store import IndexStore


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory.

    Keeps a real ~/.config/bobindex/config.toml out of every test.
    """
    xdg = tmp_path / "xdg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
    return xdg


@pytest.fixture
def gl_root(tmp_path: Path) -> Path:
    """A glftpd root containing an empty site directory."""
    root = tmp_path / "glftpd"
    (root / "site").mkdir(parents=True)
    return root


@pytest.fixture
def site_root(gl_root: Path) -> Path:
    """The site directory below the glftpd root."""
    return gl_root / "site"


@pytest.fixture
def store(tmp_path: Path) -> Iterator[IndexStore]:
    """An open index store backed by a temporary database."""
    with IndexStore(tmp_path / "index.db") as index_store:
        yield index_store


@pytest.fixture
def make_tree(site_root: Path) -> Callable[..., None]:
    """Create directories below the site root.

    Usage:
        make_tree("mp3/Artist/Album_2010/CD1", "mp3/Artist/Other_2011")
    """

    def _make(*relative: str) -> None:
        for rel in relative:
            (site_root / rel).mkdir(parents=True, exist_ok=True)

    return _make
