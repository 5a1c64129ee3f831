"""Runtime settings for bobindex.

Settings are built once at startup from the optional TOML file at
~/.config/bobindex/config.toml, overridden by command-line options,
and passed explicitly to every operation.

Example config.toml:

    gl_root = "/home/ftpd/glftpd"
    db_path = "/ftp-data/bob/bob-index.db"
    scan_path = "/mp3"
    search_limit = 50
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from bobindex.core.paths import get_config_path

DEFAULT_GL_ROOT = Path("/home/ftpd/glftpd")
DEFAULT_DB_PATH = "/ftp-data/bob/bob-index.db"
DEFAULT_SCAN_PATH = "/mp3"
DEFAULT_SEARCH_LIMIT = 50

# Directory below the glftpd root that holds the site
SITE_DIR = "site"


class Settings(BaseModel):
    """Configuration for a single bobindex invocation.

    Attributes:
        gl_root: glftpd root directory.
        db_path: Database location inside the glftpd root.
        scan_path: Subtree scanned by default, relative to the site root.
        search_limit: Default maximum number of search results.
        debug: Log every index insert and delete.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    gl_root: Annotated[
        Path,
        Field(description="glftpd root directory"),
    ] = DEFAULT_GL_ROOT
    db_path: Annotated[
        str,
        Field(description="Database location, relative to gl_root"),
    ] = DEFAULT_DB_PATH
    scan_path: Annotated[
        str,
        Field(description="Default scan subtree, relative to the site root"),
    ] = DEFAULT_SCAN_PATH
    search_limit: Annotated[
        int,
        Field(ge=0, description="Default maximum number of search results"),
    ] = DEFAULT_SEARCH_LIMIT
    debug: bool = False

    @field_validator("db_path", "scan_path")
    @classmethod
    def validate_rooted(cls, v: str, info: Any) -> str:
        """Paths inside the glftpd root must start with a separator."""
        if v and not v.startswith("/"):
            msg = f"{info.field_name}: must start with '/', got {v!r}"
            raise ValueError(msg)
        return v

    @property
    def site_root(self) -> Path:
        """Directory that indexed entry paths are relative to."""
        return self.gl_root / SITE_DIR

    @property
    def database_file(self) -> Path:
        """Absolute location of the index database."""
        # glftpd paths are joined by concatenation, db_path is rooted
        return Path(f"{self.gl_root}{self.db_path}")

    def with_overrides(self, **overrides: Any) -> "Settings":
        """Return a copy with every non-None override applied.

        Raises:
            ConfigError: If an override is invalid.
        """
        update = {key: value for key, value in overrides.items() if value is not None}
        if not update:
            return self
        try:
            return Settings.model_validate({**self.model_dump(), **update})
        except ValidationError as e:
            raise ConfigError(f"Invalid option: {e}") from e


class ConfigError(Exception):
    """Raised when the configuration cannot be loaded or saved."""


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    A missing file is not an error: defaults are used.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated Settings object.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return Settings()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written to a temporary file first and moved into place
    with os.replace().

    Args:
        settings: Settings to save.
        path: Destination. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    data = settings.model_dump(mode="json")

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config {config_path}: {e}") from e

    return config_path
