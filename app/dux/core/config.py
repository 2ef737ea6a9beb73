"""Explorer settings.

Settings are read from an optional TOML file
(``~/.config/dux/config.toml``) and validated with pydantic. A missing
file means defaults; the file is never written.

Example config.toml::

    max_workers = 8
    hide_empty = true
    name_width = 64
    fallback_delay_seconds = 5
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dux.core.paths import get_config_path

logger = logging.getLogger(__name__)


class ExplorerSettings(BaseModel):
    """Runtime settings for the explorer.

    Attributes:
        max_workers: Cap on concurrent subdirectory walks (None = one per subdirectory).
        hide_empty: Hide entries whose total size is below one byte.
        name_width: Column width for entry names.
        fallback_delay_seconds: Pause before falling back to the root after
            the current directory became unreadable.
        error_pause_seconds: Pause after reporting a failed open/reveal.
        farewell_pause_seconds: Pause after the farewell message.
    """

    model_config = ConfigDict(extra="forbid")

    max_workers: Annotated[
        int | None,
        Field(ge=1, description="Maximum concurrent subdirectory walks"),
    ] = None
    hide_empty: Annotated[
        bool,
        Field(description="Hide zero-byte entries"),
    ] = True
    name_width: Annotated[
        int,
        Field(ge=16, le=256, description="Name column width (16-256)"),
    ] = 64
    fallback_delay_seconds: Annotated[
        float,
        Field(ge=0, le=60, description="Delay before falling back to the root"),
    ] = 5.0
    error_pause_seconds: Annotated[
        float,
        Field(ge=0, le=60, description="Pause after an error message"),
    ] = 3.0
    farewell_pause_seconds: Annotated[
        float,
        Field(ge=0, le=5, description="Pause after the farewell message"),
    ] = 0.1


class ConfigError(Exception):
    """Raised when the settings file cannot be read or is invalid."""


def load_settings(path: Path | None = None) -> ExplorerSettings:
    """Load explorer settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated ExplorerSettings (defaults when the file does not exist).

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML, or
            does not match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No settings file at %s, using defaults", config_path)
        return ExplorerSettings()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read settings {config_path}: {e}") from e

    try:
        return ExplorerSettings.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid settings in {config_path}: {e}") from e
