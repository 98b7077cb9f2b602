"""Configuration loader for scrollback-view.

Settings come from built-in defaults, an optional JSON config file and
SCROLLBACK_* environment variables, in increasing order of priority.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from .errors import ScrollbackConfigError
from .presentation import DEFAULT_MAX_LINES

logger = logging.getLogger(__name__)

ENV_OVERRIDES = {
    "SCROLLBACK_MAX_LINES": "max_lines",
    "SCROLLBACK_INSET": "inset",
    "SCROLLBACK_REFRESH": "refresh_per_second",
}


class ScrollbackSettings(BaseModel):
    """Display settings for the scrollback view."""

    max_lines: int = DEFAULT_MAX_LINES  # Non-positive values show nothing
    inset: int = Field(default=1, ge=0)  # Horizontal padding in cells
    refresh_per_second: float = Field(default=4.0, gt=0)  # Live/follow mode only


def default_config_path() -> Path:
    """Return $XDG_CONFIG_HOME/scrollback-view/config.json."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / "scrollback-view" / "config.json"


def _read_config_file(config_file: Path) -> Dict[str, Any]:
    """Read a JSON config file, returning {} when it does not exist."""
    if not config_file.exists():
        logger.debug(f"No config file at {config_file}, using defaults")
        return {}

    try:
        with open(config_file) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ScrollbackConfigError(f"Failed to read config file {config_file}: {e}") from e

    if not isinstance(data, dict):
        raise ScrollbackConfigError(f"Config file {config_file} must contain a JSON object")

    logger.debug(f"Loaded config from {config_file}")
    return data


def load_settings(
    config_file: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ScrollbackSettings:
    """Load settings from config file and environment.

    Args:
        config_file: JSON config path (default: default_config_path())
        environ: Environment mapping (default: os.environ)

    Returns:
        Validated ScrollbackSettings

    Raises:
        ScrollbackConfigError: If the file or an override is invalid
    """
    if config_file is None:
        config_file = default_config_path()
    if environ is None:
        environ = os.environ

    values = _read_config_file(config_file)

    for env_name, field_name in ENV_OVERRIDES.items():
        raw = environ.get(env_name)
        if raw is not None and raw.strip():
            values[field_name] = raw.strip()

    try:
        settings = ScrollbackSettings(**values)
    except ValidationError as e:
        raise ScrollbackConfigError(f"Invalid scrollback settings: {e}") from e

    if settings.max_lines <= 0:
        logger.warning(f"max_lines={settings.max_lines} is not positive; no lines will be shown")

    return settings
