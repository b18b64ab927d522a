"""
Application settings.

Values are resolved in this order (first wins):

1. Command-line flags (passed to ``get_settings`` as overrides)
2. TOML config file (``--config``, else the first ``weatherline.toml`` found
   in the current directory, the directory of the running script,
   ``$XDG_CONFIG_HOME/[yyotti/]weatherline/`` or
   ``$XDG_CONFIG_DIRS/*/[yyotti/]weatherline/``)
3. Environment variables prefixed ``WEATHERLINE_``
4. Defaults

Config file keys may be written with dashes, matching the CLI flags::

    line-token = "XXXXX"
    forecast-token = "YYYYY"
    latitude = "35.6895"
    longitude = "139.6917"
    lang = "ja"
    units = "si"
"""

from __future__ import annotations

import os
import sys
import tomllib
from pathlib import Path
from typing import Any

from pydantic import SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weatherline.enums import Language, UnitSystem
from weatherline.errors import MissingSettingsError, UsageError

APP_NAME = "weatherline"
VENDOR = "yyotti"
CONFIG_FILE_NAME = f"{APP_NAME}.toml"

# Checked by check_settings, reported in this order
REQUIRED_SETTINGS = ("line_token", "forecast_token", "latitude", "longitude")


class Settings(BaseSettings):
    """Resolved configuration for one run."""

    model_config = SettingsConfigDict(env_prefix="WEATHERLINE_", extra="ignore")

    line_token: SecretStr = SecretStr("")
    forecast_token: SecretStr = SecretStr("")
    latitude: str = ""
    longitude: str = ""
    lang: str = Language.EN.value
    units: str = UnitSystem.US.value
    debug: bool = False

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _coordinate_to_str(cls, value: Any) -> Any:
        # TOML files may give coordinates as bare numbers
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def language(self) -> Language:
        return Language(self.lang)

    @property
    def unit_system(self) -> UnitSystem:
        return UnitSystem(self.units)


def config_search_paths() -> list[Path]:
    """Directories searched for ``weatherline.toml``, highest priority first."""
    paths = [Path.cwd()]
    if sys.argv and sys.argv[0]:
        paths.append(Path(sys.argv[0]).resolve().parent)

    config_home = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    config_dirs = os.environ.get("XDG_CONFIG_DIRS") or "/etc/xdg"
    for base in [config_home, *(d for d in config_dirs.split(os.pathsep) if d)]:
        paths.append(Path(base) / APP_NAME)
        paths.append(Path(base) / VENDOR / APP_NAME)
    return paths


def find_config_file() -> Path | None:
    """Return the first existing config file on the search path, if any."""
    for directory in config_search_paths():
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """
    Load a TOML config file, normalizing ``line-token`` to ``line_token``.

    Raises:
        UsageError: The file is missing or is not valid TOML.
    """
    try:
        with path.open("rb") as f:
            raw = tomllib.load(f)
    except FileNotFoundError as e:
        raise UsageError(f"config file not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise UsageError(f"While parsing config {path}: {e}") from e
    return {key.replace("-", "_"): value for key, value in raw.items()}


def get_settings(config_file: Path | None = None, **overrides: Any) -> Settings:
    """
    Resolve settings from flags, config file and environment.

    Args:
        config_file: Explicit config file; searched for when None.
        **overrides: Flag values; None means "not given".

    Raises:
        UsageError: Unreadable config file or values of the wrong type.
    """
    path = config_file or find_config_file()
    values = read_config_file(path) if path else {}
    values.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**values)
    except ValidationError as e:
        raise UsageError(f"invalid settings: {e}") from e


def check_settings(settings: Settings) -> None:
    """
    Ensure every required setting is non-empty.

    Raises:
        MissingSettingsError: Lists all missing settings by flag name.
    """
    missing = []
    for name in REQUIRED_SETTINGS:
        value = getattr(settings, name)
        if isinstance(value, SecretStr):
            value = value.get_secret_value()
        if not value:
            missing.append(name.replace("_", "-"))
    if missing:
        raise MissingSettingsError(missing)
