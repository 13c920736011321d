# pacer/config/settings.py
# Configuration management for the pacer CLI: tick rate, playback speed & playlist generation defaults

import os
from pathlib import Path
from typing import Dict, Any, Optional, cast
import typer
from dataclasses import dataclass, asdict

from ..core.bpm import BpmMatchingConfig
from ..core.exceptions import ConfigurationError, JSONParsingError, FileReadError
from ..pacer_io.generics import read_json_safe, write_json_safe

# env var overriding the config file location (also honoured from .env)
CONFIG_ENV_VAR = "PACER_CONFIG"


# * Default settings dataclass for pacer w/ driver & generation defaults
@dataclass
class PacerSettings:
    # driver loop settings
    tick_ms: int = 100
    speed: float = 1.0

    # default paths
    output_dir: str = "output"
    playlist_filename: str = "playlist.json"

    # BPM matching settings
    bpm_tolerance_percent: int = 10
    exact_match: bool = True
    multiple_match: bool = True

    # playlist generation settings
    min_clip_seconds: int = 30
    alternatives: int = 3

    # dev mode setting (enables DEBUG output w/ --verbose)
    dev_mode: bool = False

    def __post_init__(self) -> None:
        # tick_ms validation (integer, at least 10ms)
        if isinstance(self.tick_ms, bool) or not isinstance(self.tick_ms, int):
            raise ValueError(
                f"tick_ms must be an integer, got {type(self.tick_ms).__name__}"
            )
        if self.tick_ms < 10:
            raise ValueError(f"tick_ms must be >= 10, got {self.tick_ms}")

        # speed validation (positive number)
        if isinstance(self.speed, bool) or not isinstance(self.speed, (int, float)):
            raise ValueError(
                f"speed must be a number, got {type(self.speed).__name__}"
            )
        if self.speed <= 0:
            raise ValueError(f"speed must be > 0, got {self.speed}")

        # tolerance validation (percentage)
        if (
            isinstance(self.bpm_tolerance_percent, bool)
            or not isinstance(self.bpm_tolerance_percent, int)
            or not 0 <= self.bpm_tolerance_percent <= 100
        ):
            raise ValueError(
                f"bpm_tolerance_percent must be an integer 0-100, "
                f"got {self.bpm_tolerance_percent}"
            )

        # strict bool validation (no coercion)
        for name in ("exact_match", "multiple_match", "dev_mode"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(
                    f"{name} must be a boolean (true/false), "
                    f"got {type(value).__name__}: {value}"
                )

        # non-negative integer validation
        for name in ("min_clip_seconds", "alternatives"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value}")

    @property
    def playlist_path(self) -> Path:
        return Path(self.output_dir) / self.playlist_filename

    @property
    def bpm_config(self) -> BpmMatchingConfig:
        return BpmMatchingConfig(
            exact_match=self.exact_match,
            multiple_match=self.multiple_match,
            tolerance_percent=self.bpm_tolerance_percent,
        )


# resolve config location: explicit arg, then env var, then ~/.pacer/config.json
def default_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".pacer" / "config.json"


# * Settings management class w/ JSON persistence for loading, saving, & modifying settings
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or default_config_path()
        self._settings: Optional[PacerSettings] = None

    # load settings from file or return defaults
    def load(self) -> PacerSettings:
        if self._settings is not None:
            return self._settings

        if self.config_path.exists():
            try:
                data = read_json_safe(self.config_path)
                self._settings = PacerSettings(**data)
            except (JSONParsingError, FileReadError, TypeError, ValueError) as e:
                typer.echo(f"Warning: Invalid config file {self.config_path}: {e}")
                typer.echo("Using default settings")
                self._settings = PacerSettings()
        else:
            self._settings = PacerSettings()

        return self._settings

    # save setting to file
    def save(self, settings: PacerSettings) -> None:
        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings

    # get a specific setting value
    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # set a specific setting value; re-validates via __post_init__
    def set(self, key: str, value: Any) -> None:
        settings = self.load()
        if not hasattr(settings, key):
            raise ConfigurationError(f"Unknown setting: {key}")

        data = asdict(settings)
        data[key] = value
        self.save(PacerSettings(**data))

    # reset to default settings
    def reset(self) -> None:
        self.save(PacerSettings())

    # list all settings as a dictionary
    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# global settings manager instance
settings_manager = SettingsManager()


# * Retrieve settings preferring injected object from Typer context
def get_settings(
    ctx: typer.Context, provided: Optional[PacerSettings] = None
) -> PacerSettings:
    if provided is not None:
        return provided

    # search ctx, parent, & root for PacerSettings
    candidates: list[typer.Context] = [ctx]
    parent = cast(Optional[typer.Context], getattr(ctx, "parent", None))
    if parent is not None:
        candidates.append(parent)
    find_root = getattr(ctx, "find_root", None)
    root_ctx = (
        cast(Optional[typer.Context], find_root()) if callable(find_root) else None
    )
    if root_ctx is not None:
        candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, PacerSettings):
            return obj

    # fallback to loading from disk
    return settings_manager.load()
