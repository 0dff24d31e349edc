"""Configuration system for lyricspot.

Layered config loading (lowest to highest priority):
1. config/default.toml (shipped with package)
2. ~/.config/lyricspot/config.toml (user-level)
3. ./lyricspot.toml (project-level)
4. Environment variables (LYRICSPOT_LRCLIB__TIMEOUT, etc.)
5. CLI flags
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

_PACKAGE_ROOT = Path(__file__).resolve().parent.parent.parent.parent
_DEFAULT_CONFIG = _PACKAGE_ROOT / "config" / "default.toml"
_USER_CONFIG = Path.home() / ".config" / "lyricspot" / "config.toml"
_PROJECT_CONFIG = Path("lyricspot.toml")


class LrclibConfig(BaseModel):
    base_url: str = "https://lrclib.net"
    search_path: str = "/api/search"
    user_agent: str = "lyricspot/0.1.0 (https://github.com/lyricspot/lyricspot)"
    timeout: float = 10.0  # seconds, per query
    concurrent: bool = True  # issue strategy queries with asyncio.gather

    @property
    def search_url(self) -> str:
        """Full URL of the search endpoint."""
        return self.base_url.rstrip("/") + "/" + self.search_path.lstrip("/")


class ScoringConfig(BaseModel):
    synced_bonus: int = 10
    plain_bonus: int = 1
    close_duration: float = 4.0  # |diff| strictly below this earns close_bonus
    close_bonus: int = 5
    near_duration: float = 15.0  # otherwise strictly below this earns near_bonus
    near_bonus: int = 2


class TimelineConfig(BaseModel):
    min_line_duration: float = 0.5
    tail_duration: float = 4.0  # display window of the final line
    tick_interval: float = 0.25  # playback clock cadence for `lyricspot follow`


class LyricspotConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LYRICSPOT_",
        env_nested_delimiter="__",
    )

    lrclib: LrclibConfig = LrclibConfig()
    scoring: ScoringConfig = ScoringConfig()
    timeline: TimelineConfig = TimelineConfig()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Highest priority first: CLI overrides, env vars, then TOML layers
        return (init_settings, env_settings, dotenv_settings, _TomlLayersSource(settings_cls))


class _TomlLayersSource(PydanticBaseSettingsSource):
    """Settings source merging the default, user and project TOML files."""

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        config_data: dict = {}
        for path in (_DEFAULT_CONFIG, _USER_CONFIG, _PROJECT_CONFIG):
            config_data = _deep_merge(config_data, _load_toml(path))
        return config_data


def _load_toml(path: Path) -> dict:
    """Load a TOML file if it exists, return empty dict otherwise."""
    if path.is_file():
        with open(path, "rb") as f:
            return tomllib.load(f)
    return {}


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base."""
    merged = base.copy()
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(**cli_overrides: object) -> LyricspotConfig:
    """Load configuration from all layers and merge.

    Args:
        **cli_overrides: Direct overrides from CLI flags. Keys can be
            dot-separated (e.g. lrclib.timeout=5).
    """
    # Apply CLI overrides (dot-separated keys)
    config_data: dict = {}
    for key, value in cli_overrides.items():
        if value is None:
            continue
        parts = key.split(".")
        target = config_data
        for part in parts[:-1]:
            target = target.setdefault(part, {})
        target[parts[-1]] = value

    # TOML files and env vars are read by the settings sources
    return LyricspotConfig(**config_data)
