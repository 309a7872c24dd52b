from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import yaml


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class GameConfig:
    width: int = 19
    height: int = 13
    min_walls: int = 5
    max_walls: int = 8
    mice_per_player: int = 12
    first_band_columns: int = 9  # leftmost columns for the first player
    second_band_columns: int = 9  # rightmost columns for the second player
    max_placement_attempts: int = 1000

    @property
    def first_band(self) -> Tuple[int, int]:
        """Inclusive column range of the first player's starting band."""
        return 0, self.first_band_columns - 1

    @property
    def second_band(self) -> Tuple[int, int]:
        """Inclusive column range of the second player's starting band."""
        return self.width - self.second_band_columns, self.width - 1

    def validate(self) -> "GameConfig":
        if self.width <= 0 or self.height <= 0:
            raise ConfigError("grid dimensions must be positive")
        if self.min_walls < 0:
            raise ConfigError("min_walls must be non-negative")
        if self.min_walls > self.max_walls:
            raise ConfigError("min_walls must not exceed max_walls")
        if self.max_walls > self.height:
            raise ConfigError("max_walls must not exceed the grid height")
        if self.mice_per_player < 0:
            raise ConfigError("mice_per_player must be non-negative")
        if self.first_band_columns <= 0 or self.second_band_columns <= 0:
            raise ConfigError("player bands must contain at least one column")
        if self.first_band_columns + self.second_band_columns > self.width:
            raise ConfigError("player bands overlap or exceed the grid width")
        if self.max_placement_attempts <= 0:
            raise ConfigError("max_placement_attempts must be positive")
        return self

    def with_overrides(self, **overrides: Optional[int]) -> "GameConfig":
        changes = {key: value for key, value in overrides.items() if value is not None}
        unknown = set(changes) - _field_names()
        if unknown:
            raise ConfigError(f"unknown config keys: {sorted(unknown)}")
        return replace(self, **changes).validate()


def _field_names() -> set:
    return {f.name for f in fields(GameConfig)}


def config_from_dict(data: Optional[Dict]) -> GameConfig:
    data = dict(data or {})
    unknown = set(data) - _field_names()
    if unknown:
        raise ConfigError(f"unknown config keys: {sorted(unknown)}")
    for key, value in data.items():
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigError(f"{key} must be an integer, got {value!r}")
    return GameConfig(**data).validate()


def load_config(path: Union[str, Path]) -> GameConfig:
    cfg_path = Path(path)
    if not cfg_path.exists():
        return GameConfig()
    cfg = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    if not isinstance(cfg, dict):
        raise ConfigError(f"{cfg_path} must contain a mapping")
    return config_from_dict(cfg)
