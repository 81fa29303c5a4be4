"""Boid simulation settings and their persistence."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping

STORAGE_KEY = "yew.boids.settings"

_INTEGER_FIELDS = frozenset({"boids", "tick_interval_ms"})


@dataclass
class Settings:
    """Tunable parameters of the flock."""

    boids: int = 300
    tick_interval_ms: int = 50
    visible_range: float = 80.0
    min_distance: float = 15.0
    max_speed: float = 20.0
    cohesion_factor: float = 0.05
    separation_factor: float = 0.6
    alignment_factor: float = 0.15
    turn_speed_ratio: float = 0.25
    border_margin: float = 0.1
    color_adapt_factor: float = 0.05

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Settings:
        """Build settings from a mapping; every field must be present and well typed."""
        if not isinstance(data, Mapping):
            raise TypeError("settings must be a mapping")
        values: dict[str, Any] = {}
        for field in fields(cls):
            if field.name not in data:
                raise ValueError(f"missing field {field.name!r}")
            raw = data[field.name]
            if isinstance(raw, bool):
                raise ValueError(f"invalid value for {field.name!r}: {raw!r}")
            if field.name in _INTEGER_FIELDS:
                if not isinstance(raw, int) or raw < 0:
                    raise ValueError(f"invalid value for {field.name!r}: {raw!r}")
            else:
                if not isinstance(raw, (int, float)):
                    raise ValueError(f"invalid value for {field.name!r}: {raw!r}")
                raw = float(raw)
            values[field.name] = raw
        return cls(**values)


def load_settings(path: str | Path) -> Settings:
    """Load stored settings, falling back to the defaults on any problem."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return Settings.from_dict(data)
    except (OSError, ValueError, TypeError):
        return Settings()


def store_settings(settings: Settings, path: str | Path) -> None:
    """Store settings as JSON; failures to write are ignored."""
    try:
        Path(path).write_text(json.dumps(settings.to_dict()), encoding="utf-8")
    except OSError:
        pass


def remove_settings(path: str | Path) -> None:
    """Forget stored settings."""
    try:
        Path(path).unlink()
    except FileNotFoundError:
        pass