from __future__ import annotations

"""Configuration dataclass for world generation."""

from dataclasses import dataclass, fields, replace
from typing import Any


@dataclass(frozen=True)
class WorldGenConfig:
    width: int = 120
    height: int = 120
    seed: int = 0
    # Lower = larger land masses
    terrain_scale: float = 0.035
    vegetation_scale: float = 0.06
    vegetation_threshold: float = 0.4
    rough_scale: float = 0.15
    rough_threshold: float = 0.75
    num_cities: int = 3
    num_villages: int = 12
    num_hamlets: int = 20
    # Minimum hex distance from a new settlement to every existing one
    city_separation: int = 20
    village_separation: int = 12
    hamlet_separation: int = 6
    placement_attempts: int = 100
    min_road_distance: float = 8.0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{f.name} must be a number, not {type(value).__name__}")
            if f.type == "int" and not isinstance(value, int):
                raise TypeError(f"{f.name} must be an int, not {type(value).__name__}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"World size must be positive, got {self.width}x{self.height}")
        for name in ("num_cities", "num_villages", "num_hamlets", "placement_attempts"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative.")
        for name in ("vegetation_threshold", "rough_threshold"):
            if not 0.0 <= getattr(self, name) <= 1.0:
                raise ValueError(f"{name} must lie in [0, 1].")

    def separation_for(self, settlement_type: str) -> int:
        """Minimum center-to-center hex distance for a settlement type."""
        try:
            return getattr(self, f"{settlement_type}_separation")
        except AttributeError:
            raise ValueError(f"Unknown settlement type '{settlement_type}'") from None

    def with_overrides(self, **kwargs: Any) -> "WorldGenConfig":
        """
        Return a copy with the given fields replaced.

        Unknown keys are ignored. Ints are accepted for float fields; any other
        type mismatch raises TypeError.
        """
        changes = {}
        for key, val in kwargs.items():
            if not hasattr(self, key):
                continue
            current = getattr(self, key)
            if isinstance(current, float) and isinstance(val, (int, float)) and not isinstance(val, bool):
                changes[key] = float(val)
            elif isinstance(current, int) and isinstance(val, int) and not isinstance(val, bool):
                changes[key] = val
            else:
                raise TypeError(f"Cannot assign value of type {type(val)} to setting '{key}'.")
        return replace(self, **changes)


__all__ = ["WorldGenConfig"]
