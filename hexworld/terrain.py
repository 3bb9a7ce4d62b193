from __future__ import annotations

"""Terrain and vegetation enumerations, the terrain table and the movement cost rule."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class TerrainType(Enum):
    DEEP_WATER = "deep_water"
    SHALLOW_WATER = "shallow_water"
    SHORE = "shore"
    PLAINS = "plains"
    HILLS = "hills"
    MOUNTAINS = "mountains"


class VegetationType(Enum):
    NONE = "none"
    BUSH = "bush"
    TREE = "tree"


@dataclass(frozen=True)
class TerrainInfo:
    """
    Static description of a terrain type.

    min_elevation is the lower bound used by `terrain_from_elevation`. Shore
    carries one for reference only: shores are assigned from water adjacency.
    """
    name: str
    min_elevation: float
    is_rough: bool = False


TERRAIN_INFO: Dict[TerrainType, TerrainInfo] = {
    TerrainType.DEEP_WATER: TerrainInfo("Deep Water", float("-inf")),
    TerrainType.SHALLOW_WATER: TerrainInfo("Shallow Water", 0.3),
    TerrainType.SHORE: TerrainInfo("Shore", 0.38),
    TerrainType.PLAINS: TerrainInfo("Plains", 0.38),
    TerrainType.HILLS: TerrainInfo("Hills", 0.6),
    TerrainType.MOUNTAINS: TerrainInfo("Mountains", 0.75, is_rough=True),
}

# Checked highest first; shore is never produced from elevation alone.
_ELEVATION_ORDER = (
    TerrainType.MOUNTAINS,
    TerrainType.HILLS,
    TerrainType.PLAINS,
    TerrainType.SHALLOW_WATER,
)

DENSE_FOREST_DENSITY = 0.6


def terrain_from_elevation(elevation: float) -> TerrainType:
    """Classify an elevation in [0, 1] into a terrain type."""
    for terrain in _ELEVATION_ORDER:
        if elevation >= TERRAIN_INFO[terrain].min_elevation:
            return terrain
    return TerrainType.DEEP_WATER


def is_water(terrain: TerrainType) -> bool:
    return terrain in (TerrainType.DEEP_WATER, TerrainType.SHALLOW_WATER)


def supports_vegetation(terrain: TerrainType) -> bool:
    return terrain in (TerrainType.PLAINS, TerrainType.HILLS)


def ap_cost(
    has_road: bool,
    is_rough: bool,
    tree_density: float = 0.0,
    from_terrain: Optional[TerrainType] = None,
    to_terrain: Optional[TerrainType] = None,
    embarked: bool = False,
) -> int:
    """
    Action-point cost of stepping onto a tile.

    Road 1, open ground 2, rough ground 3; dense trees add 1 and crossing
    between land and water adds 2. Sailing onto water while embarked costs 1.
    `embarked` is the traveler's state after the move.
    """
    if embarked and to_terrain is not None and is_water(to_terrain):
        return 1

    cost = 1 if has_road else 3 if is_rough else 2

    if tree_density >= DENSE_FOREST_DENSITY:
        cost += 1

    if from_terrain is not None and to_terrain is not None:
        if is_water(from_terrain) != is_water(to_terrain):
            cost += 2

    return cost


__all__ = [
    "DENSE_FOREST_DENSITY",
    "TERRAIN_INFO",
    "TerrainInfo",
    "TerrainType",
    "VegetationType",
    "ap_cost",
    "is_water",
    "supports_vegetation",
    "terrain_from_elevation",
]
