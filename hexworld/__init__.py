from __future__ import annotations

from .buildings import BuildingType, Settlement, Specialization, is_pier_or_dock
from .generator import GenerationStage, WorldGenerationError, WorldGenerator
from .grid import HEX_DIRECTIONS, HexGrid, hex_distance
from .hex import Coordinate, HexTile
from .movement import CrossingResult, CrossingRule, can_carve_road, can_cross_edge
from .pathfinding import PathfindingMap, PathNode, PathResult, find_path, is_path_valid
from .settings import WorldGenConfig
from .terrain import (
    DENSE_FOREST_DENSITY,
    TerrainType,
    VegetationType,
    ap_cost,
    is_water,
    terrain_from_elevation,
)
from .world_map import WorldMap

__all__ = [
    "BuildingType",
    "Coordinate",
    "CrossingResult",
    "CrossingRule",
    "DENSE_FOREST_DENSITY",
    "GenerationStage",
    "HEX_DIRECTIONS",
    "HexGrid",
    "HexTile",
    "PathNode",
    "PathResult",
    "PathfindingMap",
    "Settlement",
    "Specialization",
    "TerrainType",
    "VegetationType",
    "WorldGenConfig",
    "WorldGenerationError",
    "WorldGenerator",
    "WorldMap",
    "ap_cost",
    "can_carve_road",
    "can_cross_edge",
    "find_path",
    "hex_distance",
    "is_path_valid",
    "is_pier_or_dock",
    "is_water",
    "terrain_from_elevation",
]
