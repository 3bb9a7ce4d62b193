from __future__ import annotations

"""
Data model for a single world hex tile: terrain, decoration, infrastructure,
settlement membership and the fog-of-war flags read by the pathfinder.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Union

from .buildings import BuildingType, Coordinate
from .terrain import TERRAIN_INFO, TerrainType, VegetationType, is_water


@dataclass(eq=False)
class HexTile:
    """
    Represents a single hex tile in the world.

    Tiles compare by identity; `coord` is unique within a grid.

    Core Attributes:
      col, row: Grid coordinate of this tile.
      terrain: One of TerrainType. Defaults to PLAINS.
      elevation: Elevation in [0, 1] that produced the terrain.
      vegetation: One of VegetationType.
      tree_density: 0.0 to 1.0, only meaningful for TREE vegetation.
      is_rough: Rough ground costs extra to cross.
      has_road: Roads are cleared ground (no vegetation, never rough).
      building: Building on this tile, BuildingType.NONE if empty.
      settlement_id: Id of the owning settlement, if any.
      explored: Has the player ever seen this tile?
      visible: Is the tile currently within vision range?
    """

    col: int
    row: int
    terrain: TerrainType = TerrainType.PLAINS
    elevation: float = 0.0
    vegetation: VegetationType = VegetationType.NONE
    tree_density: float = 0.0
    is_rough: bool = False
    has_road: bool = False
    building: BuildingType = BuildingType.NONE
    settlement_id: Optional[int] = None
    explored: bool = False
    visible: bool = False

    def __post_init__(self):
        if not isinstance(self.terrain, TerrainType):
            raise TypeError(f"terrain must be a TerrainType, not {type(self.terrain)}")
        if not 0.0 <= self.tree_density <= 1.0:
            raise ValueError("tree_density must lie in [0, 1].")

    @property
    def coord(self) -> Coordinate:
        return (self.col, self.row)

    @property
    def is_water(self) -> bool:
        return is_water(self.terrain)

    @property
    def terrain_name(self) -> str:
        return TERRAIN_INFO[self.terrain].name

    def clear_vegetation(self) -> None:
        self.vegetation = VegetationType.NONE
        self.tree_density = 0.0
        self.is_rough = False

    def clear_for_road(self) -> None:
        """Turn this tile into road: cleared, smooth ground."""
        self.clear_vegetation()
        self.has_road = True

    def __repr__(self) -> str:
        base = f"HexTile({self.col}, {self.row}, {self.terrain.value}"
        if self.vegetation is not VegetationType.NONE:
            base += f", {self.vegetation.value}"
        if self.is_rough:
            base += ", ROUGH"
        if self.has_road:
            base += ", ROAD"
        if self.building is not BuildingType.NONE:
            base += f", {self.building.value}"
        return base + ")"

    def to_json(self) -> Dict[str, Union[str, int, float, bool, None]]:
        """
        Serializes core attributes to a JSON-friendly dict.
        """
        return {
            "col": self.col,
            "row": self.row,
            "terrain": self.terrain.value,
            "elevation": self.elevation,
            "vegetation": self.vegetation.value,
            "tree_density": self.tree_density,
            "is_rough": self.is_rough,
            "has_road": self.has_road,
            "building": self.building.value,
            "settlement_id": self.settlement_id,
        }


__all__ = ["HexTile", "Coordinate"]
