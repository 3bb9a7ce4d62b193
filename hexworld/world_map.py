from __future__ import annotations

"""Runtime façade over a generated world: tile lookup, neighbors, start tile and fog of war."""

import logging
from typing import Any, List, Optional

from .buildings import Settlement
from .generator import WorldGenerationError, WorldGenerator
from .grid import HexGrid
from .hex import HexTile
from .settings import WorldGenConfig
from .terrain import TerrainType

logger = logging.getLogger("hexworld.world_map")
logger.addHandler(logging.NullHandler())


class WorldMap:
    """
    Generates a world on construction and answers queries about it.

    Satisfies the pathfinding map protocol, so it can be handed straight to
    `find_path` and `is_path_valid`.
    """

    def __init__(self, config: Optional[WorldGenConfig] = None, **overrides: Any) -> None:
        self.generator = WorldGenerator(config, **overrides)
        self.grid: HexGrid = self.generator.generate()
        self.settlements: List[Settlement] = self.generator.settlements
        self._start_tile: HexTile = self.find_start_tile()

    @property
    def config(self) -> WorldGenConfig:
        return self.generator.config

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def start_tile(self) -> HexTile:
        return self._start_tile

    def get_tile(self, col: int, row: int) -> Optional[HexTile]:
        return self.grid.get(col, row)

    def get_neighbors(self, tile: HexTile) -> List[HexTile]:
        return self.grid.neighbors(tile)

    def hex_distance(self, a: HexTile, b: HexTile) -> int:
        return self.grid.distance(a, b)

    def find_start_tile(self) -> HexTile:
        """
        Search outward from the map center for a plains tile, then settle for
        any land tile.

        Raises:
            WorldGenerationError: If the whole map is water.
        """
        center = self.grid.get(self.width // 2, self.height // 2)
        max_radius = self.width + self.height

        for radius in range(max_radius + 1):
            for tile in self.grid.ring(center, radius):
                if tile.terrain is TerrainType.PLAINS:
                    return tile

        for tile in self.grid:
            if not tile.is_water:
                return tile

        raise WorldGenerationError("No suitable start tile: the map has no land.")

    def get_settlement_for_tile(self, tile: HexTile) -> Optional[Settlement]:
        if tile.settlement_id is None:
            return None
        for settlement in self.settlements:
            if settlement.id == tile.settlement_id:
                return settlement
        return None

    def regenerate(self, seed: Optional[int] = None) -> None:
        """Build a new world in place, optionally with a different seed."""
        config = self.config if seed is None else self.config.with_overrides(seed=seed)
        logger.info("Regenerating world with seed %d", config.seed)
        generator = WorldGenerator(config)
        grid = generator.generate()

        self.generator = generator
        self.grid = grid
        self.settlements = generator.settlements
        self._start_tile = self.find_start_tile()

    def reveal(self, center: HexTile, radius: int) -> List[HexTile]:
        """
        Mark every tile within `radius` of `center` as explored and visible.
        Tiles outside the radius lose visibility but stay explored.
        Returns the tiles explored for the first time.
        """
        if radius < 0:
            raise ValueError("radius cannot be negative.")
        in_sight = [center] + self.grid.tiles_in_range(center, radius)
        for tile in self.grid:
            tile.visible = False

        newly_explored: List[HexTile] = []
        for tile in in_sight:
            if not tile.explored:
                tile.explored = True
                newly_explored.append(tile)
            tile.visible = True
        return newly_explored


__all__ = ["WorldMap"]
