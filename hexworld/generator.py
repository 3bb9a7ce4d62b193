from __future__ import annotations

"""
generator.py

World generation coordinator. Owns the grid and runs the six passes in a
fixed order:

  1. terrain      elevation noise -> terrain type
  2. shores       land touching water becomes shore
  3. vegetation   bushes and trees on plains and hills
  4. roughness    rough patches, mountains always rough
  5. settlements  cities, villages, hamlets
  6. roads        A* roads between settlements, piers at crossings

Each pass mutates the shared grid in place and may rely on every earlier
pass being complete.
"""

import logging
from enum import IntEnum
from typing import Any, Callable, Dict, List, Optional

from .buildings import Settlement
from .grid import HexGrid
from .hex import HexTile
from .roads import RoadGenerator
from .settings import WorldGenConfig
from .settlements import SettlementGenerator
from .terrain_gen import TerrainGenerator
from .vegetation import VegetationGenerator

logger = logging.getLogger("hexworld.generator")
logger.addHandler(logging.NullHandler())


class WorldGenerationError(RuntimeError):
    """Raised when generation cannot produce a usable world or is driven out of order."""


class GenerationStage(IntEnum):
    NEW = 0
    ALLOCATED = 1
    TERRAIN = 2
    SHORES = 3
    VEGETATION = 4
    ROUGHNESS = 5
    SETTLEMENTS = 6
    ROADS = 7

    @property
    def is_complete(self) -> bool:
        return self is GenerationStage.ROADS


class WorldGenerator:
    """
    Main world generation coordinator.

    Also satisfies the pathfinding map protocol over its own grid, which is
    what the road pass searches on.
    """

    def __init__(self, config: Optional[WorldGenConfig] = None, **overrides: Any) -> None:
        base = config if config is not None else WorldGenConfig()
        self.config: WorldGenConfig = base.with_overrides(**overrides) if overrides else base

        self.terrain_generator = TerrainGenerator(self.config)
        self.vegetation_generator = VegetationGenerator(self.config)
        self.settlement_generator = SettlementGenerator(self.config)
        self.road_generator = RoadGenerator(self.config)

        self.stage = GenerationStage.NEW
        self.settlements: List[Settlement] = []
        self._grid: Optional[HexGrid] = None

        self._passes: Dict[GenerationStage, Callable[[], None]] = {
            GenerationStage.ALLOCATED: self._allocate,
            GenerationStage.TERRAIN: self._pass_terrain,
            GenerationStage.SHORES: self._pass_shores,
            GenerationStage.VEGETATION: self._pass_vegetation,
            GenerationStage.ROUGHNESS: self._pass_roughness,
            GenerationStage.SETTLEMENTS: self._pass_settlements,
            GenerationStage.ROADS: self._pass_roads,
        }

    @property
    def grid(self) -> HexGrid:
        if self._grid is None:
            raise WorldGenerationError("No grid allocated yet; call generate() or step() first.")
        return self._grid

    # ─────────────────────────────────────────────────────────────────────
    # == PATHFINDING MAP PROTOCOL ==

    def get_neighbors(self, tile: HexTile) -> List[HexTile]:
        return self.grid.neighbors(tile)

    def hex_distance(self, a: HexTile, b: HexTile) -> int:
        return self.grid.distance(a, b)

    # ─────────────────────────────────────────────────────────────────────
    # == PASS DRIVER ==

    def step(self) -> GenerationStage:
        """Run exactly the next pass and return the stage reached."""
        if self.stage.is_complete:
            raise WorldGenerationError("World generation already complete.")
        next_stage = GenerationStage(self.stage + 1)
        self._passes[next_stage]()
        self.stage = next_stage
        return next_stage

    def generate(self) -> HexGrid:
        """
        Generate a complete world on a fresh grid.

        Calling this again discards the previous grid and settlements.
        """
        self.stage = GenerationStage.NEW
        logger.info(
            "Starting world generation (%dx%d, seed %d)",
            self.config.width, self.config.height, self.config.seed,
        )
        while not self.stage.is_complete:
            self.step()
        logger.info("World generation complete")
        return self.grid

    # ─────────────────────────────────────────────────────────────────────
    # == PASSES ==

    def _allocate(self) -> None:
        self._grid = HexGrid(self.config.width, self.config.height)
        self.settlements = []

    def _pass_terrain(self) -> None:
        logger.info("Pass 1: Terrain generation")
        self.terrain_generator.generate_terrain(self.grid)

    def _pass_shores(self) -> None:
        logger.info("Pass 2: Shore generation")
        converted = self.terrain_generator.apply_shores(self.grid)
        logger.debug("Converted %d tiles to shore", converted)

    def _pass_vegetation(self) -> None:
        logger.info("Pass 3: Vegetation")
        self.vegetation_generator.apply_vegetation(self.grid)

    def _pass_roughness(self) -> None:
        logger.info("Pass 4: Rough terrain")
        self.vegetation_generator.apply_rough_terrain(self.grid)

    def _pass_settlements(self) -> None:
        logger.info("Pass 5: Settlements")
        self.settlements = self.settlement_generator.generate_settlements(self.grid)

    def _pass_roads(self) -> None:
        logger.info("Pass 6: Roads")
        self.road_generator.generate_roads(self.grid, self.settlements, self)
        road_tiles = sum(1 for tile in self.grid if tile.has_road)
        logger.info("Total road tiles: %d", road_tiles)


__all__ = ["GenerationStage", "WorldGenerationError", "WorldGenerator"]
