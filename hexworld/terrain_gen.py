from __future__ import annotations

"""Elevation sampling, terrain classification and shore smoothing."""

import math
from typing import List

from .grid import HexGrid
from .hex import HexTile
from .noise import CHANNEL_DETAIL, CHANNEL_ELEVATION, channel_seed, perlin_noise
from .settings import WorldGenConfig
from .terrain import TerrainType, is_water, terrain_from_elevation

# Terrain types that become shore when they touch water
_LAND_TYPES = (TerrainType.PLAINS, TerrainType.HILLS, TerrainType.MOUNTAINS)


class TerrainGenerator:
    """Handles terrain elevation and shore generation."""

    def __init__(self, config: WorldGenConfig) -> None:
        self.config = config
        self._elevation_seed = channel_seed(config.seed, CHANNEL_ELEVATION)
        self._detail_seed = channel_seed(config.seed, CHANNEL_DETAIL)

    def generate_terrain(self, grid: HexGrid) -> None:
        """Assign elevation and base terrain to every tile."""
        for tile in grid:
            tile.elevation = self.sample_elevation(tile.col, tile.row)
            tile.terrain = terrain_from_elevation(tile.elevation)

    def apply_shores(self, grid: HexGrid) -> int:
        """
        Convert land tiles adjacent to water into shores.

        Decided on the terrain as it stands before any conversion, so the
        result does not depend on iteration order. Returns the number of
        converted tiles.
        """
        to_shore: List[HexTile] = [
            tile
            for tile in grid
            if tile.terrain in _LAND_TYPES
            and any(is_water(n.terrain) for n in grid.neighbors(tile))
        ]
        for tile in to_shore:
            tile.terrain = TerrainType.SHORE
        return len(to_shore)

    def sample_elevation(self, col: int, row: int) -> float:
        cfg = self.config

        elevation = perlin_noise(
            col, row, self._elevation_seed,
            octaves=5, persistence=0.5, lacunarity=2.0, scale=cfg.terrain_scale,
        )
        detail = perlin_noise(
            col, row, self._detail_seed,
            octaves=2, persistence=0.3, scale=cfg.terrain_scale * 3,
        )
        elevation = elevation * 0.85 + detail * 0.15

        # Fade edges toward water for an island-shaped landmass
        cx = cfg.width / 2
        cy = cfg.height / 2
        dx = (col - cx) / cx
        dy = (row - cy) / cy
        dist_from_center = math.sqrt(dx * dx + dy * dy)
        edge_fade = 1 - min(dist_from_center / 0.9, 1) ** 2
        elevation *= edge_fade

        return max(0.0, min(1.0, elevation))


__all__ = ["TerrainGenerator"]
