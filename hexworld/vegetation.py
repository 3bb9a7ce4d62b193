from __future__ import annotations

"""Vegetation scattering and rough-terrain patches."""

from .grid import HexGrid
from .noise import CHANNEL_ROUGH, CHANNEL_VEGETATION, channel_seed, perlin_noise
from .settings import WorldGenConfig
from .terrain import TERRAIN_INFO, TerrainType, VegetationType, supports_vegetation

# Band above the vegetation threshold that stays bushes
TREE_MARGIN = 0.08


class VegetationGenerator:
    """Handles vegetation and rough terrain generation."""

    def __init__(self, config: WorldGenConfig) -> None:
        self.config = config
        self._vegetation_seed = channel_seed(config.seed, CHANNEL_VEGETATION)
        self._rough_seed = channel_seed(config.seed, CHANNEL_ROUGH)

    def apply_vegetation(self, grid: HexGrid) -> None:
        """Scatter bushes and trees on plains and hills."""
        threshold = self.config.vegetation_threshold
        tree_threshold = threshold + TREE_MARGIN

        for tile in grid:
            if not supports_vegetation(tile.terrain):
                continue

            value = perlin_noise(
                tile.col, tile.row, self._vegetation_seed,
                octaves=3, persistence=0.6, scale=self.config.vegetation_scale,
            )
            if value <= threshold:
                continue

            if value > tree_threshold:
                tile.vegetation = VegetationType.TREE
                # Power curve below 1 makes dense forest more common
                normalized = (value - tree_threshold) / max(1.0 - tree_threshold, 1e-9)
                tile.tree_density = max(0.0, min(1.0, normalized ** 0.6))
            else:
                tile.vegetation = VegetationType.BUSH
                tile.tree_density = 0.0

    def apply_rough_terrain(self, grid: HexGrid) -> None:
        """Mark rough patches on land; terrain flagged rough in TERRAIN_INFO always is."""
        for tile in grid:
            if tile.is_water or tile.terrain is TerrainType.SHORE:
                continue

            if TERRAIN_INFO[tile.terrain].is_rough:
                tile.is_rough = True
                continue

            value = perlin_noise(
                tile.col, tile.row, self._rough_seed,
                octaves=2, persistence=0.5, scale=self.config.rough_scale,
            )
            if value > self.config.rough_threshold:
                tile.is_rough = True


__all__ = ["TREE_MARGIN", "VegetationGenerator"]
