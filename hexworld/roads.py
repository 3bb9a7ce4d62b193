from __future__ import annotations

"""Road carving between settlements, with piers at true water crossings."""

import logging
import math
from typing import List, Optional, Sequence

from .buildings import BuildingType, Settlement
from .grid import HexGrid
from .hex import HexTile
from .movement import can_carve_road
from .pathfinding import PathfindingMap, find_path
from .settings import WorldGenConfig

logger = logging.getLogger("hexworld.roads")
logger.addHandler(logging.NullHandler())


def _euclidean(a: Settlement, b: Settlement) -> float:
    return math.hypot(b.center[0] - a.center[0], b.center[1] - a.center[1])


class RoadGenerator:
    """
    Connects every pair of cities, then every village to its nearest city,
    along the cheapest path the pathfinder can find over the whole map.
    """

    def __init__(self, config: WorldGenConfig) -> None:
        self.config = config

    def generate_roads(
        self,
        grid: HexGrid,
        settlements: Sequence[Settlement],
        world_map: PathfindingMap,
    ) -> int:
        """Carve roads into `grid`. Returns the number of roads built."""
        cities = [s for s in settlements if s.type == "city"]
        villages = [s for s in settlements if s.type == "village"]
        logger.info("Connecting %d cities and %d villages", len(cities), len(villages))

        built = 0
        for i, first in enumerate(cities):
            for second in cities[i + 1:]:
                if self.connect(grid, first, second, world_map):
                    built += 1

        for village in villages:
            nearest = self.find_nearest_settlement(village, cities)
            if nearest is not None:
                if self.connect(grid, village, nearest, world_map):
                    built += 1

        logger.info("Built %d roads", built)
        return built

    def connect(
        self,
        grid: HexGrid,
        first: Settlement,
        second: Settlement,
        world_map: PathfindingMap,
    ) -> bool:
        """Carve one road between two settlement centers. False if skipped."""
        start = grid.get(*first.center)
        end = grid.get(*second.center)
        if start is None or end is None:
            logger.warning("Settlement center outside the grid: %s / %s", first.center, second.center)
            return False

        # Roads inside a settlement look wrong
        if _euclidean(first, second) < self.config.min_road_distance:
            return False

        result = find_path(start, end, world_map, only_explored=False, crossing_rule=can_carve_road)
        if not result.found or not result.path:
            logger.warning("No path found between %s and %s", first.name or first.id, second.name or second.id)
            return False

        self.process_road_tiles(result.path)
        return True

    def process_road_tiles(self, tiles: Sequence[HexTile]) -> int:
        """
        Mark land tiles along a path as road and place piers where the path
        crosses water with land on both sides. Water at the end of the path
        gets nothing. Returns the number of land tiles marked.
        """
        marked = 0
        water_sequence: List[HexTile] = []
        has_land_before = False

        for tile in tiles:
            if tile.is_water:
                water_sequence.append(tile)
                continue

            if water_sequence:
                # The current tile is the land after the crossing
                self.process_water_sequence(water_sequence, has_land_before)
                water_sequence = []

            tile.clear_for_road()
            marked += 1
            has_land_before = True

        return marked

    @staticmethod
    def process_water_sequence(water_tiles: Sequence[HexTile], is_true_crossing: bool) -> None:
        """Pier at the entry tile, and at the exit tile for multi-tile crossings."""
        if not water_tiles or not is_true_crossing:
            return

        ends = [water_tiles[0]]
        if len(water_tiles) > 1:
            ends.append(water_tiles[-1])
        for tile in ends:
            if tile.building is BuildingType.NONE:
                tile.building = BuildingType.PIER

    @staticmethod
    def find_nearest_settlement(origin: Settlement, candidates: Sequence[Settlement]) -> Optional[Settlement]:
        nearest: Optional[Settlement] = None
        min_dist = float("inf")
        for candidate in candidates:
            dist = _euclidean(origin, candidate)
            if dist < min_dist:
                min_dist = dist
                nearest = candidate
        return nearest


__all__ = ["RoadGenerator"]
