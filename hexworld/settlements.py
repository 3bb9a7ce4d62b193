from __future__ import annotations

"""
Settlement placement and composition.

`SettlementPlacer` finds sites: suitable terrain, far enough from every
settlement already placed. `SettlementGenerator` turns a site into a city,
village or hamlet, stamping buildings and `settlement_id` onto member tiles.
All random choices are drawn from `seeded_random`, keyed by the world seed,
the settlement id and a purpose tag, so a world is reproducible from its
config alone.
"""

import logging
from collections import Counter
from typing import Callable, Iterable, List, Optional, Set

from .buildings import (
    CITY_LANDMARKS,
    SPECIALIZATION_BUILDINGS,
    BuildingType,
    Settlement,
    Specialization,
)
from .grid import HexGrid, hex_distance
from .hex import Coordinate, HexTile
from .names import SettlementNameGenerator
from .noise import CHANNEL_PLACEMENT, CHANNEL_SETTLEMENT, seeded_random
from .settings import WorldGenConfig
from .terrain import TerrainType, VegetationType, is_water

logger = logging.getLogger("hexworld.settlements")
logger.addHandler(logging.NullHandler())

SETTLEMENT_TYPES = ("city", "village", "hamlet")
_TYPE_TAGS = {"city": 1, "village": 2, "hamlet": 3}

# Purpose tags for per-settlement random draws
_ROLL_LANDMARK = 1
_ROLL_SIZE = 2
_ROLL_MEMBER = 3
_ROLL_BUILDING = 4
_ROLL_SPECIALIZATION = 5
_ROLL_GENERIC = 6
_ROLL_COMPOSITION = 7
_ROLL_SHORE_BUILDING = 8

# Seeded fallback when nearby terrain does not decide: (upper bound, specialization)
_GENERIC_CHOICES = [
    (0.15, Specialization.RELIGIOUS),
    (0.30, Specialization.TRADING),
    (0.50, Specialization.FARMING),
    (0.65, Specialization.MILITARY),
]

SPECIALIZATION_SURVEY_RADIUS = 3


def is_suitable_for_building(tile: HexTile) -> bool:
    """Only empty plains and hills can host a settlement building."""
    return tile.terrain in (TerrainType.PLAINS, TerrainType.HILLS) and tile.building is BuildingType.NONE


class SettlementPlacer:
    """Handles location finding and validation for settlement placement."""

    def __init__(self, config: WorldGenConfig) -> None:
        self.config = config

    def candidates(self, settlement_type: str, grid: HexGrid) -> Iterable[Coordinate]:
        """The seed-determined scan order of candidate sites for a type."""
        tag = _TYPE_TAGS[settlement_type]
        seed = self.config.seed
        for attempt in range(self.config.placement_attempts):
            col = int(seeded_random(seed, CHANNEL_PLACEMENT, tag, attempt, 0) * grid.width)
            row = int(seeded_random(seed, CHANNEL_PLACEMENT, tag, attempt, 1) * grid.height)
            yield col, row

    def find_location(
        self,
        grid: HexGrid,
        settlement_type: str,
        settlements: List[Settlement],
        suitable: Callable[[HexTile], bool] = is_suitable_for_building,
    ) -> Optional[HexTile]:
        """
        Return the first candidate that is suitable and at least the type's
        separation away from every existing settlement center, or None once
        every placement attempt is used.
        """
        min_distance = self.config.separation_for(settlement_type)
        for col, row in self.candidates(settlement_type, grid):
            tile = grid.get(col, row)
            if tile is None or not suitable(tile):
                continue
            if all(hex_distance(s.center, tile.coord) >= min_distance for s in settlements):
                return tile
        return None


class SettlementGenerator:
    """Handles settlement generation (cities, villages and hamlets)."""

    def __init__(self, config: WorldGenConfig, placer: Optional[SettlementPlacer] = None) -> None:
        self.config = config
        self.placer = placer or SettlementPlacer(config)
        self.names = SettlementNameGenerator(config.seed)
        self.settlements: List[Settlement] = []

    def _roll(self, settlement_id: int, purpose: int, *extra: int) -> float:
        return seeded_random(self.config.seed, CHANNEL_SETTLEMENT, settlement_id, purpose, *extra)

    def generate_settlements(self, grid: HexGrid) -> List[Settlement]:
        """Place the configured number of cities, then villages, then hamlets."""
        self.settlements = []
        self.names.reset()
        settlement_id = 0

        plan = [
            ("city", self.config.num_cities, self._build_city),
            ("village", self.config.num_villages, self._build_village),
            ("hamlet", self.config.num_hamlets, self._build_hamlet),
        ]
        for settlement_type, count, build in plan:
            for _ in range(count):
                sid = settlement_id
                settlement_id += 1
                center = self.placer.find_location(grid, settlement_type, self.settlements)
                if center is None:
                    logger.debug("No site found for %s #%d; skipping", settlement_type, sid)
                    continue
                settlement = build(grid, center, sid)
                settlement.name = self.names.generate_name(
                    settlement.type, sid, settlement.specialization
                )
                self.settlements.append(settlement)

        by_type = Counter(s.type for s in self.settlements)
        logger.info(
            "Generated %d cities, %d villages and %d hamlets",
            by_type["city"], by_type["village"], by_type["hamlet"],
        )
        specs = Counter(s.specialization.value for s in self.settlements if s.specialization)
        for spec, count in sorted(specs.items()):
            logger.debug("  - %d %s settlement(s)", count, spec)
        return self.settlements

    # ─────────────────────────────────────────────────────────────────────
    # == SETTLEMENT TYPES ==

    @staticmethod
    def _claim(tile: HexTile, building: BuildingType, settlement_id: int) -> None:
        tile.building = building
        tile.clear_vegetation()
        tile.settlement_id = settlement_id

    def _build_city(self, grid: HexGrid, center: HexTile, sid: int) -> Settlement:
        landmark = CITY_LANDMARKS[int(self._roll(sid, _ROLL_LANDMARK) * len(CITY_LANDMARKS))]
        self._claim(center, landmark, sid)
        tiles = [center.coord]
        members: Set[Coordinate] = {center.coord}

        target = int(self._roll(sid, _ROLL_SIZE) * 8) + 7  # 7-14 houses
        for tile in grid.tiles_in_range(center, 2):
            if len(tiles) - 1 >= target:
                break
            if not is_suitable_for_building(tile):
                continue
            # Keep the cluster contiguous
            if not any(n.coord in members for n in grid.neighbors(tile)):
                continue
            chance = 0.95 if grid.distance(center, tile) == 1 else 0.75
            if self._roll(sid, _ROLL_MEMBER, tile.col, tile.row) >= chance:
                continue
            self._claim(tile, BuildingType.CITY_HOUSE, sid)
            tiles.append(tile.coord)
            members.add(tile.coord)

        return Settlement(id=sid, type="city", center=center.coord, tiles=tiles, landmark=landmark)

    def _build_village(self, grid: HexGrid, center: HexTile, sid: int) -> Settlement:
        specialization = self.determine_specialization(grid, center, sid)
        buildings = SPECIALIZATION_BUILDINGS[specialization]
        fishing = specialization is Specialization.FISHING

        self._claim(center, buildings.landmark or buildings.primary, sid)
        tiles = [center.coord]

        target = int(self._roll(sid, _ROLL_SIZE) * 4) + 3  # 3-6 buildings
        for tile in grid.tiles_in_range(center, 1):
            if len(tiles) - 1 >= target:
                break
            on_shore = fishing and tile.terrain is TerrainType.SHORE and tile.building is BuildingType.NONE
            if not on_shore and not is_suitable_for_building(tile):
                continue
            if self._roll(sid, _ROLL_MEMBER, tile.col, tile.row) > 0.7:
                continue

            roll = self._roll(sid, _ROLL_BUILDING, tile.col, tile.row)
            if roll < 0.5:
                building = BuildingType.HOUSE
            elif roll < 0.8:
                building = buildings.primary
            else:
                building = buildings.secondary

            if on_shore and building is not BuildingType.HOUSE:
                shore_roll = self._roll(sid, _ROLL_SHORE_BUILDING, tile.col, tile.row)
                building = BuildingType.FISHING_HUT if shore_roll < 0.6 else BuildingType.DOCK

            self._claim(tile, building, sid)
            tiles.append(tile.coord)

        return Settlement(
            id=sid,
            type="village",
            center=center.coord,
            tiles=tiles,
            specialization=specialization,
            landmark=buildings.landmark,
        )

    def _build_hamlet(self, grid: HexGrid, center: HexTile, sid: int) -> Settlement:
        specialization = self.determine_specialization(grid, center, sid)
        primary = SPECIALIZATION_BUILDINGS[specialization].primary
        fishing = specialization is Specialization.FISHING

        # 40% a lone house, 30% a lone work building, 30% house plus work building
        composition = self._roll(sid, _ROLL_COMPOSITION)
        second_building = composition >= 0.7
        center_building = primary if 0.4 <= composition < 0.7 else BuildingType.HOUSE

        self._claim(center, center_building, sid)
        tiles = [center.coord]

        if second_building:
            for tile in grid.neighbors(center):
                on_shore = fishing and tile.terrain is TerrainType.SHORE and tile.building is BuildingType.NONE
                if not on_shore and not is_suitable_for_building(tile):
                    continue
                self._claim(tile, BuildingType.FISHING_HUT if on_shore else primary, sid)
                tiles.append(tile.coord)
                break

        return Settlement(
            id=sid,
            type="hamlet",
            center=center.coord,
            tiles=tiles,
            specialization=specialization,
        )

    def determine_specialization(self, grid: HexGrid, center: HexTile, sid: int) -> Specialization:
        """
        Pick a specialization from the surrounding terrain: coast favours
        fishing, mountains mining, forest lumber. Otherwise a seeded choice
        among the remaining kinds.
        """
        water = mountains = forest = 0
        for tile in grid.tiles_in_range(center, SPECIALIZATION_SURVEY_RADIUS):
            if is_water(tile.terrain) or tile.terrain is TerrainType.SHORE:
                water += 1
            if tile.terrain is TerrainType.MOUNTAINS:
                mountains += 1
            if tile.vegetation is VegetationType.TREE:
                forest += 1

        roll = self._roll(sid, _ROLL_SPECIALIZATION)
        if water > 3 and roll < 0.5:
            return Specialization.FISHING
        if mountains > 2 and roll < 0.6:
            return Specialization.MINING
        if forest > 8 and roll < 0.5:
            return Specialization.LUMBER

        generic_roll = self._roll(sid, _ROLL_GENERIC)
        for bound, specialization in _GENERIC_CHOICES:
            if generic_roll < bound:
                return specialization
        return Specialization.GENERIC


__all__ = [
    "SETTLEMENT_TYPES",
    "SettlementGenerator",
    "SettlementPlacer",
    "is_suitable_for_building",
]
