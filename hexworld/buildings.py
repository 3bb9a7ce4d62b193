from __future__ import annotations

"""Building kinds, village specializations and the Settlement record."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, NamedTuple, Optional, Tuple

Coordinate = Tuple[int, int]

if TYPE_CHECKING:
    from .hex import HexTile


class BuildingType(Enum):
    NONE = "none"
    # Generic village structures
    HOUSE = "house"
    FIELD = "field"
    # Specialized structures
    FISHING_HUT = "fishing_hut"
    DOCK = "dock"
    LUMBER_CAMP = "lumber_camp"
    SAWMILL = "sawmill"
    MINE = "mine"
    QUARRY = "quarry"
    MONASTERY = "monastery"
    CHAPEL = "chapel"
    TRADING_POST = "trading_post"
    WAREHOUSE = "warehouse"
    WINDMILL = "windmill"
    GRAIN_SILO = "grain_silo"
    BARRACKS = "barracks"
    WATCHTOWER = "watchtower"
    # City structures
    CITY_HOUSE = "city_house"
    CHURCH = "church"
    TOWER = "tower"
    CASTLE = "castle"
    # Infrastructure
    PIER = "pier"


CITY_LANDMARKS = (BuildingType.CHURCH, BuildingType.TOWER, BuildingType.CASTLE)


class Specialization(Enum):
    GENERIC = "generic"
    FISHING = "fishing"
    LUMBER = "lumber"
    MINING = "mining"
    RELIGIOUS = "religious"
    TRADING = "trading"
    FARMING = "farming"
    MILITARY = "military"


class SpecializationBuildings(NamedTuple):
    landmark: Optional[BuildingType]
    primary: BuildingType
    secondary: BuildingType


SPECIALIZATION_BUILDINGS: Dict[Specialization, SpecializationBuildings] = {
    Specialization.FISHING: SpecializationBuildings(None, BuildingType.FISHING_HUT, BuildingType.DOCK),
    Specialization.LUMBER: SpecializationBuildings(None, BuildingType.LUMBER_CAMP, BuildingType.SAWMILL),
    Specialization.MINING: SpecializationBuildings(None, BuildingType.MINE, BuildingType.QUARRY),
    Specialization.RELIGIOUS: SpecializationBuildings(
        BuildingType.MONASTERY, BuildingType.CHAPEL, BuildingType.HOUSE
    ),
    Specialization.TRADING: SpecializationBuildings(None, BuildingType.TRADING_POST, BuildingType.WAREHOUSE),
    Specialization.FARMING: SpecializationBuildings(
        BuildingType.WINDMILL, BuildingType.FIELD, BuildingType.GRAIN_SILO
    ),
    Specialization.MILITARY: SpecializationBuildings(None, BuildingType.BARRACKS, BuildingType.WATCHTOWER),
    Specialization.GENERIC: SpecializationBuildings(None, BuildingType.FIELD, BuildingType.HOUSE),
}


def is_pier_or_dock(tile: "HexTile") -> bool:
    """True if travelers can embark or disembark at this tile."""
    return tile.building in (BuildingType.PIER, BuildingType.DOCK)


@dataclass
class Settlement:
    """
    A city, village or hamlet.

    Attributes:
      id: Value stamped into `settlement_id` on every member tile.
      type: "city", "village" or "hamlet".
      center: Coordinate of the central tile.
      tiles: Member coordinates, center first.
      specialization: Only set for villages and hamlets.
      landmark: Landmark building at the center, if any.
    """

    id: int
    type: str
    center: Coordinate
    tiles: List[Coordinate] = field(default_factory=list)
    name: str = ""
    specialization: Optional[Specialization] = None
    landmark: Optional[BuildingType] = None

    def __post_init__(self) -> None:
        if self.type not in ("city", "village", "hamlet"):
            raise ValueError(f"Invalid settlement type '{self.type}'")
        if not self.tiles:
            self.tiles = [self.center]
        elif self.center not in self.tiles:
            raise ValueError("Settlement tiles must contain the center.")

    def __contains__(self, coord: Coordinate) -> bool:
        return coord in self.tiles

    def __repr__(self) -> str:
        base = f"Settlement(id={self.id}, {self.type} '{self.name}' at {self.center}"
        if self.specialization is not None:
            base += f", {self.specialization.value}"
        return base + f", tiles={len(self.tiles)})"


__all__ = [
    "BuildingType",
    "CITY_LANDMARKS",
    "SPECIALIZATION_BUILDINGS",
    "Settlement",
    "Specialization",
    "SpecializationBuildings",
    "is_pier_or_dock",
]
