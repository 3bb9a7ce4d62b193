from __future__ import annotations

"""Per-step crossing rules: embark/disembark legality for travel, and the open rule used to survey roads."""

from typing import Callable, NamedTuple

from .buildings import is_pier_or_dock
from .hex import HexTile


class CrossingResult(NamedTuple):
    allowed: bool
    embarked: bool


# rule(from_tile, to_tile, embarked) -> CrossingResult
CrossingRule = Callable[[HexTile, HexTile, bool], CrossingResult]


def can_cross_edge(from_tile: HexTile, to_tile: HexTile, embarked: bool) -> CrossingResult:
    """
    Decide whether a step between two adjacent tiles is legal and what the
    traveler's embarked state is afterwards.

    land -> land:   always legal, state unchanged.
    land -> water:  legal when already embarked, when leaving a pier/dock
                    (boards a boat), or when stepping onto a pier/dock.
    water -> water: legal when embarked, or when leaving a pier/dock (boards).
    water -> land:  legal only onto or off a pier/dock; disembarks.
    """
    from_water = from_tile.is_water
    to_water = to_tile.is_water

    if not from_water and not to_water:
        return CrossingResult(True, embarked)

    if not from_water:
        if embarked:
            return CrossingResult(True, True)
        if is_pier_or_dock(from_tile):
            return CrossingResult(True, True)
        if is_pier_or_dock(to_tile):
            return CrossingResult(True, embarked)
        return CrossingResult(False, embarked)

    if to_water:
        if embarked or is_pier_or_dock(from_tile):
            return CrossingResult(True, True)
        return CrossingResult(False, embarked)

    if is_pier_or_dock(to_tile) or is_pier_or_dock(from_tile):
        return CrossingResult(True, False)
    return CrossingResult(False, embarked)


def can_carve_road(from_tile: HexTile, to_tile: HexTile, embarked: bool) -> CrossingResult:
    """
    Crossing rule for road surveying: every edge is open and costed on foot,
    so roads may span water. Piers are placed at the crossings afterwards.
    """
    return CrossingResult(True, False)


__all__ = ["CrossingResult", "CrossingRule", "can_carve_road", "can_cross_edge"]
