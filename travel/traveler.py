from __future__ import annotations

"""
traveler.py

The player-controlled traveler: one tile, a pool of action points per turn
and an embarked flag for boat travel. Every step goes through the same
legality rule and cost function as the pathfinder, so a previewed path
always replays exactly.
"""

import logging
from typing import List, Optional, Tuple

from hexworld.hex import HexTile
from hexworld.movement import can_cross_edge
from hexworld.pathfinding import PathfindingMap, PathResult, find_path, is_path_valid
from hexworld.terrain import ap_cost
from hexworld.world_map import WorldMap

from . import settings

logger = logging.getLogger("travel.traveler")
logger.addHandler(logging.NullHandler())


class Traveler:
    def __init__(self, tile: HexTile, ap: float = settings.MAX_AP, embarked: bool = False) -> None:
        if ap < 0:
            raise ValueError("ap cannot be negative.")
        self.tile = tile
        self.ap = ap
        self.embarked = embarked
        self.turn = 1

    def __repr__(self) -> str:
        state = "embarked" if self.embarked else "on foot"
        return f"Traveler(at {self.tile.coord}, ap={self.ap}, {state}, turn {self.turn})"

    def _step_cost(self, target: HexTile) -> Optional[float]:
        crossing = can_cross_edge(self.tile, target, self.embarked)
        if not crossing.allowed:
            return None
        return ap_cost(
            target.has_road,
            target.is_rough,
            target.tree_density,
            self.tile.terrain,
            target.terrain,
            crossing.embarked,
        )

    def _is_neighbor(self, target: HexTile, world_map: PathfindingMap) -> bool:
        return any(n.coord == target.coord for n in world_map.get_neighbors(self.tile))

    def move_cost(self, target: HexTile, world_map: PathfindingMap) -> Optional[float]:
        """
        AP needed to reach `target`: the single step cost for a neighbor,
        otherwise the cost of the cheapest path over explored tiles.
        None when the target cannot be reached.
        """
        if self._is_neighbor(target, world_map):
            return self._step_cost(target)

        result = find_path(
            self.tile,
            target,
            world_map,
            only_explored=settings.PREVIEW_ONLY_EXPLORED,
            embarked=self.embarked,
        )
        return result.total_cost if result.found else None

    def try_move(self, target: HexTile, world_map: PathfindingMap) -> bool:
        """
        Step onto an adjacent tile. Returns False, leaving the traveler
        untouched, if the tile is not a neighbor, the step is not legal or
        it costs more AP than remain. Running out of AP ends the turn.
        """
        if not self._is_neighbor(target, world_map):
            return False

        crossing = can_cross_edge(self.tile, target, self.embarked)
        if not crossing.allowed:
            return False

        cost = self._step_cost(target)
        if cost is None or cost > self.ap:
            return False

        if crossing.embarked != self.embarked:
            logger.debug("%s at %s", "Embarked" if crossing.embarked else "Disembarked", target.coord)

        self.ap -= cost
        self.tile = target
        self.embarked = crossing.embarked
        logger.debug("Moved to %s for %s AP (%s left)", target.coord, cost, self.ap)

        if self.ap <= 0:
            self.end_turn()
        return True

    def end_turn(self) -> None:
        self.turn += 1
        self.ap = settings.MAX_AP
        logger.debug("Turn %d begins", self.turn)

    def reachable_neighbors(self, world_map: PathfindingMap) -> List[HexTile]:
        """Seen neighbors that can be entered with the AP left this turn."""
        reachable: List[HexTile] = []
        for neighbor in world_map.get_neighbors(self.tile):
            if not neighbor.explored and not neighbor.visible:
                continue
            cost = self._step_cost(neighbor)
            if cost is not None and cost <= self.ap:
                reachable.append(neighbor)
        return reachable

    def preview_path(self, goal: HexTile, world_map: PathfindingMap) -> Tuple[PathResult, bool]:
        """Cheapest known path to `goal` and whether it fits in the AP left."""
        result = find_path(
            self.tile,
            goal,
            world_map,
            only_explored=settings.PREVIEW_ONLY_EXPLORED,
            embarked=self.embarked,
        )
        if not result.found:
            return result, False
        affordable = is_path_valid(
            result.path,
            self.tile,
            self.ap,
            world_map,
            self.embarked,
            only_explored=settings.PREVIEW_ONLY_EXPLORED,
        )
        return result, affordable

    def look_around(self, world_map: WorldMap) -> List[HexTile]:
        """Reveal the tiles around the traveler; returns the newly explored ones."""
        return world_map.reveal(self.tile, settings.VISION_RADIUS)


__all__ = ["Traveler"]
