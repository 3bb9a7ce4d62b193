from __future__ import annotations

"""
A* pathfinding over hex maps.

Used by the road generator while the world is being built and by runtime
movement for path preview and step-by-step travel. The search works on any
object that satisfies `PathfindingMap`.
"""

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Protocol, Set, Tuple

from .hex import HexTile
from .movement import CrossingRule, can_cross_edge
from .terrain import TerrainType, ap_cost

# cost_fn(has_road, is_rough, tree_density, from_terrain, to_terrain, embarked)
CostFunction = Callable[[bool, bool, float, TerrainType, TerrainType, bool], float]
SearchState = Tuple[int, int, bool]


class PathfindingMap(Protocol):
    def get_neighbors(self, tile: HexTile) -> List[HexTile]:
        ...

    def hex_distance(self, a: HexTile, b: HexTile) -> int:
        ...


@dataclass
class PathNode:
    tile: HexTile
    g_cost: float
    h_cost: float
    parent: Optional["PathNode"] = None
    embarked: bool = False

    @property
    def f_cost(self) -> float:
        return self.g_cost + self.h_cost

    @property
    def state(self) -> SearchState:
        return (self.tile.col, self.tile.row, self.embarked)


@dataclass
class PathResult:
    path: List[HexTile] = field(default_factory=list)
    total_cost: float = 0
    found: bool = False


def _step_cost(cost_fn: CostFunction, from_tile: HexTile, to_tile: HexTile, embarked: bool) -> float:
    return cost_fn(
        to_tile.has_road,
        to_tile.is_rough,
        to_tile.tree_density,
        from_tile.terrain,
        to_tile.terrain,
        embarked,
    )


def find_path(
    start: HexTile,
    goal: HexTile,
    world_map: PathfindingMap,
    only_explored: bool = True,
    embarked: bool = False,
    cost_fn: CostFunction = ap_cost,
    crossing_rule: CrossingRule = can_cross_edge,
) -> PathResult:
    """
    Find the cheapest path from start to goal.

    Returns the path excluding the start tile. A missing path is reported
    with found=False; it is not an error.

    The open set pops the lowest f cost first, then the lowest heuristic,
    then the earliest inserted node. Search states are (col, row, embarked),
    so a tile reached on foot and by boat is explored separately.
    The heuristic is the hex distance, which stays admissible as long as
    every step costs at least 1. `crossing_rule` decides which edges are open
    and the embarked state after each step.
    """
    if start.coord == goal.coord:
        return PathResult([], 0, True)

    if only_explored and not goal.explored:
        return PathResult([], 0, False)

    counter = itertools.count()
    h_start = world_map.hex_distance(start, goal)
    start_node = PathNode(start, 0, h_start, None, embarked)
    open_heap: List[Tuple[float, float, int, PathNode]] = [
        (start_node.f_cost, h_start, next(counter), start_node)
    ]
    best_g: Dict[SearchState, float] = {start_node.state: 0}
    closed: Set[SearchState] = set()

    while open_heap:
        _, _, _, current = heapq.heappop(open_heap)
        if current.state in closed:
            continue

        if current.tile.coord == goal.coord:
            return _reconstruct_path(current)

        closed.add(current.state)

        for neighbor in world_map.get_neighbors(current.tile):
            if only_explored and not neighbor.explored:
                continue

            crossing = crossing_rule(current.tile, neighbor, current.embarked)
            if not crossing.allowed:
                continue

            state = (neighbor.col, neighbor.row, crossing.embarked)
            if state in closed:
                continue

            tentative_g = current.g_cost + _step_cost(cost_fn, current.tile, neighbor, crossing.embarked)
            if tentative_g < best_g.get(state, float("inf")):
                best_g[state] = tentative_g
                h_cost = world_map.hex_distance(neighbor, goal)
                node = PathNode(neighbor, tentative_g, h_cost, current, crossing.embarked)
                heapq.heappush(open_heap, (node.f_cost, h_cost, next(counter), node))

    return PathResult([], 0, False)


def _reconstruct_path(goal_node: PathNode) -> PathResult:
    path: List[HexTile] = []
    node: Optional[PathNode] = goal_node
    while node is not None and node.parent is not None:
        path.append(node.tile)
        node = node.parent
    path.reverse()
    return PathResult(path, goal_node.g_cost, True)


def is_path_valid(
    path: List[HexTile],
    start_tile: HexTile,
    available_ap: float,
    world_map: PathfindingMap,
    embarked: bool = False,
    *,
    only_explored: bool = True,
    cost_fn: CostFunction = ap_cost,
    crossing_rule: CrossingRule = can_cross_edge,
) -> bool:
    """
    Replay a path against the current map state without searching again.

    False on the first step that is not adjacent, not yet explored, not
    legal to cross, or that pushes the running cost above `available_ap`.
    Pass only_explored=False to replay over tiles the player has not seen.
    """
    current = start_tile
    spent = 0.0
    state = embarked

    for tile in path:
        if only_explored and not tile.explored:
            return False
        if world_map.hex_distance(current, tile) != 1:
            return False

        crossing = crossing_rule(current, tile, state)
        if not crossing.allowed:
            return False
        state = crossing.embarked

        spent += _step_cost(cost_fn, current, tile, state)
        if spent > available_ap:
            return False
        current = tile

    return True


__all__ = [
    "CostFunction",
    "PathNode",
    "PathResult",
    "PathfindingMap",
    "find_path",
    "is_path_valid",
]
