import os, sys
import random
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from hexworld.buildings import BuildingType
from hexworld.grid import HexGrid
from hexworld.movement import can_carve_road
from hexworld.pathfinding import find_path, is_path_valid
from hexworld.terrain import TerrainType, ap_cost


class GridMap:
    """Minimal pathfinding map over a hand-built grid."""

    def __init__(self, grid):
        self.grid = grid
        self.neighbor_calls = 0

    def get_neighbors(self, tile):
        self.neighbor_calls += 1
        return self.grid.neighbors(tile)

    def hex_distance(self, a, b):
        return self.grid.distance(a, b)


def make_map(width, height, explored=True):
    grid = HexGrid(width, height)
    for tile in grid:
        tile.explored = explored
    return GridMap(grid)


def unit_cost(*args):
    return 1


def _land_step(a, b):
    return ap_cost(b.has_road, b.is_rough, b.tree_density, a.terrain, b.terrain, False)


def brute_force_cost(world_map, start, goal):
    best = float("inf")

    def walk(tile, cost, seen):
        nonlocal best
        if cost >= best:
            return
        if tile is goal:
            best = cost
            return
        for n in world_map.grid.neighbors(tile):
            if n.coord not in seen:
                seen.add(n.coord)
                walk(n, cost + _land_step(tile, n), seen)
                seen.remove(n.coord)

    walk(start, 0, {start.coord})
    return best


def test_trivial_path():
    world_map = make_map(3, 3)
    tile = world_map.grid.get(1, 1)
    result = find_path(tile, tile, world_map)
    assert result.found
    assert result.path == []
    assert result.total_cost == 0


def test_unexplored_goal_is_rejected_without_search():
    world_map = make_map(4, 4, explored=False)
    start = world_map.grid.get(0, 0)
    goal = world_map.grid.get(3, 3)
    result = find_path(start, goal, world_map, only_explored=True)
    assert not result.found
    assert world_map.neighbor_calls == 0


def test_unexplored_tiles_are_not_entered():
    world_map = make_map(3, 1)
    world_map.grid.get(1, 0).explored = False
    start, goal = world_map.grid.get(0, 0), world_map.grid.get(2, 0)
    assert not find_path(start, goal, world_map).found
    assert find_path(start, goal, world_map, only_explored=False).found


def test_five_tile_line():
    world_map = make_map(5, 1)
    start, goal = world_map.grid.get(0, 0), world_map.grid.get(4, 0)

    result = find_path(start, goal, world_map, cost_fn=unit_cost)
    assert result.found
    assert [t.coord for t in result.path] == [(1, 0), (2, 0), (3, 0), (4, 0)]
    assert result.total_cost == 4

    assert find_path(start, goal, world_map).total_cost == 8


def test_crossing_water_needs_a_pier():
    world_map = make_map(3, 1)
    start, water, goal = (world_map.grid.get(c, 0) for c in range(3))
    water.terrain = TerrainType.SHALLOW_WATER

    assert not find_path(start, goal, world_map).found

    water.building = BuildingType.PIER
    result = find_path(start, goal, world_map)
    assert result.found
    assert result.path == [water, goal]
    # Both steps cross the land/water boundary on foot
    assert result.total_cost == 8


def test_embarked_search_sails_open_water():
    world_map = make_map(4, 1)
    for tile in world_map.grid:
        tile.terrain = TerrainType.DEEP_WATER
    start, goal = world_map.grid.get(0, 0), world_map.grid.get(3, 0)

    assert not find_path(start, goal, world_map).found
    result = find_path(start, goal, world_map, embarked=True)
    assert result.found
    assert result.total_cost == 3


def test_prefers_roads():
    world_map = make_map(5, 2)
    for col in range(5):
        world_map.grid.get(col, 1).has_road = True
    start, goal = world_map.grid.get(0, 0), world_map.grid.get(4, 0)
    result = find_path(start, goal, world_map)
    assert result.found
    assert result.total_cost < 8
    assert any(t.has_road for t in result.path)


def test_matches_brute_force_optimum():
    for seed in range(6):
        rng = random.Random(seed)
        world_map = make_map(4, 3)
        for tile in world_map.grid:
            roll = rng.random()
            if roll < 0.25:
                tile.has_road = True
            elif roll < 0.5:
                tile.is_rough = True
            elif roll < 0.7:
                tile.tree_density = 0.8
        start = world_map.grid.get(0, 0)
        goal = world_map.grid.get(3, 2)

        result = find_path(start, goal, world_map)
        assert result.found
        assert result.total_cost == brute_force_cost(world_map, start, goal)


def test_path_replays_within_its_cost():
    world_map = make_map(6, 3)
    world_map.grid.get(2, 1).is_rough = True
    world_map.grid.get(3, 1).tree_density = 0.9
    start, goal = world_map.grid.get(0, 1), world_map.grid.get(5, 1)

    result = find_path(start, goal, world_map)
    assert result.found
    assert is_path_valid(result.path, start, result.total_cost, world_map)
    assert not is_path_valid(result.path, start, result.total_cost - 1, world_map)


def test_invalid_paths():
    world_map = make_map(4, 1)
    start = world_map.grid.get(0, 0)
    skipping = [world_map.grid.get(2, 0)]
    assert not is_path_valid(skipping, start, 100, world_map)

    world_map.grid.get(1, 0).terrain = TerrainType.SHALLOW_WATER
    wading = [world_map.grid.get(1, 0)]
    assert not is_path_valid(wading, start, 100, world_map)

    hidden = [world_map.grid.get(1, 0)]
    world_map.grid.get(1, 0).explored = False
    assert not is_path_valid(hidden, start, 100, world_map, only_explored=True)


def test_crossing_rule_is_injectable():
    world_map = make_map(3, 1)
    start, water, goal = (world_map.grid.get(c, 0) for c in range(3))
    water.terrain = TerrainType.SHALLOW_WATER

    assert not find_path(start, goal, world_map).found
    result = find_path(start, goal, world_map, crossing_rule=can_carve_road)
    assert result.found
    assert result.path == [water, goal]
    assert result.total_cost == 8

    assert not is_path_valid(result.path, start, 100, world_map)
    assert is_path_valid(result.path, start, 100, world_map, crossing_rule=can_carve_road)


def test_replay_rejects_unexplored_tiles_by_default():
    world_map = make_map(3, 1)
    start = world_map.grid.get(0, 0)
    path = [world_map.grid.get(1, 0), world_map.grid.get(2, 0)]
    assert is_path_valid(path, start, 100, world_map)

    world_map.grid.get(2, 0).explored = False
    assert not is_path_valid(path, start, 100, world_map)
    assert is_path_valid(path, start, 100, world_map, only_explored=False)
