import pytest

from hexworld.buildings import BuildingType, Settlement
from hexworld.grid import HexGrid
from hexworld.hex import HexTile
from hexworld.roads import RoadGenerator
from hexworld.settings import WorldGenConfig
from hexworld.terrain import TerrainType, VegetationType


class GridMap:
    def __init__(self, grid):
        self.grid = grid

    def get_neighbors(self, tile):
        return self.grid.neighbors(tile)

    def hex_distance(self, a, b):
        return self.grid.distance(a, b)


@pytest.fixture
def plains():
    grid = HexGrid(20, 6)
    return grid, GridMap(grid)


def road_coords(grid):
    return {t.coord for t in grid if t.has_road}


def test_road_carving_is_idempotent(plains):
    grid, world_map = plains
    grid.get(8, 2).vegetation = VegetationType.TREE
    grid.get(8, 2).tree_density = 0.9
    settlements = [
        Settlement(id=0, type="city", center=(1, 2)),
        Settlement(id=1, type="city", center=(17, 3)),
    ]
    roads = RoadGenerator(WorldGenConfig(width=20, height=6))

    assert roads.generate_roads(grid, settlements, world_map) == 1
    first = road_coords(grid)
    assert (17, 3) in first
    assert all(grid.get(*c).vegetation is VegetationType.NONE for c in first)
    assert all(not grid.get(*c).is_rough for c in first)

    roads.generate_roads(grid, settlements, world_map)
    assert road_coords(grid) == first


def test_close_settlements_are_not_connected(plains):
    grid, world_map = plains
    settlements = [
        Settlement(id=0, type="city", center=(2, 2)),
        Settlement(id=1, type="city", center=(6, 2)),
    ]
    roads = RoadGenerator(WorldGenConfig(width=20, height=6))
    assert roads.generate_roads(grid, settlements, world_map) == 0
    assert road_coords(grid) == set()


def test_villages_connect_to_nearest_city(plains):
    grid, world_map = plains
    settlements = [
        Settlement(id=0, type="city", center=(1, 1)),
        Settlement(id=1, type="city", center=(18, 1)),
        Settlement(id=2, type="village", center=(10, 4)),
        Settlement(id=3, type="hamlet", center=(14, 5)),
    ]
    roads = RoadGenerator(WorldGenConfig(width=20, height=6))
    assert roads.find_nearest_settlement(settlements[2], settlements[:2]) is settlements[1]

    assert roads.generate_roads(grid, settlements, world_map) == 2
    carved = road_coords(grid)
    assert {(18, 1), (10, 1)} <= carved
    # Hamlets are never connected
    assert (14, 5) not in carved
    assert any(row >= 3 for _, row in carved)


def _line(*terrains):
    return [HexTile(col, 0, terrain=t) for col, t in enumerate(terrains)]


LAND = TerrainType.PLAINS
WATER = TerrainType.SHALLOW_WATER


def test_piers_at_both_ends_of_a_crossing():
    tiles = _line(LAND, WATER, WATER, WATER, LAND)
    assert RoadGenerator(WorldGenConfig()).process_road_tiles(tiles) == 2
    assert [t.building for t in tiles] == [
        BuildingType.NONE,
        BuildingType.PIER,
        BuildingType.NONE,
        BuildingType.PIER,
        BuildingType.NONE,
    ]
    assert [t.has_road for t in tiles] == [True, False, False, False, True]


def test_single_tile_crossing_gets_one_pier():
    tiles = _line(LAND, WATER, LAND)
    RoadGenerator(WorldGenConfig()).process_road_tiles(tiles)
    assert [t.building for t in tiles].count(BuildingType.PIER) == 1
    assert tiles[1].building is BuildingType.PIER


def test_no_pier_without_land_on_both_sides():
    trailing = _line(LAND, WATER, WATER)
    leading = _line(WATER, WATER, LAND)
    roads = RoadGenerator(WorldGenConfig())
    roads.process_road_tiles(trailing)
    roads.process_road_tiles(leading)
    assert all(t.building is BuildingType.NONE for t in trailing + leading)


def test_existing_buildings_are_not_replaced():
    tiles = _line(LAND, WATER, WATER, LAND)
    tiles[1].building = BuildingType.DOCK
    roads = RoadGenerator(WorldGenConfig())
    roads.process_road_tiles(tiles)
    roads.process_road_tiles(tiles)
    assert tiles[1].building is BuildingType.DOCK
    assert tiles[2].building is BuildingType.PIER


def test_road_spans_a_channel_with_piers_at_both_banks():
    grid = HexGrid(12, 3)
    for tile in grid:
        if 4 <= tile.col <= 7:
            tile.terrain = WATER
    settlements = [
        Settlement(id=0, type="city", center=(1, 1)),
        Settlement(id=1, type="city", center=(10, 1)),
    ]
    roads = RoadGenerator(WorldGenConfig(width=12, height=3))

    assert roads.generate_roads(grid, settlements, GridMap(grid)) == 1
    piers = [t for t in grid if t.building is BuildingType.PIER]
    assert sorted(t.col for t in piers) == [4, 7]
    assert all(not t.has_road for t in piers)
    assert (10, 1) in road_coords(grid)

    # A second pass keeps the same piers
    roads.generate_roads(grid, settlements, GridMap(grid))
    assert [t for t in grid if t.building is BuildingType.PIER] == piers
