import pytest

from hexworld import WorldGenConfig, WorldGenerationError, WorldMap
from hexworld.terrain import TerrainType, is_water
from hexworld.terrain_gen import TerrainGenerator

CONFIG = WorldGenConfig(width=30, height=30, seed=3, num_cities=1, num_villages=2, num_hamlets=3)


@pytest.fixture
def world_map():
    return WorldMap(CONFIG)


def test_start_tile_is_land(world_map):
    start = world_map.start_tile
    assert not is_water(start.terrain)
    if any(t.terrain is TerrainType.PLAINS for t in world_map.grid):
        assert start.terrain is TerrainType.PLAINS
    assert world_map.get_tile(*start.coord) is start


def test_start_tile_prefers_center(world_map):
    center = world_map.get_tile(world_map.width // 2, world_map.height // 2)
    start = world_map.start_tile
    for tile in world_map.grid:
        if tile.terrain is TerrainType.PLAINS:
            assert world_map.hex_distance(center, tile) >= world_map.hex_distance(center, start)


def test_start_tile_falls_back_to_any_land(world_map):
    for tile in world_map.grid:
        if tile.terrain is TerrainType.PLAINS:
            tile.terrain = TerrainType.HILLS
    assert world_map.find_start_tile().terrain is not TerrainType.PLAINS
    assert not is_water(world_map.find_start_tile().terrain)


def test_all_water_map_has_no_start(world_map):
    for tile in world_map.grid:
        tile.terrain = TerrainType.DEEP_WATER
    with pytest.raises(WorldGenerationError):
        world_map.find_start_tile()


def test_construction_fails_without_land(monkeypatch):
    monkeypatch.setattr(TerrainGenerator, "sample_elevation", lambda self, col, row: 0.0)
    with pytest.raises(WorldGenerationError):
        WorldMap(CONFIG)


def test_lookup_and_neighbors(world_map):
    assert world_map.get_tile(-1, 0) is None
    assert world_map.get_tile(30, 0) is None
    tile = world_map.get_tile(10, 10)
    assert all(world_map.hex_distance(tile, n) == 1 for n in world_map.get_neighbors(tile))


def test_settlement_lookup(world_map):
    for settlement in world_map.settlements:
        for coord in settlement.tiles:
            assert world_map.get_settlement_for_tile(world_map.get_tile(*coord)) is settlement
    loose = next(t for t in world_map.grid if t.settlement_id is None)
    assert world_map.get_settlement_for_tile(loose) is None


def test_regenerate(world_map):
    before = [t.to_json() for t in world_map.grid]
    old_grid = world_map.grid

    world_map.regenerate()
    assert world_map.grid is not old_grid
    assert [t.to_json() for t in world_map.grid] == before

    world_map.regenerate(seed=99)
    assert world_map.config.seed == 99
    assert [t.to_json() for t in world_map.grid] != before
    assert world_map.get_tile(*world_map.start_tile.coord) is world_map.start_tile


def test_overrides():
    small = WorldMap(CONFIG, width=16, height=12)
    assert (small.width, small.height) == (16, 12)
    assert small.config.seed == CONFIG.seed


def test_reveal(world_map):
    center = world_map.get_tile(15, 15)
    first = world_map.reveal(center, 2)
    assert len(first) == 19
    assert all(t.explored and t.visible for t in first)
    assert sum(t.visible for t in world_map.grid) == 19

    moved = world_map.get_tile(16, 15)
    second = world_map.reveal(moved, 2)
    assert 0 < len(second) < 19
    assert center.explored and center.visible
    far_left = world_map.get_tile(13, 15)
    assert far_left.explored and not far_left.visible

    with pytest.raises(ValueError):
        world_map.reveal(center, -1)
