import argparse
import logging
import sys
from collections import Counter
from typing import Optional, Sequence, Tuple

from hexworld import WorldGenConfig, WorldGenerationError, WorldMap
from travel import Traveler


def parse_coord(text: str) -> Tuple[int, int]:
    try:
        col, row = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected COL,ROW, got '{text}'") from None
    return col, row


def build_parser() -> argparse.ArgumentParser:
    defaults = WorldGenConfig()
    parser = argparse.ArgumentParser(
        description="Generate a hex world and optionally query a path across it."
    )
    parser.add_argument("--seed", type=int, default=defaults.seed, help="World seed")
    parser.add_argument("--width", type=int, default=defaults.width, help="Map width in hexes")
    parser.add_argument("--height", type=int, default=defaults.height, help="Map height in hexes")
    parser.add_argument("--cities", type=int, default=defaults.num_cities, help="Number of cities to place")
    parser.add_argument("--villages", type=int, default=defaults.num_villages, help="Number of villages to place")
    parser.add_argument("--hamlets", type=int, default=defaults.num_hamlets, help="Number of hamlets to place")
    parser.add_argument(
        "--path",
        nargs=2,
        type=parse_coord,
        metavar="COL,ROW",
        help="Find the cheapest path between two tiles",
    )
    parser.add_argument("--verbose", action="store_true", help="Log each generation pass")
    return parser


def print_summary(world_map: WorldMap) -> None:
    print(f"World {world_map.width}x{world_map.height}, seed {world_map.config.seed}")

    by_type = Counter(s.type for s in world_map.settlements)
    print(
        f"Settlements: {by_type['city']} cities, "
        f"{by_type['village']} villages, {by_type['hamlet']} hamlets"
    )
    for settlement in world_map.settlements:
        kind = settlement.specialization.value if settlement.specialization else settlement.type
        print(f"  {settlement.name:<20} {settlement.type:<8} {kind:<10} at {settlement.center}")

    road_tiles = sum(1 for tile in world_map.grid if tile.has_road)
    print(f"Road tiles: {road_tiles}")
    print(f"Start tile: {world_map.start_tile.coord} ({world_map.start_tile.terrain_name})")


def print_path(world_map: WorldMap, start: Tuple[int, int], goal: Tuple[int, int]) -> int:
    start_tile = world_map.get_tile(*start)
    goal_tile = world_map.get_tile(*goal)
    if start_tile is None or goal_tile is None:
        print(f"Path endpoints out of bounds: {start} -> {goal}", file=sys.stderr)
        return 2

    # Path queries from the CLI see the whole map
    for tile in world_map.grid:
        tile.explored = True
    traveler = Traveler(start_tile)
    result, affordable = traveler.preview_path(goal_tile, world_map)
    if not result.found:
        print(f"No path from {start} to {goal}")
        return 1

    steps = " -> ".join(f"{t.col},{t.row}" for t in result.path)
    print(f"Path {start} -> {goal}: {len(result.path)} steps, {result.total_cost} AP")
    print(f"  {steps}")
    if affordable:
        print("  Reachable this turn")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = WorldGenConfig(
            width=args.width,
            height=args.height,
            seed=args.seed,
            num_cities=args.cities,
            num_villages=args.villages,
            num_hamlets=args.hamlets,
        )
        world_map = WorldMap(config)
    except (TypeError, ValueError, WorldGenerationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print_summary(world_map)
    if args.path:
        return print_path(world_map, *args.path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
