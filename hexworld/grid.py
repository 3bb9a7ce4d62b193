from __future__ import annotations

"""Dense rectangular storage of hex tiles with neighbor and distance queries."""

from collections import deque
from typing import Iterator, List, Optional, Tuple

from .hex import Coordinate, HexTile

# Directions over (col, row): E, W, S, N, SE, NW.
# Consistent with `hex_distance`: a single step changes max(|dc|, |dr|, |dc - dr|) by one.
HEX_DIRECTIONS: List[Tuple[int, int]] = [
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (-1, -1),
]


def hex_distance(a: Coordinate, b: Coordinate) -> int:
    """Number of steps between two coordinates on an unbounded grid."""
    dc = b[0] - a[0]
    dr = b[1] - a[1]
    return max(abs(dc), abs(dr), abs(dc - dr))


class HexGrid:
    """
    A width x height block of HexTile objects, row-major.

    Every monotone path between two in-bounds tiles stays inside their
    bounding box, so `distance` is also the exact step count inside the grid.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._tiles: List[HexTile] = [
            HexTile(col, row) for row in range(height) for col in range(width)
        ]

    def __contains__(self, coord: Coordinate) -> bool:
        col, row = coord
        return 0 <= col < self.width and 0 <= row < self.height

    def __iter__(self) -> Iterator[HexTile]:
        return iter(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def get(self, col: int, row: int) -> Optional[HexTile]:
        """Return the tile at (col, row), or None when out of bounds."""
        if not (0 <= col < self.width and 0 <= row < self.height):
            return None
        return self._tiles[row * self.width + col]

    def neighbors(self, tile: HexTile) -> List[HexTile]:
        """In-bounds neighbors in HEX_DIRECTIONS order."""
        result: List[HexTile] = []
        for dc, dr in HEX_DIRECTIONS:
            neighbor = self.get(tile.col + dc, tile.row + dr)
            if neighbor is not None:
                result.append(neighbor)
        return result

    def distance(self, a: HexTile, b: HexTile) -> int:
        return hex_distance(a.coord, b.coord)

    def tiles_in_range(self, center: HexTile, radius: int) -> List[HexTile]:
        """
        Tiles within `radius` steps of `center`, excluding it, nearest first.
        """
        found: List[HexTile] = []
        visited = {center.coord}
        queue = deque([(center, 0)])
        while queue:
            tile, dist = queue.popleft()
            if dist > 0:
                found.append(tile)
            if dist >= radius:
                continue
            for neighbor in self.neighbors(tile):
                if neighbor.coord not in visited:
                    visited.add(neighbor.coord)
                    queue.append((neighbor, dist + 1))
        return found

    def ring(self, center: HexTile, radius: int) -> List[HexTile]:
        """In-bounds tiles exactly `radius` steps from `center`."""
        if radius == 0:
            return [center]
        ring: List[HexTile] = []
        for dr in range(-radius, radius + 1):
            for dc in range(-radius, radius + 1):
                if max(abs(dc), abs(dr), abs(dc - dr)) != radius:
                    continue
                tile = self.get(center.col + dc, center.row + dr)
                if tile is not None:
                    ring.append(tile)
        return ring


__all__ = ["HEX_DIRECTIONS", "HexGrid", "hex_distance"]
