"""
Tiles
=====

Letter tiles and the field that owns them.

Positions and drift vectors are pymunk Vec2d values. Vec2d is immutable, so a
tile's motion can only change by reassigning its fields, which only the
physics world does. Only the selection toggles ``selected``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from pymunk import Vec2d


@dataclass(eq=False)
class Tile:
    """
    A hexagonal letter tile.

    Identity matters: two tiles with equal fields are still distinct tiles,
    so equality is by object identity.
    """
    uid: int
    position: Vec2d
    drift: Vec2d
    letter: str
    selected: bool = False

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def contains(self, point: Tuple[float, float], radius: float) -> bool:
        """True if point lies strictly within radius of the tile center."""
        return (self.position - point).length < radius


class TileField:
    """
    Insertion-ordered collection of tiles, keyed by UID.

    Iteration order is row-major generation order. The hit test relies on it:
    the earliest generated tile wins when tiles overlap.
    """

    def __init__(self, hex_radius: float):
        self.hex_radius = hex_radius
        self._tiles: Dict[int, Tile] = {}
        self._next_uid = 0

    def add(self, position: Tuple[float, float], drift: Tuple[float, float], letter: str) -> Tile:
        """Create a tile and append it to the field."""
        tile = Tile(
            uid=self._next_uid,
            position=Vec2d(*position),
            drift=Vec2d(*drift),
            letter=letter
        )
        self._next_uid += 1
        self._tiles[tile.uid] = tile
        return tile

    def __contains__(self, tile: Tile) -> bool:
        return self._tiles.get(tile.uid) is tile

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles.values())

    def __len__(self) -> int:
        return len(self._tiles)

    @property
    def tiles(self) -> List[Tile]:
        """Tiles in generation order."""
        return list(self._tiles.values())

    def tile_at(self, x: float, y: float) -> Optional[Tile]:
        """First tile (in generation order) whose center is within one radius of (x, y)."""
        for tile in self._tiles.values():
            if tile.contains((x, y), self.hex_radius):
                return tile
        return None
