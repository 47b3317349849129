"""
Selection
=========

The player's in-progress word: an ordered, duplicate-free run of tiles.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from hexdrift.core.tiles import Tile, TileField


class SelectionState(Enum):
    EMPTY = "empty"
    BUILDING = "building"


class Selection:
    """
    Tracks selected tiles in click order.

    Selecting a tile twice is a no-op and there is no single-tile deselect;
    clear() drops the whole run.
    """

    def __init__(self):
        self._tiles: List[Tile] = []

    @property
    def state(self) -> SelectionState:
        return SelectionState.BUILDING if self._tiles else SelectionState.EMPTY

    @property
    def tiles(self) -> List[Tile]:
        """Selected tiles in selection order (copy)."""
        return list(self._tiles)

    @property
    def word(self) -> str:
        """Letters of the selected tiles, in selection order."""
        return "".join(tile.letter for tile in self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, tile: Tile) -> bool:
        return any(t is tile for t in self._tiles)

    def select(self, tile: Tile) -> bool:
        """
        Append a tile to the word.

        Returns:
            True if the tile was added, False if it was already selected.
        """
        if tile.selected:
            return False
        tile.selected = True
        self._tiles.append(tile)
        return True

    def select_at(self, field: TileField, x: float, y: float) -> Optional[Tile]:
        """
        Select the tile under a point.

        Returns:
            The newly selected tile, or None on a miss or a repeat.
        """
        tile = field.tile_at(x, y)
        if tile is None or not self.select(tile):
            return None
        return tile

    def clear(self) -> List[Tile]:
        """Deselect everything. Returns the tiles that were selected."""
        released = self._tiles
        for tile in released:
            tile.selected = False
        self._tiles = []
        return released

    def discard(self) -> None:
        """Forget the selection without touching tiles (field was replaced)."""
        self._tiles = []
