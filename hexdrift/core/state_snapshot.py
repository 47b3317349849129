"""
State Snapshot
==============

Packs per-frame render data into numpy arrays.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, TYPE_CHECKING

import numpy as np

from hexdrift.core.config_loader import ColorTier

if TYPE_CHECKING:
    from hexdrift.core.tiles import TileField


@dataclass
class GameSnapshot:
    """
    Everything the display layer needs for one frame.

    Tile arrays share one index, in field generation order.
    """
    score: int
    drift_speed: float
    multiplier: int
    color_tier: ColorTier
    board_width: float
    board_height: float
    hex_radius: float

    tile_uid: np.ndarray          # (N,) int32
    tile_x: np.ndarray            # (N,) float32
    tile_y: np.ndarray            # (N,) float32
    tile_letter: np.ndarray       # (N,) <U1
    tile_selected: np.ndarray     # (N,) bool

    current_word: str = ""
    pending_words: int = 0

    @property
    def tile_count(self) -> int:
        return int(self.tile_uid.shape[0])

    @property
    def drift_speed_label(self) -> str:
        return f"{self.drift_speed:.1f}"

    def to_dict(self) -> Dict[str, Any]:
        """Plain-Python form for display code that doesn't want numpy."""
        tiles: List[Dict[str, Any]] = []
        for i in range(self.tile_count):
            tiles.append({
                "uid": int(self.tile_uid[i]),
                "x": float(self.tile_x[i]),
                "y": float(self.tile_y[i]),
                "letter": str(self.tile_letter[i]),
                "selected": bool(self.tile_selected[i]),
            })

        return {
            "board_width": self.board_width,
            "board_height": self.board_height,
            "hex_radius": self.hex_radius,
            "tiles": tiles,
            "score": self.score,
            "drift_speed": self.drift_speed_label,
            "multiplier": self.multiplier,
            "background": self.color_tier.background,
            "foreground": self.color_tier.foreground,
            "color_tier": self.color_tier.name,
            "current_word": self.current_word,
            "pending_words": self.pending_words,
        }


def build_snapshot(
    field: "TileField",
    score: int,
    drift_speed: float,
    multiplier: int,
    color_tier: ColorTier,
    board_width: float,
    board_height: float,
    current_word: str = "",
    pending_words: int = 0
) -> GameSnapshot:
    """Copy the field into fresh arrays."""
    tiles = field.tiles
    n = len(tiles)

    tile_uid = np.zeros(n, dtype=np.int32)
    tile_x = np.zeros(n, dtype=np.float32)
    tile_y = np.zeros(n, dtype=np.float32)
    tile_letter = np.full(n, "", dtype="<U1")
    tile_selected = np.zeros(n, dtype=bool)

    for i, tile in enumerate(tiles):
        tile_uid[i] = tile.uid
        tile_x[i] = tile.x
        tile_y[i] = tile.y
        tile_letter[i] = tile.letter
        tile_selected[i] = tile.selected

    return GameSnapshot(
        score=score,
        drift_speed=drift_speed,
        multiplier=multiplier,
        color_tier=color_tier,
        board_width=board_width,
        board_height=board_height,
        hex_radius=field.hex_radius,
        tile_uid=tile_uid,
        tile_x=tile_x,
        tile_y=tile_y,
        tile_letter=tile_letter,
        tile_selected=tile_selected,
        current_word=current_word,
        pending_words=pending_words
    )
