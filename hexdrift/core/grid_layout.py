"""
Grid Layout
===========

Offset hexagonal packing of the initial tile field.
"""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

from hexdrift.core.config_loader import GameConfig, get_config
from hexdrift.core.rng import LetterSource
from hexdrift.core.tiles import TileField


class GridLayout:
    """
    Generates tile fields as columns of hexagons.

    Odd columns are shifted down by half a row, which turns the rectangular
    lattice into a hexagonal packing.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        if config is None:
            config = get_config()

        self._col_spacing_factor = config.tiles.col_spacing_factor

    def dimensions(
        self,
        width: float,
        height: float,
        margin: float,
        hex_radius: float
    ) -> Tuple[int, int]:
        """
        Number of (rows, cols) that fit the field.

        Degenerate sizes give zero rows or columns, never a negative count.
        """
        if hex_radius <= 0:
            return 0, 0
        col_spacing = hex_radius * self._col_spacing_factor
        row_spacing = math.sqrt(3) * hex_radius
        num_cols = math.floor((width - 2 * margin) / col_spacing)
        num_rows = math.floor((height - 2 * margin) / row_spacing)
        return max(0, num_rows), max(0, num_cols)

    def cell_centers(
        self,
        width: float,
        height: float,
        margin: float,
        hex_radius: float
    ) -> List[Tuple[float, float]]:
        """Tile centers in row-major order."""
        col_spacing = hex_radius * self._col_spacing_factor
        row_spacing = math.sqrt(3) * hex_radius
        num_rows, num_cols = self.dimensions(width, height, margin, hex_radius)

        centers = []
        for row in range(num_rows):
            for col in range(num_cols):
                x = margin + col * col_spacing
                y = margin + row * row_spacing + (col % 2) * (row_spacing / 2)
                centers.append((x, y))
        return centers

    def generate(
        self,
        width: float,
        height: float,
        margin: float,
        hex_radius: float,
        source: LetterSource
    ) -> TileField:
        """
        Build a fresh tile field.

        Args:
            width: Field width in pixels.
            height: Field height in pixels.
            margin: Inset of the first row and column.
            hex_radius: Hexagon radius.
            source: Letter and drift source.

        Returns:
            New TileField, empty if the viewport fits no tiles.
        """
        field = TileField(hex_radius)
        for x, y in self.cell_centers(width, height, margin, hex_radius):
            field.add((x, y), source.drift(), source.letter())
        return field
