"""
Physics World
=============

Drift integration, wall reflection, and pairwise elastic collisions for the
tile field.
"""

from __future__ import annotations

from typing import List, Optional

from pymunk import Vec2d

from hexdrift.core.config_loader import GameConfig, get_config
from hexdrift.core.tiles import Tile, TileField


class PhysicsWorld:
    """
    Advances the tile field one tick at a time.

    Each step:
    - Integrates positions by drift * drift_speed
    - Reflects tiles off the canvas edges
    - Resolves velocity-only elastic collisions between overlapping tiles

    Collisions never move tiles apart, so tiles may overlap visually.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize physics world.

        Args:
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._width = float(config.board.width)
        self._height = float(config.board.height)
        self._radius = config.tiles.hex_radius
        self._mass = config.physics.mass
        self._field = TileField(self._radius)

    @property
    def field(self) -> TileField:
        """The live tile field."""
        return self._field

    @property
    def tile_count(self) -> int:
        return len(self._field)

    @property
    def board_width(self) -> float:
        return self._width

    @property
    def board_height(self) -> float:
        return self._height

    def load_field(self, field: TileField) -> None:
        """Replace the live field, discarding the old one."""
        self._field = field

    def step(self, drift_speed: float) -> None:
        """
        Advance the simulation by one tick.

        All positions are integrated and reflected before any collision is
        evaluated, so collisions see post-update positions.

        Args:
            drift_speed: Global scalar applied to every tile's drift.
        """
        for tile in self._field:
            self._integrate(tile, drift_speed)
            self._reflect(tile)
        self.resolve_collisions()

    def _integrate(self, tile: Tile, drift_speed: float) -> None:
        tile.position = tile.position + tile.drift * drift_speed

    def _reflect(self, tile: Tile) -> None:
        """Clamp to the canvas and invert the drift component that crossed."""
        r = self._radius
        x, y = tile.position
        dx, dy = tile.drift

        if x - r < 0:
            x = r
            dx = -dx
        if x + r > self._width:
            x = self._width - r
            dx = -dx
        if y - r < 0:
            y = r
            dy = -dy
        if y + r > self._height:
            y = self._height - r
            dy = -dy

        tile.position = Vec2d(x, y)
        tile.drift = Vec2d(dx, dy)

    def resolve_collisions(self) -> int:
        """
        Resolve every overlapping, approaching pair once (O(n^2)).

        Returns:
            Number of pairs whose drift changed.
        """
        tiles = self._field.tiles
        contact_distance = 2 * self._radius
        resolved = 0

        for i in range(len(tiles)):
            for j in range(i + 1, len(tiles)):
                if self._collide(tiles[i], tiles[j], contact_distance):
                    resolved += 1

        return resolved

    def _collide(self, a: Tile, b: Tile, contact_distance: float) -> bool:
        dx = a.position.x - b.position.x
        dy = a.position.y - b.position.y
        if dx * dx + dy * dy >= contact_distance * contact_distance:
            return False

        offset = Vec2d(dx, dy)
        distance = offset.length

        relative = a.drift - b.drift
        if distance > 0:
            normal = offset / distance
        elif relative.length > 0:
            # Coincident centers: use the line of relative motion
            normal = -relative.normalized()
        else:
            return False

        approach = relative.dot(normal)
        if approach >= 0:
            return False

        # J = 2 m1 m2 / (m1 + m2) * v_rel; equal masses give J / m = v_rel
        m = self._mass
        impulse = 2 * m * m / (m + m) * approach
        a.drift = a.drift - normal * (impulse / m)
        b.drift = b.drift + normal * (impulse / m)
        return True

    def get_tiles_out_of_bounds(self) -> List[Tile]:
        """Tiles whose hexagon crosses a canvas edge."""
        r = self._radius
        return [
            t for t in self._field
            if t.x < r or t.x > self._width - r or t.y < r or t.y > self._height - r
        ]
