"""
Tests for drift integration, wall reflection and tile collisions.
"""

import pytest

from hexdrift.core.config_loader import load_config
from hexdrift.core.grid_layout import GridLayout
from hexdrift.core.physics_world import PhysicsWorld
from hexdrift.core.rng import LetterSource
from hexdrift.core.tiles import TileField


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def physics(config):
    return PhysicsWorld(config)


@pytest.fixture
def field(config, physics):
    field = TileField(config.hex_radius)
    physics.load_field(field)
    return field


class TestIntegration:
    """Test drift motion."""

    def test_position_moves_by_drift_times_speed(self, physics, field):
        tile = field.add((400, 300), (0.2, -0.1), "A")

        physics.step(2.0)

        assert tile.x == pytest.approx(400.4)
        assert tile.y == pytest.approx(299.8)

    def test_drift_unchanged_by_speed(self, physics, field):
        """The global speed scales motion, not the stored drift."""
        tile = field.add((400, 300), (0.2, -0.1), "A")

        physics.step(3.0)

        assert tile.drift.x == pytest.approx(0.2)
        assert tile.drift.y == pytest.approx(-0.1)

    def test_empty_field_steps(self, physics, field):
        physics.step(1.0)
        assert physics.tile_count == 0


class TestReflection:
    """Test wall bounces."""

    def test_left_wall(self, config, physics, field):
        r = config.hex_radius
        tile = field.add((r + 1, 300), (-0.25, 0.1), "A")

        physics.step(10.0)

        assert tile.x == pytest.approx(r)
        assert tile.drift.x == pytest.approx(0.25)
        assert tile.drift.y == pytest.approx(0.1)

    def test_right_wall(self, config, physics, field):
        r = config.hex_radius
        width = config.board.width
        tile = field.add((width - r - 1, 300), (0.25, 0.0), "A")

        physics.step(10.0)

        assert tile.x == pytest.approx(width - r)
        assert tile.drift.x == pytest.approx(-0.25)

    def test_top_and_bottom_walls(self, config, physics, field):
        r = config.hex_radius
        height = config.board.height
        top = field.add((200, r + 1), (0.0, -0.25), "A")
        bottom = field.add((600, height - r - 1), (0.0, 0.25), "B")

        physics.step(10.0)

        assert top.y == pytest.approx(r)
        assert top.drift.y == pytest.approx(0.25)
        assert bottom.y == pytest.approx(height - r)
        assert bottom.drift.y == pytest.approx(-0.25)

    def test_reflection_preserves_speed(self, config, physics, field):
        """Bounces are undamped."""
        r = config.hex_radius
        tile = field.add((r + 0.5, r + 0.5), (-0.2, -0.15), "A")
        before = tile.drift.length

        physics.step(5.0)

        assert tile.drift.length == pytest.approx(before)

    def test_containment_over_many_ticks(self, config, physics):
        """No tile ever leaves [r, dim - r] on either axis."""
        layout = GridLayout(config)
        board = config.board
        physics.load_field(layout.generate(
            board.width, board.height, board.margin, config.hex_radius,
            LetterSource(config, seed=3)
        ))
        r = config.hex_radius

        for _ in range(150):
            physics.step(8.0)
            for tile in physics.field:
                assert r <= tile.x <= board.width - r
                assert r <= tile.y <= board.height - r

        assert physics.get_tiles_out_of_bounds() == []


class TestCollisions:
    """Test pairwise elastic collisions."""

    def test_head_on_swaps_drift(self, physics, field):
        """Equal masses meeting head-on exchange velocities."""
        a = field.add((400, 300), (1.0, 0.0), "A")
        b = field.add((430, 300), (-1.0, 0.0), "B")

        resolved = physics.resolve_collisions()

        assert resolved == 1
        assert a.drift.x == pytest.approx(-1.0)
        assert b.drift.x == pytest.approx(1.0)
        assert a.drift.y == pytest.approx(0.0)
        assert b.drift.y == pytest.approx(0.0)

    def test_coincident_tiles_swap_drift(self, physics, field):
        """Tiles at the same position with opposite drifts swap them."""
        a = field.add((400, 300), (1.0, 0.0), "A")
        b = field.add((400, 300), (-1.0, 0.0), "B")

        physics.resolve_collisions()

        assert a.drift.x == pytest.approx(-1.0)
        assert b.drift.x == pytest.approx(1.0)

    def test_coincident_tiles_without_relative_motion(self, physics, field):
        a = field.add((400, 300), (0.5, 0.5), "A")
        b = field.add((400, 300), (0.5, 0.5), "B")

        assert physics.resolve_collisions() == 0
        assert tuple(a.drift) == pytest.approx((0.5, 0.5))
        assert tuple(b.drift) == pytest.approx((0.5, 0.5))

    def test_separating_pair_untouched(self, physics, field):
        """Overlapping tiles already moving apart keep their drift."""
        a = field.add((400, 300), (-1.0, 0.0), "A")
        b = field.add((430, 300), (1.0, 0.0), "B")

        assert physics.resolve_collisions() == 0
        assert a.drift.x == pytest.approx(-1.0)
        assert b.drift.x == pytest.approx(1.0)

    def test_distant_pair_untouched(self, config, physics, field):
        gap = 2 * config.hex_radius
        a = field.add((400, 300), (1.0, 0.0), "A")
        b = field.add((400 + gap, 300), (-1.0, 0.0), "B")

        assert physics.resolve_collisions() == 0
        assert a.drift.x == pytest.approx(1.0)

    @pytest.mark.parametrize("pos_b,drift_a,drift_b", [
        ((420, 310), (0.3, 0.1), (-0.2, 0.15)),
        ((410, 340), (0.05, 0.25), (0.1, -0.2)),
        ((385, 290), (-0.25, -0.1), (0.2, 0.05)),
    ])
    def test_momentum_conserved(self, physics, field, pos_b, drift_a, drift_b):
        """Sum of drift vectors is unchanged by an oblique collision."""
        a = field.add((400, 300), drift_a, "A")
        b = field.add(pos_b, drift_b, "B")
        total_before = a.drift + b.drift

        assert physics.resolve_collisions() == 1

        total_after = a.drift + b.drift
        assert total_after.x == pytest.approx(total_before.x)
        assert total_after.y == pytest.approx(total_before.y)

    def test_energy_conserved(self, physics, field):
        """Equal-mass elastic collisions keep total kinetic energy."""
        a = field.add((400, 300), (0.3, 0.1), "A")
        b = field.add((420, 310), (-0.2, 0.15), "B")
        energy_before = a.drift.dot(a.drift) + b.drift.dot(b.drift)

        physics.resolve_collisions()

        energy_after = a.drift.dot(a.drift) + b.drift.dot(b.drift)
        assert energy_after == pytest.approx(energy_before)

    def test_no_position_correction(self, physics, field):
        """Collisions change velocity only; overlapping tiles stay put."""
        a = field.add((400, 300), (1.0, 0.0), "A")
        b = field.add((430, 300), (-1.0, 0.0), "B")

        physics.resolve_collisions()

        assert tuple(a.position) == pytest.approx((400, 300))
        assert tuple(b.position) == pytest.approx((430, 300))

    def test_collision_uses_post_update_positions(self, config, physics, field):
        """A pair that only touches after this tick's motion collides this tick."""
        gap = 2 * config.hex_radius + 1
        a = field.add((400, 300), (1.0, 0.0), "A")
        b = field.add((400 + gap, 300), (-1.0, 0.0), "B")

        physics.step(1.0)

        assert a.drift.x == pytest.approx(-1.0)
        assert b.drift.x == pytest.approx(1.0)
