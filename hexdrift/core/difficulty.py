"""
Difficulty
==========

Drift speed progression and score-driven color tiers.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from hexdrift.core.config_loader import ColorTier, GameConfig, get_config

logger = logging.getLogger(__name__)


def color_tier_for_score(score: int, tiers: Sequence[ColorTier]) -> ColorTier:
    """
    Highest tier whose threshold the score has reached.

    Args:
        score: Current score.
        tiers: Tiers sorted by ascending min_score, the first at 0.
    """
    current = tiers[0]
    for tier in tiers:
        if score >= tier.min_score:
            current = tier
    return current


class DifficultyController:
    """
    Raises the global drift speed by a fixed step every period.

    The speed only goes up. Time is supplied by the caller through advance(),
    so tests can step periods by hand instead of waiting on a timer.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize difficulty controller.

        Args:
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._period = config.difficulty.period_seconds
        self._step = config.difficulty.speed_step
        self._drift_speed = config.difficulty.initial_drift_speed
        self._elapsed = 0.0
        self._level = 0

    @property
    def level(self) -> int:
        """Number of ticks since the last reset."""
        return self._level

    @property
    def drift_speed_label(self) -> str:
        """Drift speed at one decimal place, for display."""
        return f"{self._drift_speed:.1f}"

    def get_drift_speed(self) -> float:
        return self._drift_speed

    def set_drift_speed(self, value: float) -> None:
        if value <= 0:
            raise ValueError(f"Drift speed must be positive, got {value}")
        self._drift_speed = value

    def tick(self) -> float:
        """Apply one difficulty increase. Returns the new drift speed."""
        self._drift_speed += self._step
        self._level += 1
        logger.info("Difficulty increased: drift speed is now %s", self.drift_speed_label)
        return self._drift_speed

    def advance(self, dt: float) -> int:
        """
        Advance the difficulty clock.

        Args:
            dt: Simulated seconds elapsed.

        Returns:
            Number of ticks fired.
        """
        self._elapsed += dt
        fired = 0
        while self._elapsed >= self._period:
            self._elapsed -= self._period
            self.tick()
            fired += 1
        return fired

    def reset(self, drift_speed: float) -> None:
        """Restart the clock at the given speed."""
        self.set_drift_speed(drift_speed)
        self._elapsed = 0.0
        self._level = 0
