"""
RNG - Letters and Drift
=======================

Seeded source of tile letters and drift vectors.
"""

from __future__ import annotations

import random
from typing import Optional, Tuple

from hexdrift.core.config_loader import GameConfig, get_config


class LetterSource:
    """
    Uniform random letters and small symmetric drift vectors.

    One seeded ``random.Random`` feeds both, so a fixed seed reproduces the
    same field layout.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize letter source.

        Args:
            config: Game configuration. Uses default if None.
            seed: Random seed for reproducibility. Random if None.
        """
        if config is None:
            config = get_config()

        self._alphabet = config.tiles.alphabet
        self._drift_range = config.tiles.drift_range
        self._rng = random.Random(seed)

    def letter(self) -> str:
        """Draw one letter uniformly from the alphabet."""
        return self._rng.choice(self._alphabet)

    def drift(self) -> Tuple[float, float]:
        """Draw a drift vector with each component in [-range, +range]."""
        r = self._drift_range
        return (self._rng.uniform(-r, r), self._rng.uniform(-r, r))

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Reseed the source.

        Args:
            seed: New random seed. Keeps current stream if None.
        """
        if seed is not None:
            self._rng = random.Random(seed)
