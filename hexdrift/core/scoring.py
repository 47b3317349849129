"""
Scoring System
==============

Awards points for valid words and manages the one-shot score multiplier.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from hexdrift.core.config_loader import ColorTier, GameConfig, get_config
from hexdrift.core.difficulty import color_tier_for_score
from hexdrift.core.rng import LetterSource
from hexdrift.core.tiles import Tile

logger = logging.getLogger(__name__)


@dataclass
class ScoreEvent:
    """Record of a scored word."""
    word: str
    points: int
    multiplier: int
    total: int

    def __repr__(self) -> str:
        if self.multiplier > 1:
            return f"ScoreEvent({self.word}={self.points}, multiplier={self.multiplier}x)"
        return f"ScoreEvent({self.word}={self.points})"


class ScoreTracker:
    """
    Tracks score and the armed multiplier.

    The multiplier is armed by the player, applies to the next valid word
    only, and survives invalid submissions:
    - 1x: normal scoring, arming allowed
    - 2x: armed, further arming is a no-op until a valid word consumes it
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        source: Optional[LetterSource] = None
    ):
        """
        Initialize score tracker.

        Args:
            config: Game configuration. Uses default if None.
            source: Letter source used to re-letter scored tiles.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._source = source if source is not None else LetterSource(config)
        self._points_per_letter = config.scoring.points_per_letter
        self._armed_value = config.scoring.multiplier_value
        self._score: int = 0
        self._multiplier: int = 1
        self._words: int = 0

    @property
    def score(self) -> int:
        """Current total score."""
        return self._score

    @property
    def multiplier(self) -> int:
        """Multiplier applied to the next valid word (1 or the armed value)."""
        return self._multiplier

    @property
    def multiplier_armed(self) -> bool:
        return self._multiplier != 1

    @property
    def words(self) -> int:
        """Number of valid words scored."""
        return self._words

    @property
    def color_tier(self) -> ColorTier:
        """Color tier derived from the current score."""
        return color_tier_for_score(self._score, self._config.scoring.color_tiers)

    def get_word_score(self, word: str) -> int:
        """Points the word would earn with the current multiplier."""
        return len(word) * self._points_per_letter * self._multiplier

    def activate_multiplier(self) -> bool:
        """
        Arm the multiplier for the next valid word.

        Returns:
            True if armed now, False if it was already armed.
        """
        if self.multiplier_armed:
            return False
        self._multiplier = self._armed_value
        logger.info("Multiplier activated for next word!")
        return True

    def apply_word(self, word: str, is_valid: bool, tiles: Iterable[Tile] = ()) -> Optional[ScoreEvent]:
        """
        Apply the outcome of a submitted word.

        A valid word scores len(word) * points_per_letter * multiplier,
        disarms the multiplier and re-letters its tiles in place. An invalid
        word changes nothing.

        Args:
            word: The submitted word.
            is_valid: Resolved validity.
            tiles: Tiles that spelled the word.

        Returns:
            ScoreEvent for a valid word, None otherwise.
        """
        if not is_valid:
            logger.info("Invalid word: %s", word)
            return None

        multiplier = self._multiplier
        points = self.get_word_score(word)
        self._score += points
        self._words += 1
        self._multiplier = 1

        for tile in tiles:
            tile.letter = self._source.letter()

        logger.info("Valid word %s: +%d (total %d)", word, points, self._score)
        return ScoreEvent(word=word, points=points, multiplier=multiplier, total=self._score)

    def reset(self) -> None:
        """Reset score and disarm the multiplier."""
        self._score = 0
        self._multiplier = 1
        self._words = 0

