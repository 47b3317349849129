"""
Core Game
=========

Main game orchestrator combining layout, physics, selection, scoring,
difficulty and word validation.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from hexdrift.core.config_loader import ColorTier, GameConfig, get_config
from hexdrift.core.difficulty import DifficultyController
from hexdrift.core.grid_layout import GridLayout
from hexdrift.core.physics_world import PhysicsWorld
from hexdrift.core.rng import LetterSource
from hexdrift.core.rules import WordRules
from hexdrift.core.scoring import ScoreEvent, ScoreTracker
from hexdrift.core.selection import Selection, SelectionState
from hexdrift.core.state_snapshot import GameSnapshot, build_snapshot
from hexdrift.core.tiles import Tile, TileField
from hexdrift.core.word_validator import (
    DictionaryLookup,
    InlineValidationWorker,
    Lookup,
    Submission,
    ValidationWorker,
)

logger = logging.getLogger(__name__)

Worker = Union[ValidationWorker, InlineValidationWorker]


class CoreGame:
    """
    Main game simulation class.

    Orchestrates:
    - Tile field layout and reshuffles
    - Drift physics
    - Word selection
    - Word validation (off-thread) and scoring
    - Drift speed progression

    One frame = update(dt): physics step, then finished verdicts, then the
    difficulty clock. Layout state (field, selection) is separate from
    progress state (score, drift speed): reshuffle() replaces the first and
    keeps the second.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        worker: Optional[Worker] = None,
        lookup: Optional[Lookup] = None
    ):
        """
        Initialize game.

        Args:
            config: Game configuration. Uses default if None.
            seed: Random seed for letters and drift.
            worker: Validation worker. A background ValidationWorker if None.
            lookup: Dictionary lookup for the default worker.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._seed = seed

        # Initialize subsystems
        self._source = LetterSource(config, seed)
        self._layout = GridLayout(config)
        self._physics = PhysicsWorld(config)
        self._selection = Selection()
        self._scorer = ScoreTracker(config, self._source)
        self._difficulty = DifficultyController(config)
        self._rules = WordRules(config)

        if worker is None:
            worker = ValidationWorker(lookup if lookup is not None else DictionaryLookup(config))
        self._worker = worker

        # Game state
        self._started: bool = False
        self._next_submission_id: int = 0
        self._frame_dt = 1.0 / config.physics.target_fps

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def physics(self) -> PhysicsWorld:
        return self._physics

    @property
    def field(self) -> TileField:
        """The live tile field."""
        return self._physics.field

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def scorer(self) -> ScoreTracker:
        return self._scorer

    @property
    def difficulty(self) -> DifficultyController:
        return self._difficulty

    @property
    def rules(self) -> WordRules:
        return self._rules

    @property
    def is_started(self) -> bool:
        return self._started

    @property
    def score(self) -> int:
        """Current score."""
        return self._scorer.score

    @property
    def multiplier(self) -> int:
        return self._scorer.multiplier

    @property
    def drift_speed(self) -> float:
        return self._difficulty.get_drift_speed()

    @property
    def drift_speed_label(self) -> str:
        return self._difficulty.drift_speed_label

    @property
    def color_tier(self) -> ColorTier:
        return self._scorer.color_tier

    @property
    def pending_submissions(self) -> int:
        """Submitted words still waiting for (or holding) a verdict."""
        return self._worker.pending

    def start(
        self,
        initial_drift_speed: Optional[float] = None,
        seed: Optional[int] = None
    ) -> GameSnapshot:
        """
        Start a session.

        Args:
            initial_drift_speed: Player-chosen speed. Config default if None.
            seed: New random seed. Continues the current stream if None.

        Returns:
            Initial snapshot.

        Raises:
            ValueError: If the speed is not positive.
        """
        if initial_drift_speed is None:
            initial_drift_speed = self._config.difficulty.initial_drift_speed
        if initial_drift_speed <= 0:
            raise ValueError(f"Initial drift speed must be positive, got {initial_drift_speed}")

        if seed is not None:
            self._seed = seed
            self._source.reset(seed)

        self._scorer.reset()
        self._difficulty.reset(initial_drift_speed)
        self._generate_field()
        self._started = True

        logger.info(
            "Game started: %d tiles, drift speed %s",
            self._physics.tile_count, self.drift_speed_label
        )
        return self.snapshot()

    def reshuffle(self) -> GameSnapshot:
        """Regenerate the field. Score, multiplier and drift speed persist."""
        self._generate_field()
        logger.info("Board reshuffled!")
        return self.snapshot()

    def _generate_field(self) -> None:
        board = self._config.board
        field = self._layout.generate(
            self._physics.board_width,
            self._physics.board_height,
            board.margin,
            self._config.tiles.hex_radius,
            self._source
        )
        # Old tiles go with the old field; the selection must not outlive it
        self._selection.discard()
        self._physics.load_field(field)

    def pointer_select(self, x: float, y: float) -> Optional[Tile]:
        """
        Select the tile under the pointer.

        Returns:
            The selected tile, or None if nothing new was selected.
        """
        return self._selection.select_at(self._physics.field, x, y)

    def submit(self) -> Optional[Submission]:
        """
        Send the current word for validation and clear the selection.

        Scoring happens later, when update() picks up the verdict.

        Returns:
            The submission, or None if nothing was selected.
        """
        if self._selection.state is SelectionState.EMPTY:
            return None

        submission = Submission(
            submission_id=self._next_submission_id,
            word=self._selection.word,
            tiles=tuple(self._selection.tiles)
        )
        self._next_submission_id += 1
        self._selection.clear()
        self._worker.dispatch(submission)
        return submission

    def clear(self) -> None:
        """Drop the in-progress word."""
        self._selection.clear()

    def activate_multiplier(self) -> bool:
        """Arm the score multiplier. False if it is already armed."""
        return self._scorer.activate_multiplier()

    def update(self, dt: Optional[float] = None) -> List[ScoreEvent]:
        """
        Advance one frame.

        Args:
            dt: Simulated seconds for the difficulty clock. One frame at
                target_fps if None.

        Returns:
            Score events applied this frame.
        """
        if dt is None:
            dt = self._frame_dt

        self._physics.step(self.drift_speed)
        events = self.apply_verdicts()
        self._difficulty.advance(dt)
        return events

    def apply_verdicts(self) -> List[ScoreEvent]:
        """Score every finished lookup, in submission order."""
        events = []
        for verdict in self._worker.drain():
            is_valid = self._rules.resolve(verdict.word, verdict.outcome)
            # Tiles dropped by a reshuffle keep their letters
            live_tiles = [t for t in verdict.submission.tiles if t in self._physics.field]
            event = self._scorer.apply_word(verdict.word, is_valid, live_tiles)
            if event is not None:
                events.append(event)
        return events

    def wait_for_verdicts(self) -> List[ScoreEvent]:
        """Block until all lookups finish, then apply them."""
        self._worker.wait()
        return self.apply_verdicts()

    def snapshot(self) -> GameSnapshot:
        """Build current render snapshot."""
        return build_snapshot(
            self._physics.field,
            score=self._scorer.score,
            drift_speed=self.drift_speed,
            multiplier=self._scorer.multiplier,
            color_tier=self._scorer.color_tier,
            board_width=self._physics.board_width,
            board_height=self._physics.board_height,
            current_word=self._selection.word,
            pending_words=self._worker.pending
        )

    def get_render_data(self) -> Dict[str, Any]:
        """Snapshot as plain Python values."""
        return self.snapshot().to_dict()

    def get_info(self) -> Dict[str, Any]:
        return {
            "score": self._scorer.score,
            "words": self._scorer.words,
            "multiplier": self._scorer.multiplier,
            "drift_speed": self.drift_speed,
            "difficulty_level": self._difficulty.level,
            "tile_count": self._physics.tile_count,
            "color_tier": self.color_tier.name,
            "pending_submissions": self._worker.pending,
            "seed": self._seed,
        }

    def close(self) -> None:
        """Stop the validation worker."""
        self._worker.close()
