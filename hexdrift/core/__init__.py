"""
Hex Drift Core - Game simulation and state.

This module provides the tile field, drift physics, selection, scoring,
difficulty progression and word validation.

Main exports:
- CoreGame: Game orchestrator driven by a frame loop
- GameConfig: Configuration loaded from game_config.yaml
- PhysicsWorld: Drift, wall reflection and tile collisions
- GridLayout: Hexagonal field generation
"""

from hexdrift.core.config_loader import GameConfig, ColorTier, load_config
from hexdrift.core.tiles import Tile, TileField
from hexdrift.core.rng import LetterSource
from hexdrift.core.grid_layout import GridLayout
from hexdrift.core.physics_world import PhysicsWorld
from hexdrift.core.selection import Selection, SelectionState
from hexdrift.core.scoring import ScoreTracker, ScoreEvent
from hexdrift.core.difficulty import DifficultyController, color_tier_for_score
from hexdrift.core.word_validator import (
    DictionaryLookup,
    LookupOutcome,
    ValidationWorker,
    InlineValidationWorker,
)
from hexdrift.core.rules import WordRules
from hexdrift.core.state_snapshot import GameSnapshot
from hexdrift.core.game import CoreGame

__all__ = [
    "GameConfig",
    "ColorTier",
    "load_config",
    "Tile",
    "TileField",
    "LetterSource",
    "GridLayout",
    "PhysicsWorld",
    "Selection",
    "SelectionState",
    "ScoreTracker",
    "ScoreEvent",
    "DifficultyController",
    "color_tier_for_score",
    "DictionaryLookup",
    "LookupOutcome",
    "ValidationWorker",
    "InlineValidationWorker",
    "WordRules",
    "GameSnapshot",
    "CoreGame",
]
