"""
Configuration Loader
====================

Loads and validates game_config.yaml, providing typed access to all parameters.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Optional

import yaml


@dataclass(frozen=True)
class BoardConfig:
    """Canvas geometry."""
    width: int        # Canvas width in pixels
    height: int       # Canvas height in pixels
    margin: int       # Inset of the first tile row/column


@dataclass(frozen=True)
class TileConfig:
    """Hexagonal tile geometry and randomization."""
    hex_radius: float
    col_spacing_factor: float
    drift_range: float
    alphabet: str


@dataclass(frozen=True)
class PhysicsConfig:
    """Drift simulation parameters."""
    mass: float
    target_fps: int


@dataclass(frozen=True)
class DifficultyConfig:
    """Drift speed progression."""
    period_seconds: float
    speed_step: float
    initial_drift_speed: float
    speed_choices: Tuple[float, ...]


@dataclass(frozen=True)
class ColorTier:
    """Background/foreground pair shown from min_score upward."""
    name: str
    min_score: int
    background: str
    foreground: str


@dataclass(frozen=True)
class ScoringConfig:
    """Scoring parameters."""
    points_per_letter: int
    multiplier_value: int
    color_tiers: Tuple[ColorTier, ...]   # Sorted by ascending min_score


@dataclass(frozen=True)
class ValidatorConfig:
    """Dictionary lookup and local fallback."""
    url_template: str
    timeout_seconds: float
    fallback_words: Tuple[str, ...]


@dataclass(frozen=True)
class GameConfig:
    """
    Complete game configuration loaded from YAML.

    All values are immutable to prevent accidental modification during runtime.
    """
    board: BoardConfig
    tiles: TileConfig
    physics: PhysicsConfig
    difficulty: DifficultyConfig
    scoring: ScoringConfig
    validator: ValidatorConfig

    @property
    def hex_radius(self) -> float:
        return self.tiles.hex_radius


def _parse_color_tiers(tiers_data: List) -> Tuple[ColorTier, ...]:
    """Parse color tiers from YAML, sorted by threshold."""
    tiers = []
    for tier in tiers_data:
        tiers.append(ColorTier(
            name=str(tier["name"]),
            min_score=int(tier["min_score"]),
            background=str(tier["background"]),
            foreground=str(tier["foreground"])
        ))
    return tuple(sorted(tiers, key=lambda t: t.min_score))


def _validate_config(config: GameConfig) -> None:
    """Validate configuration consistency."""
    if config.tiles.hex_radius <= 0:
        raise ValueError(f"hex_radius must be positive, got {config.tiles.hex_radius}")

    if not config.tiles.alphabet:
        raise ValueError("alphabet must not be empty")

    for letter in config.tiles.alphabet:
        if len(letter) != 1 or not letter.isupper():
            raise ValueError(f"alphabet must contain uppercase letters only, got '{letter}'")

    if config.difficulty.period_seconds <= 0:
        raise ValueError(f"period_seconds must be positive, got {config.difficulty.period_seconds}")

    if config.difficulty.speed_step <= 0:
        raise ValueError(f"speed_step must be positive, got {config.difficulty.speed_step}")

    if config.difficulty.initial_drift_speed <= 0:
        raise ValueError(
            f"initial_drift_speed must be positive, got {config.difficulty.initial_drift_speed}"
        )

    # Color tiers must cover every score from zero, one tier per threshold
    thresholds = [tier.min_score for tier in config.scoring.color_tiers]
    if not thresholds or thresholds[0] != 0:
        raise ValueError("color_tiers must include a tier with min_score 0")
    if len(set(thresholds)) != len(thresholds):
        raise ValueError(f"color_tiers thresholds must be unique, got {thresholds}")

    if config.scoring.multiplier_value < 1:
        raise ValueError(f"multiplier_value must be >= 1, got {config.scoring.multiplier_value}")


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load and validate game configuration from YAML.

    Args:
        config_path: Path to game_config.yaml. If None, uses default location.

    Returns:
        Validated GameConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "game_config.yaml"
        )

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f)

    board_data = raw["board"]
    board = BoardConfig(
        width=int(board_data["width"]),
        height=int(board_data["height"]),
        margin=int(board_data.get("margin", 50))
    )

    tiles_data = raw["tiles"]
    tiles = TileConfig(
        hex_radius=float(tiles_data["hex_radius"]),
        col_spacing_factor=float(tiles_data.get("col_spacing_factor", 1.8)),
        drift_range=float(tiles_data.get("drift_range", 0.25)),
        alphabet=str(tiles_data.get("alphabet", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"))
    )

    physics_data = raw.get("physics", {})
    physics = PhysicsConfig(
        mass=float(physics_data.get("mass", 1.0)),
        target_fps=int(physics_data.get("target_fps", 60))
    )

    difficulty_data = raw["difficulty"]
    difficulty = DifficultyConfig(
        period_seconds=float(difficulty_data["period_seconds"]),
        speed_step=float(difficulty_data["speed_step"]),
        initial_drift_speed=float(difficulty_data.get("initial_drift_speed", 1.0)),
        speed_choices=tuple(float(s) for s in difficulty_data.get("speed_choices", [1.0]))
    )

    scoring_data = raw["scoring"]
    scoring = ScoringConfig(
        points_per_letter=int(scoring_data["points_per_letter"]),
        multiplier_value=int(scoring_data.get("multiplier_value", 2)),
        color_tiers=_parse_color_tiers(scoring_data["color_tiers"])
    )

    validator_data = raw["validator"]
    validator = ValidatorConfig(
        url_template=str(validator_data["url_template"]),
        timeout_seconds=float(validator_data.get("timeout_seconds", 3.0)),
        fallback_words=tuple(str(w) for w in validator_data.get("fallback_words", []))
    )

    config = GameConfig(
        board=board,
        tiles=tiles,
        physics=physics,
        difficulty=difficulty,
        scoring=scoring,
        validator=validator
    )

    _validate_config(config)
    return config


# Module-level singleton for convenience
_cached_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the cached game configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> GameConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config
