"""
Human Play Mode
================

Play Hex Drift interactively with the mouse and keyboard.

Controls:
    - Click: Select the tile under the pointer
    - Enter/Space: Submit the selected word
    - Backspace/C: Clear the selection
    - M: Arm the 2x multiplier for the next valid word
    - R: Reshuffle the board
    - ESC: Quit

Usage:
    python -m tools.play_human [--seed SEED] [--speed SPEED] [--offline]
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import List, Optional, Tuple

import pygame

from hexdrift.core.config_loader import load_config, GameConfig
from hexdrift.core.game import CoreGame
from hexdrift.core.word_validator import LookupOutcome
from hexdrift.logging_config import setup_logging


class HexRenderer:
    """Draws the tile field, HUD and intro screen."""

    HUD_HEIGHT = 60

    def __init__(self, config: GameConfig, window_width: int, window_height: int):
        self._config = config
        self._window_width = window_width
        self._window_height = window_height
        self._hud_height = self.HUD_HEIGHT

        self._tile_fill = (51, 51, 51)
        self._tile_selected = (255, 170, 51)
        self._tile_border = (136, 136, 136)
        self._hud_fill = (15, 15, 20)
        self._hud_text = (220, 220, 220)

        pygame.font.init()
        self._font_tile = pygame.font.Font(None, 30)
        self._font_large = pygame.font.Font(None, 42)
        self._font_small = pygame.font.Font(None, 22)

    @property
    def hud_height(self) -> int:
        return self._hud_height

    def screen_to_world(self, screen_x: int, screen_y: int) -> Tuple[float, float]:
        return float(screen_x), float(screen_y - self._hud_height)

    def render(self, screen: pygame.Surface, render_data: dict) -> None:
        background = pygame.Color(render_data["background"])
        foreground = pygame.Color(render_data["foreground"])

        screen.fill(background)
        radius = render_data["hex_radius"]
        for tile in render_data["tiles"]:
            self._draw_tile(screen, tile, radius, foreground)

        self._draw_hud(screen, render_data)

    def _hexagon_points(self, cx: float, cy: float, radius: float) -> List[Tuple[float, float]]:
        """Pointy-top hexagon vertices."""
        points = []
        for i in range(6):
            angle = math.radians(60 * i - 30)
            points.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
        return points

    def _draw_tile(self, screen: pygame.Surface, tile: dict, radius: float, letter_color) -> None:
        cx = tile["x"]
        cy = tile["y"] + self._hud_height
        points = self._hexagon_points(cx, cy, radius)

        fill = self._tile_selected if tile["selected"] else self._tile_fill
        pygame.draw.polygon(screen, fill, points)
        pygame.draw.polygon(screen, self._tile_border, points, 1)

        text = self._font_tile.render(tile["letter"], True, letter_color)
        screen.blit(text, text.get_rect(center=(int(cx), int(cy))))

    def _draw_hud(self, screen: pygame.Surface, render_data: dict) -> None:
        pygame.draw.rect(screen, self._hud_fill, (0, 0, self._window_width, self._hud_height))

        score = self._font_large.render(f"{render_data['score']:,}", True, self._hud_text)
        screen.blit(score, (20, 14))

        speed = self._font_small.render(f"Drift {render_data['drift_speed']}", True, self._hud_text)
        screen.blit(speed, (180, 12))

        if render_data["multiplier"] > 1:
            mult = self._font_small.render(f"x{render_data['multiplier']} armed", True, self._tile_selected)
            screen.blit(mult, (180, 34))

        word = render_data["current_word"] or "-"
        word_text = self._font_large.render(word, True, self._tile_selected)
        screen.blit(word_text, (320, 14))

        if render_data["pending_words"]:
            checking = self._font_small.render("checking...", True, self._hud_text)
            screen.blit(checking, (self._window_width - 110, 22))

    def render_intro(self, screen: pygame.Surface, choices: Tuple[float, ...]) -> None:
        screen.fill(self._hud_fill)
        title = self._font_large.render("HEX DRIFT", True, self._hud_text)
        screen.blit(title, title.get_rect(center=(self._window_width // 2, 120)))

        prompt = self._font_small.render("Choose a starting drift speed:", True, self._hud_text)
        screen.blit(prompt, prompt.get_rect(center=(self._window_width // 2, 200)))

        for i, choice in enumerate(choices):
            line = self._font_small.render(f"[{i + 1}]  {choice:.1f}", True, self._tile_selected)
            screen.blit(line, line.get_rect(center=(self._window_width // 2, 240 + 30 * i)))


class HumanPlayer:
    """
    Human-playable Hex Drift with a real-time frame loop.

    Word lookups run on the game's worker thread, so tiles keep drifting
    while a word is being checked.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        initial_speed: Optional[float] = None,
        offline: bool = False
    ):
        if config is None:
            config = load_config()

        self._config = config
        self._target_fps = config.physics.target_fps

        lookup = (lambda word: LookupOutcome.TRANSPORT_FAILURE) if offline else None
        self._game = CoreGame(config=config, seed=seed, lookup=lookup)

        window_width = config.board.width
        window_height = config.board.height + HexRenderer.HUD_HEIGHT
        pygame.init()
        self._renderer = HexRenderer(config, window_width, window_height)
        self._screen = pygame.display.set_mode((window_width, window_height))
        pygame.display.set_caption("Hex Drift")
        self._clock = pygame.time.Clock()

        self._running = True
        if initial_speed is not None:
            self._game.start(initial_speed)

    def run(self) -> int:
        """Run the game loop. Returns final score."""
        print("=== Hex Drift ===")
        print("Click tiles to spell, Enter to submit, Backspace to clear")
        print("M multiplier, R reshuffle, ESC quit")
        print()

        while self._running:
            dt = self._clock.tick(self._target_fps) / 1000.0
            if not self._game.is_started:
                self._handle_intro_events()
                self._renderer.render_intro(self._screen, self._config.difficulty.speed_choices)
            else:
                self._handle_events()
                # Update before render: the frame shows this tick's positions
                for event in self._game.update(dt):
                    print(f"  {event.word} +{event.points} (Total: {event.total})")
                self._renderer.render(self._screen, self._game.get_render_data())
            pygame.display.flip()

        self._game.close()
        pygame.quit()
        return self._game.score

    def _handle_intro_events(self) -> None:
        choices = self._config.difficulty.speed_choices
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._running = False
                elif pygame.K_1 <= event.key <= pygame.K_9:
                    index = event.key - pygame.K_1
                    if index < len(choices):
                        self._game.start(choices[index])

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._running = False
                elif event.key in (pygame.K_RETURN, pygame.K_SPACE):
                    self._game.submit()
                elif event.key in (pygame.K_BACKSPACE, pygame.K_c):
                    self._game.clear()
                elif event.key == pygame.K_m:
                    self._game.activate_multiplier()
                elif event.key == pygame.K_r:
                    self._game.reshuffle()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                x, y = self._renderer.screen_to_world(*event.pos)
                self._game.pointer_select(x, y)


def main():
    parser = argparse.ArgumentParser(description="Play Hex Drift interactively")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--speed", type=float, default=None,
                        help="Starting drift speed (skips the intro screen)")
    parser.add_argument("--config", type=str, default=None, help="Path to game_config.yaml")
    parser.add_argument("--offline", action="store_true",
                        help="Skip the online dictionary and use the fallback word list")
    parser.add_argument("--log-file", type=str, default=None, help="Also write logs to this file")
    parser.add_argument("--log-dir", type=str, default=None,
                        help="Write a timestamped session log into this directory")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")

    args = parser.parse_args()
    setup_logging(
        logging.DEBUG if args.debug else logging.INFO,
        log_file=args.log_file,
        log_dir=args.log_dir
    )

    config = load_config(args.config)
    player = HumanPlayer(
        config=config,
        seed=args.seed,
        initial_speed=args.speed,
        offline=args.offline
    )
    score = player.run()
    print(f"\nFinal Score: {score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
