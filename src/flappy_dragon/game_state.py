"""
game_state.py: The per-frame mode machine (menu, playing, game over).
"""

import logging
import random
from typing import Optional

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FRAME_DURATION, PLAYER_SCREEN_X,
    PLAYER_GLYPH, WALL_GLYPH, BLACK, YELLOW, RED, NAVY,
    TITLE_TEXT, DEATH_TEXT, PLAY_TEXT, QUIT_TEXT, INSTRUCTIONS_TEXT
)
from .data_models import GameMode, KeyCode, Player, Obstacle, FrameInput
from .physics_core import PhysicsCore, RandomSource
from .surface import Surface

logger = logging.getLogger(__name__)


class GameState:
    """
    Owns the player, the live obstacle and the score, and advances them once
    per rendered frame through `tick`.
    """

    def __init__(self, rng: Optional[RandomSource] = None, physics: Optional[PhysicsCore] = None):
        self.rng = rng or random.Random()
        self.physics = physics or PhysicsCore()

        self.mode = GameMode.MENU
        self.frame_time = 0.0
        self.player = Player()
        self.score = 0
        self.obstacle = self.physics.spawn_obstacle(SCREEN_WIDTH, 0, self.rng)

        self._handlers = {
            GameMode.MENU: self.main_menu,
            GameMode.PLAYING: self.play,
            GameMode.END: self.dead,
        }

    def tick(self, ctx: Surface, frame: FrameInput):
        """The single per-frame entry point."""
        self._handlers[self.mode](ctx, frame)

    def restart(self):
        self.player = Player()
        self.frame_time = 0.0
        self.score = 0
        self.obstacle = self.physics.spawn_obstacle(SCREEN_WIDTH, self.score, self.rng)
        self.mode = GameMode.PLAYING
        logger.info("Game started.")

    # ----------------- Mode Handlers -----------------

    def main_menu(self, ctx: Surface, frame: FrameInput):
        ctx.cls()
        ctx.print_centered(5, TITLE_TEXT)
        self._menu_options(ctx, frame)

    def dead(self, ctx: Surface, frame: FrameInput):
        ctx.cls()
        ctx.print_centered(5, DEATH_TEXT)
        ctx.print_centered(6, f"You earned {self.score} points")
        self._menu_options(ctx, frame)

    def play(self, ctx: Surface, frame: FrameInput):
        ctx.cls_bg(NAVY)

        # Physics runs at a fixed rate regardless of the render rate
        self.frame_time += frame.elapsed_ms
        if self.frame_time > FRAME_DURATION:
            self.frame_time = 0.0
            self.physics.gravity_and_move(self.player)

        if frame.key is KeyCode.SPACE:
            self.physics.flap(self.player)

        self.render_player(ctx)
        ctx.print(0, 0, INSTRUCTIONS_TEXT)
        ctx.print(0, 1, f"Score: {self.score}")
        self.render_obstacle(ctx)

        if self.physics.has_passed(self.obstacle, self.player):
            self.score += 1
            self.obstacle = self.physics.spawn_obstacle(
                self.player.x + SCREEN_WIDTH, self.score, self.rng)
            logger.info("Obstacle passed. Score: %d", self.score)

        if self.physics.is_out_of_bounds(self.player) or self.physics.hit_obstacle(self.obstacle, self.player):
            self.mode = GameMode.END
            logger.info("Player died at x=%d y=%d. Final score: %d",
                        self.player.x, self.player.y, self.score)

    def _menu_options(self, ctx: Surface, frame: FrameInput):
        """Shared Play / Quit prompt for the menu and game-over screens."""
        ctx.print_centered(9, PLAY_TEXT)
        ctx.print_centered(13, QUIT_TEXT)

        if frame.key is KeyCode.P:
            self.restart()
        elif frame.key is KeyCode.Q:
            logger.info("Quit requested from %s.", self.mode.value)
            ctx.request_quit()

    # ----------------- Rendering -----------------

    def render_player(self, ctx: Surface):
        ctx.set(PLAYER_SCREEN_X, self.player.y, YELLOW, BLACK, PLAYER_GLYPH)

    def render_obstacle(self, ctx: Surface):
        """Draws the wall above and below the gap, scrolled by the player's x."""
        obstacle: Obstacle = self.obstacle
        half_size = obstacle.half_size
        screen_x = obstacle.x - self.player.x

        for y in range(0, obstacle.gap_y - half_size):
            ctx.set(screen_x, y, RED, BLACK, WALL_GLYPH)

        for y in range(obstacle.gap_y + half_size, SCREEN_HEIGHT):
            ctx.set(screen_x, y, RED, BLACK, WALL_GLYPH)
