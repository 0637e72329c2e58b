#!/usr/bin/env python3
"""
terminal_client.py

Pygame host for the game: an 80x50 character-cell window, keyboard sampling
and the fixed-rate frame loop. The game itself only sees the Surface methods.
"""

import argparse
import logging
import random
from typing import Dict, Optional, Sequence, Tuple

import pygame

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, CELL_SIZE, FONT_SIZE, RENDER_FPS,
    WINDOW_TITLE, BLACK, WHITE
)
from .data_models import KeyCode, FrameInput
from .game_state import GameState
from .surface import Color

logger = logging.getLogger(__name__)

KEY_MAP: Dict[int, KeyCode] = {
    pygame.K_SPACE: KeyCode.SPACE,
    pygame.K_p: KeyCode.P,
    pygame.K_q: KeyCode.Q,
}


def translate_key(key: int) -> Optional[KeyCode]:
    """Maps a pygame key constant to a game key, or None if the game ignores it."""
    return KEY_MAP.get(key)


# ----------------- Terminal Client (rendering / input) -----------------

class TerminalClient:
    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT, fps: int = RENDER_FPS):
        pygame.init()
        self.width = width
        self.height = height
        self.fps = fps
        self.screen = pygame.display.set_mode((width * CELL_SIZE, height * CELL_SIZE))
        pygame.display.set_caption(WINDOW_TITLE)

        self.font = pygame.font.Font(None, FONT_SIZE)
        self.glyph_cache: Dict[Tuple[str, Color], pygame.Surface] = {}
        self.clock = pygame.time.Clock()
        self.quitting = False

    # --- Surface ---

    def cls(self):
        self.screen.fill(BLACK)

    def cls_bg(self, color: Color):
        self.screen.fill(color)

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str):
        if not (0 <= x < self.width and 0 <= y < self.height):
            return

        cell = pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
        self.screen.fill(bg, cell)
        surf = self._glyph(glyph, fg)
        self.screen.blit(surf, surf.get_rect(center=cell.center))

    def print(self, x: int, y: int, text: str):
        for i, char in enumerate(text):
            self.set(x + i, y, WHITE, BLACK, char)

    def print_centered(self, y: int, text: str):
        self.print((self.width - len(text)) // 2, y, text)

    def request_quit(self):
        self.quitting = True

    # --- Loop ---

    def poll_input(self) -> Optional[KeyCode]:
        """Drains the event queue, keeping only the latest recognized key press."""
        key = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.request_quit()
            elif event.type == pygame.KEYDOWN:
                key = translate_key(event.key) or key
        return key

    def run(self, state: GameState):
        """The main execution loop. Returns once the game requests a quit."""
        while not self.quitting:
            elapsed_ms = float(self.clock.tick(self.fps))
            frame = FrameInput(elapsed_ms=elapsed_ms, key=self.poll_input())
            if self.quitting:
                break
            state.tick(self, frame)
            pygame.display.flip()

    def _glyph(self, glyph: str, fg: Color) -> pygame.Surface:
        surf = self.glyph_cache.get((glyph, fg))
        if surf is None:
            surf = self.font.render(glyph, True, fg)
            self.glyph_cache[(glyph, fg)] = surf
        return surf


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flappy-dragon", description=WINDOW_TITLE)
    parser.add_argument("--seed", type=int, default=None, help="Seed for obstacle gaps (default: random)")
    parser.add_argument("--fps", type=int, default=RENDER_FPS, help="Render frame rate")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    state = GameState(rng=random.Random(args.seed))

    try:
        client = TerminalClient(fps=args.fps)
    except pygame.error as e:
        logger.error("Could not open the game window: %s", e)
        pygame.quit()
        return 1

    try:
        client.run(state)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
