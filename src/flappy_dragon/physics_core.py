"""
physics_core.py: The deterministic kinematic functions, obstacle generation and collision logic.
"""

import logging
import random
from typing import Optional, Protocol

from .constants import (
    GRAVITY_STEP, TERMINAL_VELOCITY, FLAP_VELOCITY, SCREEN_HEIGHT,
    GAP_Y_MIN, GAP_Y_MAX, OBSTACLE_BASE_SIZE, OBSTACLE_MIN_SIZE
)
from .data_models import Player, Obstacle

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything with `randrange`, e.g. `random.Random` or a test stub."""

    def randrange(self, start: int, stop: int) -> int:
        ...


class PhysicsCore:
    """
    Deterministic physics used by the game state.
    Randomness only enters through the rng handed to spawn_obstacle.
    """

    SCREEN_HEIGHT = SCREEN_HEIGHT

    def gravity_and_move(self, player: Player):
        """
        Applies one physics step to the player. Mutates the player.
        """
        if player.velocity < TERMINAL_VELOCITY:
            player.velocity = min(player.velocity + GRAVITY_STEP, TERMINAL_VELOCITY)

        # int() truncates toward zero: a velocity of 0.8 moves nothing this step
        player.y += int(player.velocity)
        player.x += 1

        # Only the top is clamped; falling out the bottom is a death
        if player.y < 0:
            player.y = 0

    def flap(self, player: Player):
        """Overrides any accumulated velocity with the flap impulse."""
        player.velocity = FLAP_VELOCITY

    @staticmethod
    def obstacle_size(score: int) -> int:
        return max(OBSTACLE_MIN_SIZE, OBSTACLE_BASE_SIZE - score)

    def spawn_obstacle(self, x: int, score: int, rng: Optional[RandomSource] = None) -> Obstacle:
        """Generates an obstacle at world-x `x`, sized for `score`."""
        rng = rng or random
        obstacle = Obstacle(
            x=x,
            gap_y=rng.randrange(GAP_Y_MIN, GAP_Y_MAX),
            size=self.obstacle_size(score),
        )
        logger.debug("Spawned obstacle at x=%d gap_y=%d size=%d",
                     obstacle.x, obstacle.gap_y, obstacle.size)
        return obstacle

    def hit_obstacle(self, obstacle: Obstacle, player: Player) -> bool:
        """Checks whether the player is in the obstacle column but outside its gap."""
        half_size = obstacle.half_size
        does_x_match = obstacle.x == player.x
        is_above_gap = player.y < obstacle.gap_y - half_size
        is_below_gap = player.y > obstacle.gap_y + half_size
        return does_x_match and (is_above_gap or is_below_gap)

    def has_passed(self, obstacle: Obstacle, player: Player) -> bool:
        return player.x > obstacle.x

    def is_out_of_bounds(self, player: Player) -> bool:
        return player.y > self.SCREEN_HEIGHT
