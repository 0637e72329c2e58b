"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constants import PLAYER_START_X, PLAYER_START_Y


class GameMode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    END = "end"


class KeyCode(Enum):
    """The key presses the game reacts to."""
    SPACE = "space"
    P = "p"
    Q = "q"


@dataclass
class Player:
    """The player entity, in world coordinates."""
    x: int = PLAYER_START_X
    y: int = PLAYER_START_Y
    velocity: float = 0.0


@dataclass
class Obstacle:
    """A one-column wall at world-x `x` with a gap centered on `gap_y`."""
    x: int
    gap_y: int
    size: int

    @property
    def half_size(self) -> int:
        return self.size // 2


@dataclass(frozen=True)
class FrameInput:
    """What the host sampled for one rendered frame."""
    elapsed_ms: float = 0.0
    key: Optional[KeyCode] = None
