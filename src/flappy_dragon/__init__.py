"""
Flappy Dragon: a side-scrolling reflex game on a character-cell grid.
"""

from .data_models import GameMode, KeyCode, Player, Obstacle, FrameInput
from .game_state import GameState
from .physics_core import PhysicsCore

__version__ = "0.1.0"
