"""
constants.py: Centralized configuration for the game grid, physics and display.
"""

# -------- Grid & Timing Config --------
SCREEN_WIDTH = 80               # Grid width (cells)
SCREEN_HEIGHT = 50              # Grid height (cells)
FRAME_DURATION = 75.0           # Milliseconds between physics steps
RENDER_FPS = 60                 # Host frame rate; independent of physics rate

# -------- Player Config --------
PLAYER_START_X = 5
PLAYER_START_Y = 25
PLAYER_SCREEN_X = 0             # The world scrolls under the player
GRAVITY_STEP = 0.2              # Velocity added per physics step
TERMINAL_VELOCITY = 2.0         # Cap on falling velocity (cells/step)
FLAP_VELOCITY = -2.0            # Instantaneous velocity after a flap

# -------- Obstacle Config --------
GAP_Y_MIN = 10                  # Inclusive
GAP_Y_MAX = 40                  # Exclusive
OBSTACLE_BASE_SIZE = 20         # Gap size at score 0
OBSTACLE_MIN_SIZE = 2           # The gap never closes below this

# -------- Glyphs & Colors (RGB) --------
PLAYER_GLYPH = "@"
WALL_GLYPH = "|"
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
NAVY = (0, 0, 128)

# -------- Text --------
WINDOW_TITLE = "Flappy Dragon"
TITLE_TEXT = "Welcome to Flappy Dragon"
DEATH_TEXT = "You are dead!"
PLAY_TEXT = "(P) Play"
QUIT_TEXT = "(Q) Quit"
INSTRUCTIONS_TEXT = "Press SPACE to flap."

# -------- Terminal Window Config --------
CELL_SIZE = 12                  # Pixels per character cell
FONT_SIZE = 16
