import pytest

from flappy_dragon.game_state import GameState


class RecordingSurface:
    """Records every draw call so tests can inspect what a tick rendered."""

    def __init__(self):
        self.cells = {}
        self.texts = []
        self.centered = []
        self.clears = 0
        self.backgrounds = []
        self.quit_requested = False

    def cls(self):
        self.clears += 1

    def cls_bg(self, color):
        self.backgrounds.append(color)

    def set(self, x, y, fg, bg, glyph):
        self.cells[(x, y)] = (fg, bg, glyph)

    def print(self, x, y, text):
        self.texts.append((x, y, text))

    def print_centered(self, y, text):
        self.centered.append((y, text))

    def request_quit(self):
        self.quit_requested = True


class FixedRng:
    """Stands in for random.Random; always returns the same gap."""

    def __init__(self, value=20):
        self.value = value
        self.calls = []

    def randrange(self, start, stop):
        self.calls.append((start, stop))
        return self.value


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def rng():
    return FixedRng()


@pytest.fixture
def state(rng):
    return GameState(rng=rng)
