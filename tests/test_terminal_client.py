import pytest

pygame = pytest.importorskip("pygame")

from flappy_dragon import terminal_client
from flappy_dragon.constants import SCREEN_WIDTH, YELLOW, BLACK
from flappy_dragon.data_models import GameMode, KeyCode
from flappy_dragon.game_state import GameState
from flappy_dragon.terminal_client import TerminalClient, translate_key


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    client = TerminalClient()
    yield client
    pygame.quit()


@pytest.mark.parametrize("key, expected", [
    (pygame.K_SPACE, KeyCode.SPACE),
    (pygame.K_p, KeyCode.P),
    (pygame.K_q, KeyCode.Q),
    (pygame.K_a, None),
    (pygame.K_ESCAPE, None),
])
def test_translate_key(key, expected):
    assert translate_key(key) is expected


def test_poll_input_keeps_latest_recognized_key(client):
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_p))
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    assert client.poll_input() is KeyCode.SPACE
    assert client.poll_input() is None


def test_window_close_requests_quit(client):
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    client.poll_input()
    assert client.quitting


def test_run_returns_on_quit_without_ticking(client):
    state = GameState()
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    client.run(state)
    assert state.mode is GameMode.MENU


def test_run_exits_after_quit_key(client):
    state = GameState()
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q))
    client.run(state)
    assert client.quitting


def test_set_ignores_cells_off_grid(client):
    client.cls()
    client.set(-1, 0, YELLOW, BLACK, "@")
    client.set(SCREEN_WIDTH, 0, YELLOW, BLACK, "@")
    client.set(0, -3, YELLOW, BLACK, "@")
    assert client.glyph_cache == {}

    client.set(0, 0, YELLOW, BLACK, "@")
    assert ("@", YELLOW) in client.glyph_cache


def test_main_reports_window_failure(monkeypatch):
    def broken(*args, **kwargs):
        raise pygame.error("no display")

    monkeypatch.setattr(terminal_client, "TerminalClient", broken)
    assert terminal_client.main(["--seed", "1"]) == 1


def test_parser_defaults():
    args = terminal_client.build_parser().parse_args([])
    assert args.seed is None
    assert args.log_level == "WARNING"
