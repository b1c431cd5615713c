import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from heartbox import run_pygame
from heartbox.controls import Key
from heartbox.game import Game
from heartbox.run_pygame import CELL_HEIGHT, CELL_WIDTH, PygameScreen, translate_event


def keydown(key: int, unicode: str = "") -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key, unicode=unicode)


@pytest.mark.parametrize(
    "event, expected",
    [
        (keydown(pygame.K_UP), Key.UP),
        (keydown(pygame.K_LEFT), Key.LEFT),
        (keydown(pygame.K_q, "q"), Key.QUIT),
        (keydown(pygame.K_SPACE, " "), Key.TOGGLE),
        (keydown(pygame.K_EQUALS, "+"), Key.ASPECT_UP),
        (keydown(pygame.K_RIGHTBRACKET, "]"), Key.SPEED_UP),
        (keydown(pygame.K_x, "x"), None),
        (pygame.event.Event(pygame.KEYUP, key=pygame.K_UP), None),
        (pygame.event.Event(pygame.QUIT), Key.QUIT),
    ],
)
def test_translate_event(event, expected):
    assert translate_event(event) is expected


@pytest.fixture
def font():
    pygame.font.init()
    yield
    pygame.font.quit()


def test_flush_paints_border_and_heart(monkeypatch, font):
    flips = []
    monkeypatch.setattr(run_pygame.pygame.display, "flip", lambda: flips.append(1))
    surface = pygame.Surface((80 * CELL_WIDTH, 24 * CELL_HEIGHT))
    screen = PygameScreen(surface, 24, 80)
    game = Game(screen)
    game.draw_static()
    assert game.step()

    def pixel(y: int, x: int):
        cx = x * CELL_WIDTH + CELL_WIDTH // 2
        cy = y * CELL_HEIGHT + CELL_HEIGHT // 2
        return tuple(surface.get_at((cx, cy)))[:3]

    assert flips == [1]
    assert pixel(game.box.y, game.box.x) == run_pygame.FOREGROUND
    assert pixel(12, 40) == run_pygame.HEART_COLOR
    assert pixel(12, 30) == run_pygame.BACKGROUND


class FakeClock:
    def __init__(self) -> None:
        self.ticks = []

    def tick(self, fps: int) -> int:
        self.ticks.append(fps)
        return 0


def test_runner_stops_on_window_close(monkeypatch):
    clocks = []
    quits = []
    seen_running = []
    real_poll = run_pygame.poll_keys
    real_quit = pygame.quit

    def make_clock():
        clocks.append(FakeClock())
        return clocks[-1]

    def poll():
        seen_running.append(runner.running)
        if len(seen_running) == 3:
            pygame.event.post(pygame.event.Event(pygame.QUIT))
        return real_poll()

    def quit_pygame():
        quits.append(1)
        real_quit()

    monkeypatch.setattr(run_pygame.pygame.time, "Clock", make_clock)
    monkeypatch.setattr(run_pygame.pygame, "quit", quit_pygame)
    monkeypatch.setattr(run_pygame, "poll_keys", poll)

    runner = run_pygame.GameRunner(rows=24, cols=80)
    assert not runner.running
    runner.run()

    assert seen_running == [True, True, True]
    assert clocks[0].ticks == [run_pygame.FPS] * 3
    assert quits == [1]
    assert not runner.running
