import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from trucogame.config import GameState, Scene, load_font
from trucogame.intro import HOLD_SECONDS, MAX_ALPHA, FadeIn, draw_intro, run_intro


def fade_to_hold():
    fade = FadeIn()
    ticks = 0
    while fade.hold_started is None:
        fade.tick(0.0)
        ticks += 1
    return fade, ticks


def test_first_line_fades_first():
    fade = FadeIn()
    for _ in range(MAX_ALPHA):
        fade.tick(0.0)
    assert fade.alpha1 == MAX_ALPHA
    assert fade.alpha2 == 0
    assert fade.first_done is False


def test_extra_tick_before_second_line():
    fade = FadeIn()
    for _ in range(MAX_ALPHA + 1):
        fade.tick(0.0)
    assert fade.first_done is True
    assert fade.alpha2 == 0
    fade.tick(0.0)
    assert fade.alpha2 == 1


def test_alphas_never_decrease():
    fade = FadeIn()
    previous = (0, 0)
    for _ in range(600):
        fade.tick(0.0)
        current = (fade.alpha1, fade.alpha2)
        assert current[0] >= previous[0] and current[1] >= previous[1]
        assert max(current) <= MAX_ALPHA
        previous = current


def test_hold_starts_when_both_lines_full():
    fade, _ = fade_to_hold()
    assert fade.alpha1 == MAX_ALPHA
    assert fade.alpha2 == MAX_ALPHA
    assert fade.finished is False


def test_finishes_after_hold():
    fade, _ = fade_to_hold()
    assert fade.tick(HOLD_SECONDS / 2) is False
    assert fade.tick(HOLD_SECONDS) is True
    assert fade.finished is True


@pytest.fixture
def fonts():
    return load_font(None, 24), load_font(None, 20)


def _bright_pixels(surface, rect):
    return sum(
        1
        for x in range(rect.left, min(rect.right, surface.get_width()))
        for y in range(rect.top, min(rect.bottom, surface.get_height()))
        if surface.get_at((x, y))[0] > 128
    )


def test_invisible_text_leaves_black_screen(fonts):
    state = GameState(width=320, height=180)
    surface = pygame.Surface(state.size)
    first, second = draw_intro(surface, state, *fonts, 0, 0)
    assert _bright_pixels(surface, first) == 0
    assert _bright_pixels(surface, second) == 0


def test_opaque_text_is_drawn(fonts):
    state = GameState(width=320, height=180)
    surface = pygame.Surface(state.size)
    first, second = draw_intro(surface, state, *fonts, MAX_ALPHA, MAX_ALPHA)
    assert _bright_pixels(surface, first) > 0
    assert _bright_pixels(surface, second) > 0
    assert second.top > first.top


@pytest.fixture
def screen():
    pygame.display.init()
    surface = pygame.display.set_mode((320, 180))
    pygame.event.clear()
    yield surface
    pygame.display.quit()


def test_run_intro_quit(screen):
    state = GameState(width=320, height=180)
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert run_intro(state, screen, pygame.time.Clock()) is Scene.QUIT


def test_run_intro_escape_skips(screen):
    state = GameState(width=320, height=180)
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert run_intro(state, screen, pygame.time.Clock()) is Scene.TITLE