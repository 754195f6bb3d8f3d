import pygame
import pytest

from trucogame.config import (
    BASE_HEIGHT,
    BASE_WIDTH,
    CENTRE,
    LEFT,
    RIGHT,
    Character,
    FontLadder,
    GameState,
    compute_scale,
    draw_text,
    load_font,
)


def test_scale_is_one_at_design_size():
    assert compute_scale(BASE_WIDTH, BASE_HEIGHT) == 1.0


def test_scale_uses_smaller_ratio():
    assert compute_scale(BASE_WIDTH * 2, BASE_HEIGHT) == 1.0
    assert compute_scale(BASE_WIDTH, BASE_HEIGHT * 3) == 1.0


def test_state_scale_follows_size():
    state = GameState(width=1920, height=1080)
    assert state.scale == compute_scale(1920, 1080)
    assert state.size == (1920, 1080)


def test_state_defaults():
    state = GameState()
    assert state.volume == 5
    assert state.user == Character()
    assert state.user is not state.opponent


def test_ladder_climbs_and_stops_at_top():
    ladder = FontLadder(["a", "b", "c"])
    assert ladder.step(True) == "b"
    assert ladder.step(True) == "c"
    assert ladder.step(True) == "c"
    assert ladder.index == 2


def test_ladder_descends_to_bottom():
    ladder = FontLadder(["a", "b", "c"])
    ladder.step(True)
    assert ladder.step(False) == "a"
    assert ladder.step(False) == "a"
    assert ladder.index == 0


def test_ladder_respects_custom_top():
    ladder = FontLadder(["a", "b", "c", "d"], top=1)
    for _ in range(5):
        ladder.step(True)
    assert ladder.current() == "b"


def test_ladder_rejects_empty():
    with pytest.raises(ValueError):
        FontLadder([])


def test_load_font_falls_back_when_missing():
    font = load_font("no/such/font.ttf", 20)
    assert font.get_height() > 0


def test_ladder_load_sizes_grow():
    ladder = FontLadder.load("no/such/font.ttf", 20, 3)
    assert len(ladder) == 3
    first = ladder.current().size("Exit")[0]
    ladder.step(True)
    ladder.step(True)
    assert ladder.current().size("Exit")[0] >= first


def test_draw_text_alignment():
    font = load_font("no/such/font.ttf", 24)
    surface = pygame.Surface((400, 100))
    centred = draw_text(surface, font, "Truco", (255, 255, 255), 200, 10, CENTRE)
    assert centred.centerx == 200
    assert centred.top == 10
    left = draw_text(surface, font, "Truco", (255, 255, 255), 50, 10, LEFT)
    assert left.left == 50
    right = draw_text(surface, font, "Truco", (255, 255, 255), 300, 10, RIGHT)
    assert right.right == 300


def test_draw_text_rejects_unknown_alignment():
    font = load_font("no/such/font.ttf", 24)
    surface = pygame.Surface((100, 100))
    with pytest.raises(ValueError):
        draw_text(surface, font, "x", (0, 0, 0), 0, 0, "middle")