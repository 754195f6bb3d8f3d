import itertools

import pygame
import pytest

from trucogame.charchoose import draw_character_choice, portrait_at, portrait_boxes
from trucogame.config import GameState

RED = (200, 0, 0)


@pytest.fixture
def font():
    pygame.font.init()
    return pygame.font.Font(None, 20)


def red_image():
    image = pygame.Surface((10, 10))
    image.fill(RED)
    return image


def test_first_box_position_at_design_size():
    assert portrait_boxes(1280, 720, 1.0)[0] == (340, 210, 540, 410)


@pytest.mark.parametrize("width,height", [(1280, 720), (1920, 1080), (1366, 768)])
def test_boxes_are_square_and_sized_by_scale(width, height):
    scale = min(width / 1280, height / 720)
    for left, top, right, bottom in portrait_boxes(width, height, scale):
        assert right - left == int(200 * scale)
        assert bottom - top == right - left


def test_boxes_do_not_overlap():
    boxes = portrait_boxes(1280, 720, 1.0)
    for a, b in itertools.combinations(boxes, 2):
        disjoint = a[2] < b[0] or b[2] < a[0] or a[3] < b[1] or b[3] < a[1]
        assert disjoint


@pytest.mark.parametrize("slot", [1, 2, 3, 4])
def test_portrait_at_box_centres(slot):
    left, top, right, bottom = portrait_boxes(1280, 720, 1.0)[slot - 1]
    assert portrait_at((left + right) // 2, (top + bottom) // 2, 1280, 720, 1.0) == slot


def test_portrait_at_edges_are_inclusive():
    left, top, right, bottom = portrait_boxes(1280, 720, 1.0)[1]
    assert portrait_at(right, bottom, 1280, 720, 1.0) == 2
    assert portrait_at(left, top, 1280, 720, 1.0) == 2


def test_portrait_at_outside_is_none():
    assert portrait_at(0, 0, 1280, 720, 1.0) is None
    left, top, right, bottom = portrait_boxes(1280, 720, 1.0)[0]
    assert portrait_at(right + 1, top, 1280, 720, 1.0) is None


def test_draw_outlines_chosen_portrait(font):
    state = GameState()
    surface = pygame.Surface(state.size)
    images = [red_image()] * 4
    draw_character_choice(surface, state, font, images, 2)
    boxes = portrait_boxes(state.width, state.height, state.scale)
    left, top, _, bottom = boxes[1]
    assert tuple(surface.get_at((left, (top + bottom) // 2)))[:3] == (255, 255, 255)
    other_left, other_top, _, other_bottom = boxes[0]
    assert tuple(surface.get_at((other_left, (other_top + other_bottom) // 2)))[:3] == RED


def test_draw_fills_boxes_with_images(font):
    state = GameState()
    surface = pygame.Surface(state.size)
    draw_character_choice(surface, state, font, [red_image(), None, red_image(), red_image()], None)
    boxes = portrait_boxes(state.width, state.height, state.scale)
    for slot, (left, top, right, bottom) in enumerate(boxes, start=1):
        pixel = tuple(surface.get_at(((left + right) // 2, (top + bottom) // 2)))[:3]
        if slot == 2:
            assert pixel == (0, 0, 0)
        else:
            assert pixel == RED