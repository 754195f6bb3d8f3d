import pygame

from trucogame.config import load_font
from trucogame.resolution import (
    RESOLUTIONS,
    Resolution,
    ResolutionPicker,
    available_resolutions,
    draw_resolution_screen,
)


def test_label_format():
    assert Resolution(1920, 1080).label == "1920 X 1080"
    assert str(Resolution(1280, 720)) == "1280 X 720"


def test_large_monitor_offers_everything():
    assert available_resolutions(1920, 1080) == list(RESOLUTIONS)


def test_smallest_is_always_offered():
    assert available_resolutions(800, 600) == [Resolution(1280, 720)]


def test_stops_at_first_that_does_not_fit():
    offered = available_resolutions(1366, 768)
    assert offered == [Resolution(1280, 720)]


def test_offered_sizes_fit_monitor():
    offered = available_resolutions(1440, 900)
    assert offered == list(RESOLUTIONS[: len(offered)])
    assert all(r.width <= 1440 and r.height <= 900 for r in offered)


def test_picker_starts_fullscreen_at_monitor_size():
    picker = ResolutionPicker(1600, 900)
    assert picker.fullscreen
    assert picker.fullscreen_label == "ON"
    assert picker.chosen_size() == Resolution(1600, 900)
    assert picker.label() == "1600 X 900"


def test_toggle_selects_largest_window():
    picker = ResolutionPicker(1920, 1080)
    picker.toggle_fullscreen()
    assert picker.fullscreen_label == "OFF"
    assert picker.chosen_size() == RESOLUTIONS[-1]
    picker.toggle_fullscreen()
    assert picker.fullscreen
    assert picker.index == len(picker.options)


def test_next_and_previous_wrap():
    picker = ResolutionPicker(1920, 1080)
    picker.toggle_fullscreen()
    picker.next()
    assert picker.chosen_size() == RESOLUTIONS[0]
    picker.previous()
    assert picker.chosen_size() == RESOLUTIONS[-1]


def test_previous_cycle_returns_to_start():
    picker = ResolutionPicker(1920, 1080)
    picker.toggle_fullscreen()
    start = picker.index
    for _ in picker.options:
        picker.previous()
    assert picker.index == start


def test_arrows_ignored_in_fullscreen():
    picker = ResolutionPicker(1920, 1080)
    picker.next()
    picker.previous()
    assert picker.chosen_size() == Resolution(1920, 1080)


def test_draw_clears_background():
    surface = pygame.Surface((1280, 720))
    surface.fill((255, 255, 255))
    font = load_font("no/such/font.ttf", 55)
    draw_resolution_screen(surface, font, "ON", "1920 X 1080", 100)
    assert surface.get_at((0, 0))[:3] == (0, 0, 0)