"""The start-up screen where the player picks fullscreen or a window size."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from trucogame.config import (
    BASE_HEIGHT,
    BASE_WIDTH,
    CENTRE,
    FONT_RETRO,
    FPS,
    LEFT,
    WHITE,
    WINDOW_TITLE,
    draw_text,
    load_font,
)

WIDEST_LABEL = "1920 X 1080"
_LEFT_EDGE = BASE_WIDTH // 2 - 400
_FULLSCREEN_ROW = BASE_HEIGHT // 2 - 100
_RESOLUTION_ROW = BASE_HEIGHT // 2
_DONE_ROW = 600


@dataclass(frozen=True)
class Resolution:
    """A screen size."""

    width: int
    height: int

    @property
    def label(self) -> str:
        return f"{self.width} X {self.height}"

    def __str__(self):
        return self.label


RESOLUTIONS = (
    Resolution(1280, 720),
    Resolution(1280, 800),
    Resolution(1360, 768),
    Resolution(1366, 768),
    Resolution(1440, 900),
    Resolution(1536, 864),
    Resolution(1600, 900),
    Resolution(1680, 1050),
    Resolution(1600, 1024),
    Resolution(1920, 1080),
)


def available_resolutions(monitor_width, monitor_height):
    """Return the window sizes offered on a monitor, stopping at the first that does not fit."""
    offered = [RESOLUTIONS[0]]
    for res in RESOLUTIONS[1:]:
        if res.width > monitor_width or res.height > monitor_height:
            break
        offered.append(res)
    return offered


class ResolutionPicker:
    """The choice between fullscreen at monitor size and one of the offered windows."""

    def __init__(self, monitor_width, monitor_height):
        self.monitor = Resolution(monitor_width, monitor_height)
        self.options = available_resolutions(monitor_width, monitor_height)
        self.fullscreen = True
        self.index = len(self.options)

    @property
    def fullscreen_label(self) -> str:
        return "ON" if self.fullscreen else "OFF"

    def toggle_fullscreen(self):
        if self.fullscreen:
            self.fullscreen = False
            self.index = len(self.options) - 1
        else:
            self.fullscreen = True
            self.index = len(self.options)

    def previous(self):
        if self.fullscreen:
            return
        self.index = self.index - 1 if self.index > 0 else len(self.options) - 1

    def next(self):
        if self.fullscreen:
            return
        self.index = self.index + 1 if self.index < len(self.options) - 1 else 0

    def label(self):
        """The text shown for the resolution row."""
        return self.chosen_size().label

    def chosen_size(self):
        return self.monitor if self.fullscreen else self.options[self.index]


def _text_width(font, text):
    return font.size(text)[0]


def _arrow_offsets(font, value_text):
    arrow = _text_width(font, "<") + _text_width(font, value_text) // 2 + 10
    return arrow, _text_width(font, value_text) // 2 + 10


def draw_resolution_screen(surface, font, fullscreen_label, resolution_label, shade):
    """Draw the picker; ``shade`` greys out the resolution row."""
    surface.fill((0, 0, 0))
    p1 = _text_width(font, "FullScreen:") + 30
    p2 = _text_width(font, "Resolution:") + 30

    arrow, arrow2 = _arrow_offsets(font, "OFF")
    y = _FULLSCREEN_ROW
    draw_text(surface, font, "FullScreen:", WHITE, _LEFT_EDGE, y, LEFT)
    draw_text(surface, font, "<", WHITE, _LEFT_EDGE + p1, y, LEFT)
    draw_text(surface, font, fullscreen_label, WHITE, _LEFT_EDGE + p1 + arrow, y, CENTRE)
    draw_text(surface, font, ">", WHITE, _LEFT_EDGE + p1 + arrow + arrow2, y, LEFT)

    arrow3, arrow4 = _arrow_offsets(font, WIDEST_LABEL)
    grey = (shade, shade, shade)
    y = _RESOLUTION_ROW
    draw_text(surface, font, "Resolution:", grey, _LEFT_EDGE, y, LEFT)
    draw_text(surface, font, "<", grey, _LEFT_EDGE + p2, y, LEFT)
    draw_text(surface, font, resolution_label, grey, _LEFT_EDGE + p2 + arrow3, y, CENTRE)
    draw_text(surface, font, ">", grey, _LEFT_EDGE + p2 + arrow3 + arrow4, y, LEFT)

    draw_text(surface, font, "Done", WHITE, BASE_WIDTH // 2, _DONE_ROW, CENTRE)


def _target_at(font, x, y, fullscreen):
    """Name the control under a click: 'done', 'toggle', 'previous', 'next' or None."""
    line = font.get_linesize()
    less = _text_width(font, "<")

    done_left = BASE_WIDTH // 2 - _text_width(font, "Done") // 2
    if done_left <= x <= done_left + _text_width(font, "Done") and _DONE_ROW <= y <= _DONE_ROW + line:
        return "done"

    left1 = _LEFT_EDGE + _text_width(font, "FullScreen:") + 30
    right1 = left1 + less + _text_width(font, "OFF") + 20
    if _FULLSCREEN_ROW <= y <= _FULLSCREEN_ROW + line:
        if left1 <= x <= left1 + less or right1 <= x <= right1 + _text_width(font, ">"):
            return "toggle"
        return None

    left2 = _LEFT_EDGE + _text_width(font, "Resolution:") + 30
    right2 = left2 + less + _text_width(font, WIDEST_LABEL) + 20
    if not fullscreen and _RESOLUTION_ROW <= y <= _RESOLUTION_ROW + line:
        if left2 <= x <= left2 + less:
            return "previous"
        if right2 <= x <= right2 + less:
            return "next"
    return None


def _monitor_size():
    sizes = pygame.display.get_desktop_sizes()
    if sizes:
        return sizes[0]
    info = pygame.display.Info()
    return info.current_w, info.current_h


def choose_resolution(state):
    """Show the picker and store the choice in ``state``; return False if the window was closed."""
    pygame.init()
    pygame.display.set_caption(WINDOW_TITLE)
    monitor_width, monitor_height = _monitor_size()
    screen = pygame.display.set_mode((BASE_WIDTH, BASE_HEIGHT))
    font = load_font(FONT_RETRO, 55)
    clock = pygame.time.Clock()
    picker = ResolutionPicker(monitor_width, monitor_height)

    actions = {
        "toggle": picker.toggle_fullscreen,
        "previous": picker.previous,
        "next": picker.next,
    }
    finished = False
    while not finished:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
                finished = True
                break
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                target = _target_at(font, *event.pos, picker.fullscreen)
                if target == "done":
                    finished = True
                    break
                if target in actions:
                    actions[target]()
        shade = 100 if picker.fullscreen else 255
        draw_resolution_screen(screen, font, picker.fullscreen_label, picker.label(), shade)
        pygame.display.flip()
        clock.tick(FPS)

    chosen = picker.chosen_size()
    state.width = chosen.width
    state.height = chosen.height
    state.fullscreen = picker.fullscreen
    state.resolution_index = picker.index
    return True