"""The opening credits: two lines of text fade in, hold, then the title follows."""

from __future__ import annotations

import time

import pygame

from trucogame.config import (
    BLACK,
    CENTRE,
    FONT_CARTOON,
    FPS,
    Scene,
    draw_text,
    load_font,
)

MAX_ALPHA = 255
HOLD_SECONDS = 2.0
CREDITS = "Gabriel e Matheus"
PRESENTS = "Apresentam"


class FadeIn:
    """Raises the first line's opacity one step per tick, then the second's, then holds."""

    def __init__(self):
        self.alpha1 = 0
        self.alpha2 = 0
        self.first_done = False
        self.second_done = False
        self.hold_started = None
        self.finished = False

    def tick(self, now):
        """Advance one frame at time ``now``; return True once the hold is over."""
        if not self.first_done:
            if self.alpha1 == MAX_ALPHA:
                self.first_done = True
            else:
                self.alpha1 += 1
            return self.finished
        if not self.second_done:
            if self.alpha2 == MAX_ALPHA:
                self.second_done = True
            else:
                self.alpha2 += 1
        if self.second_done:
            if self.hold_started is None:
                self.hold_started = now
            elif now - self.hold_started >= HOLD_SECONDS:
                self.finished = True
        return self.finished


def draw_intro(surface, state, font1, font2, alpha1, alpha2):
    """Draw both credit lines on black; return the rectangles they cover."""
    surface.fill(BLACK)
    scale = state.scale
    centre_x = state.width / 2
    quarter = state.height / 4
    first = draw_text(surface, font1, CREDITS, (255, 255, 255, alpha1), centre_x, quarter + 50 * scale, CENTRE)
    second = draw_text(surface, font2, PRESENTS, (255, 255, 255, alpha2), centre_x, quarter + 150 * scale, CENTRE)
    return first, second


def run_intro(state, screen, clock):
    """Play the credits; return the next scene."""
    font1 = load_font(FONT_CARTOON, 90 * state.scale)
    font2 = load_font(FONT_CARTOON, 70 * state.scale)
    fade = FadeIn()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return Scene.QUIT
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return Scene.TITLE
        if fade.tick(time.monotonic()):
            return Scene.TITLE
        draw_intro(screen, state, font1, font2, fade.alpha1, fade.alpha2)
        pygame.display.flip()
        clock.tick(FPS)