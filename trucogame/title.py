"""The title screen: the background drops into place, then "Press to play" blinks."""

from __future__ import annotations

import os
import time

import pygame

from trucogame.config import (
    CENTRE,
    FONT_CARTOON,
    FONT_RETRO,
    FPS,
    YELLOW,
    Scene,
    draw_text,
    load_font,
)
from trucogame.optionsstate import MAX_VOLUME

BACKGROUND_IMAGE = "images/background.png"
THEME_MUSIC = "sounds/menuTheme.wav"
START_SOUND = "sounds/gameStart.wav"
TITLE_TEXT = "Truco"
PRESS_TEXT = "Press to play"
BLINK_STEP = 3
MAX_ALPHA = 255
START_DELAY = 1.5


class TitleAnimation:
    """Positions and opacity of the title screen as it drops in and blinks."""

    def __init__(self, height, scale):
        self.distance = height * 2
        self.background_y = -self.distance
        self.title_y = height // 4 - self.distance
        self.press_y = int(height // 2 + 100 * scale) - self.distance
        self.travelled = 0
        self.speed = 1
        self.ready = False
        self.alpha = MAX_ALPHA
        self.rising = False

    def drop(self):
        """Move everything down one accelerating step; return True once it has landed."""
        if self.ready:
            return True
        step = min(self.speed, self.distance - self.travelled)
        self.background_y += step
        self.title_y += step
        self.press_y += step
        self.travelled += step
        self.speed += 1
        if self.travelled == self.distance:
            self.ready = True
        return self.ready

    def blink(self):
        """Fade the prompt one step towards the other end of its range; return the opacity."""
        if self.rising:
            self.alpha += BLINK_STEP
            if self.alpha == MAX_ALPHA:
                self.rising = False
            return self.alpha
        self.alpha -= BLINK_STEP
        if self.alpha == 0:
            self.rising = True
        return self.alpha


def draw_title(surface, state, background_y, title_y, press_y, alpha, font1, font2):
    """Draw the title screen; return the rectangles of the title and the prompt."""
    surface.fill((0, 0, 0))
    background = state.background
    if background is not None:
        if background.get_size() != state.size:
            background = pygame.transform.scale(background, state.size)
        surface.blit(background, (0, int(background_y)))
    centre_x = state.width // 2
    title = draw_text(surface, font1, TITLE_TEXT, YELLOW, centre_x, title_y, CENTRE)
    prompt = draw_text(surface, font2, PRESS_TEXT, (255, 255, 255, alpha), centre_x, press_y, CENTRE)
    return title, prompt


def _load_background(state):
    if not os.path.exists(BACKGROUND_IMAGE):
        return None
    try:
        image = pygame.image.load(BACKGROUND_IMAGE)
    except pygame.error:
        return None
    return pygame.transform.scale(image, state.size)


def _load_sound(path):
    if not pygame.mixer.get_init() or not os.path.exists(path):
        return None
    try:
        return pygame.mixer.Sound(path)
    except pygame.error:
        return None


def _start_music(volume):
    if not pygame.mixer.get_init() or not os.path.exists(THEME_MUSIC):
        return
    try:
        pygame.mixer.music.load(THEME_MUSIC)
    except pygame.error:
        return
    pygame.mixer.music.set_volume(volume / MAX_VOLUME)
    pygame.mixer.music.play()


def _stop_music():
    if pygame.mixer.get_init():
        pygame.mixer.music.stop()


def run_title(state, screen, clock):
    """Play the title screen until a key or click starts the game; return the next scene."""
    state.background = _load_background(state)
    _start_music(state.volume)
    click = _load_sound(START_SOUND)
    font1 = load_font(FONT_CARTOON, 150 * state.scale)
    font2 = load_font(FONT_RETRO, 40 * state.scale)
    animation = TitleAnimation(state.height, state.scale)
    started_at = None

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                _stop_music()
                return Scene.QUIT
            if (
                event.type in (pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN)
                and animation.ready
                and started_at is None
            ):
                if click is not None:
                    click.play()
                animation.alpha = MAX_ALPHA
                started_at = time.monotonic()
        if not animation.ready:
            animation.drop()
        elif started_at is None:
            animation.blink()
        elif time.monotonic() - started_at >= START_DELAY:
            return Scene.NAME_ENTRY
        draw_title(
            screen, state, animation.background_y, animation.title_y,
            animation.press_y, animation.alpha, font1, font2,
        )
        pygame.display.flip()
        clock.tick(FPS)