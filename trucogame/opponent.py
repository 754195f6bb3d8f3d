"""The screen that introduces the opponent before the match starts."""

from __future__ import annotations

import os
import time

import pygame

from trucogame.animations import Transition
from trucogame.config import BLACK, FPS, Character, Scene
from trucogame.paused import run_pause

OPPONENT_NAME = "Matheus"
OPPONENT_PORTRAIT = "images/chars/2.jpeg"
ESCAPE_COOLDOWN = 0.3


def _load_image(path):
    if not os.path.exists(path):
        return None
    try:
        return pygame.image.load(path)
    except pygame.error:
        return None


def default_opponent():
    """Return the computer opponent, with its portrait if the image is available."""
    return Character(OPPONENT_NAME, _load_image(OPPONENT_PORTRAIT))


def draw_opponent_screen(surface, state):
    """Draw the opponent screen: the background stretched over the whole surface."""
    surface.fill(BLACK)
    background = state.background
    if background is None:
        return
    if background.get_size() != state.size:
        background = pygame.transform.scale(background, state.size)
    surface.blit(background, (0, 0))


def _leave(state, scene):
    if scene is Scene.INTRO:
        state.go_to_menu = False
    if scene in (Scene.INTRO, Scene.NEW_RESOLUTION) and pygame.mixer.get_init():
        pygame.mixer.music.stop()
    return scene


def run_opponent_choice(state, screen, clock):
    """Show the opponent; Enter starts the match. Return the next scene."""
    state.opponent = default_opponent()
    snapshot = pygame.Surface(state.size)
    draw_opponent_screen(snapshot, state)
    transition = Transition(state.width, state.height, state.scale)
    last_escape = 0.0

    while True:
        now = time.monotonic()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return Scene.QUIT
            if event.type != pygame.KEYDOWN or not transition.ready:
                continue
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                return Scene.MAIN_GAME
            if event.key == pygame.K_ESCAPE and now - last_escape >= ESCAPE_COOLDOWN:
                snapshot = pygame.Surface(state.size)
                draw_opponent_screen(snapshot, state)
                result = run_pause(state, screen, clock, snapshot, False)
                last_escape = time.monotonic()
                if result is not None:
                    return _leave(state, result)
                pygame.event.clear()
                break

        if transition.ready:
            draw_opponent_screen(screen, state)
        else:
            transition.step(now)
            transition.draw(screen, snapshot)
        pygame.display.flip()
        clock.tick(FPS)