"""The screen where the player picks a portrait."""

from __future__ import annotations

import os
import time

import pygame

from trucogame.animations import Transition
from trucogame.config import (
    BLACK,
    CENTRE,
    FONT_CARTOON,
    FPS,
    WHITE,
    YELLOW,
    Scene,
    draw_text,
    load_font,
)
from trucogame.paused import run_pause

PORTRAIT_1 = "images/chars/1.jpeg"
PORTRAIT_2 = "images/chars/2.jpeg"
PROMPT = "Escolha o seu personagem"
ESCAPE_COOLDOWN = 0.3


def portrait_boxes(width, height, scale):
    """Return the four portrait boxes as ``(left, top, right, bottom)``, in slot order."""
    half_w = width // 2
    half_h = height // 2
    x1 = int(half_w - 100 * scale - 200 * scale)
    x2 = int(x1 + 200 * scale)
    x3 = int(half_w + 100 * scale)
    x4 = int(x3 + 200 * scale)
    y1 = int(half_h + 50 * scale - 200 * scale)
    y2 = int(y1 + 200 * scale)
    y3 = int(half_h + 100 * scale)
    y4 = int(y3 + 200 * scale)
    return (
        (x1, y1, x2, y2),
        (x3, y1, x4, y2),
        (x1, y3, x2, y4),
        (x3, y3, x4, y4),
    )


def portrait_at(x, y, width, height, scale):
    """Return the slot number (1 to 4) of the box covering ``(x, y)``, or None."""
    for slot, (left, top, right, bottom) in enumerate(portrait_boxes(width, height, scale), start=1):
        if left <= x <= right and top <= y <= bottom:
            return slot
    return None


def _blit_background(surface, state):
    surface.fill(BLACK)
    background = state.background
    if background is None:
        return
    if background.get_size() != state.size:
        background = pygame.transform.scale(background, state.size)
    surface.blit(background, (0, 0))


def draw_character_choice(surface, state, font, images, chosen):
    """Draw the prompt and the portraits, outlining slot ``chosen`` if any."""
    _blit_background(surface, state)
    scale = state.scale
    draw_text(surface, font, PROMPT, YELLOW, state.width // 2, state.height // 2 - 300 * scale, CENTRE)
    boxes = portrait_boxes(state.width, state.height, scale)
    for image, (left, top, right, bottom) in zip(images, boxes):
        if image is None:
            continue
        scaled = pygame.transform.scale(image, (right - left, bottom - top))
        surface.blit(scaled, (left, top))
    if chosen:
        left, top, right, bottom = boxes[chosen - 1]
        thickness = max(1, int(3 * scale))
        pygame.draw.rect(surface, WHITE, pygame.Rect(left, top, right - left, bottom - top), thickness)


def _load_image(path):
    if not os.path.exists(path):
        return None
    try:
        return pygame.image.load(path)
    except pygame.error:
        return None


def _leave(state, scene):
    if scene is Scene.INTRO:
        state.go_to_menu = False
    if scene in (Scene.INTRO, Scene.NEW_RESOLUTION) and pygame.mixer.get_init():
        pygame.mixer.music.stop()
    return scene


def run_character_choice(state, screen, clock):
    """Let the player pick a portrait; return the next scene."""
    scale = state.scale
    first = _load_image(PORTRAIT_1)
    second = _load_image(PORTRAIT_2)
    slots = (first, second, first, first)
    font = load_font(FONT_CARTOON, 70 * scale)
    chosen = None

    snapshot = pygame.Surface(state.size)
    draw_character_choice(snapshot, state, font, slots, chosen)
    transition = Transition(state.width, state.height, scale)
    last_escape = 0.0

    while True:
        now = time.monotonic()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return Scene.QUIT
            if not transition.ready:
                continue
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                slot = portrait_at(*event.pos, state.width, state.height, scale)
                if slot is not None:
                    chosen = slot
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER) and chosen:
                    state.user.portrait = slots[chosen - 1]
                    return Scene.OPPONENT_CHOICE
                if event.key == pygame.K_ESCAPE and now - last_escape >= ESCAPE_COOLDOWN:
                    snapshot = pygame.Surface(state.size)
                    draw_character_choice(snapshot, state, font, slots, chosen)
                    result = run_pause(state, screen, clock, snapshot, False)
                    last_escape = time.monotonic()
                    if result is not None:
                        return _leave(state, result)
                    pygame.event.clear()
                    break

        if transition.ready:
            draw_character_choice(screen, state, font, slots, chosen)
        else:
            transition.step(now)
            transition.draw(screen, snapshot)
        pygame.display.flip()
        clock.tick(FPS)