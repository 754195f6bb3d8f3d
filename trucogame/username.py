"""The screen where the player types a name."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass

import pygame

from trucogame.animations import (
    ColorErrorAnimation,
    QuestionMarkBounce,
    ShakeAnimation,
    Transition,
)
from trucogame.config import (
    BLACK,
    CENTRE,
    FONT_CARTOON,
    FONT_RETRO,
    FPS,
    USER_MAX,
    YELLOW,
    Scene,
    draw_text,
    load_font,
)
from trucogame.names import verify_name
from trucogame.paused import run_pause

ERROR_SOUND = "sounds/error.wav"
ERROR_COOLDOWN = 0.15
ESCAPE_COOLDOWN = 0.3
QUESTION = "Qual o seu Nome"
BOX_ALPHA = 100


class NameEntry:
    """The name being typed: letters and single inner spaces, up to ``max_length``."""

    def __init__(self, name="", max_length=USER_MAX):
        self.name = name
        self.max_length = max_length

    def type_char(self, char):
        """Append ``char`` if it is an ASCII letter or a non-leading space; return True if taken."""
        if len(char) != 1 or len(self.name) >= self.max_length:
            return False
        if not ("A" <= char <= "Z" or "a" <= char <= "z" or char == " "):
            return False
        if char == " " and not self.name:
            return False
        self.name += char
        return True

    def backspace(self):
        """Remove the last character; return False if there was nothing to remove."""
        if not self.name:
            return False
        self.name = self.name[:-1]
        return True

    def submit(self):
        """Tidy the name and return whether it is acceptable."""
        self.name, valid = verify_name(self.name)
        return valid


@dataclass(frozen=True)
class _NameBox:
    left: int
    right: int
    top: int
    bottom: int
    centre_x: float
    text_y: float
    question_y: int

    @classmethod
    def for_state(cls, state, font):
        scale = state.scale
        half_w = state.width // 2
        half_h = state.height // 2
        left = int(half_w - 250 * scale)
        right = int(half_w + 250 * scale)
        top = int(half_h - 30 * scale)
        bottom = int(half_h + 30 * scale)
        centre_y = (top + bottom) // 2
        return cls(
            left=left,
            right=right,
            top=top,
            bottom=bottom,
            centre_x=float((left + right) // 2),
            text_y=centre_y - font.get_linesize() / 2,
            question_y=int(half_h - 200 * scale),
        )


def _blit_background(surface, state):
    surface.fill(BLACK)
    background = state.background
    if background is None:
        return
    if background.get_size() != state.size:
        background = pygame.transform.scale(background, state.size)
    surface.blit(background, (0, 0))


def _draw_name_screen(surface, state, box, name, offset, mark_y, white_to_red, black_to_red, font1, font2):
    _blit_background(surface, state)
    centre = state.width / 2
    draw_text(surface, font1, QUESTION, YELLOW, centre, box.question_y, CENTRE)
    draw_text(surface, font1, "?", YELLOW, centre + 325 * state.scale, mark_y, CENTRE)

    rect = pygame.Rect(box.left + offset, box.top, box.right - box.left, box.bottom - box.top)
    fill = pygame.Surface(rect.size, pygame.SRCALPHA)
    fill.fill((black_to_red, 0, 0, BOX_ALPHA))
    surface.blit(fill, rect.topleft)
    text_color = (255, white_to_red, white_to_red)
    pygame.draw.rect(surface, text_color, rect, 2)
    if name:
        draw_text(surface, font2, name, text_color, box.centre_x + offset, box.text_y, CENTRE)


def _load_sound(path):
    if not pygame.mixer.get_init() or not os.path.exists(path):
        return None
    try:
        return pygame.mixer.Sound(path)
    except pygame.error:
        return None


def _leave(state, scene):
    if scene is Scene.INTRO:
        state.go_to_menu = False
    if scene in (Scene.INTRO, Scene.NEW_RESOLUTION) and pygame.mixer.get_init():
        pygame.mixer.music.stop()
    return scene


def run_name_entry(state, screen, clock):
    """Ask for the player's name; return the next scene."""
    scale = state.scale
    error_sound = _load_sound(ERROR_SOUND)
    font1 = load_font(FONT_CARTOON, 70 * scale)
    font2 = load_font(FONT_RETRO, 45 * scale)
    box = _NameBox.for_state(state, font2)

    entry = NameEntry()
    state.user.name = ""
    shake = ShakeAnimation(scale)
    colors = ColorErrorAnimation()
    bounce = QuestionMarkBounce(box.question_y)
    transition = Transition(state.width, state.height, scale)

    def render(surface):
        _draw_name_screen(
            surface, state, box, entry.name, shake.offset, bounce.y,
            colors.white_to_red, colors.black_to_red, font1, font2,
        )

    snapshot = pygame.Surface(state.size)
    render(snapshot)
    last_error = None
    last_escape = 0.0

    while True:
        now = time.monotonic()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return Scene.QUIT
            if event.type != pygame.KEYDOWN or not transition.ready:
                continue
            if event.key == pygame.K_BACKSPACE:
                entry.backspace()
            elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                if entry.submit():
                    state.user.name = entry.name
                    return Scene.CHARACTER_CHOICE
                if last_error is None or now - last_error >= ERROR_COOLDOWN:
                    if error_sound is not None:
                        error_sound.play()
                    shake.start()
                    colors.start()
                    last_error = now
            elif entry.type_char(event.unicode):
                pass
            elif event.key == pygame.K_ESCAPE and now - last_escape >= ESCAPE_COOLDOWN:
                snapshot = pygame.Surface(state.size)
                render(snapshot)
                result = run_pause(state, screen, clock, snapshot, False)
                last_escape = time.monotonic()
                if result is not None:
                    return _leave(state, result)
                pygame.event.clear()
                break

        if transition.ready:
            if shake.running:
                shake.step(now)
            if colors.running:
                colors.step()
            bounce.step(now)
            render(screen)
        else:
            transition.step(now)
            transition.draw(screen, snapshot)
        pygame.display.flip()
        clock.tick(FPS)