"""Shared game state, constants and small drawing helpers."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from typing import Optional, Sequence

import pygame

USER_MAX = 18
FPS = 90
BASE_WIDTH = 1280
BASE_HEIGHT = 720
TOTAL_RECTS = 16
WINDOW_TITLE = "Truco"

FONT_RETRO = "fonts/retro.ttf"
FONT_CARTOON = "fonts/cartoon.ttf"

LEFT = "left"
CENTRE = "centre"
RIGHT = "right"

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 229, 32)


def compute_scale(width, height):
    """Return the factor that fits the 1280x720 design into ``width`` x ``height``."""
    return min(width / BASE_WIDTH, height / BASE_HEIGHT)


@dataclass
class Character:
    """A player: a display name and an optional portrait image."""

    name: str = ""
    portrait: Optional[pygame.Surface] = None


class Scene(enum.Enum):
    """The screens the game moves between."""

    INTRO = "intro"
    TITLE = "title"
    NAME_ENTRY = "name_entry"
    CHARACTER_CHOICE = "character_choice"
    OPPONENT_CHOICE = "opponent_choice"
    MAIN_GAME = "main_game"
    NEW_RESOLUTION = "new_resolution"
    QUIT = "quit"


@dataclass
class GameState:
    """Everything the scenes share while the game runs."""

    width: int = BASE_WIDTH
    height: int = BASE_HEIGHT
    fullscreen: bool = False
    resolution_index: int = 0
    volume: int = 5
    background: Optional[pygame.Surface] = None
    user: Character = field(default_factory=Character)
    opponent: Character = field(default_factory=Character)
    go_to_menu: bool = False
    exit_game: bool = False

    @property
    def scale(self) -> float:
        return compute_scale(self.width, self.height)

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)


def load_font(path, size):
    """Load a TrueType font, falling back to pygame's default font if the file is absent."""
    if not pygame.font.get_init():
        pygame.font.init()
    size = max(1, int(size))
    if path and os.path.exists(path):
        return pygame.font.Font(path, size)
    return pygame.font.Font(None, size)


def draw_text(surface, font, text, color, x, y, align=LEFT):
    """Draw ``text`` with its top edge at ``y``; ``x`` is the left, centre or right edge."""
    color = tuple(color)
    rendered = font.render(text, True, color[:3])
    if len(color) > 3 and color[3] < 255:
        rendered.set_alpha(color[3])
    width = rendered.get_width()
    x = int(x)
    if align == CENTRE:
        left = x - width // 2
    elif align == RIGHT:
        left = x - width
    elif align == LEFT:
        left = x
    else:
        raise ValueError(f"unknown alignment: {align!r}")
    return surface.blit(rendered, (left, int(y)))


class FontLadder:
    """A row of fonts of growing size that a hovered label climbs and a released one descends."""

    def __init__(self, fonts: Sequence, top: Optional[float] = None):
        if not fonts:
            raise ValueError("a font ladder needs at least one font")
        self._fonts = list(fonts)
        last = len(self._fonts) - 1
        self.top = last if top is None else min(top, last)
        self.index = 0

    @classmethod
    def load(cls, path, base_size, count, top=None):
        """Load ``count`` fonts of sizes ``base_size``, ``base_size + 1``, ..."""
        base = int(base_size)
        fonts = [load_font(path, base + step) for step in range(max(1, int(count)))]
        return cls(fonts, top)

    def step(self, active):
        """Grow one size while active and below the top, shrink one size otherwise."""
        if active and self.index < self.top:
            self.index += 1
        elif not active and self.index > 0:
            self.index -= 1
        return self.current()

    def current(self):
        return self._fonts[self.index]

    def __len__(self):
        return len(self._fonts)