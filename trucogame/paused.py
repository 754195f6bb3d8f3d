"""The pause menu shown over a frozen snapshot of the current scene."""

from __future__ import annotations

import enum
import time

import pygame

from trucogame.config import (
    FONT_RETRO,
    FPS,
    LEFT,
    WHITE,
    FontLadder,
    Scene,
    draw_text,
    load_font,
)
from trucogame.options import OptionsMenu
from trucogame.optionsstate import OptionsOutcome

ESCAPE_COOLDOWN = 0.3
OVERLAY_ALPHA = 180


class PauseItem(enum.Enum):
    """The entries of the pause menu, by their label."""

    RESUME = "Resume"
    RESTART = "Restart"
    OPTIONS = "Options"
    MENU = "Back to main menu"
    EXIT = "Exit"

    @property
    def label(self) -> str:
        return self.value


_PLAIN_ITEMS = (PauseItem.RESUME, PauseItem.OPTIONS, PauseItem.MENU, PauseItem.EXIT)
_RESTART_ITEMS = (
    PauseItem.RESUME,
    PauseItem.RESTART,
    PauseItem.OPTIONS,
    PauseItem.MENU,
    PauseItem.EXIT,
)


class PauseMenu:
    """The interactive pause screen.

    ``run`` returns None to resume the scene, or the Scene to go to instead.
    """

    def __init__(self, state, snapshot, restart=False, last_escape=0.0):
        self.state = state
        self.snapshot = snapshot
        self.restart = bool(restart)
        self.last_escape = last_escape
        self.items = _RESTART_ITEMS if self.restart else _PLAIN_ITEMS
        self.focus = None
        self.keyboard = False
        self.mouse_pos = (0, 0)
        self.result = None

        scale = state.scale
        base = int(50 * scale)
        count = max(1, int(10 * scale))
        fonts = [load_font(FONT_RETRO, base + step) for step in range(count)]
        self._ladders = {item: FontLadder(fonts) for item in self.items}

        base_font = fonts[0]
        self.line = base_font.get_linesize()
        self._widths = {item: base_font.size(item.label)[0] for item in self.items}
        self.left = int(state.width // 2 - 400 * scale)
        self.rows = {item: (self.left, y) for item, y in self._row_tops(scale).items()}

    def _row_tops(self, scale):
        distance = int(scale * 10)
        half = self.state.height // 2
        line = self.line
        if self.restart:
            return {
                PauseItem.RESUME: half - 2.5 * line - distance * 2,
                PauseItem.RESTART: half - 1.5 * line - distance,
                PauseItem.OPTIONS: half - 0.5 * line,
                PauseItem.MENU: half + 0.5 * line + distance,
                PauseItem.EXIT: half + 1.5 * line + distance * 2,
            }
        return {
            PauseItem.RESUME: half - 2.0 * line - distance * 2,
            PauseItem.OPTIONS: half - 1.0 * line - distance // 2,
            PauseItem.MENU: half + distance // 2,
            PauseItem.EXIT: half + 1.0 * line + distance * 2,
        }

    def move_up(self):
        """Move the keyboard focus up one entry; the first press lands on Resume."""
        if self.focus is None:
            self.focus = self.items[0]
        else:
            position = self.items.index(self.focus)
            self.focus = self.items[max(0, position - 1)]
        return self.focus

    def move_down(self):
        """Move the keyboard focus down one entry; the first press lands on Resume."""
        if self.focus is None:
            self.focus = self.items[0]
        else:
            position = self.items.index(self.focus)
            self.focus = self.items[min(len(self.items) - 1, position + 1)]
        return self.focus

    def item_at(self, x, y):
        """Return the entry whose label covers ``(x, y)``, or None."""
        for item in self.items:
            left, top = self.rows[item]
            if left <= x <= left + self._widths[item] and top <= y <= top + self.line:
                return item
        return None

    def draw(self, surface):
        """Draw the menu over the snapshot; return the rectangles of the labels."""
        if self.snapshot is not None:
            surface.blit(self.snapshot, (0, 0))
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, OVERLAY_ALPHA))
        surface.blit(overlay, (0, 0))
        rects = {}
        for item in self.items:
            left, top = self.rows[item]
            font = self._ladders[item].current()
            rects[item] = draw_text(surface, font, item.label, WHITE, left, top, LEFT)
        return rects

    def _update_fonts(self):
        if not self.keyboard:
            self.focus = self.item_at(*self.mouse_pos)
        for item, ladder in self._ladders.items():
            ladder.step(item is self.focus)

    def _choose(self, item, now, screen, clock):
        """Act on an entry; return True when the pause menu should close."""
        if item is PauseItem.RESUME:
            if now - self.last_escape >= ESCAPE_COOLDOWN:
                self.result = None
                return True
            return False
        if item is PauseItem.OPTIONS:
            outcome = OptionsMenu(self.state, self.snapshot, self.last_escape).run(screen, clock)
            if outcome is OptionsOutcome.RETURN:
                return False
            if outcome is OptionsOutcome.APPLY:
                self.result = Scene.NEW_RESOLUTION
            elif outcome is OptionsOutcome.QUIT:
                self.result = Scene.QUIT
            else:
                self.result = None
            return True
        if item is PauseItem.MENU:
            self.state.go_to_menu = True
            self.result = Scene.INTRO
            return True
        if item is PauseItem.EXIT:
            self.state.exit_game = True
            self.result = Scene.QUIT
            return True
        return False

    def _handle_event(self, event, screen, clock):
        """Return True when the event closes the menu."""
        now = time.monotonic()
        if event.type == pygame.QUIT:
            self.result = Scene.QUIT
            return True
        if event.type == pygame.MOUSEMOTION:
            self.keyboard = False
            self.mouse_pos = event.pos
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and not self.keyboard:
            self.mouse_pos = event.pos
            item = self.item_at(*event.pos)
            return item is not None and self._choose(item, now, screen, clock)
        if event.type != pygame.KEYDOWN:
            return False
        if event.key == pygame.K_ESCAPE:
            if now - self.last_escape >= ESCAPE_COOLDOWN:
                self.result = None
                return True
            return False
        if event.key == pygame.K_UP:
            self.keyboard = True
            self.move_up()
        elif event.key == pygame.K_DOWN:
            self.keyboard = True
            self.move_down()
        elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            if self.keyboard and self.focus is not None:
                return self._choose(self.focus, now, screen, clock)
        return False

    def run(self, screen, clock):
        """Run until the menu is left; return None to resume, or the next Scene."""
        while True:
            for event in pygame.event.get():
                if self._handle_event(event, screen, clock):
                    self.last_escape = time.monotonic()
                    pygame.event.clear()
                    return self.result
            self._update_fonts()
            self.draw(screen)
            pygame.display.flip()
            clock.tick(FPS)


def run_pause(state, screen, clock, snapshot, restart):
    """Pause the current scene; return None to resume it, or the Scene to go to."""
    menu = PauseMenu(state, snapshot, restart, last_escape=time.monotonic())
    return menu.run(screen, clock)