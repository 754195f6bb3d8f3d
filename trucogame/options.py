"""The options menu opened from the pause screen."""

from __future__ import annotations

import time

import pygame

from trucogame.config import (
    CENTRE,
    FONT_RETRO,
    FPS,
    LEFT,
    WHITE,
    FontLadder,
    draw_text,
    load_font,
)
from trucogame.optionsstate import MAX_VOLUME, OptionsFocus, OptionsOutcome, OptionsState
from trucogame.resolution import WIDEST_LABEL

ESCAPE_COOLDOWN = 0.3
OVERLAY_ALPHA = 180
APPLY_TEXT = "Apply Resolution"
RETURN_TEXT = "Return"

_HIT_ORDER = (
    "return",
    "fullscreen_left",
    "fullscreen_right",
    "resolution_left",
    "resolution_right",
    "volume_left",
    "volume_right",
    "apply",
)

_ROWS = ("fullscreen", "resolution", "volume")

_FOCUS_CONTROLS = {
    OptionsFocus.NONE: (),
    OptionsFocus.FULLSCREEN: (
        "fullscreen_label", "fullscreen_left", "fullscreen_right", "fullscreen_value",
    ),
    OptionsFocus.RESOLUTION: (
        "resolution_label", "resolution_left", "resolution_right", "resolution_value",
    ),
    OptionsFocus.VOLUME: ("volume_label", "volume_left", "volume_right", "volume_value"),
    OptionsFocus.RETURN: ("return",),
    OptionsFocus.APPLY: ("apply",),
}


def _set_music_volume(volume):
    if pygame.mixer.get_init():
        pygame.mixer.music.set_volume(volume / MAX_VOLUME)


def _monitor_size():
    if not pygame.display.get_init():
        pygame.display.init()
    sizes = pygame.display.get_desktop_sizes()
    if sizes:
        return sizes[0]
    info = pygame.display.Info()
    return info.current_w, info.current_h


class OptionsLayout:
    """Where the rows and arrows of the options menu sit on the screen."""

    def __init__(self, state, font):
        def width(text):
            return font.size(text)[0]

        scale = state.scale
        distance = int(scale * 10)
        half_height = state.height // 2
        self.line = font.get_linesize()
        self.left = int(state.width // 2 - 400 * scale)
        self.centre_x = state.width // 2

        self.fullscreen_y = half_height - 2 * self.line - distance * 2
        self.resolution_y = half_height - self.line - distance // 2
        self.volume_y = half_height + distance // 2
        self.return_y = half_height + self.line + distance * 2
        self.apply_y = half_height + 200 * scale

        self.fullscreen_x = self._columns(width, "FullScreen:", "OFF")
        self.resolution_x = self._columns(width, "Resolution:", WIDEST_LABEL)
        self.volume_x = self._columns(width, "Volume:", "1.0")

        less, more = width("<"), width(">")
        self.boxes = {
            "return": (
                self.left, self.left + width(RETURN_TEXT), self.return_y, self.return_y + self.line,
            ),
        }
        for name in _ROWS:
            xs = getattr(self, f"{name}_x")
            y = getattr(self, f"{name}_y")
            self.boxes[f"{name}_left"] = (xs[1], xs[1] + less, y, y + self.line)
            self.boxes[f"{name}_right"] = (xs[3], xs[3] + more, y, y + self.line)
        apply_width = width(APPLY_TEXT)
        self.boxes["apply"] = (
            self.centre_x - apply_width // 2,
            self.centre_x + apply_width // 2,
            self.apply_y,
            self.apply_y + self.line,
        )

    def _columns(self, width, label, widest):
        """Return the x of the label, the left arrow, the centred value and the right arrow."""
        start = self.left + width(label) + 30
        value = start + width("<") + width(widest) // 2 + 10
        right = value + width(widest) // 2 + 10
        return (self.left, start, value, right)

    def item_at(self, x, y, fullscreen, changed):
        """Name the control under ``(x, y)``, or None.

        The resolution arrows are dead while fullscreen is on and the apply
        button is dead until a setting has changed.
        """
        for name in _HIT_ORDER:
            if fullscreen and name.startswith("resolution"):
                continue
            if name == "apply" and not changed:
                continue
            left, right, top, bottom = self.boxes[name]
            if left <= x <= right and top <= y <= bottom:
                return name
        return None


class OptionsMenu:
    """The interactive options screen drawn over a snapshot of the paused scene."""

    def __init__(self, state, snapshot, last_escape=0.0, monitor_size=None):
        self.state = state
        self.snapshot = snapshot
        self.last_escape = last_escape
        width, height = monitor_size if monitor_size is not None else _monitor_size()
        self.settings = OptionsState(state, width, height)

        scale = state.scale
        base = int(50 * scale)
        count = max(1, int(10 * scale))
        fonts = [load_font(FONT_RETRO, base + step) for step in range(count)]
        tops = {
            "fullscreen_label": count - 4 * scale,
            "resolution_label": count - 4 * scale,
            "resolution_value": count - 6 * scale,
            "volume_value": count - 2 * scale,
        }
        names = ["return", "apply"]
        for row in _ROWS:
            names += [f"{row}_label", f"{row}_left", f"{row}_right", f"{row}_value"]
        self._ladders = {name: FontLadder(fonts, tops.get(name)) for name in names}
        self.layout = OptionsLayout(state, fonts[0])
        self.keyboard = False
        self.mouse_pos = (0, 0)

    def handle_click(self, x, y):
        """Act on a left click; return the outcome that closes the menu, or None."""
        settings = self.settings
        target = self.layout.item_at(x, y, settings.fullscreen, settings.is_changed())
        if target == "return":
            return OptionsOutcome.RETURN
        if target == "apply":
            return settings.apply()
        if target in ("fullscreen_left", "fullscreen_right"):
            settings.toggle_fullscreen()
        elif target == "resolution_left":
            settings.previous_resolution()
        elif target == "resolution_right":
            settings.next_resolution()
        elif target == "volume_left":
            if settings.volume_down():
                _set_music_volume(settings.volume)
        elif target == "volume_right":
            if settings.volume_up():
                _set_music_volume(settings.volume)
        return None

    def _handle_key(self, key, now):
        settings = self.settings
        if key == pygame.K_ESCAPE:
            if now - self.last_escape >= ESCAPE_COOLDOWN:
                pygame.event.clear()
                return OptionsOutcome.ESCAPE
            return None
        if key in (pygame.K_UP, pygame.K_DOWN):
            self.keyboard = True
            settings.move_focus(key == pygame.K_DOWN)
            return None
        if key in (pygame.K_LEFT, pygame.K_RIGHT):
            if settings.press_horizontal(key == pygame.K_RIGHT) and settings.focus is OptionsFocus.VOLUME:
                _set_music_volume(settings.volume)
            return None
        if key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            return settings.press_enter()
        return None

    def _active_controls(self):
        if self.keyboard:
            return set(_FOCUS_CONTROLS[self.settings.focus])
        settings = self.settings
        hovered = self.layout.item_at(*self.mouse_pos, settings.fullscreen, settings.is_changed())
        return {hovered} if hovered else set()

    def _update_fonts(self):
        active = self._active_controls()
        for name, ladder in self._ladders.items():
            ladder.step(name in active)

    def draw(self, surface):
        """Draw the menu over the snapshot."""
        if self.snapshot is not None:
            surface.blit(self.snapshot, (0, 0))
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, OVERLAY_ALPHA))
        surface.blit(overlay, (0, 0))

        settings = self.settings
        layout = self.layout
        fonts = {name: ladder.current() for name, ladder in self._ladders.items()}
        shade = settings.shade
        rows = (
            ("fullscreen", "FullScreen:", settings.fullscreen_label(), WHITE),
            ("resolution", "Resolution:", settings.resolution_label(), (shade, shade, shade)),
            ("volume", "Volume:", settings.volume_label(), WHITE),
        )
        for name, label, value, color in rows:
            xs = getattr(layout, f"{name}_x")
            y = getattr(layout, f"{name}_y")
            draw_text(surface, fonts[f"{name}_label"], label, color, xs[0], y, LEFT)
            draw_text(surface, fonts[f"{name}_left"], "<", color, xs[1], y, LEFT)
            draw_text(surface, fonts[f"{name}_value"], value, color, xs[2], y, CENTRE)
            draw_text(surface, fonts[f"{name}_right"], ">", color, xs[3], y, LEFT)

        draw_text(surface, fonts["return"], RETURN_TEXT, WHITE, layout.left, layout.return_y, LEFT)
        apply_shade = settings.apply_shade
        draw_text(
            surface, fonts["apply"], APPLY_TEXT, (apply_shade, apply_shade, apply_shade),
            layout.centre_x, layout.apply_y, CENTRE,
        )

    def run(self, screen, clock):
        """Run until the menu is left; return the OptionsOutcome."""
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return OptionsOutcome.QUIT
                outcome = None
                if event.type == pygame.MOUSEMOTION:
                    self.keyboard = False
                    self.mouse_pos = event.pos
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.mouse_pos = event.pos
                    outcome = self.handle_click(*event.pos)
                elif event.type == pygame.KEYDOWN:
                    outcome = self._handle_key(event.key, time.monotonic())
                if outcome is not None:
                    return outcome
            self._update_fonts()
            self.draw(screen)
            pygame.display.flip()
            clock.tick(FPS)