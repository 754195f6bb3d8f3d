"""Small frame-by-frame animations used by the menus."""

from __future__ import annotations

import pygame

from trucogame.config import BLACK, TOTAL_RECTS

COLOR_STEP = 15
SHAKE_INTERVAL = 0.05
SHAKE_MOVES = 6
BOUNCE_INTERVAL = 0.85
TRANSITION_PAUSE = 2.0


class ColorErrorAnimation:
    """Flashes the name box from white/black to red and back."""

    def __init__(self):
        self.up_red = True
        self.initiated = False
        self.running = False
        self.white_to_red = 255
        self.black_to_red = 0

    def start(self):
        self.running = True

    def step(self):
        """Advance one frame; clears ``running`` when the colours are back to normal."""
        if not self.initiated:
            self._towards_red()
            self.initiated = True
        elif self.up_red:
            if self.white_to_red == 0 and self.black_to_red == 255:
                self.up_red = False
                self._towards_normal()
            else:
                self._towards_red()
        elif self.white_to_red == 255 and self.black_to_red == 0:
            self.up_red = True
            self.running = False
        else:
            self._towards_normal()

    def _towards_red(self):
        self.white_to_red -= COLOR_STEP
        self.black_to_red += COLOR_STEP

    def _towards_normal(self):
        self.white_to_red += COLOR_STEP
        self.black_to_red -= COLOR_STEP


class ShakeAnimation:
    """Shakes a widget sideways; ``offset`` is the horizontal shift to apply."""

    def __init__(self, scale):
        self.distance = int(4 * scale)
        self.offset = 0
        self.last_move = 0.0
        self.initiated = False
        self.moved_right = True
        self.moves = 0
        self.running = False

    def start(self):
        self.running = True

    def step(self, now):
        """Advance at time ``now`` and return the current offset."""
        if self.moves == SHAKE_MOVES:
            self.moves = 0
            self.running = False
            self.initiated = False
        if not self.initiated:
            self.offset += self.distance
            self.moved_right = False
            self.initiated = True
            self._moved(now)
        elif now - self.last_move >= SHAKE_INTERVAL:
            if self.moved_right:
                self.moved_right = False
                self.offset += self.distance
            else:
                self.moved_right = True
                self.offset -= self.distance
            self._moved(now)
        return self.offset

    def _moved(self, now):
        self.last_move = now
        self.moves += 1


class QuestionMarkBounce:
    """Moves the question mark of the name prompt up and down slowly."""

    def __init__(self, y):
        self.y = y
        self.times_done = 0
        self.last_move = 0.0
        self.started = False

    def step(self, now):
        """Advance at time ``now`` and return the current vertical position."""
        if not self.started:
            self.started = True
            self.last_move = now
            self.times_done += 1
            self.y += 4
            return self.y
        if now - self.last_move >= BOUNCE_INTERVAL:
            if self.times_done < 3:
                self.times_done += 1
                self.y += 5
            else:
                self.times_done -= 1
                self.y -= 5
            self.last_move = now
        return self.y


def load_rects(height, scale):
    """Return the starting tops and bottoms of the transition's curtain strips."""
    tops = [int(height + 50 * i * scale) for i in range(TOTAL_RECTS)]
    bottoms = [int(height * 2 + 50 * i * scale) for i in range(TOTAL_RECTS)]
    return tops, bottoms


class Transition:
    """Black strips rise over the screen, hold, then fall away to reveal the snapshot."""

    def __init__(self, width, height, scale):
        self.width = width
        self.height = height
        self.speed = int(25 * scale)
        self.strip_width = width // TOTAL_RECTS
        self.tops, self.bottoms = load_rects(height, scale)
        self.covered = False
        self.paused = False
        self.paused_at = 0.0
        self.released = 0
        self.parity = 0
        self.ready = False
        self.show_snapshot = False

    def step(self, now):
        """Advance at time ``now``; return True when the strips moved or the view changed."""
        changed = False
        if not self.covered:
            if self.tops[-1] == 0:
                self.covered = True
                self.paused = True
                self.paused_at = now
                self.show_snapshot = True
            else:
                for i, top in enumerate(self.tops):
                    self._shift(i, -(self.speed if top - self.speed >= 0 else top))
            changed = True
        if self.paused and now - self.paused_at >= TRANSITION_PAUSE:
            self.paused = False
        if self.covered and not self.ready and not self.paused:
            if self.tops[-1] == self.height:
                self.ready = True
            else:
                for i in range(min(self.released + 1, TOTAL_RECTS)):
                    top = self.tops[i]
                    fits = top + self.speed <= self.height
                    self._shift(i, self.speed if fits else self.height - top)
                    self.parity ^= 1
                if self.released < TOTAL_RECTS - 1 and self.parity == 0:
                    self.released += 1
                changed = True
        return changed

    def _shift(self, i, amount):
        self.tops[i] += amount
        self.bottoms[i] += amount

    def draw(self, surface, snapshot):
        """Draw the strips, over ``snapshot`` once the screen has been covered."""
        if self.show_snapshot and snapshot is not None:
            surface.blit(snapshot, (0, 0))
        for i, (top, bottom) in enumerate(zip(self.tops, self.bottoms)):
            rect = pygame.Rect(i * self.strip_width, top, self.strip_width, bottom - top)
            pygame.draw.rect(surface, BLACK, rect)