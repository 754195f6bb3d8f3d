"""The settings behind the options menu: fullscreen, window size, volume and keyboard focus."""

from __future__ import annotations

import enum

from trucogame.resolution import Resolution, available_resolutions

MAX_VOLUME = 10
VOLUME_LABELS = ("0.0", "0.1", "0.2", "0.3", "0.4", "0.5", "0.6", "0.7", "0.8", "0.9", "1.0")
ACTIVE_SHADE = 255
INACTIVE_SHADE = 100


class OptionsFocus(enum.Enum):
    """The row of the options menu that the keyboard is on."""

    NONE = "none"
    FULLSCREEN = "fullscreen"
    RESOLUTION = "resolution"
    VOLUME = "volume"
    RETURN = "return"
    APPLY = "apply"


_FOCUS_UP = {
    OptionsFocus.FULLSCREEN: OptionsFocus.FULLSCREEN,
    OptionsFocus.RESOLUTION: OptionsFocus.FULLSCREEN,
    OptionsFocus.VOLUME: OptionsFocus.RESOLUTION,
    OptionsFocus.RETURN: OptionsFocus.VOLUME,
    OptionsFocus.APPLY: OptionsFocus.RETURN,
}

_FOCUS_DOWN = {
    OptionsFocus.FULLSCREEN: OptionsFocus.RESOLUTION,
    OptionsFocus.RESOLUTION: OptionsFocus.VOLUME,
    OptionsFocus.VOLUME: OptionsFocus.RETURN,
    OptionsFocus.RETURN: OptionsFocus.APPLY,
    OptionsFocus.APPLY: OptionsFocus.APPLY,
}


class OptionsOutcome(enum.Enum):
    """How the options menu was left."""

    RETURN = "return"
    APPLY = "apply"
    ESCAPE = "escape"
    QUIT = "quit"


class OptionsState:
    """Pending display settings; the volume takes effect at once, the rest on ``apply``."""

    def __init__(self, state, monitor_width, monitor_height):
        self.state = state
        self.monitor = Resolution(monitor_width, monitor_height)
        self.options = available_resolutions(monitor_width, monitor_height)
        self.original_fullscreen = bool(state.fullscreen)
        self.original_index = state.resolution_index
        self.fullscreen = bool(state.fullscreen)
        self.index = state.resolution_index
        self.focus = OptionsFocus.NONE

    @property
    def volume(self) -> int:
        return self.state.volume

    @property
    def shade(self) -> int:
        """Brightness of the resolution row: dimmed while fullscreen is on."""
        return INACTIVE_SHADE if self.fullscreen else ACTIVE_SHADE

    @property
    def apply_shade(self) -> int:
        """Brightness of the apply button: lit only when something changed."""
        return ACTIVE_SHADE if self.is_changed() else INACTIVE_SHADE

    def toggle_fullscreen(self):
        self.fullscreen = not self.fullscreen
        self.index = len(self.options) - 1

    def previous_resolution(self):
        if self.fullscreen:
            return False
        self.index = self.index - 1 if self.index > 0 else len(self.options) - 1
        return True

    def next_resolution(self):
        if self.fullscreen:
            return False
        self.index = self.index + 1 if self.index < len(self.options) - 1 else 0
        return True

    def volume_down(self):
        if self.state.volume <= 0:
            return False
        self.state.volume -= 1
        return True

    def volume_up(self):
        if self.state.volume >= MAX_VOLUME:
            return False
        self.state.volume += 1
        return True

    def move_focus(self, down):
        """Move the keyboard focus one row; the first key press lands on the fullscreen row."""
        if self.focus is OptionsFocus.NONE:
            self.focus = OptionsFocus.FULLSCREEN
        else:
            self.focus = (_FOCUS_DOWN if down else _FOCUS_UP)[self.focus]
        return self.focus

    def press_horizontal(self, right):
        """Handle a left or right arrow on the focused row; return True if a setting changed."""
        if self.focus is OptionsFocus.FULLSCREEN:
            self.toggle_fullscreen()
            return True
        if self.focus is OptionsFocus.RESOLUTION:
            return self.next_resolution() if right else self.previous_resolution()
        if self.focus is OptionsFocus.VOLUME:
            return self.volume_up() if right else self.volume_down()
        return False

    def press_enter(self):
        """Activate the focused button; return the outcome, or None if nothing happens."""
        if self.focus is OptionsFocus.RETURN:
            return OptionsOutcome.RETURN
        if self.focus is OptionsFocus.APPLY:
            return self.apply()
        return None

    def is_changed(self):
        return self.index != self.original_index or self.fullscreen != self.original_fullscreen

    def apply(self):
        """Write the pending display settings into the game state; None if nothing changed."""
        if not self.is_changed():
            return None
        chosen = self._chosen_size()
        self.state.resolution_index = self.index
        self.state.fullscreen = self.fullscreen
        self.state.width = chosen.width
        self.state.height = chosen.height
        return OptionsOutcome.APPLY

    def _chosen_size(self):
        if self.fullscreen:
            return self.monitor
        return self.options[self.index]

    def fullscreen_label(self):
        return "ON" if self.fullscreen else "OFF"

    def resolution_label(self):
        return self._chosen_size().label

    def volume_label(self):
        return VOLUME_LABELS[self.state.volume]