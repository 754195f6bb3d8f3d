# trucogame

The screens of a Truco card game, built on pygame. Each screen is a
function that takes the shared `GameState`, the display surface and a
`pygame.time.Clock`, runs its own event loop and returns the `Scene` to
go to next.

## The screens

| Function | Module | What it does | Returns |
| --- | --- | --- | --- |
| `choose_resolution(state)` | `trucogame.resolution` | Opens a 1280x720 window where fullscreen is switched on or off and a window size is picked. Only sizes that fit the monitor are offered. Enter or clicking *Done* confirms. | `True`, with the choice stored in `state`; `False` if the window was closed |
| `run_intro` | `trucogame.intro` | The credits fade in and hold for two seconds. Escape skips them. | `Scene.TITLE` |
| `run_title` | `trucogame.title` | Loads the background and the theme music. The background drops into place, then "Press to play" blinks until a key or mouse button is pressed. | `Scene.NAME_ENTRY` |
| `run_name_entry` | `trucogame.username` | The player types a name: ASCII letters and spaces, up to 18 characters, with no leading space. Runs of spaces are collapsed and trailing spaces are dropped. A name shorter than three characters shakes the box and flashes it red. | `Scene.CHARACTER_CHOICE` |
| `run_character_choice` | `trucogame.charchoose` | The player clicks one of four portraits and presses Enter. The portrait is stored in `state.user.portrait`. | `Scene.OPPONENT_CHOICE` |
| `run_opponent_choice` | `trucogame.opponent` | Sets `state.opponent` to the computer opponent. Enter goes on. | `Scene.MAIN_GAME` |

Any of these can also return `Scene.QUIT` when the window is closed.

The last three screens open with a transition of black strips and can be
paused with Escape. The pause menu (`trucogame.paused.PauseMenu`,
`run_pause`) offers Resume, Options, Back to main menu and Exit, and can
be used with the mouse or with the arrow keys and Enter. Depending on the
choice, those screens return `Scene.INTRO`, `Scene.QUIT` or
`Scene.NEW_RESOLUTION`.

The options menu (`trucogame.options.OptionsMenu`) changes fullscreen, the
window size and the music volume. The volume applies at once. The display
settings go into `state` only when *Apply Resolution* is chosen, and the
menu then returns `Scene.NEW_RESOLUTION` through the pause menu. The
settings logic itself is in `trucogame.optionsstate.OptionsState`, and it
needs no display.

Name tidying is available on its own as `trucogame.names.verify_name`,
which returns `(name, valid)`.

## Example

```python
import pygame

from trucogame.charchoose import run_character_choice
from trucogame.config import GameState, Scene
from trucogame.intro import run_intro
from trucogame.opponent import run_opponent_choice
from trucogame.resolution import choose_resolution
from trucogame.title import run_title
from trucogame.username import run_name_entry

state = GameState()
if choose_resolution(state):
    flags = pygame.FULLSCREEN if state.fullscreen else 0
    screen = pygame.display.set_mode(state.size, flags)
    clock = pygame.time.Clock()
    screens = {
        Scene.INTRO: run_intro,
        Scene.TITLE: run_title,
        Scene.NAME_ENTRY: run_name_entry,
        Scene.CHARACTER_CHOICE: run_character_choice,
        Scene.OPPONENT_CHOICE: run_opponent_choice,
    }
    scene = Scene.INTRO
    while scene in screens:
        scene = screens[scene](state, screen, clock)
    pygame.quit()
```

To handle `Scene.NEW_RESOLUTION`, the caller recreates the display at
`state.size` and continues from `Scene.INTRO`.

## Assets

The screens load `fonts/`, `images/` and `sounds/` relative to the
current directory. Missing fonts fall back to pygame's default font.
Missing images and sounds are skipped.

## What this package does not do

- It has no command to start the game. You chain the screens yourself, as
  in the example above.
- It has no game table. `run_opponent_choice` returns `Scene.MAIN_GAME`,
  but no screen in the package deals cards or plays a hand.
- It does not reopen the display after *Apply Resolution*. It only
  updates `state` and returns `Scene.NEW_RESOLUTION`.

## Installation

```
pip install .
```

## Development

```
pip install .[test]
pytest
```