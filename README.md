# vertexos

A small simulated desktop built on tkinter. It shows a wallpaper and a clock,
and it has icons that start a handful of mini applications:

- **Calculator** (`vertexos.calculator`): evaluates one binary expression such
  as `12*3` or `7/2`.
- **Tic-tac-toe** (`vertexos.tictactoe`): a two-player game on a 3×3 board.
- **Calendar** (`vertexos.calendar_app`): pick a day and see it shown as
  `Selected Date: DD-MM-YYYY`.
- **Dice roller** (`vertexos.dice`): rolls a six-sided die.
- **FileNest** (`vertexos.filenest`): select a file, then delete it, show its
  path, size and modification time, or view its first 4096 bytes.
- **Notepad** (`vertexos.notepad`): edit text, mark a selection bold or
  italic, save the plain text to a file.
- **Audio player** (`vertexos.audio`): plays an MP3 file through the pygame
  mixer, with play and pause.
- **Task manager** (`vertexos.taskmanager`): lists the running simulated apps
  with their RAM and disk figures, and draws RAM and disk usage graphs.
- **Power** (`vertexos.power`): shows a black full-screen shutdown window,
  plays `shutdown.mp3` after half a second and closes everything after four
  seconds.

Each app can run only once at a time. Launching one that is already open
shows an "already running" message instead.

## Installing

```
pip install .
```

tkinter must be available in your Python installation.

Image files for the wallpaper and the icons (`home.png`, `home1.png`,
`home2.jpg`, `home4.jpg`, `calc.png`, `calendar.png`, `Minigame.png`,
`random.png`, `notepad.png`, `file.png`, `audio.png`, `task.png`, `image.png`,
`power.png`), the dice faces `dice1.png` … `dice6.png`, and the shutdown files
are read from the current directory. A missing image is reported on stderr and
skipped (the dice show the number instead, FileNest and the audio player show
text buttons); the desktop still starts.

## Running

```
vertexos
vertexos --config path/to/wallpaper_config.txt
```

The chosen wallpaper is remembered in `wallpaper_config.txt` in the current
directory, or in the file given with `--config`. Click the toggle icon at the
top right to cycle through the four wallpapers. The power icon starts the
shutdown screen.

## Using the parts as a library

The logic of each app lives apart from its window, so it can be used on its
own:

```python
from vertexos.calculator import evaluate, Calculator
from vertexos.tictactoe import TicTacToe
from vertexos.registry import AppRegistry, SimulatedApp

evaluate("8/2")          # "4.000000"
evaluate("1/0")          # "Error"
evaluate("abc")          # "Invalid Input"

calc = Calculator()
for key in "12+30=":
    calc.press(key)
calc.display()           # "42.000000"

game = TicTacToe()
game.play(0, 0)          # "Player O's turn"
game.play(1, 1)          # "Player X's turn"

apps = AppRegistry()
apps.add(SimulatedApp("calculator", 45, 8))
apps.is_running("calculator")      # True
apps.ensure_not_running("calculator")  # raises AppAlreadyRunningError
apps.close("calculator")
```

Other pieces that work without a window:

- `vertexos.calendar_app`: `format_selected_date`, `month_grid`.
- `vertexos.dice`: `DiceRoller` (takes an optional `random.Random`),
  `image_for`.
- `vertexos.filenest`: `FileNest` with `select`, `delete`, `info`, `content`;
  failures raise `FileNestError`, and `NoFileSelectedError` when nothing is
  selected.
- `vertexos.notepad`: `NotepadDocument` and `TextStyle`.
- `vertexos.power`: `ShutdownSequence`, which takes the scheduling, sound and
  closing functions to call.
- `vertexos.taskmanager`: `UsageHistory`, `UsageSimulator`, `transform_value`,
  `graph_points`, `app_lines`.
- `vertexos.audio`: `AudioPlayer` drives any backend with `play`, `pause`,
  `stop` and `finished` methods; `PygameBackend` is the one used by the app.
- `vertexos.desktop`: `load_wallpaper_index`, `save_wallpaper_index`,
  `next_wallpaper_index`, `format_clock`, and `Desktop`, which can be created
  with `root=None` to use `launch` and `cycle_wallpaper` without drawing.

Every `launch_*` function takes `(parent=None, registry=None)`. With no
parent it opens its own window and runs its own event loop.

## What it does not do

- There is no video player.
- The task manager's graphs come from a smooth simulated curve, not from
  the real memory or disk use of the machine; the app list shows the fixed
  figures each app is registered with.
- The desktop clock shows the time at which the desktop was drawn; it does
  not tick.
- Shutting down only closes the desktop windows; it does not touch the
  computer itself.

## Tests

```
pip install .[test]
pytest
```