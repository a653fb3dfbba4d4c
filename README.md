# saiyan-menu

A small game shell built on pygame. It opens a 920×570 window titled
"Dragon Ball" with a title menu and three level stages.

- The menu shows a logo inside a frame. Every half second the frame border
  changes colour, going through red, blue, orange, purple and green in that
  order.
- The menu has five buttons: **Iniciar Juego**, **Nivel UNO**, **Nivel DOS**,
  **Nivel TRES** and **Ver Records**. A button is highlighted while the mouse
  is over it.
- Clicking a level button with the left mouse button opens that level's
  stage. **Iniciar Juego** opens level one.
- A stage draws its background image stretched to fill the window. Press
  **Esc** to go back to the menu.

## Installation

```
pip install .
```

## Running

```
saiyan-menu [--resources RESOURCE_DIR]
```

`--resources` names the folder that holds the game's images and font. It
defaults to `Recursos` in the current directory. The program looks for these
files in that folder:

- `backgraunds/BACKGRAUND NIVEL 1.png`
- `backgraunds/BACKGRAUND NIVEL 2.png`
- `backgraunds/BACKGRAUND NIVEL 3.png`
- `titulo/dragonball_logo.png`
- `fuente/Saiyan-Sans.ttf`

If an image is missing, a warning goes to Python's `logging` module and the
program keeps running without it. If the font is missing, pygame's default
font is used for the buttons.

## Using it as a library

```python
from saiyan_menu.app import MainWindow

window = MainWindow("Recursos")
window.start_level2()
window.return_to_menu()
window.run()
```

- `saiyan_menu.app` provides `MainWindow` and `main`. `MainWindow` has
  `load_levels`, `start_level1`, `start_level2`, `start_level3`,
  `return_to_menu`, `show_records`, `handle_event`, `draw` and `run`.
- `saiyan_menu.levels` provides `Stage`, `Level1`, `Level2`, `Level3` and a
  small `Signal` class with `connect` and `emit`. A stage's `return_to_menu`
  signal fires when `key_press` receives the Esc key.
- `saiyan_menu.menu` provides `MenuScreen` and `frame_style(color)`, which
  returns the frame's style sheet text for a border colour.
  `MenuScreen.update(elapsed_ms)` advances the colour timer,
  `cycle_frame_color()` moves to the next colour, and `handle_click(pos)`
  emits the signal of the button under `pos` and returns its label.

## What it does not do

The stages show only their backgrounds: there are no characters, no
gameplay and no scoring. **Iniciar Juego** starts level one only and does not
go on to the later levels. **Ver Records** only logs a message; no records
are kept or shown.

## Tests

```
pip install .[test]
pytest
```