# grassdoom

A small first-person maze walker drawn with a grid raycaster. It has brick walls with mortar lines, a checkered floor that darkens with distance, and a plain sky. Walls hit on their north/south faces are drawn darker than walls hit on their east/west faces. The world is an 8×8 map with a wall border and four pillars. The field of view is 60°, and the frame is 800×600 unless you choose another size.

## Installing

```
pip install .
```

This also installs pygame, which provides the window and keyboard input.

## Playing

```
grassdoom
```

The window is titled "KillerGrass DOOM v0.1".

Options:

| Option          | Meaning                                          |
|-----------------|--------------------------------------------------|
| `--width N`     | frame width in pixels (default 800)              |
| `--height N`    | frame height in pixels (default 600)             |
| `--frames N`    | stop after drawing N frames (default: run until closed) |

Every value must be a positive integer.

Controls:

| Key            | Action              |
|----------------|---------------------|
| `W` / `S`      | move forward / back |
| `A` / `D`      | strafe left / right |
| `←` / `→`      | turn                |
| `Esc`          | quit                |

The game also ends when you close the window. You move at 2 map cells per second and turn at 2.5 radians per second. You cannot walk into walls. Movement is checked on each axis separately, so you slide along a wall when you walk into it at an angle.

## Using it as a library

The simulation and the renderer work without a window:

```python
from grassdoom.trig import get_tables
from grassdoom.game import Game, Control
from grassdoom.render import Renderer

game = Game(get_tables())
game.update(0.5, {Control.FORWARD})
print(game.player.x, game.player.y)

renderer = Renderer(game, 800, 600)
frame = renderer.render()   # 0x00BBGGRR pixel values, row by row
```

- `grassdoom.trig`: `TrigTables` holds cosine and sine lookups in tenth-of-a-degree steps. `angle_index(angle)` maps an angle in radians to a table index. `get_tables()` returns one shared instance.
- `grassdoom.game`: the `Control` enum, the `Player` dataclass (`x`, `y`, `angle`), and `Game` with `reset()`, `can_move_to(x, y)` and `update(delta_time, pressed)`.
- `grassdoom.render`: `Renderer` with `precompute_rays()`, which returns one `Ray` per column, and `render()`. `rgb`, `red`, `green`, `blue` and `shade` pack, unpack and scale colours. `generate_textures()` returns the 64×64 wall and floor textures.
- `grassdoom.app`: `main(argv=None)` runs the game. `pressed_controls(state)` turns a pygame key-state lookup into a set of `Control` values.

## What it does not do

There are no enemies, weapons, sound, or levels beyond the single built-in map.

## Running the tests

```
pip install .[test]
pytest
```