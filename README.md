# heliresgate

A small arcade game played in the terminal. You fly a helicopter (`H`) across a
60×20 field. You pick up the soldiers (`S`) waiting on the left edge and carry
them to the landing platform (`P`) on the right. Two rocket batteries (`B`) fire
rockets (`*`) across the field: the left battery fires to the right, the right
battery fires to the left. When a battery runs out of its 5 rockets, it takes
the bridge and then the depot to reload. Only one battery at a time can hold the
bridge, and only one at a time can hold the depot. The bridge (`=`) and the
depot (`D`) are also drawn on the field.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Playing

```
heliresgate
```

The command takes no options apart from `--help`. Each part of the game runs in
its own thread: the helicopter, both batteries, the rockets and the screen. The
screen is cleared and redrawn every tenth of a second. Below the field it shows
the status lines, in Portuguese: soldiers rescued (`Soldados resgatados`), the
rockets left in each battery (`Foguetes B0` / `B1`) and the game's state
(`Em andamento`, `VITÓRIA!` or `DERROTA!`).

Controls:

| Key | Action     |
|-----|------------|
| `w` | move up    |
| `s` | move down  |
| `a` | move left  |
| `d` | move right |

Other keys do nothing. On a terminal, keys are read one at a time and are not
echoed. The helicopter cannot move past the screen borders.

Flying over a soldier takes one soldier on board. Landing on the platform
unloads everyone on board. You win once all 10 soldiers have been rescued.

You lose if a rocket hits the helicopter, or if the helicopter flies onto a
battery or the depot. The game ends when it is won or lost. The final screen is
drawn, and the command then returns. Pressing Ctrl-C stops it with exit status 130.

## Using it as a library

You can drive the pieces one step at a time without threads:

```python
from heliresgate.game import Game, Direction
from heliresgate.helicopter import move_helicopter, helicopter_step
from heliresgate.rockets import create_rocket, advance_rockets
from heliresgate.interface import render_screen, render_status

game = Game()
move_helicopter(game, Direction.UP)
helicopter_step(game, "a")          # moves left and picks up a soldier
create_rocket(game, 0, 5, 5, 1)
advance_rockets(game)
print(render_screen(game))
print(render_status(game))
```

- `heliresgate.game.Game` holds the whole state: `helicopter`, `soldiers`,
  `batteries`, the 32 `rockets` slots, `soldiers_rescued` and `state` (a
  `GameState`). `Game.reset()` puts every piece back at its start.
- `heliresgate.helicopter` has `direction_for_key`, `move_helicopter`,
  `check_collision`, `process_rescue`, `helicopter_step`, `read_key` and
  `run_helicopter`.
- `heliresgate.rockets` has `create_rocket` (returns `None` when all slots are in
  use), `advance_rockets` and `run_rockets`.
- `heliresgate.battery` has `fire_direction`, `try_fire`, `reload_battery` and
  `run_battery`. The random source and the sleep function can be passed in.
- `heliresgate.interface` has `render_screen`, `render_status`, `draw` and
  `run_interface`.
- `heliresgate.main.start_threads` starts the whole game with your own key
  reader and output stream. It returns the threads by name.

## What it does not do

There are no difficulty settings, levels, scores or saved games. Each run is one
game on a fixed layout. The batteries do not visibly move while they reload.
The bridge and the depot are only drawn at fixed places on the field. Without
`termios` (for example on Windows), or when input is not a terminal, keys are
read from standard input as it delivers them, so a terminal may wait for Enter
before it passes keys on.