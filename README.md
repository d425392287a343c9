# antsim

The model side of an ant colony simulation. Ants leave pheromone
markers on a grid world, pick up food, carry it home and can fight
ants of rival colonies. Colonies store food and use it to raise new
workers and soldiers. The package also provides the layout logic of a
small editor, with containers, buttons, sliders and brush tools that
paint walls and food into the world.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

The tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Modules

- `antsim.world`
  - `World` is a grid enclosed by a border of walls. Its methods are
    `add_wall`, `add_wall_cell`, `remove_wall`, `add_food_at`,
    `add_food_at_cell`, `add_marker`, `add_marker_repellent`,
    `clear_markers` and `update`.
  - `WorldGrid` holds the `WorldCell`s. Each cell keeps one
    `ColonyCell` of markers per colony. The grid provides `get`,
    `get_safe`, `check_coords`, `add_marker`, `add_food`, `is_on_food`,
    `pick_food`, `clear_cell`, and `first_hit`, which casts a ray and
    returns a `HitPoint`.
  - `update(dt)` fades markers that are not permanent and clears the
    record of which ant stands on which cell.
  - `compute_distance(grid)` and `min_dist(...)` fill each cell's
    `wall_dist`.
  - `Mode` gives the ant phases. `TO_FOOD`, `TO_HOME` and `TO_ENEMY`
    are also the marker kinds. `FightMode` gives the fight states.
- `antsim.ant`
  - `Ant` and its `Direction`.
  - Movement with wall bounces: `update_position`.
  - Food pick-up: `check_food`. Return to the base: `check_colony`.
  - Marker laying: `add_marker`.
  - Fighting: `set_target`, `attack`, `request_fight`, `detect_enemy`.
  - Death: `terminate`, `kill`.
  - Sprite corners: `body_quad` and `food_quad`.
  - `Ant.step(world, dt)` runs one basic update. The ant either fights
    or wanders with random heading noise, then looks for food and lays
    markers.
  - `marker_intensity(coef, count)` returns the exponentially decaying
    marker strength.
- `antsim.colony`
  - `Colony` with its `ColonyBase` food store.
  - Population: `initialize`, `create_worker`, `specialize_soldier`,
    `create_new_ants`.
  - `update` runs each step and `soldiers_count` counts soldiers.
  - Housekeeping: `kill_weak_ants`, `remove_dead_ants`,
    `stop_fights_with`, `set_color`, `set_position`.
  - `PopulationDiff` reports the population change over its last samples.
- `antsim.index_vector`
  - `IndexVector` is a dense container whose ids stay stable when
    elements are erased.
  - `Ref` and `PRef` are handles that turn false once their element is
    erased.
- `antsim.config`
  - `Config` holds the window, world and population settings.
  - It also reads and writes `conf.txt`.
- `antsim.paths`
  - `resource_path()`, `exe_dir()` and `conf_path()` locate resources
    and the configuration file.
  - These paths are only resolved on macOS. Elsewhere they are relative
    to the working directory.
- `antsim.gui`
  - The widgets are `Item`, `Container`, `NamedContainer`,
    `DefaultButton`, `Button`, `Slider` and `SliderLabel`.
  - They lay out sizes and positions according to `Size`, `Orientation`
    and `Alignment`.
  - Observers are registered with `watch` and `watch_size`.
- `antsim.tools`
  - `ToolSelector` offers the `Tool.BRUSH_WALL`, `Tool.BRUSH_FOOD` and
    `Tool.BRUSH_DELETE` brushes.
  - Brushes only act in edit mode.
  - Wall changes are reported through an `on_walls_changed` callback.
- Helpers
  - `Cooldown`: an accumulating timer.
  - `DoubleObject`: a front and back buffer pair.
  - `AsyncRenderer`: a thread that fills a `DoubleObject` and swaps it.
  - `Graphic`: a rolling chart that produces vertex positions.
  - `RoundedRectangle`: breaks a rounded rectangle into `Rect` and
    `Circle` shapes.

## Example

```python
import random

from antsim.colony import Colony
from antsim.world import World, Mode

world = World(800, 600)            # world units; cells are 4 units wide
world.add_food_at(600.0, 300.0, 50)

colony = Colony(400.0, 300.0, max_ants_count=500, rng=random.Random(1))
colony.initialize(0, 100)

for _ in range(50):
    world.update(0.016)
    colony.update(0.016, world)
    colony.kill_weak_ants(world)
    colony.remove_dead_ants()

print(len(colony.ants), colony.soldiers_count(), colony.base.food)
```

## Configuration

`Config.load_or_create(path)` reads `conf.txt`, which defaults to
`conf_path()`. Lines that start with `#` are comments. The remaining
lines give, in this order:

1. window width
2. window height
3. fullscreen flag
4. GUI scale
5. maximum ants per colony

If the file cannot be read, it is written from the current settings and
the method returns `False`. `Config.defaults_text()` returns that file's
contents.

## What the package does not do

- It opens no window and draws nothing. The shape, vertex and layout
  helpers only compute geometry.
- It has no event loop and no command to run.
- `Ant.step` does not steer ants by sampling the markers around them.
  Ants lay markers but move only by random heading changes and wall
  bounces.
- Ants of different colonies are not matched into fights automatically.
  Fights begin only through `request_fight` and `set_target`.
- Nothing in the package runs the world, colonies and distance field
  together as a complete simulation loop. The caller drives the steps,
  as in the example above.