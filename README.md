# duds

A small tile-based dungeon game. The player stands on a randomly generated
32×31 map of floor tiles, with walls scattered over roughly one tile in ten.
Pointing at a tile highlights it and makes it the player's target; the
cheapest route there is found with A* and drawn as markers, and a left click
starts or stops walking along that route.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
duds
```

Options:

- `--assets DIR` — directory holding the tile sheets (default `assets`).
- `--seed N` — seed for map generation, for a repeatable map.

Controls:

- Move the mouse over a floor tile to highlight it and plan a path to it.
- Left click to start moving along the path; click again to stop.
- `W` / `A` / `S` / `D` pan the camera, `Q` / `E` raise and lower it.

The button in the top-left corner shows "Hover" or "Press" as the pointer
moves over or presses it; it has no other effect.

The tile sheets are read from `DIR/tilesheets/tiny_dungeon_world.png` and
`DIR/tilesheets/tiny_dungeon_monsters.png` and cut into 16×16 pixel tiles.
They are not part of the package. A sheet that cannot be read is logged and
skipped, and the tiles and player that use it are then not drawn; path
markers still are.

## Using the pieces

The game logic works without a window. The pathfinding takes a lookup from
tile position to `(blocked, walk cost)`:

```python
from duds.components import MapPosition
from duds.pathfinding import search_path

lookup = {MapPosition(x, 0): (False, 1) for x in range(4)}
path = search_path(MapPosition(0, 0), MapPosition(3, 0), lookup)
# [MapPosition(0, 0), MapPosition(1, 0), MapPosition(2, 0), MapPosition(3, 0)]
```

`search_path` returns `None` when the goal cannot be reached. Searches stay
within coordinates 0 to 31 on each axis.

`duds.ecs.World` holds entities (integers) and their components from
`duds.components`, with `spawn`, `insert`, `remove`, `despawn`, `get`, `has`,
`query` and `single`. The systems each take a world and update it:

- `duds.pathfinding`: `find_path`, `move_along_path`
- `duds.generation`: `generate_test_map`, `walkable_hover`
- `duds.highlight`: `highlight_changed`, `highlight_target_path`
- `duds.cursor`: `cursor_clicked`
- `duds.assets`: `slice_tilesheets_into_cache`, `attach_sprites`,
  `sync_transform_to_map_position`

`duds.app.Game` ties them together: `setup()` spawns the player and the map,
`update(delta)` runs the per-frame systems and `fixed_update(delta)` the
movement and camera.

## What it does not do

There is no combat, no monsters besides the player, no sound, and no saving
or loading of games; the `Health` component exists but nothing uses it.