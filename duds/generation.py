"""Random test map generation and pointer hover handling for map tiles."""

from __future__ import annotations

import random
from dataclasses import dataclass

from duds.components import (
    Highlight,
    HighlightEvent,
    MapPosition,
    SheetSprite,
    TileSheetType,
    Transform,
    Visible,
    Walkable,
)
from duds.ecs import World
from duds.entities import floor_tile, wall_tile

FLOOR_SPRITE_COLUMN = 5
FLOOR_SPRITE_ROWS = range(8, 12)
WALL_ROLL_SIDES = 10
WALL_ROLL_THRESHOLD = 8


@dataclass(frozen=True)
class MapSize:
    """Dimensions of a generated map, in tiles."""

    width: int = 32
    height: int = 31


def generate_test_map(world: World, rng: random.Random | None = None) -> None:
    """Fill the world with a floor of varied tiles and scattered walls.

    Every position gets a visible floor tile of walk cost 1; roughly one
    position in ten also gets a wall on top of it.
    """
    rng = rng if rng is not None else random.Random()
    size = MapSize()
    for x in range(size.width):
        for y in range(size.height):
            position = MapPosition(x, y)
            sprite = SheetSprite(
                TileSheetType.WORLD,
                FLOOR_SPRITE_COLUMN,
                rng.randrange(FLOOR_SPRITE_ROWS.start, FLOOR_SPRITE_ROWS.stop),
            )
            world.spawn(*floor_tile(position, sprite, Walkable(1)), Visible())
            if rng.randrange(WALL_ROLL_SIDES) > WALL_ROLL_THRESHOLD:
                world.spawn(*wall_tile(position), Visible())


def walkable_hover(world: World, hovered: int) -> list[HighlightEvent]:
    """Events that move the highlight onto ``hovered`` and off every other tile."""
    events = []
    for entity, _ in world.query(Transform):
        highlighted = world.has(entity, Highlight)
        if entity == hovered and not highlighted:
            events.append(HighlightEvent(entity, True))
        elif entity != hovered and highlighted:
            events.append(HighlightEvent(entity, False))
    return events