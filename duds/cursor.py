"""Mouse input that starts and stops the player's movement."""

from __future__ import annotations

from duds.components import Moving, Player
from duds.ecs import World

CLICK_SPEED = 3.0


def cursor_clicked(world: World, left_just_pressed: bool) -> None:
    """Toggle the player between moving and standing on a left click."""
    if not left_just_pressed:
        return
    try:
        entity, _ = world.single(Player)
    except LookupError:
        print("cursor_clicked: Player not found!")
        return
    if world.has(entity, Moving):
        world.remove(entity, Moving)
    else:
        world.insert(entity, Moving(speed=CLICK_SPEED))