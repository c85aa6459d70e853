"""Tile highlighting under the pointer and markers along planned paths."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from duds.components import (
    Highlight,
    HighlightEvent,
    MapPosition,
    PathMarker,
    Player,
    Target,
    Transform,
)
from duds.ecs import World

BLACK = (0.0, 0.0, 0.0)
HIGHLIGHT_EMISSIVE = (0.3, 0.3, 0.0)
MARKER_COLOR = (0.2, 0.6, 1.0, 0.4)
MARKER_HALF_SIZE = (0.4, 0.4, 0.05)
MARKER_HEIGHT = 1.0


@dataclass
class Material:
    """Surface appearance of a drawn entity."""

    base_color: tuple[float, ...] = (1.0, 1.0, 1.0, 1.0)
    emissive: tuple[float, float, float] = BLACK
    texture: Any = None
    unlit: bool = False
    alpha_blend: bool = False
    casts_shadows: bool = True


def highlight_changed(
    world: World, events: Iterable[HighlightEvent]
) -> MapPosition | None:
    """Apply highlight events to tiles and aim the player at the last highlighted tile.

    Returns the position the player's target was set to, or None if no tile
    was highlighted.
    """
    target_position = None
    target_changed = False
    for event in events:
        if event.entity not in world:
            continue
        position = world.get(event.entity, MapPosition)
        material = world.get(event.entity, Material)
        if position is None or material is None:
            continue
        if event.add:
            world.insert(event.entity, Highlight())
            target_changed = True
            target_position = position
            material.emissive = HIGHLIGHT_EMISSIVE
        else:
            world.remove(event.entity, Highlight)
            material.emissive = BLACK

    if not target_changed:
        return None
    try:
        _, target, _ = world.single(Target, Player)
    except LookupError:
        return target_position
    target.position = target_position
    return target_position


def highlight_target_path(world: World, changed_targets: Iterable[Target]) -> list[int]:
    """Redraw path markers for targets that changed; return the new marker entities.

    When no target changed, existing markers are left as they are.
    """
    targets = list(changed_targets)
    if not targets:
        return []
    for entity, _ in world.query(PathMarker):
        world.despawn(entity)

    material = Material(
        base_color=MARKER_COLOR,
        unlit=True,
        alpha_blend=True,
        casts_shadows=False,
    )
    markers = []
    for target in targets:
        for pos in target.path or ():
            markers.append(
                world.spawn(
                    Transform(float(pos.x), float(pos.y), MARKER_HEIGHT),
                    material,
                    PathMarker(),
                )
            )
    return markers