"""A* path search over the tile map and movement along found paths."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterable

from duds.components import Blocking, MapPosition, Moving, Target, Timer, Walkable
from duds.ecs import World

MAP_LIMIT = 31

TileLookup = dict[MapPosition, tuple[bool, "int | None"]]


def build_tile_lookup(
    tiles: Iterable[tuple[MapPosition, Walkable | None, Blocking | None]],
) -> TileLookup:
    """Merge every tile at a position into ``(blocked, walk cost or None)``.

    Walk costs below 1 count as 1; any blocking tile blocks the position.
    """
    lookup: TileLookup = {}
    for position, walkable, blocking in tiles:
        cost = max(walkable.cost, 1) if walkable is not None else None
        if position in lookup:
            blocked, existing = lookup[position]
            lookup[position] = (
                blocked or blocking is not None,
                cost if cost is not None else existing,
            )
        else:
            lookup[position] = (blocking is not None, cost)
    return lookup


def neighbors(pos: MapPosition) -> list[MapPosition]:
    """Orthogonal neighbours that stay on the map, in -x, +x, -y, +y order."""
    result = []
    if pos.x > 0:
        result.append(MapPosition(pos.x - 1, pos.y))
    if pos.x < MAP_LIMIT:
        result.append(MapPosition(pos.x + 1, pos.y))
    if pos.y > 0:
        result.append(MapPosition(pos.x, pos.y - 1))
    if pos.y < MAP_LIMIT:
        result.append(MapPosition(pos.x, pos.y + 1))
    return result


def manhattan_distance(a: MapPosition, b: MapPosition) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def get_walkable_cost(pos: MapPosition, lookup: TileLookup) -> int | None:
    """Cost of stepping onto ``pos``, or None if it is blocked or not walkable."""
    blocked, cost = lookup.get(pos, (False, None))
    return None if blocked else cost


def search_path(
    start: MapPosition, goal: MapPosition, lookup: TileLookup
) -> list[MapPosition] | None:
    """Cheapest path from ``start`` to ``goal`` inclusive, or None if unreachable."""
    order = itertools.count()
    # Lowest priority first; among equals, the higher cost first.
    frontier = [(0, 0, next(order), start)]
    came_from: dict[MapPosition, MapPosition | None] = {start: None}
    cost_so_far = {start: 0}

    while frontier:
        *_, position = heapq.heappop(frontier)
        if position == goal:
            break
        for neighbor in neighbors(position):
            step = get_walkable_cost(neighbor, lookup)
            if step is None:
                continue
            new_cost = cost_so_far[position] + step
            if neighbor not in cost_so_far or new_cost < cost_so_far[neighbor]:
                cost_so_far[neighbor] = new_cost
                priority = new_cost + manhattan_distance(neighbor, goal)
                heapq.heappush(frontier, (priority, -new_cost, next(order), neighbor))
                came_from[neighbor] = position

    path = []
    current = goal
    while (previous := came_from.get(current)) is not None:
        path.append(current)
        current = previous
    if current != start:
        return None
    path.append(start)
    path.reverse()
    return path


def find_path(world: World) -> None:
    """Plan a path for every stationary entity whose target has changed."""
    lookup = build_tile_lookup(
        (position, world.get(entity, Walkable), world.get(entity, Blocking))
        for entity, position in world.query(MapPosition)
    )
    for _, start, target in world.query(MapPosition, Target, without=Moving):
        goal = target.position
        if goal is None:
            continue
        if target.path and target.path[-1] == goal:
            continue
        target.path = search_path(start, goal, lookup)


def move_along_path(world: World, delta: float) -> None:
    """Step moving entities one tile along their path each time their timer runs out."""
    for entity, _, target, moving in world.query(MapPosition, Target, Moving):
        moving.timer.tick(delta)
        if not moving.timer.finished() or target.path is None:
            continue
        if len(target.path) > 1:
            target.path.pop(0)
            world.insert(entity, target.path[0])
            moving.timer = Timer(1.0 / moving.speed)
        else:
            target.path = None