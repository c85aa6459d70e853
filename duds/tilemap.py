"""Tile geometry helpers."""

from __future__ import annotations

from duds.components import MapPosition

TILE_SIZE = 16


def map_to_world_coordinates(map_position: MapPosition) -> tuple[int, int]:
    """Pixel coordinates of a tile's corner."""
    return map_position.x * TILE_SIZE, map_position.y * TILE_SIZE


def is_inside(x: float, y: float, cx: float, cy: float, radius: float) -> bool:
    """Whether ``(x, y)`` lies strictly inside the square of side ``radius`` centred on ``(cx, cy)``."""
    if radius <= 0.0:
        return False
    half = radius / 2.0
    return cx - half < x < cx + half and cy - half < y < cy + half